# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Font profile constants and alias mappings."""

# Native-language and spaced names -> canonical family identifiers.
# Lookups are done on the stripped, lower-cased name.
FONT_ALIASES: dict[str, str] = {
    "굴림": "gulim",
    "돋움": "dotum",
    "바탕": "batang",
    "맑은 고딕": "malgun_gothic",
    "malgun gothic": "malgun_gothic",
    "malgun-gothic": "malgun_gothic",
}

# Number of entries in an ASCII width table (codepoints 0-127)
ASCII_TABLE_SIZE = 128

# Highest codepoint measured through the ASCII table
ASCII_MAX = ASCII_TABLE_SIZE - 1

# pt -> px conversion: px = pt + PT_TO_PX_OFFSET, then one extra pixel for
# every breakpoint the result exceeds.
PT_TO_PX_OFFSET = 3
PT_TO_PX_BREAKPOINTS: tuple[tuple[int, int], ...] = (
    (13, 1),
    (26, 2),
)

# Flat per-character surcharge for table-form profiles rendered bold
BOLD_SURCHARGE = 1

# Value of the "bold" key in a table-form document that also serves bold
BOLD_SURCHARGE_MARKER = "surcharge"

DEFAULT_END_MARKER = "..."

# Environment variable with extra profile directories (os.pathsep separated)
PROFILE_PATH_ENV = "HANPOK_PROFILE_PATH"

# Package holding resources/profiles/*.json
RESOURCE_PACKAGE = "hanpok"
PROFILE_SUFFIX = ".json"

# Characters that are wide-script-adjacent but narrower than full width.
# Measured individually when building a profile from a font file.
DEFAULT_SYMBOL_CHARS: tuple[str, ...] = (
    "‘",  # left single quotation mark
    "’",  # right single quotation mark
    "“",  # left double quotation mark
    "”",  # right double quotation mark
    "·",  # middle dot
)

# Reference glyph for the full-width default (Hangul syllable GA)
FULL_WIDTH_REFERENCE = "가"

# Control characters that keep a nonzero placeholder width (tab, newline)
PLACEHOLDER_CODES = frozenset({9, 10})

# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Building font profiles from TrueType/OpenType font files.

Advance widths are read from the ``hmtx`` table, scaled from font units to
the requested pixel size and rounded. The result only approximates what a
browser renders: hinting and subpixel positioning are ignored.
"""

import logging
from collections.abc import Iterable
from io import BytesIO
from pathlib import Path
from typing import TYPE_CHECKING

from ..exceptions import ProfileBuildError
from .constants import (
    ASCII_TABLE_SIZE,
    DEFAULT_SYMBOL_CHARS,
    FULL_WIDTH_REFERENCE,
    PLACEHOLDER_CODES,
)
from .model import FontProfile, ProfileForm
from .normalize import normalize_font_name

if TYPE_CHECKING:
    from fontTools.ttLib import TTFont

logger = logging.getLogger(__name__)


class FontWidthExtractor:
    """Extracts pixel widths from a TTFont at a fixed pixel size.

    Stateless apart from the font and the scale derived from its
    ``unitsPerEm``.
    """

    def __init__(self, tt_font: "TTFont", size: int) -> None:
        """Initializes the extractor.

        Args:
            tt_font: fonttools TTFont object.
            size: Target pixel size (the em size in pixels).

        Raises:
            ProfileBuildError: If the font lacks the tables widths need.
        """
        for table in ("head", "hmtx"):
            if table not in tt_font:
                raise ProfileBuildError(f"Font has no '{table}' table")
        self._hmtx = tt_font["hmtx"]
        self._scale = size / tt_font["head"].unitsPerEm
        try:
            cmap = tt_font.getBestCmap()
        except KeyError:
            cmap = None
        if not cmap:
            raise ProfileBuildError("Font has no usable Unicode cmap")
        self._cmap: dict[int, str] = cmap

    def has_glyph(self, codepoint: int) -> bool:
        glyph_name = self._cmap.get(codepoint)
        return glyph_name is not None and glyph_name in self._hmtx.metrics

    def advance(self, codepoint: int) -> int | None:
        """Returns the rounded pixel advance of a code point, or None if the
        font has no glyph for it."""
        if not self.has_glyph(codepoint):
            return None
        advance_width = self._hmtx.metrics[self._cmap[codepoint]][0]
        return round(advance_width * self._scale)

    def ascii_widths(self) -> tuple[int, ...]:
        """Returns widths for codepoints 0-127.

        Unmapped codes are 0. Tab and newline get the space width, since
        browsers collapse them into a space.
        """
        space = self.advance(32) or 0
        widths = []
        for code in range(ASCII_TABLE_SIZE):
            if code in PLACEHOLDER_CODES:
                widths.append(space)
            else:
                widths.append(self.advance(code) or 0)
        return tuple(widths)


def build_profile(
    tt_font: "TTFont",
    size: int,
    *,
    family: str | None = None,
    bold: bool = False,
    symbol_chars: Iterable[str] = DEFAULT_SYMBOL_CHARS,
) -> FontProfile:
    """Builds an extended-form profile from a font.

    Args:
        tt_font: fonttools TTFont object.
        size: Pixel size to build the profile for.
        family: Family identifier; defaults to the font's family name.
        bold: Weight the profile is registered under.
        symbol_chars: Non-ASCII characters to measure individually.

    Returns:
        The profile. Its default width is the advance of the Hangul
        syllable GA when the font maps it, else the pixel size.

    Raises:
        ProfileBuildError: If the font cannot be measured.
    """
    if size <= 0:
        raise ProfileBuildError(f"Pixel size must be positive, got {size}")

    if family is None:
        family = _family_name(tt_font)
        if not family:
            raise ProfileBuildError("Font has no family name; pass one explicitly")
    family = normalize_font_name(family)

    extractor = FontWidthExtractor(tt_font, size)
    ascii_widths = extractor.ascii_widths()

    default = extractor.advance(ord(FULL_WIDTH_REFERENCE))
    if default is None:
        logger.debug(
            "No glyph for %r, full width falls back to %dpx",
            FULL_WIDTH_REFERENCE,
            size,
        )
        default = size

    symbols: dict[int, int] = {}
    for char in symbol_chars:
        if len(char) != 1 or ord(char) < ASCII_TABLE_SIZE:
            raise ProfileBuildError(
                f"Symbol {char!r} must be a single non-ASCII character"
            )
        w = extractor.advance(ord(char))
        if w is None:
            logger.debug("No glyph for U+%04X, using default width", ord(char))
            continue
        if w != default:
            symbols[ord(char)] = w

    profile = FontProfile(
        family=family,
        size=size,
        bold=bold,
        ascii=ascii_widths,
        default=default,
        symbols=symbols,
        form=ProfileForm.EXTENDED,
    )
    logger.info("Built profile %s (%d symbol overrides)", profile, len(symbols))
    return profile


def build_profile_from_file(
    path: Path | str,
    size: int,
    *,
    family: str | None = None,
    bold: bool = False,
    font_number: int = 0,
    symbol_chars: Iterable[str] = DEFAULT_SYMBOL_CHARS,
) -> FontProfile:
    """Builds a profile from a font file on disk.

    Args:
        path: Path to a .ttf/.otf/.ttc file.
        size: Pixel size.
        family: Family identifier; defaults to the font's family name.
        bold: Weight the profile is registered under.
        font_number: Index inside a font collection (.ttc).
        symbol_chars: Non-ASCII characters to measure individually.

    Raises:
        FileNotFoundError: If the file does not exist.
        ProfileBuildError: If the file cannot be parsed or measured.
    """
    from fontTools.ttLib import TTFont, TTLibError

    path = Path(path)
    font_data = path.read_bytes()
    try:
        tt_font = TTFont(BytesIO(font_data), fontNumber=font_number)
    except (TTLibError, OSError, ValueError) as e:
        raise ProfileBuildError(f"Could not parse font '{path.name}': {e}") from e
    try:
        return build_profile(
            tt_font, size, family=family, bold=bold, symbol_chars=symbol_chars
        )
    finally:
        tt_font.close()


def _family_name(tt_font: "TTFont") -> str | None:
    """Returns the font's family name from the name table (ID 16, then 1)."""
    if "name" not in tt_font:
        return None
    name_table = tt_font["name"]
    for name_id in (16, 1):
        record = name_table.getDebugName(name_id)
        if record:
            return record
    return None

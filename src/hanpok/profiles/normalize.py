# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Font name and size normalization.

Folds the many ways a caller can name a font ("Gulim", "굴림") and
express a size (12, "12px", "9pt") into the canonical (family, pixel size)
pair used as a profile key.
"""

import re

from .constants import FONT_ALIASES, PT_TO_PX_BREAKPOINTS, PT_TO_PX_OFFSET

_DIGITS_RE = re.compile(r"^(\d+)$")
_PT_RE = re.compile(r"^(\d+)pt$", re.IGNORECASE)
_PX_RE = re.compile(r"^(\d+)px$", re.IGNORECASE)
_LEADING_INT_RE = re.compile(r"^[+-]?\d+")


def normalize_font_name(font_name: str) -> str:
    """Maps a font name to its canonical family identifier.

    Args:
        font_name: Font name as given by the caller, e.g. "Gulim" or "굴림".

    Returns:
        Canonical lower-case identifier. Names without an alias are
        returned lower-cased so that the lookup fails cleanly later.
    """
    name = font_name.strip().lower()
    return FONT_ALIASES.get(name, name)


def pt_to_px(pt: int) -> int:
    """Converts a point size to the pixel size browsers render it at."""
    px = pt + PT_TO_PX_OFFSET
    for threshold, extra in PT_TO_PX_BREAKPOINTS:
        if px > threshold:
            px += extra
    return px


def normalize_size(size_spec: int | float | str) -> int:
    """Converts a size specification to an integer pixel size.

    Accepted forms:
    - ``12`` or ``"12"``: used as-is
    - ``"9pt"``: converted with :func:`pt_to_px`
    - ``"12px"``: used as-is
    - anything else: leading integer if present, else 0

    Args:
        size_spec: Size as a number or string.

    Returns:
        Pixel size. Never raises for strings; unmatched input yields a
        size no profile exists for.

    Raises:
        TypeError: If size_spec is a bool or not a number/string.
    """
    if isinstance(size_spec, bool):
        raise TypeError("Font size must be a number or string, not bool")
    if isinstance(size_spec, (int, float)):
        return int(size_spec)
    if not isinstance(size_spec, str):
        raise TypeError(
            f"Font size must be a number or string, not {type(size_spec).__name__}"
        )

    spec = size_spec.strip()
    m = _DIGITS_RE.match(spec)
    if m:
        return int(m.group(1))
    m = _PT_RE.match(spec)
    if m:
        return pt_to_px(int(m.group(1)))
    m = _PX_RE.match(spec)
    if m:
        return int(m.group(1))

    # Best effort: leading integer, e.g. "12 px" or "13.5"
    m = _LEADING_INT_RE.match(spec)
    return int(m.group(0)) if m else 0

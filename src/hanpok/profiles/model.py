# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Immutable font profile model."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from .constants import ASCII_MAX, ASCII_TABLE_SIZE

# (family, pixel size, bold)
ProfileKey = tuple[str, int, bool]


class ProfileForm(Enum):
    """Shapes a font profile document can take.

    Attributes:
        TABLE: Only a 128-entry ASCII table; everything above 127 is
            full-width and measures the pixel size.
        EXTENDED: ASCII table plus a full-width default and a sparse
            symbol override map.
    """

    TABLE = "table"
    EXTENDED = "extended"


@dataclass(frozen=True)
class FontProfile:
    """Resolved width table for one (family, size, weight) combination.

    Attributes:
        family: Canonical family identifier (e.g. "gulim").
        size: Pixel size.
        bold: True for the bold weight.
        ascii: Widths for codepoints 0-127.
        default: Width of any codepoint above 127 without an override.
        symbols: Read-only codepoint -> width overrides (keys above 127).
        bold_surcharge: Flat pixels added to every character.
        form: Shape of the document the profile was loaded from.
    """

    family: str
    size: int
    bold: bool
    ascii: tuple[int, ...]
    default: int
    symbols: Mapping[int, int] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    bold_surcharge: int = 0
    form: ProfileForm = ProfileForm.EXTENDED

    def __post_init__(self) -> None:
        if len(self.ascii) != ASCII_TABLE_SIZE:
            raise ValueError(
                f"ASCII table must have {ASCII_TABLE_SIZE} entries, "
                f"got {len(self.ascii)}"
            )
        # Freeze whatever sequence/mapping the caller handed in
        object.__setattr__(self, "ascii", tuple(self.ascii))
        if not isinstance(self.symbols, MappingProxyType):
            object.__setattr__(self, "symbols", MappingProxyType(dict(self.symbols)))

    @property
    def key(self) -> ProfileKey:
        return (self.family, self.size, self.bold)

    @property
    def weight(self) -> str:
        return "bold" if self.bold else "normal"

    def char_width(self, codepoint: int) -> int:
        """Returns the pixel width of a single Unicode scalar value.

        Args:
            codepoint: Numeric code point of the character.

        Returns:
            Width in pixels, including the bold surcharge.
        """
        if codepoint <= ASCII_MAX:
            w = self.ascii[codepoint]
        else:
            w = self.symbols.get(codepoint, self.default)
        return w + self.bold_surcharge

    def __str__(self) -> str:
        return f"{self.family} {self.size}px ({self.weight})"

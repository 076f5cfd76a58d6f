# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Custom exceptions for hanpok."""


class HanPokError(Exception):
    """Base exception for all hanpok errors."""


class UnsupportedProfileError(HanPokError):
    """No width table exists for the requested font, size and weight.

    Attributes:
        family: Canonical family identifier that was looked up.
        size: Pixel size that was looked up.
        bold: Requested weight.
    """

    def __init__(self, family: str, size: int, bold: bool = False) -> None:
        self.family = family
        self.size = size
        self.bold = bold
        weight = "bold" if bold else "normal"
        super().__init__(f"Font profile not found: {family} {size}px ({weight})")


class ProfileDataError(HanPokError):
    """A font profile document is malformed."""


class InvalidTextError(HanPokError):
    """Input text could not be decoded as UTF-8."""


class ProfileBuildError(HanPokError):
    """A font file could not be turned into a font profile."""

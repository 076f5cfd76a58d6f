# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Pixel width measurement and width-safe truncation.

All functions take a resolved :class:`~hanpok.profiles.FontProfile` and
operate on Unicode scalar values, never on bytes. Results are estimates:
kerning, hinting and subpixel rendering are not modeled, so do not use
them for pixel-perfect alignment.
"""

import logging

from .profiles.constants import DEFAULT_END_MARKER
from .profiles.model import FontProfile
from .profiles.store import ProfileStore, resolve_profile
from .utils import ensure_text

logger = logging.getLogger(__name__)


def width(profile: FontProfile, text: str | bytes) -> int:
    """Calculates the width of a string in pixels.

    Args:
        profile: Resolved font profile.
        text: The string to measure (bytes are decoded as UTF-8).

    Returns:
        Width in pixels. 0 for the empty string.
    """
    text = ensure_text(text)
    char_width = profile.char_width
    return sum(char_width(ord(ch)) for ch in text)


def fits(profile: FontProfile, text: str | bytes, max_width: int) -> bool:
    """Returns True if text renders within max_width pixels."""
    return width(profile, text) <= max_width


def cut(
    profile: FontProfile,
    text: str | bytes,
    max_width: int,
    end: str | bytes = DEFAULT_END_MARKER,
) -> str:
    """Cuts a string to a maximum width, appending an end marker.

    The result never exceeds max_width, end marker included. Text that
    already fits is returned unchanged, without a marker. When one wide
    character jumps from below the marker threshold straight past
    max_width, the text before it is kept and the marker appended.

    Args:
        profile: Resolved font profile.
        text: The string to cut.
        max_width: Maximum width in pixels.
        end: Marker appended when content is removed.

    Returns:
        The (possibly) truncated string. Empty if nothing fits.
    """
    text = ensure_text(text)
    end = ensure_text(end)
    char_width = profile.char_width

    # Width left for content once the end marker is accounted for
    safe_max = max_width - width(profile, end)

    # Length of the longest prefix that still leaves room for the marker,
    # captured on the first character that crosses safe_max
    safe: int | None = None
    w = 0
    for i, ch in enumerate(text):
        w += char_width(ord(ch))
        if w > max_width:
            if safe_max < 0:
                logger.debug(
                    "End marker %r (%dpx) does not fit in %dpx",
                    end,
                    max_width - safe_max,
                    max_width,
                )
                return ""
            if safe is None:
                # Jumped from <= safe_max straight past max_width
                if i == 0:
                    return ""
                safe = i
            return text[:safe] + end
        if w > safe_max and safe is None:
            safe = i

    return text


def wrap_text(profile: FontProfile, text: str | bytes, max_width: int) -> list[str]:
    """Word-wraps text to lines no wider than max_width.

    Handles explicit line breaks (\\r, \\n, \\r\\n). Words wider than
    max_width are broken between characters; a single character wider
    than max_width gets a line of its own.

    Args:
        profile: Resolved font profile.
        text: The text to wrap.
        max_width: Maximum line width in pixels.

    Returns:
        List of lines (at least one, possibly empty).
    """
    text = ensure_text(text)
    if max_width <= 0:
        return text.splitlines() or [""]

    paragraphs = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    result: list[str] = []

    for para in paragraphs:
        if not para:
            result.append("")
            continue

        current_line = ""
        for word in para.split(" "):
            candidate = word if not current_line else current_line + " " + word
            if width(profile, candidate) <= max_width:
                current_line = candidate
                continue

            if current_line:
                result.append(current_line)
            if width(profile, word) <= max_width:
                current_line = word
                continue

            # Character-level wrapping
            current_line = ""
            for ch in word:
                test = current_line + ch
                if width(profile, test) > max_width and current_line:
                    result.append(current_line)
                    current_line = ch
                else:
                    current_line = test

        if current_line:
            result.append(current_line)

    return result or [""]


class TextMeasurer:
    """Measures and cuts text for one font, size and weight.

    Resolves the profile once at construction; every method call after
    that is a pure function of its arguments.
    """

    def __init__(
        self,
        font_name: str,
        size: int | float | str,
        bold: bool = False,
        store: ProfileStore | None = None,
    ) -> None:
        """Initializes the measurer.

        Args:
            font_name: Font name or alias, e.g. "Gulim" or "굴림".
            size: Size, e.g. 12, "12px" or "9pt".
            bold: True for the bold weight.
            store: Profile store; defaults to the packaged profiles.

        Raises:
            UnsupportedProfileError: If no table exists for the combination.
        """
        self.profile = resolve_profile(font_name, size, bold, store=store)

    def width(self, text: str | bytes) -> int:
        return width(self.profile, text)

    def fits(self, text: str | bytes, max_width: int) -> bool:
        return fits(self.profile, text, max_width)

    def cut(
        self, text: str | bytes, max_width: int, end: str | bytes = DEFAULT_END_MARKER
    ) -> str:
        return cut(self.profile, text, max_width, end)

    def wrap(self, text: str | bytes, max_width: int) -> list[str]:
        return wrap_text(self.profile, text, max_width)

    def __repr__(self) -> str:
        return f"TextMeasurer({self.profile})"

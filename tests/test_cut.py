# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Tests for width-safe truncation (measure.cut)."""

import pytest
from conftest import make_profile

from hanpok import cut, width
from hanpok.profiles import FontProfile

TEXTS = [
    "",
    "HELLOWORLD",
    "Hello, world! This is a longer sentence.",
    "안녕하세요 반갑습니다",
    "한글 English 섞어쓰기 ‘인용’ · 끝",
    "\x00\x00abc",
    "😀😀😀 emoji",
]
MARKERS = ["...", "…", "", "~", "(더보기)"]
MAX_WIDTHS = [-5, 0, 1, 5, 12, 20, 30, 47, 100, 1000]


class TestCutExamples:
    """Worked truncation examples."""

    def test_checkpoint_after_two_characters(self, flat_profile: FontProfile):
        """6px per character, 18px marker: safe_max is 12, so 'HE' is kept."""
        result = cut(flat_profile, "HELLOWORLD", 30, "...")
        assert result == "HE..."
        assert width(flat_profile, result) == 30

    def test_fitting_text_is_unchanged(self, flat_profile: FontProfile):
        """No marker is added when nothing is removed."""
        assert cut(flat_profile, "HELLO", 30, "...") == "HELLO"

    def test_default_marker(self, flat_profile: FontProfile):
        assert cut(flat_profile, "HELLOWORLD", 30) == "HE..."

    def test_hangul(self, gulim12: FontProfile):
        """12px syllables with a 12px marker in a 40px box."""
        assert cut(gulim12, "가나다라마", 40) == "가나..."

    def test_gulim_mixed(self, gulim12: FontProfile):
        assert cut(gulim12, "HELLO WORLD", 30) == "HE..."

    def test_empty_marker(self, flat_profile: FontProfile):
        """With no marker the cut keeps every character that fits."""
        assert cut(flat_profile, "HELLOWORLD", 30, "") == "HELLO"

    def test_symbols_in_marker(self, batang11_bold: FontProfile):
        """The marker is measured with the same profile."""
        result = cut(batang11_bold, "가나다라마바사", 40, "·")
        assert result == "가나·"
        assert width(batang11_bold, result) <= 40

    def test_jump_past_max_keeps_prefix(self):
        """A wide character that overflows before any checkpoint was taken
        still keeps the prefix that leaves room for the marker."""
        profile = make_profile(6, 12)
        assert cut(profile, "ab가", 20, ".") == "ab."

    def test_first_character_overflows(self):
        profile = make_profile(6, 50)
        assert cut(profile, "가a", 30, ".") == ""

    def test_marker_only(self, flat_profile: FontProfile):
        """Checkpoint taken before any character was kept: marker only."""
        assert cut(flat_profile, "가가", 15, ".") == "."

    def test_bytes_input(self, flat_profile: FontProfile):
        assert cut(flat_profile, b"HELLOWORLD", 30, b"...") == "HE..."

    def test_bold_surcharge(self, store):
        bold = store.resolve("Gulim", 12, bold=True)
        # H=9, E=9, '...' = 15
        assert cut(bold, "HELLO", 33) == "HE..."


class TestDegenerateBudget:
    """Budgets too small for the end marker."""

    def test_zero_width(self, flat_profile: FontProfile):
        assert cut(flat_profile, "abc", 0) == ""

    def test_negative_width(self, flat_profile: FontProfile):
        assert cut(flat_profile, "abc", -10) == ""

    def test_marker_wider_than_budget(self, flat_profile: FontProfile):
        """The marker alone would overflow, so nothing is returned."""
        assert cut(flat_profile, "abcdef", 10, "...") == ""

    def test_fitting_text_still_returned(self, flat_profile: FontProfile):
        assert cut(flat_profile, "a", 10, "...") == "a"

    def test_zero_width_prefix(self):
        """Zero-width characters alone fit a zero budget."""
        profile = FontProfile(
            family="test",
            size=12,
            bold=False,
            ascii=(0,) + (6,) * 127,
            default=12,
        )
        assert width(profile, "\x00\x00") == 0
        assert cut(profile, "\x00\x00", 0) == "\x00\x00"
        assert cut(profile, "\x00\x00a", 0) == ""

    def test_empty_text(self, flat_profile: FontProfile):
        assert cut(flat_profile, "", 0) == ""


@pytest.mark.parametrize("text", TEXTS)
@pytest.mark.parametrize("end", MARKERS)
class TestCutProperties:
    """Invariants over a grid of texts, markers and budgets."""

    def test_never_exceeds_max(self, batang11_bold: FontProfile, text, end):
        for max_width in MAX_WIDTHS:
            result = cut(batang11_bold, text, max_width, end)
            assert width(batang11_bold, result) <= max(max_width, 0)

    def test_unchanged_when_fitting(self, gulim12: FontProfile, text, end):
        for max_width in MAX_WIDTHS:
            if width(gulim12, text) <= max_width:
                assert cut(gulim12, text, max_width, end) == text

    def test_marker_appended_on_truncation(self, gulim12: FontProfile, text, end):
        for max_width in MAX_WIDTHS:
            result = cut(gulim12, text, max_width, end)
            if result == text or not result:
                continue
            assert result.endswith(end)
            assert text.startswith(result.removesuffix(end))

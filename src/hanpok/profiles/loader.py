# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Loading and serializing font profile documents.

A profile document is a JSON object in one of two forms::

    {"family": "gulim", "size": 12, "bold": "surcharge", "form": "table",
     "widths": [...128 ints...]}

    {"family": "batang", "size": 11, "bold": true, "form": "extended",
     "default": 12, "ascii": [...128 ints...], "symbols": {"e28098": 4}}

Symbol keys are the hex encoding of the character's UTF-8 bytes.
"""

import dataclasses
import json
import logging
from collections.abc import Iterator
from importlib.resources import files
from pathlib import Path
from typing import Any

from ..exceptions import ProfileDataError
from .constants import (
    ASCII_MAX,
    ASCII_TABLE_SIZE,
    BOLD_SURCHARGE,
    BOLD_SURCHARGE_MARKER,
    PROFILE_SUFFIX,
    RESOURCE_PACKAGE,
)
from .model import FontProfile, ProfileForm

logger = logging.getLogger(__name__)


def _require_width(value: Any, what: str) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ProfileDataError(f"{what} must be a non-negative integer, got {value!r}")
    return value


def _parse_table(values: Any, what: str) -> tuple[int, ...]:
    if not isinstance(values, list) or len(values) != ASCII_TABLE_SIZE:
        raise ProfileDataError(f"{what} must be a list of {ASCII_TABLE_SIZE} widths")
    return tuple(_require_width(v, f"{what}[{i}]") for i, v in enumerate(values))


def decode_symbol_key(key: str) -> int:
    """Decodes a hex-encoded UTF-8 symbol key to its code point.

    Args:
        key: Hex of the character's UTF-8 bytes, e.g. "e28098" for U+2018.

    Returns:
        The code point.

    Raises:
        ProfileDataError: If the key is not exactly one non-ASCII character.
    """
    try:
        char = bytes.fromhex(key).decode("utf-8")
    except (ValueError, UnicodeDecodeError) as e:
        raise ProfileDataError(f"Invalid symbol key {key!r}: {e}") from e
    if len(char) != 1 or ord(char) <= ASCII_MAX:
        raise ProfileDataError(
            f"Symbol key {key!r} must encode a single character above U+007F"
        )
    return ord(char)


def encode_symbol_key(codepoint: int) -> str:
    """Encodes a code point as the hex of its UTF-8 bytes."""
    return chr(codepoint).encode("utf-8").hex()


def profiles_from_document(data: Any) -> list[FontProfile]:
    """Builds the profiles described by one profile document.

    A table-form document whose "bold" value is "surcharge" yields two
    profiles: the normal one and a bold one that adds a flat surcharge
    to every character.

    Args:
        data: Parsed JSON document.

    Returns:
        List of one or two profiles.

    Raises:
        ProfileDataError: If the document is malformed.
    """
    if not isinstance(data, dict):
        raise ProfileDataError("Profile document must be a JSON object")

    family = data.get("family")
    if not isinstance(family, str) or not family:
        raise ProfileDataError("Profile document needs a non-empty 'family'")
    family = family.strip().lower()
    size = data.get("size")
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise ProfileDataError(f"'size' must be a positive integer, got {size!r}")

    try:
        form = ProfileForm(data.get("form", ProfileForm.EXTENDED.value))
    except ValueError as e:
        raise ProfileDataError(f"Unknown profile form: {data.get('form')!r}") from e

    bold = data.get("bold", False)

    if form is ProfileForm.TABLE:
        widths = _parse_table(data.get("widths"), "widths")
        if bold not in (False, True, BOLD_SURCHARGE_MARKER):
            raise ProfileDataError(f"Invalid 'bold' value: {bold!r}")
        normal = FontProfile(
            family=family,
            size=size,
            bold=bold is True,
            ascii=widths,
            default=size,
            form=ProfileForm.TABLE,
        )
        if bold != BOLD_SURCHARGE_MARKER:
            return [normal]
        return [
            normal,
            dataclasses.replace(normal, bold=True, bold_surcharge=BOLD_SURCHARGE),
        ]

    if not isinstance(bold, bool):
        raise ProfileDataError(
            f"Extended profiles need a boolean 'bold', got {bold!r}"
        )
    ascii_widths = _parse_table(data.get("ascii"), "ascii")
    default = _require_width(data.get("default"), "default")
    raw_symbols = data.get("symbols") or {}
    if not isinstance(raw_symbols, dict):
        raise ProfileDataError("'symbols' must be a JSON object")
    symbols = {
        decode_symbol_key(k): _require_width(v, f"symbols[{k}]")
        for k, v in raw_symbols.items()
    }
    return [
        FontProfile(
            family=family,
            size=size,
            bold=bold,
            ascii=ascii_widths,
            default=default,
            symbols=symbols,
            form=ProfileForm.EXTENDED,
        )
    ]


def profile_to_dict(profile: FontProfile) -> dict[str, Any]:
    """Serializes a profile to the document format read by
    :func:`profiles_from_document`."""
    if profile.form is ProfileForm.TABLE:
        return {
            "family": profile.family,
            "size": profile.size,
            "bold": BOLD_SURCHARGE_MARKER if profile.bold_surcharge else profile.bold,
            "form": ProfileForm.TABLE.value,
            "widths": list(profile.ascii),
        }
    return {
        "family": profile.family,
        "size": profile.size,
        "bold": profile.bold,
        "form": ProfileForm.EXTENDED.value,
        "default": profile.default,
        "ascii": list(profile.ascii),
        "symbols": {
            encode_symbol_key(cp): w for cp, w in sorted(profile.symbols.items())
        },
    }


def load_profile_file(path: Path | str) -> list[FontProfile]:
    """Loads the profiles from a single JSON document on disk.

    Raises:
        ProfileDataError: If the file cannot be read, is not UTF-8 JSON
            or is malformed.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ProfileDataError(f"{path.name}: cannot read profile: {e}") from e
    try:
        return profiles_from_document(data)
    except ProfileDataError as e:
        raise ProfileDataError(f"{path.name}: {e}") from e


def iter_directory_profiles(directory: Path | str) -> Iterator[FontProfile]:
    """Yields the profiles of every document in a directory (sorted by name)."""
    directory = Path(directory)
    for path in sorted(directory.glob(f"*{PROFILE_SUFFIX}")):
        profiles = load_profile_file(path)
        logger.debug("Loaded %d profile(s) from %s", len(profiles), path)
        yield from profiles


def iter_packaged_profiles() -> Iterator[FontProfile]:
    """Yields the profiles shipped as package resources."""
    resource_dir = files(RESOURCE_PACKAGE) / "resources" / "profiles"
    entries = sorted(
        (e for e in resource_dir.iterdir() if e.name.endswith(PROFILE_SUFFIX)),
        key=lambda e: e.name,
    )
    for entry in entries:
        try:
            data = json.loads(entry.read_text(encoding="utf-8"))
            profiles = profiles_from_document(data)
        except (
            OSError,
            UnicodeDecodeError,
            json.JSONDecodeError,
            ProfileDataError,
        ) as e:
            raise ProfileDataError(f"{entry.name}: {e}") from e
        logger.debug("Loaded %d packaged profile(s) from %s", len(profiles), entry.name)
        yield from profiles

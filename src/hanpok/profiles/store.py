# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Font profile registry and resolution."""

import functools
import logging
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from ..exceptions import UnsupportedProfileError
from .constants import PROFILE_PATH_ENV
from .loader import iter_directory_profiles, iter_packaged_profiles
from .model import FontProfile, ProfileKey
from .normalize import normalize_font_name, normalize_size

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolveResult:
    """Result of a non-raising profile lookup.

    Attributes:
        success: True if a profile was found.
        profile: The resolved profile, or None.
        error: The resolution error if success=False.
    """

    success: bool
    profile: FontProfile | None = None
    error: UnsupportedProfileError | None = None

    def __post_init__(self) -> None:
        if self.success and self.profile is None:
            raise ValueError("A successful result needs a profile")
        if not self.success and self.error is None:
            raise ValueError("A failed result needs an error")

    def unwrap(self) -> FontProfile:
        """Returns the profile or raises the stored error."""
        if not self.success:
            raise self.error
        return self.profile


class ProfileStore:
    """Immutable registry of font profiles keyed by (family, size, bold).

    The registry is populated once at construction and never mutated
    afterwards, so a single instance can be shared across threads.
    """

    def __init__(self, profiles: Iterable[FontProfile] = ()) -> None:
        """Initializes the store.

        Args:
            profiles: Profiles to register. Later entries replace earlier
                ones with the same key.
        """
        table: dict[ProfileKey, FontProfile] = {}
        for profile in profiles:
            if profile.key in table:
                logger.debug("Profile %s replaced", profile)
            table[profile.key] = profile
        self._profiles = MappingProxyType(table)

    @classmethod
    def from_resources(cls) -> "ProfileStore":
        """Creates a store with the profiles shipped in the package."""
        return cls(iter_packaged_profiles())

    @classmethod
    def from_directories(
        cls, *directories: Path | str, include_packaged: bool = True
    ) -> "ProfileStore":
        """Creates a store from profile directories.

        Args:
            *directories: Directories with profile documents. Profiles found
                here override packaged ones with the same key.
            include_packaged: If True, start from the packaged profiles.

        Raises:
            FileNotFoundError: If a directory does not exist.
        """
        for directory in directories:
            if not Path(directory).is_dir():
                raise FileNotFoundError(f"Profile directory not found: {directory}")

        def _all() -> Iterator[FontProfile]:
            if include_packaged:
                yield from iter_packaged_profiles()
            for directory in directories:
                yield from iter_directory_profiles(directory)

        return cls(_all())

    def __len__(self) -> int:
        return len(self._profiles)

    def __contains__(self, key: object) -> bool:
        return key in self._profiles

    def __iter__(self) -> Iterator[FontProfile]:
        return iter(self._profiles[k] for k in sorted(self._profiles))

    def keys(self) -> list[ProfileKey]:
        """Returns all registered keys, sorted."""
        return sorted(self._profiles)

    def families(self) -> list[str]:
        return sorted({family for family, _, _ in self._profiles})

    def get(self, family: str, size: int, bold: bool = False) -> FontProfile | None:
        """Looks up an already-normalized key."""
        return self._profiles.get((family, size, bold))

    def lookup(
        self, font_name: str, size_spec: int | float | str, bold: bool = False
    ) -> ResolveResult:
        """Resolves a profile without raising on a missing table.

        Args:
            font_name: Font name or alias, e.g. "Gulim" or "굴림".
            size_spec: Size, e.g. 12, "12px" or "9pt".
            bold: True for the bold weight.

        Returns:
            ResolveResult with either the profile or the error.
        """
        family = normalize_font_name(font_name)
        size = normalize_size(size_spec)
        profile = self.get(family, size, bool(bold))
        if profile is None:
            return ResolveResult(
                success=False,
                error=UnsupportedProfileError(family, size, bool(bold)),
            )
        return ResolveResult(success=True, profile=profile)

    def resolve(
        self, font_name: str, size_spec: int | float | str, bold: bool = False
    ) -> FontProfile:
        """Resolves a profile.

        Args:
            font_name: Font name or alias, e.g. "Gulim" or "굴림".
            size_spec: Size, e.g. 12, "12px" or "9pt".
            bold: True for the bold weight.

        Returns:
            The matching profile.

        Raises:
            UnsupportedProfileError: If no table exists for the combination.
        """
        return self.lookup(font_name, size_spec, bold).unwrap()


def _env_profile_dirs() -> list[Path]:
    """Returns existing directories listed in HANPOK_PROFILE_PATH."""
    raw = os.environ.get(PROFILE_PATH_ENV, "")
    dirs = []
    for entry in raw.split(os.pathsep):
        if not entry.strip():
            continue
        path = Path(entry.strip()).expanduser()
        if path.is_dir():
            dirs.append(path)
        else:
            logger.warning("Skipping missing profile directory: %s", path)
    return dirs


@functools.cache
def default_store() -> ProfileStore:
    """Returns the process-wide store.

    Packaged profiles plus any directories listed in HANPOK_PROFILE_PATH.
    Loaded on first use and cached for the life of the process.
    """
    store = ProfileStore.from_directories(*_env_profile_dirs())
    logger.debug("Profile store loaded: %d profiles", len(store))
    return store


def resolve_profile(
    font_name: str,
    size: int | float | str,
    bold: bool = False,
    store: ProfileStore | None = None,
) -> FontProfile:
    """Resolves a profile against ``store`` (default: :func:`default_store`).

    Raises:
        UnsupportedProfileError: If no table exists for the combination.
    """
    if store is None:
        store = default_store()
    return store.resolve(font_name, size, bold)


def lookup_profile(
    font_name: str,
    size: int | float | str,
    bold: bool = False,
    store: ProfileStore | None = None,
) -> ResolveResult:
    """Non-raising variant of :func:`resolve_profile`."""
    if store is None:
        store = default_store()
    return store.lookup(font_name, size, bold)

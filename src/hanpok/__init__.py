# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""hanpok - On-screen pixel width estimation for mixed Korean text."""

from importlib.metadata import PackageNotFoundError, version

from .exceptions import (
    HanPokError,
    InvalidTextError,
    ProfileBuildError,
    ProfileDataError,
    UnsupportedProfileError,
)
from .measure import TextMeasurer, cut, fits, width, wrap_text
from .profiles import (
    FontProfile,
    ProfileStore,
    ResolveResult,
    default_store,
    lookup_profile,
    resolve_profile,
)

try:
    __version__ = version("hanpok")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "__version__",
    "resolve_profile",
    "lookup_profile",
    "default_store",
    "width",
    "cut",
    "fits",
    "wrap_text",
    "TextMeasurer",
    "FontProfile",
    "ProfileStore",
    "ResolveResult",
    "HanPokError",
    "UnsupportedProfileError",
    "ProfileDataError",
    "InvalidTextError",
    "ProfileBuildError",
]

# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Font profiles: width tables, normalization and the profile store."""

from ..exceptions import ProfileDataError, UnsupportedProfileError
from .builder import FontWidthExtractor, build_profile, build_profile_from_file
from .constants import FONT_ALIASES
from .loader import load_profile_file, profile_to_dict, profiles_from_document
from .model import FontProfile, ProfileForm, ProfileKey
from .normalize import normalize_font_name, normalize_size, pt_to_px
from .store import (
    ProfileStore,
    ResolveResult,
    default_store,
    lookup_profile,
    resolve_profile,
)

__all__ = [
    # Exceptions
    "ProfileDataError",
    "UnsupportedProfileError",
    # Model
    "FontProfile",
    "ProfileForm",
    "ProfileKey",
    # Normalization
    "FONT_ALIASES",
    "normalize_font_name",
    "normalize_size",
    "pt_to_px",
    # Loading
    "load_profile_file",
    "profile_to_dict",
    "profiles_from_document",
    # Store
    "ProfileStore",
    "ResolveResult",
    "default_store",
    "lookup_profile",
    "resolve_profile",
    # Building
    "FontWidthExtractor",
    "build_profile",
    "build_profile_from_file",
]

# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Pytest fixtures for the hanpok test suite."""

import json
from collections.abc import Generator
from pathlib import Path

import pytest

from hanpok.profiles import FontProfile, ProfileForm, ProfileStore, default_store
from hanpok.profiles.constants import PROFILE_PATH_ENV


def make_profile(
    ascii_width: int = 6,
    default: int = 12,
    *,
    family: str = "test",
    size: int = 12,
    bold: bool = False,
    symbols: dict[int, int] | None = None,
    bold_surcharge: int = 0,
    form: ProfileForm = ProfileForm.EXTENDED,
) -> FontProfile:
    """Create a profile where every ASCII character has the same width."""
    return FontProfile(
        family=family,
        size=size,
        bold=bold,
        ascii=(ascii_width,) * 128,
        default=default,
        symbols=symbols or {},
        bold_surcharge=bold_surcharge,
        form=form,
    )


def extended_document(**overrides) -> dict:
    """Minimal valid extended-form profile document."""
    doc = {
        "family": "sample",
        "size": 14,
        "bold": False,
        "form": "extended",
        "default": 15,
        "ascii": [7] * 128,
        "symbols": {"e28098": 5},
    }
    doc.update(overrides)
    return doc


def write_document(directory: Path, name: str, document: dict) -> Path:
    """Write a profile document as JSON and return its path."""
    path = directory / name
    path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _fresh_default_store(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate tests from HANPOK_PROFILE_PATH and the cached default store."""
    monkeypatch.delenv(PROFILE_PATH_ENV, raising=False)
    default_store.cache_clear()
    yield
    default_store.cache_clear()


@pytest.fixture(scope="session")
def store() -> ProfileStore:
    """Store with the packaged profiles."""
    return ProfileStore.from_resources()


@pytest.fixture
def gulim12(store: ProfileStore) -> FontProfile:
    return store.resolve("Gulim", 12)


@pytest.fixture
def batang13(store: ProfileStore) -> FontProfile:
    return store.resolve("Batang", "13px")


@pytest.fixture
def batang11_bold(store: ProfileStore) -> FontProfile:
    return store.resolve("Batang", "11px", bold=True)


@pytest.fixture
def flat_profile() -> FontProfile:
    """Every ASCII character 6px, everything else 12px."""
    return make_profile(6, 12)


@pytest.fixture
def profile_dir(tmp_path: Path) -> Path:
    """Directory holding one extra profile document."""
    write_document(tmp_path, "sample_14px.json", extended_document())
    return tmp_path

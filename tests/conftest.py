"""Shared fixtures."""

import os

import pytest

from core.config import AppSettings
from core.domain.models import LicenseTier
from helpers import FakeDirectory, make_user


@pytest.fixture
def users():
    """Scenario A account: one Pro holder, one Basic user."""
    return [
        make_user("1", "a@x.com", LicenseTier.PRO),
        make_user("2", "b@x.com", LicenseTier.BASIC),
    ]


@pytest.fixture
def directory(users):
    return FakeDirectory(users)


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def record_sleep(sleeps):
    return sleeps.append


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate settings from any developer .env or ZOOM_SWAP_* variables."""
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.upper().startswith("ZOOM_SWAP_"):
            monkeypatch.delenv(name)


@pytest.fixture
def settings(clean_env):
    return AppSettings()

"""Shared test fixtures for users-api."""

import os
from pathlib import Path

import pytest

from users_api.config import ENV_PREFIX
from users_api.seed import DEFAULT_USERS
from users_api.store import UserStore


@pytest.fixture
def store():
    """Store seeded with the eight fixture users."""
    return UserStore(DEFAULT_USERS)


@pytest.fixture
def empty_store():
    """Store with no users."""
    return UserStore()


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Hide user/project config files and USERS_API_* variables.

    Yields the temporary directory that serves as both home and cwd.
    """
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.chdir(work)
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    yield tmp_path

"""Shared fixtures: in-memory stores and one repository set per simulated tab."""

import os

# Keep config (and any app startup) off disk and off MongoDB
os.environ["CONTENT_STORE_PATH"] = ""
os.environ.pop("DATABASE_URL", None)
os.environ.pop("ADMIN_PASSWORD_HASH", None)

import pytest

from database import MemoryRecordStore
from events import ChangeSignal
from repositories import Repositories


@pytest.fixture
def store():
    return MemoryRecordStore()


@pytest.fixture
def repos(store):
    tab = Repositories(store, ChangeSignal("tab"))
    yield tab
    tab.close()


@pytest.fixture
def other_tab(store):
    tab = Repositories(store, ChangeSignal("other-tab"))
    yield tab
    tab.close()

from __future__ import annotations

import pytest

from voice_shopping.config import get_settings
from voice_shopping.engine import CommandEngine
from voice_shopping.store import ShoppingListStore

SETTING_VARS = ["NUMBER_WORD_MATCH", "STORE_MATCH", "STRIP_NUMBER_WORDS", "CORS_ORIGINS", "LOG_LEVEL", "PORT"]


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch):
    for var in SETTING_VARS:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store() -> ShoppingListStore:
    return ShoppingListStore()


@pytest.fixture
def engine(store: ShoppingListStore) -> CommandEngine:
    return CommandEngine(store=store)

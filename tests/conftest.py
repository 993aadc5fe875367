from __future__ import annotations

from typing import Callable

import pytest
from fastapi import FastAPI

from greeter import settings as settings_module
from greeter.main import create_app
from greeter.settings import ServerSettings


@pytest.fixture(autouse=True)
def clear_cfg_cache(monkeypatch: pytest.MonkeyPatch):
    """Every test starts without GREETER_CFG and with an empty config cache."""
    monkeypatch.delenv("GREETER_CFG", raising=False)
    settings_module.get_cfg.cache_clear()
    yield
    settings_module.get_cfg.cache_clear()


@pytest.fixture
def create_test_app() -> Callable[..., FastAPI]:
    """Build an app with explicit settings, never touching the config file."""

    def _create(**overrides: object) -> FastAPI:
        return create_app(ServerSettings(**overrides))

    return _create

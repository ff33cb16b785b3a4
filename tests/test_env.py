from __future__ import annotations

import importlib
import logging
from collections.abc import Iterator

import pytest

from arraystore.config import StoreOptions


def _reload_env() -> None:
    # arraystore.env captures ARRAYSTORE_* at import time
    import arraystore.env as env_mod

    importlib.reload(env_mod)


@pytest.fixture(autouse=True)
def reset_env_module(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    yield
    monkeypatch.undo()
    _reload_env()


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ARRAYSTORE_IDENTIFIER_FORMAT", raising=False)
    monkeypatch.delenv("ARRAYSTORE_LOG_LEVEL", raising=False)
    _reload_env()

    options = StoreOptions.from_env()
    assert options.identifier_format == "canonical"
    assert options.log_level == "WARNING"
    assert options.verbose == 0


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ARRAYSTORE_IDENTIFIER_FORMAT", " Compact ")
    monkeypatch.setenv("ARRAYSTORE_LOG_LEVEL", "debug")
    _reload_env()

    options = StoreOptions.from_env()
    assert options.identifier_format == "compact"
    assert options.log_level == "debug"


def test_from_env_rejects_unknown_format(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ARRAYSTORE_IDENTIFIER_FORMAT", "braces")
    _reload_env()

    with pytest.raises(ValueError, match="Unknown identifier format"):
        StoreOptions.from_env()


def test_rejects_unknown_format() -> None:
    with pytest.raises(ValueError, match="Unknown identifier format"):
        StoreOptions(identifier_format="braces")  # type: ignore[arg-type]


def test_empty_values_use_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ARRAYSTORE_IDENTIFIER_FORMAT", "")
    monkeypatch.setenv("ARRAYSTORE_LOG_LEVEL", "")
    _reload_env()

    options = StoreOptions.from_env()
    assert options.identifier_format == "canonical"
    assert options.log_level == "WARNING"


def test_from_env_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ARRAYSTORE_LOG_LEVEL", "loud")
    _reload_env()

    with pytest.raises(ValueError, match="ARRAYSTORE_.*Unknown logging level"):
        StoreOptions.from_env()


def test_effective_log_level() -> None:
    assert StoreOptions(log_level="error").effective_log_level == logging.ERROR
    assert StoreOptions(log_level="error", verbose=1).effective_log_level == logging.INFO
    assert StoreOptions(log_level=5, verbose=3).effective_log_level == logging.DEBUG

from __future__ import annotations

import io
from collections.abc import Iterator

import pytest

from arraystore.config import STORE_OPTIONS
from arraystore.logging import configure_logger


@pytest.fixture()
def log_stream() -> Iterator[io.StringIO]:
    """Route arraystore logs into a buffer for the duration of a test."""
    stream = io.StringIO()
    configure_logger(level="DEBUG", stream=stream, color=False, force=True)
    yield stream
    configure_logger(force=True)


@pytest.fixture(autouse=True)
def restore_store_options() -> Iterator[None]:
    identifier_format = STORE_OPTIONS.identifier_format
    log_level = STORE_OPTIONS.log_level
    verbose = STORE_OPTIONS.verbose
    yield
    STORE_OPTIONS.identifier_format = identifier_format
    STORE_OPTIONS.log_level = log_level
    STORE_OPTIONS.verbose = verbose

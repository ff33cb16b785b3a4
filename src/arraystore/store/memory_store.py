from __future__ import annotations

import threading
from collections.abc import Iterator, Mapping
from typing import Any

import pandas as pd

from arraystore.identifier import IdentifierFormat
from arraystore.logging import get_logger
from arraystore.store.base import Store
from arraystore.store.missing import MISSING, Missing

logger = get_logger("store.memory")


class MemoryStore(Store[str, Any]):
    """Non-persistent in-memory store backed by a single dict.

    Every operation takes the store's lock, so individual calls are atomic when
    the store is shared between threads. Sequences of calls are not.
    """

    def __init__(
        self,
        initial: Mapping[str, Any] | None = None,
        *,
        identifier_format: IdentifierFormat | None = None,
    ) -> None:
        super().__init__(identifier_format=identifier_format)

        self._data: dict[str, Any] = {}
        self._lock = threading.RLock()

        for key, value in (initial or {}).items():
            self.add(key, value)

    def exists(self, key: str) -> bool:
        with self._lock:
            return key in self._data

    def get(self, key: str) -> Any | Missing:
        with self._lock:
            return self._data.get(key, MISSING)

    def set(self, key: str, value: Any) -> bool:
        with self._lock:
            self._data[key] = value

        logger.debug("set %r", key)
        return True

    def add(self, key: str, value: Any) -> bool:
        with self._lock:
            return super().add(key, value)

    def replace(self, key: str, value: Any) -> bool:
        with self._lock:
            return super().replace(key, value)

    def delete(self, key: str) -> bool:
        with self._lock:
            if key not in self._data:
                return False

            del self._data[key]

        logger.debug("delete %r", key)
        return True

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._data.keys())

    def items(self) -> list[tuple[str, Any]]:
        with self._lock:
            return list(self._data.items())

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            return dict(self._data)

    def to_frame(self) -> pd.DataFrame:
        items = self.items()
        page = pd.DataFrame(
            {"key": [k for k, _ in items], "value": pd.Series([v for _, v in items], dtype=object)}
        )
        return page.set_index("key")

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self)})"

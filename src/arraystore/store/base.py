from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterable
from typing import Generic, Literal, TypeVar

from arraystore.config import STORE_OPTIONS
from arraystore.identifier import IdentifierFormat, check_format, generate_identifier
from arraystore.logging import get_logger
from arraystore.store.missing import MISSING, Missing

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

logger = get_logger("store")


class Store(Generic[K, V], ABC):
    """Storage contract shared by all stores.

    Subclasses provide the primitives (`exists`, `get`, `set`, `delete`, `keys`).
    The conditional writes and identifier-keyed inserts are built on top of them
    here, so every store reports failures the same way: a falsy return value,
    never an exception.
    """

    def __init__(self, *, identifier_format: IdentifierFormat | None = None) -> None:
        self.identifier_format: IdentifierFormat = (
            identifier_format or STORE_OPTIONS.identifier_format
        )
        check_format(self.identifier_format)

    @abstractmethod
    def exists(self, key: K) -> bool: ...

    @abstractmethod
    def get(self, key: K) -> V | Missing: ...

    @abstractmethod
    def set(self, key: K, value: V) -> bool: ...

    @abstractmethod
    def delete(self, key: K) -> bool: ...

    @abstractmethod
    def keys(self) -> list[K]: ...

    def add(self, key: K, value: V) -> bool:
        if self.exists(key):
            logger.debug("add rejected, key exists: %r", key)
            return False

        return self.set(key, value)

    def replace(self, key: K, value: V) -> bool:
        if not self.exists(key):
            logger.debug("replace rejected, key absent: %r", key)
            return False

        return self.set(key, value)

    def get_many(self, keys: Iterable[K]) -> dict[K, V]:
        found: dict[K, V] = {}
        for key in keys:
            value = self.get(key)
            if value is not MISSING:
                found[key] = value  # type: ignore[assignment]

        return found

    def generate_identifier(self) -> str:
        return generate_identifier(self.identifier_format)

    def store(self, value: V) -> str | Literal[False]:
        """Insert `value` under a fresh identifier and return the identifier.

        Returns False if the identifier is already taken. The insert is not
        retried with another identifier.
        """
        key = self.generate_identifier()

        if self.add(key, value):  # type: ignore[arg-type]
            return key

        logger.warning("Identifier collision on %s, value not stored", key)
        return False

from __future__ import annotations

from typing import Any, Final

__all__ = ["MISSING", "Missing"]


class Missing:
    """Marker returned by `Store.get` for absent keys.

    `None` is a legitimate stored value, so lookups need a result that no caller
    can store by accident. There is exactly one instance; compare with `is`.
    """

    _instance: Missing | None = None

    def __new__(cls) -> Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> Missing:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Missing:
        return self

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Final = Missing()

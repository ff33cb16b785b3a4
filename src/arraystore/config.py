from __future__ import annotations

import logging
from dataclasses import dataclass

from arraystore import env
from arraystore.identifier import IdentifierFormat, check_format


def normalize_level(level: int | str) -> int:
    if isinstance(level, bool):
        raise TypeError("Logging level must be an int or str.")
    if isinstance(level, int):
        return level
    if not isinstance(level, str):
        raise TypeError("Logging level must be an int or str.")

    name = level.strip().upper()
    if name.isdecimal():
        return int(name)

    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: {level!r}")
    return resolved


@dataclass(slots=True)
class StoreOptions:
    """Holds process-wide store and CLI options.

    Defaults come from the environment (see `arraystore.env`). `verbose` is the
    CLI's `-v` count and overrides `log_level` when set.
    """

    identifier_format: IdentifierFormat = "canonical"
    log_level: int | str = "WARNING"
    verbose: int = 0

    def __post_init__(self) -> None:
        check_format(self.identifier_format)
        normalize_level(self.log_level)

    @property
    def effective_log_level(self) -> int:
        if self.verbose > 1:
            return logging.DEBUG
        if self.verbose == 1:
            return logging.INFO
        return normalize_level(self.log_level)

    @classmethod
    def from_env(cls) -> StoreOptions:
        try:
            return cls(
                identifier_format=env.ARRAYSTORE_IDENTIFIER_FORMAT.strip().lower(),  # type: ignore[arg-type]
                log_level=env.ARRAYSTORE_LOG_LEVEL,
            )
        except ValueError as exc:
            raise ValueError(f"Invalid ARRAYSTORE_* environment setting: {exc}") from exc


STORE_OPTIONS = StoreOptions.from_env()

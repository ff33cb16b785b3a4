from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from typing import Any, TextIO

import typer

from arraystore.cli.utils import coerce_value, format_value
from arraystore.logging import get_logger
from arraystore.store.memory_store import MemoryStore

logger = get_logger("cli.shell")

USAGE = {
    "exists": "exists KEY",
    "get": "get KEY",
    "add": "add KEY VALUE",
    "set": "set KEY VALUE",
    "replace": "replace KEY VALUE",
    "delete": "delete KEY",
    "store": "store VALUE",
    "keys": "keys",
    "uuid": "uuid",
}

VALUE_COMMANDS = frozenset({"add", "set", "replace", "store"})


class ShellCommandError(ValueError):
    pass


class ShellSession:
    """Executes one-line store commands against a fresh in-memory store."""

    def __init__(self, store: MemoryStore | None = None) -> None:
        self.store = store if store is not None else MemoryStore()
        self._handlers: dict[str, tuple[int, Callable[..., Any]]] = {
            "exists": (1, self.store.exists),
            "get": (1, self.store.get),
            "add": (2, self.store.add),
            "set": (2, self.store.set),
            "replace": (2, self.store.replace),
            "delete": (1, self.store.delete),
            "store": (1, self.store.store),
            "keys": (0, lambda: " ".join(self.store.keys())),
            "uuid": (0, self.store.generate_identifier),
        }

    def execute(self, line: str) -> str | None:
        text = line.strip()
        if not text or text.startswith("#"):
            return None

        name, _, rest = text.partition(" ")
        name = name.lower()
        if name not in self._handlers:
            raise ShellCommandError(f"Unknown command: {name!r}")

        arity, handler = self._handlers[name]
        args = self._split_args(name, rest.strip(), arity)

        # Keys stay raw text, values are coerced.
        if name in VALUE_COMMANDS:
            args[-1] = coerce_value(args[-1])

        return format_value(handler(*args))

    def run(self, lines: Iterable[str], out: TextIO, err: TextIO) -> int:
        failures = 0
        for lineno, line in enumerate(lines, start=1):
            try:
                result = self.execute(line)
            except ShellCommandError as exc:
                failures += 1
                logger.debug("line %d rejected: %s", lineno, exc)
                err.write(f"line {lineno}: {exc}\n")
                continue

            if result is not None:
                out.write(result + "\n")

        return failures

    @staticmethod
    def _split_args(name: str, rest: str, arity: int) -> list[str]:
        # Keys are single words, a trailing value may contain spaces.
        if name in VALUE_COMMANDS:
            args = rest.split(maxsplit=arity - 1) if rest else []
        else:
            args = rest.split()

        if len(args) != arity:
            raise ShellCommandError(f"Usage: {USAGE[name]}")

        return args


def shell() -> None:
    """Read commands from stdin, one per line, and echo each result."""
    session = ShellSession()
    failures = session.run(sys.stdin, sys.stdout, sys.stderr)
    if failures:
        raise typer.Exit(code=1)

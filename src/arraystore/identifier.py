from __future__ import annotations

import random
import re
from dataclasses import dataclass
from typing import Literal

__all__ = [
    "IdentifierFields",
    "IdentifierFormat",
    "check_format",
    "InvalidIdentifierError",
    "generate_identifier",
    "is_identifier",
    "parse_identifier",
]

IdentifierFormat = Literal["canonical", "compact"]
IDENTIFIER_FORMATS: tuple[IdentifierFormat, ...] = ("canonical", "compact")

_RANDOM = random.SystemRandom()

_CANONICAL_RE = re.compile(
    r"^([0-9a-f]{8})-([0-9a-f]{4})-([0-9a-f]{4})-([0-9a-f]{4})-([0-9a-f]{12})$"
)
_COMPACT_RE = re.compile(
    r"^([0-9a-f]{8})([0-9a-f]{4})([0-9a-f]{4})([0-9a-f]{4})([0-9a-f]{12})$"
)

# RFC 4122 variant bits are `10`.
_VARIANT_RFC4122 = 0b10


class InvalidIdentifierError(ValueError):
    pass


@dataclass(frozen=True, slots=True)
class IdentifierFields:
    time_low: int
    time_mid: int
    time_hi_version: int
    clock_seq: int
    node: int

    @property
    def version(self) -> int:
        return self.time_hi_version >> 12

    @property
    def variant(self) -> int:
        return self.clock_seq >> 14

    def hex(self) -> str:
        return (
            f"{self.time_low:08x}{self.time_mid:04x}{self.time_hi_version:04x}"
            f"{self.clock_seq:04x}{self.node:012x}"
        )

    def format(self, fmt: IdentifierFormat = "canonical") -> str:
        check_format(fmt)
        if fmt == "compact":
            return self.hex()

        return (
            f"{self.time_low:08x}-{self.time_mid:04x}-{self.time_hi_version:04x}"
            f"-{self.clock_seq:04x}-{self.node:012x}"
        )


def generate_identifier(fmt: IdentifierFormat = "canonical") -> str:
    """Return a random version 4 identifier.

    Layout: 32 random bits (time_low), 16 random bits (time_mid), 16 bits with
    the top nibble set to 0100, 16 bits with the top two bits set to 10, and
    48 random bits (node). `fmt="compact"` drops the hyphens.
    """
    check_format(fmt)

    fields = IdentifierFields(
        time_low=_RANDOM.getrandbits(32),
        time_mid=_RANDOM.getrandbits(16),
        time_hi_version=_RANDOM.getrandbits(12) | 0x4000,
        clock_seq=_RANDOM.getrandbits(14) | 0x8000,
        node=_RANDOM.getrandbits(48),
    )

    return fields.format(fmt)


def parse_identifier(text: str) -> IdentifierFields:
    """Split an identifier in canonical or compact form into its fields."""
    if not isinstance(text, str):
        raise InvalidIdentifierError(f"Identifier must be a string, got {type(text).__name__}")

    normalized = text.strip().lower()
    match = _CANONICAL_RE.match(normalized) or _COMPACT_RE.match(normalized)
    if match is None:
        raise InvalidIdentifierError(f"Malformed identifier: {text!r}")

    time_low, time_mid, time_hi_version, clock_seq, node = (
        int(group, 16) for group in match.groups()
    )

    return IdentifierFields(
        time_low=time_low,
        time_mid=time_mid,
        time_hi_version=time_hi_version,
        clock_seq=clock_seq,
        node=node,
    )


def is_identifier(text: str) -> bool:
    try:
        fields = parse_identifier(text)
    except InvalidIdentifierError:
        return False

    return fields.version == 4 and fields.variant == _VARIANT_RFC4122


def check_format(fmt: str) -> None:
    if fmt not in IDENTIFIER_FORMATS:
        raise ValueError(
            f"Unknown identifier format: {fmt!r}. Expected one of {', '.join(IDENTIFIER_FORMATS)}."
        )

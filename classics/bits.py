"""Bit manipulation, float bit patterns and small packed value types."""

from __future__ import annotations

import struct
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

WORD_BITS = 32
_WORD_MASK = (1 << WORD_BITS) - 1
_FLOAT = struct.Struct("<f")
_UINT = struct.Struct("<I")


def _check_position(pos: int) -> None:
    if not 0 <= pos < WORD_BITS:
        raise ValueError(f"bit position {pos} outside 0..{WORD_BITS - 1}")


def _check_word(value: int) -> None:
    if not 0 <= value <= _WORD_MASK:
        raise ValueError(f"value {value} is not an unsigned 32-bit integer")


def set_bit(value: int, pos: int) -> int:
    """Return ``value`` with bit ``pos`` set."""
    _check_word(value)
    _check_position(pos)
    return value | (1 << pos)


def clear_bit(value: int, pos: int) -> int:
    """Return ``value`` with bit ``pos`` cleared."""
    _check_word(value)
    _check_position(pos)
    return value & ~(1 << pos) & _WORD_MASK


def toggle_bit(value: int, pos: int) -> int:
    """Return ``value`` with bit ``pos`` flipped."""
    _check_word(value)
    _check_position(pos)
    return value ^ (1 << pos)


def check_bit(value: int, pos: int) -> int:
    """Return bit ``pos`` of ``value`` as 0 or 1."""
    _check_word(value)
    _check_position(pos)
    return (value >> pos) & 1


def float_to_bits(value: float) -> int:
    """Return the IEEE 754 single-precision bit pattern of ``value``."""
    return _UINT.unpack(_FLOAT.pack(value))[0]


def bits_to_float(bits: int) -> float:
    """Return the single-precision float whose bit pattern is ``bits``."""
    _check_word(bits)
    return _FLOAT.unpack(_UINT.pack(bits))[0]


def format_array(values: Iterable[int]) -> str:
    """Render integers as ``[ a b c ]``."""
    return "[ " + "".join(f"{value} " for value in values) + "]"


class Color(IntEnum):
    """Colours numbered from zero, each with a display label."""

    RED = 0
    GREEN = 1
    BLUE = 2
    YELLOW = 3
    CYAN = 4
    MAGENTA = 5

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Permissions:
    """Read, write and execute flags for one class of user."""

    read: bool = False
    write: bool = False
    execute: bool = False

    def __str__(self) -> str:
        return (
            ("r" if self.read else "-")
            + ("w" if self.write else "-")
            + ("x" if self.execute else "-")
        )


def format_mode(owner: Permissions, group: Permissions, others: Permissions) -> str:
    """Render owner, group and other permissions as ``rwxrwxrwx``."""
    return f"{owner}{group}{others}"


@dataclass(frozen=True)
class IPv4Address:
    """An IPv4 address held as four octets, most significant first."""

    octet1: int
    octet2: int
    octet3: int
    octet4: int

    def __post_init__(self) -> None:
        for octet in (self.octet1, self.octet2, self.octet3, self.octet4):
            if not 0 <= octet <= 255:
                raise ValueError(f"octet {octet} outside 0..255")

    @classmethod
    def from_int(cls, value: int) -> IPv4Address:
        """Build an address from its 32-bit value in network byte order."""
        _check_word(value)
        return cls(*value.to_bytes(4, "big"))

    @property
    def octets(self) -> tuple[int, int, int, int]:
        return (self.octet1, self.octet2, self.octet3, self.octet4)

    def __int__(self) -> int:
        return int.from_bytes(bytes(self.octets), "big")

    def __str__(self) -> str:
        return ".".join(str(octet) for octet in self.octets)
"""
Value and address capabilities.

Cells and addresses are plain Python ints. The capability objects in this
module hold the arithmetic rules for them: how a cell wraps, what its default
is, and how an address moves (and whether it may move below its start).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from .errors import AddressRangeError

UNICODE_LIMIT = 0x110000


def code_point(value: int) -> str:
    """Character for a cell value; cells wider than Unicode wrap around it."""
    return chr(value % UNICODE_LIMIT)


class CellValue(ABC):
    """Arithmetic rules for the values stored in tape cells."""

    @property
    @abstractmethod
    def modulus(self) -> int:
        ...

    @property
    def dtype(self):
        return object

    @abstractmethod
    def default(self) -> int:
        ...

    @abstractmethod
    def wrapping_add(self, value: int, amount: int = 1) -> int:
        ...

    @abstractmethod
    def wrapping_sub(self, value: int, amount: int = 1) -> int:
        ...

    def is_zero(self, value: int) -> bool:
        return value == 0

    def from_char(self, ch: str) -> int:
        return ord(ch) % self.modulus

    def to_char(self, value: int) -> str:
        return code_point(value)

    def load(self, raw) -> int:
        # storage may hand back numpy scalars
        return int(raw)


class WrappingCell(CellValue):
    """An unsigned cell of ``bits`` width wrapping modulo ``2**bits``."""

    def __init__(self, bits: int = 8, default: int = 0):
        if bits <= 0:
            raise ValueError(f"Cell width must be positive, got {bits}")
        self.bits = bits
        self._modulus = 1 << bits
        self._default = default % self._modulus

    def __repr__(self) -> str:
        return f"WrappingCell(bits={self.bits})"

    @property
    def modulus(self) -> int:
        return self._modulus

    @property
    def dtype(self):
        for width, dtype in ((8, np.uint8), (16, np.uint16), (32, np.uint32), (64, np.uint64)):
            if self.bits <= width:
                return dtype
        return object

    def default(self) -> int:
        return self._default

    def wrapping_add(self, value: int, amount: int = 1) -> int:
        return (value + amount) % self._modulus

    def wrapping_sub(self, value: int, amount: int = 1) -> int:
        return (value - amount) % self._modulus


class Address(ABC):
    """Arithmetic rules for tape addresses."""

    bits: int

    def start(self) -> int:
        return 0

    @abstractmethod
    def incr(self, address: int) -> int:
        ...

    @abstractmethod
    def decr(self, address: int) -> int:
        ...

    @abstractmethod
    def wrapping_add(self, address: int, amount: int) -> int:
        ...

    @abstractmethod
    def wrapping_sub(self, address: int, amount: int) -> int:
        ...


class UnsignedAddress(Address):
    """
    Left-bounded addressing. Stepping below ``start()`` with ``decr`` is a
    fault; the wrapping variants wrap modulo ``2**bits`` like a machine word.
    """

    def __init__(self, bits: int = 64):
        self.bits = bits
        self._modulus = 1 << bits

    def __repr__(self) -> str:
        return f"UnsignedAddress(bits={self.bits})"

    def incr(self, address: int) -> int:
        if address + 1 >= self._modulus:
            raise AddressRangeError(message=f"Address overflow past {address}", address=address)
        return address + 1

    def decr(self, address: int) -> int:
        if address <= self.start():
            raise AddressRangeError(
                message=f"Cannot move the tape pointer below address {self.start()}",
                address=address,
            )
        return address - 1

    def wrapping_add(self, address: int, amount: int) -> int:
        return (address + amount) % self._modulus

    def wrapping_sub(self, address: int, amount: int) -> int:
        return (address - amount) % self._modulus


class SignedAddress(Address):
    """Bidirectional addressing: decrementing past zero continues into negatives."""

    def __init__(self, bits: int = 64):
        self.bits = bits
        self._half = 1 << (bits - 1)

    def __repr__(self) -> str:
        return f"SignedAddress(bits={self.bits})"

    def _wrap(self, address: int) -> int:
        return ((address + self._half) % (self._half << 1)) - self._half

    def incr(self, address: int) -> int:
        return address + 1

    def decr(self, address: int) -> int:
        return address - 1

    def wrapping_add(self, address: int, amount: int) -> int:
        return self._wrap(address + amount)

    def wrapping_sub(self, address: int, amount: int) -> int:
        return self._wrap(address - amount)


BYTE = WrappingCell(8)
USIZE = UnsignedAddress(64)
ISIZE = SignedAddress(64)


def cell_for_bits(bits: Optional[int]) -> CellValue:
    if bits is None or bits == 8:
        return BYTE
    return WrappingCell(bits)

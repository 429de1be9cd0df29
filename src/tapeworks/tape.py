from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

import numpy as np

from .cells import BYTE, CellValue
from .errors import AddressRangeError

INITIAL_CAPACITY = 30000


class _Segment:
    """A growable run of cells indexed from 0, backed by a numpy array."""

    def __init__(self, value: CellValue, default: int, capacity: int):
        self.value = value
        self.default = default
        self.length = 0
        self.cells = np.full(max(1, capacity), default, dtype=value.dtype)

    def __len__(self) -> int:
        return self.length

    def get(self, index: int) -> int:
        if index >= self.length:
            return self.default
        return self.value.load(self.cells[index])

    def set(self, index: int, value: int) -> None:
        if index >= self.length:
            self._expand(index)
        # out-of-range writes wrap like any other cell arithmetic
        self.cells[index] = self.value.wrapping_add(value, 0)

    def _expand(self, index: int) -> None:
        # everything past self.length is still default, so only capacity matters
        capacity = len(self.cells)
        if index >= capacity:
            new_capacity = max(capacity * 2, index + 1)
            try:
                grown = np.full(new_capacity, self.default, dtype=self.value.dtype)
            except (MemoryError, OverflowError, ValueError) as e:
                raise AddressRangeError(
                    message=f"Cannot grow tape storage to address {index}",
                    address=index,
                ) from e
            grown[:self.length] = self.cells[:self.length]
            self.cells = grown
        self.length = index + 1


class Tape(ABC):
    """Addressable cell storage. Reads never grow or fault; writes may grow."""

    value: CellValue

    @abstractmethod
    def get(self, address: int) -> int:
        ...

    @abstractmethod
    def set(self, address: int, value: int) -> None:
        ...

    def snapshot(self, start: int, stop: int) -> List[int]:
        return [self.get(address) for address in range(start, stop)]


class StandardTape(Tape):
    """
    One-dimensional tape that expands rightward without bound.

    Addresses below 0 do not exist on this tape; asking for one is an
    AddressRangeError. Reading past the written extent yields the default
    value and leaves the storage untouched.
    """

    def __init__(self, value: CellValue = BYTE, *, default: Optional[int] = None,
                 capacity: int = INITIAL_CAPACITY):
        self.value = value
        self.default = value.default() if default is None else value.wrapping_add(default, 0)
        self._cells = _Segment(value, self.default, capacity)

    def __len__(self) -> int:
        return len(self._cells)

    def _check(self, address: int) -> None:
        if address < 0:
            raise AddressRangeError(
                message=f"Address {address} is left of the start of the tape",
                address=address,
            )

    def get(self, address: int) -> int:
        self._check(address)
        return self._cells.get(address)

    def set(self, address: int, value: int) -> None:
        self._check(address)
        self._cells.set(address, value)


class BidirectionalTape(Tape):
    """
    Like StandardTape, but expands into negative addresses as well.

    Non-negative addresses live in the forward segment. Address -1 is slot 0
    of the backward segment, -2 is slot 1, and so on.
    """

    def __init__(self, value: CellValue = BYTE, *, default: Optional[int] = None,
                 capacity: int = INITIAL_CAPACITY):
        self.value = value
        self.default = value.default() if default is None else value.wrapping_add(default, 0)
        self._forward = _Segment(value, self.default, capacity)
        self._backward = _Segment(value, self.default, capacity // 2)

    def __len__(self) -> int:
        return len(self._forward) + len(self._backward)

    @property
    def extent(self) -> tuple:
        """Lowest and one-past-highest address ever written."""
        return -len(self._backward), len(self._forward)

    def _choose(self, address: int):
        if address < 0:
            return self._backward, -address - 1
        return self._forward, address

    def get(self, address: int) -> int:
        cells, index = self._choose(address)
        return cells.get(index)

    def set(self, address: int, value: int) -> None:
        cells, index = self._choose(address)
        cells.set(index, value)

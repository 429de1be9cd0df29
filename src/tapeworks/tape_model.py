from __future__ import annotations

from typing import List, Optional

from .cells import BYTE, ISIZE, USIZE, Address, CellValue
from .tape import BidirectionalTape, StandardTape, Tape


class TapeModel:
    """
    A tape plus the current memory pointer.

    Pointer-relative accessors go through the pointer; the ``*_at`` accessors
    ignore it. No bounds checks happen here: growth and faults belong to the
    tape and the address capability.
    """

    def __init__(self, tape: Tape, address: Address = USIZE):
        self.tape = tape
        self.address = address
        self.pointer = address.start()

    @property
    def value(self) -> CellValue:
        return self.tape.value

    def read(self) -> int:
        return self.tape.get(self.pointer)

    def write(self, value: int) -> None:
        self.tape.set(self.pointer, value)

    def read_at(self, address: int) -> int:
        return self.tape.get(address)

    def write_at(self, address: int, value: int) -> None:
        self.tape.set(address, value)

    def move_to(self, address: int) -> None:
        self.pointer = address

    def window(self, radius: int = 8) -> List[int]:
        """Cells around the pointer, for debugging output."""
        start = self.pointer - radius
        if isinstance(self.tape, StandardTape):
            start = max(0, start)
        return self.tape.snapshot(start, self.pointer + radius + 1)


def classic_tape(value: CellValue = BYTE, *, default: Optional[int] = None) -> TapeModel:
    """
    Right-unbounded tape with unsigned addressing. Stepping the pointer left
    of the starting cell is an AddressRangeError.
    """
    return TapeModel(StandardTape(value, default=default), USIZE)


def bidirectional_tape(value: CellValue = BYTE, *, default: Optional[int] = None) -> TapeModel:
    """Tape that grows in both directions, addressed with signed ints."""
    return TapeModel(BidirectionalTape(value, default=default), ISIZE)

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Union

SYMBOLS = frozenset('><+-.,[]')
END_OF_PROGRAM = ' '


# ---------------- Compiled instructions ----------------
@dataclass(frozen=True)
class MoveRight:
    count: int

@dataclass(frozen=True)
class MoveLeft:
    count: int

@dataclass(frozen=True)
class Increment:
    count: int

@dataclass(frozen=True)
class Decrement:
    count: int

@dataclass(frozen=True)
class Read:
    pass

@dataclass(frozen=True)
class Write:
    pass

@dataclass(frozen=True)
class LoopStart:
    target: int  # index of the matching LoopEnd

@dataclass(frozen=True)
class LoopEnd:
    target: int  # index of the matching LoopStart

@dataclass(frozen=True)
class End:
    pass

Instruction = Union[MoveRight, MoveLeft, Increment, Decrement, Read, Write, LoopStart, LoopEnd, End]


class RawProgram:
    """Source filtered down to the eight symbols, with a sentinel at the end."""

    def __init__(self, symbols: Iterable[str]):
        self.symbols: List[str] = [c for c in symbols if c in SYMBOLS]
        self.symbols.append(END_OF_PROGRAM)

    def __len__(self) -> int:
        return len(self.symbols)

    def get(self, index: int) -> str:
        return self.symbols[index]

    def __str__(self) -> str:
        return ''.join(self.symbols[:-1])


class CompiledProgram:
    """Run-length encoded instructions with resolved loop targets."""

    def __init__(self, instructions: Sequence[Instruction]):
        self.instructions = tuple(instructions)

    def __len__(self) -> int:
        return len(self.instructions)

    def __iter__(self):
        return iter(self.instructions)

    def get(self, index: int) -> Instruction:
        return self.instructions[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, CompiledProgram):
            return NotImplemented
        return self.instructions == other.instructions

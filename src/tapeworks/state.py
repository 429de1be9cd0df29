from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from .program import Instruction


@dataclass
class CompilerState:
    instructions: List[Instruction] = field(default_factory=list)
    # (instruction index, symbol, offset into the raw source) per '[' / ']'
    boundaries: List[Tuple[int, str, int]] = field(default_factory=list)
    symbol_count: int = 0

    def reset(self) -> None:
        self.instructions.clear()
        self.boundaries.clear()
        self.symbol_count = 0

    def emit(self, instruction: Instruction) -> int:
        self.instructions.append(instruction)
        return len(self.instructions) - 1

    def mark_boundary(self, symbol: str, offset: int) -> None:
        self.boundaries.append((len(self.instructions), symbol, offset))

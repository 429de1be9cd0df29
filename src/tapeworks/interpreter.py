"""
Generic fetch-execute engine.

A concrete interpreter owns a loaded program and a tape model and says how a
single instruction is executed. The engine owns the loop and the instruction
pointer contract:

- ``process_instruction`` returns True to halt.
- With auto-increment on, the engine advances the instruction pointer after
  every instruction that did not halt. A jump lands on its matching loop
  boundary and the increment then steps past it.
- With auto-increment off, ``process_instruction`` must move the pointer
  itself or the program will spin on one instruction forever.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from .io import CellIO, ConsoleIO
from .tape_model import TapeModel

logger = logging.getLogger(__name__)


class Interpreter(ABC):
    auto_increment: bool = True

    def __init__(self, model: TapeModel, io: Optional[CellIO] = None):
        self.model = model
        self.io = io if io is not None else ConsoleIO()
        self._instr_ptr = 0
        self.steps = 0
        self.halted = False

    @abstractmethod
    def load_program(self, source: str) -> None:
        ...

    @property
    @abstractmethod
    def program(self):
        ...

    @abstractmethod
    def process_instruction(self, instruction: Any) -> bool:
        ...

    @property
    def instr_ptr(self) -> int:
        """Index of the next instruction to execute (not the tape pointer)."""
        return self._instr_ptr

    @instr_ptr.setter
    def instr_ptr(self, index: int) -> None:
        self._instr_ptr = index

    def set_instr_ptr(self, index: int) -> None:
        self.instr_ptr = index

    def incr_instr_ptr(self) -> None:
        self.instr_ptr += 1

    def decr_instr_ptr(self) -> None:
        self.instr_ptr -= 1

    def current_instruction(self) -> Any:
        return self.program.get(self.instr_ptr)

    def step(self, incr: Optional[bool] = None) -> bool:
        """Executes one instruction. Returns True once the program has halted."""
        if self.halted:
            return True
        if incr is None:
            incr = self.auto_increment

        self.steps += 1
        if self.process_instruction(self.current_instruction()):
            self.halted = True
        elif incr:
            self.incr_instr_ptr()
        return self.halted

    def run_program(self, incr: Optional[bool] = None) -> None:
        """Runs from the first instruction until the program halts."""
        self.set_instr_ptr(0)
        self.steps = 0
        self.halted = False
        logger.debug("running %s (%d instructions)", type(self).__name__, len(self.program))
        while not self.step(incr):
            pass
        logger.debug("halted after %d steps, pointer at %d", self.steps, self.model.pointer)

"""
Brainfuck on top of the generic engine.

OptimizedInterpreter runs the compiled, run-length encoded form with
precomputed loop targets. NaiveInterpreter walks the filtered source one
symbol at a time and rescans for the matching bracket on every jump; it is
slower and kept as a reference to check the optimized path against.
"""
from __future__ import annotations

from typing import Optional

from .compiler import compile_source, filter_source, match_brackets
from .errors import InvariantError
from .interpreter import Interpreter
from .io import CellIO
from .program import (
    END_OF_PROGRAM, CompiledProgram, Decrement, End, Increment, Instruction, LoopEnd,
    LoopStart, MoveLeft, MoveRight, RawProgram, Read, Write,
)
from .tape_model import TapeModel, classic_tape


class OptimizedInterpreter(Interpreter):
    auto_increment = True

    def __init__(self, model: Optional[TapeModel] = None, io: Optional[CellIO] = None):
        super().__init__(model if model is not None else classic_tape(), io)
        self._program = compile_source('', self.model.value)

    @property
    def program(self) -> CompiledProgram:
        return self._program

    def load_program(self, source: str) -> None:
        self._program = compile_source(source, self.model.value)
        self.instr_ptr = 0

    def process_instruction(self, instruction: Instruction) -> bool:
        model = self.model
        value = model.value
        address = model.address

        if isinstance(instruction, MoveRight):
            model.move_to(address.wrapping_add(model.pointer, instruction.count))
        elif isinstance(instruction, MoveLeft):
            model.move_to(address.wrapping_sub(model.pointer, instruction.count))
        elif isinstance(instruction, Increment):
            model.write(value.wrapping_add(model.read(), instruction.count))
        elif isinstance(instruction, Decrement):
            model.write(value.wrapping_sub(model.read(), instruction.count))
        elif isinstance(instruction, Read):
            model.write(self.io.read(value))
        elif isinstance(instruction, Write):
            self.io.write(model.read(), value)
        elif isinstance(instruction, LoopStart):
            if value.is_zero(model.read()):
                self.set_instr_ptr(instruction.target)
        elif isinstance(instruction, LoopEnd):
            if not value.is_zero(model.read()):
                self.set_instr_ptr(instruction.target)
        elif isinstance(instruction, End):
            return True
        else:
            raise InvariantError(message=f"Unrecognized instruction: {instruction!r}")
        return False


class NaiveInterpreter(Interpreter):
    auto_increment = True

    def __init__(self, model: Optional[TapeModel] = None, io: Optional[CellIO] = None):
        super().__init__(model if model is not None else classic_tape(), io)
        self._program = RawProgram('')

    @property
    def program(self) -> RawProgram:
        return self._program

    def load_program(self, source: str) -> None:
        symbols = filter_source(source)
        # bracket positions are only checked here; jumps rescan at run time
        match_brackets(
            ((i, ch, offset) for i, (offset, ch) in enumerate(symbols) if ch in '[]'),
            source,
        )
        self._program = RawProgram(ch for _, ch in symbols)
        self.instr_ptr = 0

    def process_instruction(self, instruction: str) -> bool:
        model = self.model
        value = model.value
        cell = model.read()

        if instruction == '>':
            model.move_to(model.address.incr(model.pointer))
        elif instruction == '<':
            model.move_to(model.address.decr(model.pointer))
        elif instruction == '+':
            model.write(value.wrapping_add(cell))
        elif instruction == '-':
            model.write(value.wrapping_sub(cell))
        elif instruction == '.':
            self.io.write(cell, value)
        elif instruction == ',':
            model.write(self.io.read(value))
        elif instruction == '[':
            if value.is_zero(cell):
                depth = 1
                while depth:
                    self.incr_instr_ptr()
                    cmd = self.current_instruction()
                    if cmd == '[':
                        depth += 1
                    elif cmd == ']':
                        depth -= 1
        elif instruction == ']':
            if not value.is_zero(cell):
                depth = 1
                while depth:
                    self.decr_instr_ptr()
                    cmd = self.current_instruction()
                    if cmd == '[':
                        depth -= 1
                    elif cmd == ']':
                        depth += 1
        elif instruction == END_OF_PROGRAM:
            return True
        else:
            raise InvariantError(message=f"Unrecognized symbol: {instruction!r}")
        return False

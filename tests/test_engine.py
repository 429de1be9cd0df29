#!/usr/bin/env python3
"""
Tests for the generic engine: stepping, halting and both pointer modes.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from tapeworks import BufferedIO, Interpreter, OptimizedInterpreter, classic_tape


class WordProgram(list):
    def get(self, index):
        return self[index]


class SkipMachine(Interpreter):
    """A toy language whose instructions move the instruction pointer themselves."""

    auto_increment = False

    def __init__(self, model):
        super().__init__(model, BufferedIO())
        self._program = WordProgram(['halt'])

    @property
    def program(self):
        return self._program

    def load_program(self, source):
        self._program = WordProgram(source.split() + ['halt'])

    def process_instruction(self, instruction):
        model = self.model
        if instruction == 'inc':
            model.write(model.value.wrapping_add(model.read()))
            self.incr_instr_ptr()
        elif instruction == 'skip':
            self.set_instr_ptr(self.instr_ptr + 2)
        elif instruction == 'halt':
            return True
        return False


def test_manual_pointer_mode():
    model = classic_tape()
    machine = SkipMachine(model)
    machine.load_program("inc skip inc inc skip inc")
    machine.run_program()
    assert model.read() == 2
    assert machine.halted
    assert machine.steps == 5


def test_explicit_incr_overrides_class_default():
    model = classic_tape()
    machine = SkipMachine(model)
    # with auto-increment forced on, 'skip' jumps three ahead instead of two
    machine.load_program("skip inc inc inc inc")
    machine.run_program(incr=True)
    assert model.read() == 1


def test_step_by_step_until_halt():
    io = BufferedIO()
    interp = OptimizedInterpreter(classic_tape(), io)
    interp.load_program("++.")
    assert interp.step() is False
    assert interp.instr_ptr == 1
    assert interp.current_instruction().__class__.__name__ == 'Write'
    assert interp.step() is False
    assert interp.step() is True
    assert interp.halted
    assert io.written == [2]

    # halted engines do not execute further
    assert interp.step() is True
    assert interp.steps == 3


def test_host_side_step_budget():
    interp = OptimizedInterpreter(classic_tape(), BufferedIO())
    interp.load_program("+[]")
    for _ in range(1000):
        if interp.step():
            break
    assert not interp.halted
    assert interp.steps == 1000


def test_decr_instr_ptr():
    interp = OptimizedInterpreter(classic_tape(), BufferedIO())
    interp.set_instr_ptr(4)
    interp.decr_instr_ptr()
    assert interp.instr_ptr == 3


def test_instr_ptr_is_a_property():
    interp = OptimizedInterpreter(classic_tape(), BufferedIO())
    interp.load_program("+++")
    interp.instr_ptr = 1
    assert interp.current_instruction().__class__.__name__ == 'End'
    interp.incr_instr_ptr()
    assert interp.instr_ptr == 2
    assert isinstance(type(interp).instr_ptr, property)

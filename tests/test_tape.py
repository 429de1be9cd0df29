#!/usr/bin/env python3
"""
Tests for the tape storage strategies and the tape model.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from tapeworks import (
    AddressRangeError, BidirectionalTape, StandardTape, WrappingCell, bidirectional_tape, classic_tape,
)


def test_standard_tape_reads_default_without_growing():
    tape = StandardTape()
    assert tape.get(100000) == 0
    assert len(tape) == 0


def test_standard_tape_fills_gap_with_defaults():
    tape = StandardTape()
    tape.set(50000, 42)
    assert tape.get(50000) == 42
    assert tape.get(25000) == 0
    assert tape.get(49999) == 0
    assert len(tape) == 50001


def test_standard_tape_growth_keeps_old_values():
    tape = StandardTape(capacity=4)
    for address in range(20):
        tape.set(address, address * 3)
    assert tape.snapshot(0, 20) == [a * 3 for a in range(20)]


def test_standard_tape_has_no_negative_addresses():
    tape = StandardTape()
    with pytest.raises(AddressRangeError):
        tape.get(-1)
    with pytest.raises(AddressRangeError):
        tape.set(-1, 1)


def test_standard_tape_unreachable_address():
    tape = StandardTape()
    with pytest.raises(AddressRangeError) as excinfo:
        tape.set(2**64 - 1, 1)
    assert excinfo.value.address == 2**64 - 1


def test_custom_default():
    tape = StandardTape(default=7)
    assert tape.get(10) == 7
    tape.set(5, 1)
    assert tape.get(3) == 7
    assert tape.get(5) == 1


def test_wide_cells_use_object_storage():
    tape = StandardTape(WrappingCell(100))
    tape.set(3, 2**99)
    assert tape.get(3) == 2**99
    assert tape.get(2) == 0


def test_bidirectional_negative_addresses():
    tape = BidirectionalTape()
    tape.set(-5, 99)
    assert tape.get(-5) == 99
    assert tape.get(-4) == 0
    assert tape.get(0) == 0
    assert tape.extent == (-5, 0)


def test_bidirectional_sides_are_independent():
    tape = BidirectionalTape()
    tape.set(-1, 1)
    tape.set(0, 2)
    tape.set(3, 4)
    assert tape.snapshot(-2, 4) == [0, 1, 2, 0, 0, 4]
    assert tape.extent == (-1, 4)
    assert len(tape) == 5


def test_tape_model_pointer_and_arbitrary_access():
    model = classic_tape()
    assert model.pointer == 0
    model.write(9)
    model.move_to(3)
    model.write(4)
    assert model.read() == 4
    assert model.read_at(0) == 9
    model.write_at(1, 8)
    assert model.pointer == 3
    assert model.tape.snapshot(0, 4) == [9, 8, 0, 4]


def test_bidirectional_model_starts_at_zero():
    model = bidirectional_tape()
    model.move_to(model.address.decr(model.pointer))
    model.write(5)
    assert model.pointer == -1
    assert model.read_at(-1) == 5


def test_window_clips_at_tape_start():
    model = classic_tape()
    model.write_at(0, 1)
    model.write_at(2, 3)
    assert model.window(radius=2) == [1, 0, 3]


def test_custom_default_wraps_to_cell_width():
    tape = StandardTape(default=300)
    assert tape.default == 44
    assert tape.get(7) == 44
    tape.set(3, 1)
    assert tape.get(2) == 44

    tape = BidirectionalTape(default=-1)
    assert tape.get(-9) == 255
    assert tape.get(9) == 255


def test_out_of_range_write_wraps():
    model = classic_tape()
    model.write_at(0, 300)
    assert model.read_at(0) == 44
    model.write(-1)
    assert model.read() == 255

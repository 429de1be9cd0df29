"""
Compiler: raw source -> run-length encoded instructions with loop targets.

Steps:
1. Filter the source to the eight symbols; everything else is a comment.
2. Collapse runs of identical symbols. Moves collapse without limit,
   increments and decrements collapse up to one full wrap of the cell, and
   I/O and loop boundaries never collapse.
3. Record where each loop boundary landed in the output.
4. Pair the boundaries with an explicit stack and patch both ends.
5. Append End.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from .cells import BYTE, CellValue
from .errors import make_source_error
from .program import (
    SYMBOLS, CompiledProgram, Decrement, End, Increment, Instruction, LoopEnd, LoopStart,
    MoveLeft, MoveRight, Read, Write,
)
from .state import CompilerState

logger = logging.getLogger(__name__)


def filter_source(source: str) -> List[Tuple[int, str]]:
    """Returns (offset, symbol) for every recognized symbol in the source."""
    return [(offset, ch) for offset, ch in enumerate(source) if ch in SYMBOLS]


def match_brackets(boundaries: Iterable[Tuple[int, str, int]], source: str) -> List[Tuple[int, int]]:
    """
    Pairs loop boundaries. ``boundaries`` holds (position, symbol, source
    offset) in encounter order; the result holds (start, end) positions in the
    order the loops close. Raises MalformedSourceError on imbalance.
    """
    stack: List[Tuple[int, int]] = []
    pairs: List[Tuple[int, int]] = []
    for position, symbol, offset in boundaries:
        if symbol == '[':
            stack.append((position, offset))
        else:
            if not stack:
                raise make_source_error(message="Unmatched ']'", source=source, offset=offset)
            start, _ = stack.pop()
            pairs.append((start, position))

    if stack:
        _, offset = stack[-1]
        raise make_source_error(message="Unmatched '['", source=source, offset=offset)
    return pairs


def _run_limit(symbol: str, value: CellValue):
    if symbol in '<>':
        return None
    if symbol in '+-':
        return value.modulus
    return 1


def _instruction_for(symbol: str, count: int) -> Instruction:
    if symbol == '>':
        return MoveRight(count)
    if symbol == '<':
        return MoveLeft(count)
    if symbol == '+':
        return Increment(count)
    if symbol == '-':
        return Decrement(count)
    if symbol == ',':
        return Read()
    if symbol == '.':
        return Write()
    if symbol == '[':
        return LoopStart(0)
    return LoopEnd(0)


def compile_source(source: str, value: CellValue = BYTE, *, state: Optional[CompilerState] = None) -> CompiledProgram:
    state = state if state is not None else CompilerState()
    state.reset()

    symbols = filter_source(source)
    state.symbol_count = len(symbols)

    cursor = 0
    while cursor < len(symbols):
        offset, ch = symbols[cursor]
        limit = _run_limit(ch, value)
        count = 0
        while cursor < len(symbols) and symbols[cursor][1] == ch and (limit is None or count < limit):
            count += 1
            cursor += 1

        if ch in '[]':
            state.mark_boundary(ch, offset)
        state.emit(_instruction_for(ch, count))

    pairs = match_brackets(state.boundaries, source)
    for start, end in pairs:
        state.instructions[start] = LoopStart(end)
        state.instructions[end] = LoopEnd(start)

    state.emit(End())
    logger.debug(
        "compiled %d symbols into %d instructions (%d loops)",
        state.symbol_count, len(state.instructions), len(pairs),
    )
    return CompiledProgram(state.instructions)


def format_program(program: CompiledProgram) -> str:
    """One line per instruction, for dumping the compiled form."""
    lines = []
    for index, instr in enumerate(program):
        if isinstance(instr, (MoveRight, MoveLeft, Increment, Decrement)):
            text = f"{type(instr).__name__.lower()}(count={instr.count})"
        elif isinstance(instr, (LoopStart, LoopEnd)):
            text = f"{type(instr).__name__.lower()}(target={instr.target})"
        else:
            text = type(instr).__name__.lower()
        lines.append(f"{index:5d}  {text}")
    return "\n".join(lines)

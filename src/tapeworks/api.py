from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .brainfuck import NaiveInterpreter, OptimizedInterpreter
from .cells import cell_for_bits, code_point
from .compiler import compile_source, format_program
from .io import BufferedIO, CellIO
from .program import CompiledProgram, LoopStart
from .tape_model import TapeModel, bidirectional_tape, classic_tape

TAPE_KINDS = ('classic', 'bidirectional')


def _env_flag(raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in ('1', 'true', 'yes', 'on'):
        return True
    if lowered in ('0', 'false', 'no', 'off'):
        return False
    raise ValueError(f"Not a boolean: {raw!r}")


@dataclass(frozen=True)
class RunOptions:
    tape: str = 'classic'
    cell_bits: int = 8
    optimized: bool = True
    prompt: Optional[str] = "\nInput a character: "

    def __post_init__(self):
        if self.tape not in TAPE_KINDS:
            raise ValueError(f"Unknown tape kind {self.tape!r}; expected one of {TAPE_KINDS}")
        if self.cell_bits <= 0:
            raise ValueError(f"cell_bits must be positive, got {self.cell_bits}")

    @classmethod
    def from_env(cls) -> "RunOptions":
        return cls(
            tape=os.environ.get("TAPEWORKS_TAPE", "classic"),
            cell_bits=int(os.environ.get("TAPEWORKS_CELL_BITS", "8")),
            optimized=_env_flag(os.environ.get("TAPEWORKS_OPTIMIZED", "1")),
        )

    def make_model(self) -> TapeModel:
        value = cell_for_bits(self.cell_bits)
        if self.tape == 'bidirectional':
            return bidirectional_tape(value)
        return classic_tape(value)


@dataclass(frozen=True)
class CompileResult:
    program: CompiledProgram
    loops: List[Tuple[int, int]]
    listing: str


@dataclass(frozen=True)
class RunResult:
    output: List[int]
    pointer: int
    cells: List[int] = field(repr=False)
    steps: int = 0

    @property
    def text(self) -> str:
        return ''.join(code_point(c) for c in self.output)


def compile_string(source: str, *, options: Optional[RunOptions] = None) -> CompileResult:
    options = options if options is not None else RunOptions()
    program = compile_source(source, cell_for_bits(options.cell_bits))
    loops = [(i, instr.target) for i, instr in enumerate(program) if isinstance(instr, LoopStart)]
    return CompileResult(program=program, loops=loops, listing=format_program(program))


def run_string(source: str, *, input_data: str = "", options: Optional[RunOptions] = None,
               io: Optional[CellIO] = None, window: int = 16) -> RunResult:
    """
    Loads ``source`` into a fresh interpreter and runs it to completion.

    Output is captured unless a CellIO is passed in. ``cells`` holds the
    ``window`` cells starting at the tape's start address.
    """
    options = options if options is not None else RunOptions()
    buffered = io if io is not None else BufferedIO(input_data)

    cls = OptimizedInterpreter if options.optimized else NaiveInterpreter
    interp = cls(options.make_model(), buffered)
    interp.load_program(source)
    interp.run_program()

    model = interp.model
    start = model.address.start()
    output = list(buffered.written) if isinstance(buffered, BufferedIO) else []
    return RunResult(
        output=output,
        pointer=model.pointer,
        cells=model.tape.snapshot(start, start + window),
        steps=interp.steps,
    )

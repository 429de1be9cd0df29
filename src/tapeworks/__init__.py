import logging

from .api import CompileResult, RunOptions, RunResult, compile_string, run_string
from .brainfuck import NaiveInterpreter, OptimizedInterpreter
from .cells import BYTE, ISIZE, USIZE, Address, CellValue, SignedAddress, UnsignedAddress, WrappingCell
from .compiler import compile_source, filter_source, format_program, match_brackets
from .errors import (
    AddressRangeError, InputExhaustedError, InvariantError, MalformedSourceError, TapeworksError,
)
from .interpreter import Interpreter
from .io import BufferedIO, CellIO, ConsoleIO
from .program import CompiledProgram, RawProgram
from .tape import BidirectionalTape, StandardTape, Tape
from .tape_model import TapeModel, bidirectional_tape, classic_tape

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Address',
    'AddressRangeError',
    'BYTE',
    'BidirectionalTape',
    'BufferedIO',
    'CellIO',
    'CellValue',
    'CompileResult',
    'CompiledProgram',
    'ConsoleIO',
    'ISIZE',
    'InputExhaustedError',
    'Interpreter',
    'InvariantError',
    'MalformedSourceError',
    'NaiveInterpreter',
    'OptimizedInterpreter',
    'RawProgram',
    'RunOptions',
    'RunResult',
    'SignedAddress',
    'StandardTape',
    'Tape',
    'TapeModel',
    'TapeworksError',
    'USIZE',
    'UnsignedAddress',
    'WrappingCell',
    'bidirectional_tape',
    'classic_tape',
    'compile_source',
    'compile_string',
    'filter_source',
    'format_program',
    'match_brackets',
    'run_string',
]

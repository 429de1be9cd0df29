from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import List, Optional, TextIO, Union

from .cells import CellValue, code_point
from .errors import InputExhaustedError


class CellIO(ABC):
    """The Read and Write collaborators an interpreter talks to."""

    @abstractmethod
    def read(self, value: CellValue) -> int:
        ...

    @abstractmethod
    def write(self, cell: int, value: CellValue) -> None:
        ...


class ConsoleIO(CellIO):
    """
    Prompts for one character per read and writes each output character
    immediately, without buffering.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
                 prompt: Optional[str] = "\nInput a character: "):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.prompt = prompt

    def read(self, value: CellValue) -> int:
        if self.prompt:
            self.stdout.write(self.prompt)
            self.stdout.flush()
        ch = self.stdin.read(1)
        if not ch:
            raise InputExhaustedError(message="No input left to read")
        return value.from_char(ch)

    def write(self, cell: int, value: CellValue) -> None:
        self.stdout.write(value.to_char(cell))
        self.stdout.flush()


class BufferedIO(CellIO):
    """Feeds reads from a fixed input and collects every written cell."""

    def __init__(self, input_data: Union[str, bytes] = ""):
        if isinstance(input_data, bytes):
            input_data = input_data.decode('latin-1')
        self.pending = list(input_data)
        self.written: List[int] = []
        self.reads = 0

    def read(self, value: CellValue) -> int:
        if not self.pending:
            raise InputExhaustedError(
                message=f"Input exhausted after {self.reads} read(s)"
            )
        self.reads += 1
        return value.from_char(self.pending.pop(0))

    def write(self, cell: int, value: CellValue) -> None:
        self.written.append(cell)

    @property
    def output(self) -> str:
        return ''.join(code_point(c) for c in self.written)

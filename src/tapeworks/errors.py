from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


def _build_context(lines: List[str], line_no_1: int, *, context: int = 2) -> str:
    idx = max(1, line_no_1)
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
    return "\n".join(out)


def _hint_for(message: str) -> Optional[str]:
    msg = message.lower()
    if "unmatched ']'" in msg:
        return 'Every "]" needs an earlier "[" to jump back to.'
    if "unmatched '['" in msg:
        return 'Check for a missing closing "]".'
    return None


def _locate(source: str, offset: int) -> tuple:
    # 1-based (line, column) of a character offset into source
    before = source[:offset]
    line = before.count('\n') + 1
    column = offset - (before.rfind('\n') + 1) + 1
    return line, column


@dataclass
class TapeworksError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class AddressRangeError(TapeworksError):
    address: int


@dataclass
class MalformedSourceError(TapeworksError):
    position: int
    line: int
    column: int
    context: str


@dataclass
class InputExhaustedError(TapeworksError):
    pass


@dataclass
class InvariantError(TapeworksError):
    pass


def make_source_error(*, message: str, source: str, offset: int) -> MalformedSourceError:
    """Builds a MalformedSourceError pointing at ``offset`` in the raw source."""
    line, column = _locate(source, offset)
    ctx = _build_context(source.split('\n'), line)
    hint = _hint_for(message)
    hint_block = f"\nHint: {hint}" if hint else ""
    return MalformedSourceError(
        message=f"MalformedSourceError: {message} (line {line}, column {column})\n{ctx}{hint_block}",
        position=offset,
        line=line,
        column=column,
        context=ctx,
    )

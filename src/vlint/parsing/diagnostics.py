import os
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Union

SOURCE_TAG = "V"

Number = Union[int, float]


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class DiagnosticRecord:
    """
    One diagnostic recovered from compiler text.
    line is 1-based. Unparseable line/column values hold NaN.
    """
    file: str
    line: Number
    column: Number
    message: str
    raw_source: str = field(default="", repr=False, compare=False)


@dataclass(frozen=True)
class ContinuationFragment:
    target_index: int
    content: str


class Position(NamedTuple):
    line: Number  # 0-based
    character: Number


class Range(NamedTuple):
    start: Position
    end: Position


@dataclass(frozen=True)
class PositionedDiagnostic:
    file_uri: str
    range: Range
    severity: Severity
    message: str
    source: str = SOURCE_TAG


def project(record: DiagnosticRecord, severity: Severity, cwd: str) -> PositionedDiagnostic:
    """
    Maps a record onto a one-character range anchored at its column.
    The compiler does not report span width, so the highlight is always one
    character wide. NaN positions pass through untouched.
    """
    line = record.line - 1
    start = Position(line, record.column)
    end = Position(line, record.column + 1)
    return PositionedDiagnostic(
        file_uri=resolve_file(cwd, record.file),
        range=Range(start, end),
        severity=severity,
        message=record.message,
    )


def resolve_file(cwd: str, file: str) -> str:
    """Absolute path of a compiler-relative file name. No filesystem access."""
    return os.path.normpath(os.path.join(cwd, file))

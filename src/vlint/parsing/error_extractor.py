"""
Error-format extraction.

The compiler emits at most one fatal error per run:

    main.v:3:1: unexpected token
     * expected `}`

or, with a severity label in front of the location:

    error: main.v:3:1: unexpected token
"""
from typing import List

from ..errors import MalformedDiagnosticLine, report_anomaly
from ..utils.lang import SOURCE_EXTENSION
from .diagnostics import DiagnosticRecord
from .tokenizer import NAN, field_at, is_number, parse_number, tokenize

LOCATION_MARKER = SOURCE_EXTENSION + ":"
DETAIL_MARKER = " *"
DETAIL_SEPARATOR = ":\n"


def strip_blank_lines(blob: str) -> str:
    return "\n".join(line for line in blob.split("\n") if line.strip())


def find_line(lines: List[str], marker: str) -> int:
    """Index of the first line containing marker, or -1."""
    for idx, line in enumerate(lines):
        if marker in line:
            return idx
    return -1


def _file_field_index(fields: List[str]) -> int:
    # Fields before the file name are a severity label ("error").
    for idx, value in enumerate(fields):
        if value.strip().endswith(SOURCE_EXTENSION):
            return idx
    return 0


def _file_name(fields: List[str], at: int) -> str:
    """
    The file field, with a Windows drive letter split off by the delimiter
    (`C:\\p\\main.v`) glued back on.
    """
    name = field_at(fields, at)
    if at > 0:
        drive = field_at(fields, at - 1)
        if len(drive) == 1 and drive.isalpha() and fields[at][:1] in ("\\", "/"):
            return f"{drive}:{name}"
    return name


def extract_error(blob: str) -> DiagnosticRecord:
    """Recovers exactly one record from error-format output. Never raises."""
    stripped = strip_blank_lines(blob)
    lines = stripped.split("\n")

    index = find_line(lines, LOCATION_MARKER)
    if index < 0:
        report_anomaly(MalformedDiagnosticLine(stripped, f"no '{LOCATION_MARKER}' location line"))
        record = DiagnosticRecord(file="", line=NAN, column=NAN, message="", raw_source=stripped)
    else:
        fields = tokenize(lines[index])
        at = _file_field_index(fields)
        record = DiagnosticRecord(
            file=_file_name(fields, at),
            line=parse_number(field_at(fields, at + 1)),
            column=parse_number(field_at(fields, at + 2)),
            message="".join(fields[at + 3:]).strip(),
            raw_source=stripped,
        )
        if not (is_number(record.line) and is_number(record.column)):
            report_anomaly(MalformedDiagnosticLine(lines[index], "non-numeric line or column"))

    detail = find_line(lines, DETAIL_MARKER)
    if detail >= 0:
        record.message += DETAIL_SEPARATOR + lines[detail].strip()

    return record

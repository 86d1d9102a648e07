from typing import List, Tuple

from .classifier import OutputFormat, LineKind, LineGrammar, classify_output, classify_line
from .diagnostics import (
    DiagnosticRecord,
    PositionedDiagnostic,
    Position,
    Range,
    Severity,
    SOURCE_TAG,
    project,
)
from .error_extractor import extract_error
from .warning_extractor import extract_warnings

_SEVERITY = {
    OutputFormat.ERROR: Severity.ERROR,
    OutputFormat.WARNING: Severity.WARNING,
}


def extract_records(output: str) -> Tuple[OutputFormat, List[DiagnosticRecord]]:
    """
    Pipeline: Raw compiler text -> Classified -> Records
    """
    fmt = classify_output(output)
    if fmt is OutputFormat.CLEAN:
        return fmt, []
    if fmt is OutputFormat.ERROR:
        return fmt, [extract_error(output)]
    return fmt, extract_warnings(output)


def extract_diagnostics(output: str, cwd: str) -> Tuple[OutputFormat, List[PositionedDiagnostic]]:
    fmt, records = extract_records(output)
    if fmt is OutputFormat.CLEAN:
        return fmt, []
    severity = _SEVERITY[fmt]
    return fmt, [project(record, severity, cwd) for record in records]

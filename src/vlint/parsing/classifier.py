"""
Output and line classification.

Two levels:
  - classify_output() picks the extractor for a whole compiler output blob.
  - classify_line() tags individual warning-format lines with the grammar
        RECORD_LINE | CONTINUATION_LINE | BLANK
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from .tokenizer import tokenize

WARNING_PREFIX = "warning"


class OutputFormat(str, Enum):
    CLEAN = "clean"
    ERROR = "error"
    WARNING = "warning"


class LineKind(str, Enum):
    RECORD_LINE = "record"
    CONTINUATION_LINE = "continuation"
    BLANK = "blank"


@dataclass(frozen=True)
class LineGrammar:
    """
    A continuation line has fewer than record_min_fields fields and starts
    with continuation_marker. Everything else that is not blank is a record.
    """
    record_min_fields: int = 5
    continuation_marker: str = "*"


DEFAULT_GRAMMAR = LineGrammar()


def classify_output(output: str) -> OutputFormat:
    """
    Heuristic: output is warning-format iff its first 7 characters are
    literally "warning". Error text that happens to start with those
    characters is misclassified; this is the compiler's layout, not a bug here.
    """
    if len(output.strip()) <= 1:
        return OutputFormat.CLEAN
    if output[:len(WARNING_PREFIX)] == WARNING_PREFIX:
        return OutputFormat.WARNING
    return OutputFormat.ERROR


def classify_line(line: str, grammar: LineGrammar = DEFAULT_GRAMMAR) -> Tuple[LineKind, List[str]]:
    """Returns the line kind and its fields. The line is expected to be trimmed."""
    if not line:
        return LineKind.BLANK, []
    fields = tokenize(line)
    if len(fields) < grammar.record_min_fields and line.startswith(grammar.continuation_marker):
        return LineKind.CONTINUATION_LINE, fields
    return LineKind.RECORD_LINE, fields

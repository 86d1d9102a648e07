"""
Warning-format extraction.

A single run may list any number of warnings, each optionally followed by
"*"-prefixed elaboration lines that carry no location of their own:

    warning: file.v:10:4: unused variable `x`
    * consider removing it
    warning: util.v:2:1: module `os` imported but never used

Elaboration is linked to its warning purely by line order.
"""
from dataclasses import dataclass, field
from typing import List

from ..errors import MalformedDiagnosticLine, OrphanContinuation, report_anomaly
from .classifier import DEFAULT_GRAMMAR, LineGrammar, LineKind, classify_line
from .diagnostics import ContinuationFragment, DiagnosticRecord
from .tokenizer import field_at, is_number, parse_number

CONTINUATION_PREFIX = "\n "


@dataclass
class _PendingRecord:
    record: DiagnosticRecord
    continuations: List[str] = field(default_factory=list)

    def finish(self) -> DiagnosticRecord:
        for content in self.continuations:
            self.record.message += CONTINUATION_PREFIX + content
        return self.record


def extract_warnings(blob: str, grammar: LineGrammar = DEFAULT_GRAMMAR) -> List[DiagnosticRecord]:
    pending: List[_PendingRecord] = []

    for raw_line in blob.strip().split("\n"):
        line = raw_line.strip()
        kind, fields = classify_line(line, grammar)

        if kind is LineKind.BLANK:
            continue

        if kind is LineKind.CONTINUATION_LINE:
            if not pending:
                report_anomaly(OrphanContinuation(ContinuationFragment(len(pending) - 1, line)))
                continue
            pending[-1].continuations.append(line)
            continue

        record = DiagnosticRecord(
            file=field_at(fields, 1),
            line=parse_number(field_at(fields, 2)),
            column=parse_number(field_at(fields, 3)),
            message=field_at(fields, 4),
            raw_source=blob,
        )
        if len(fields) < grammar.record_min_fields:
            report_anomaly(MalformedDiagnosticLine(line, f"expected {grammar.record_min_fields} fields, got {len(fields)}"))
        elif not (is_number(record.line) and is_number(record.column)):
            report_anomaly(MalformedDiagnosticLine(line, "non-numeric line or column"))
        pending.append(_PendingRecord(record))

    return [p.finish() for p in pending]

"""
Diagnostic storage and the per-run clear/replace/accumulate policy.
"""
import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional

from .errors import VLintError
from .parsing import (
    OutputFormat,
    PositionedDiagnostic,
    Severity,
    SOURCE_TAG,
    extract_records,
    project,
)

logger = logging.getLogger(__name__)


class DiagnosticCollection:
    """
    Mapping of absolute file path -> ordered diagnostics.

    Every method takes the lock, and the lock is re-entrant so the
    CollectionManager can hold it across a whole run.
    """
    def __init__(self, name: str = SOURCE_TAG):
        self.name = name
        self.lock = threading.RLock()
        self._entries: Dict[str, List[PositionedDiagnostic]] = {}
        self._disposed = False

    def _check_open(self):
        if self._disposed:
            raise RuntimeError(f"Diagnostic collection '{self.name}' has been disposed")

    def get(self, path: str) -> List[PositionedDiagnostic]:
        with self.lock:
            return list(self._entries.get(path, []))

    def set(self, path: str, diagnostics: List[PositionedDiagnostic]):
        """Replaces the file's diagnostics. An empty list removes the entry."""
        with self.lock:
            self._check_open()
            if diagnostics:
                self._entries[path] = list(diagnostics)
            else:
                self._entries.pop(path, None)

    def append(self, path: str, diagnostic: PositionedDiagnostic):
        with self.lock:
            self._check_open()
            self._entries.setdefault(path, []).append(diagnostic)

    def delete(self, path: str):
        with self.lock:
            self._check_open()
            self._entries.pop(path, None)

    def clear(self):
        with self.lock:
            self._check_open()
            self._entries.clear()

    def items(self) -> Dict[str, List[PositionedDiagnostic]]:
        """Consistent snapshot of every entry."""
        with self.lock:
            return {path: list(diags) for path, diags in self._entries.items()}

    def dispose(self):
        with self.lock:
            self._entries.clear()
            self._disposed = True

    def __contains__(self, path: str) -> bool:
        with self.lock:
            return path in self._entries

    def __len__(self) -> int:
        with self.lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.items())


class RunOutcome(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    SKIPPED = "skipped"
    INVOCATION_FAILED = "invocation_failed"


@dataclass
class LintResult:
    document_path: str
    outcome: RunOutcome
    output_format: Optional[OutputFormat] = None
    diagnostics: List[PositionedDiagnostic] = field(default_factory=list)
    output: str = ""
    error: Optional[VLintError] = None

    @property
    def failed(self) -> bool:
        return self.outcome not in (RunOutcome.SUCCESS, RunOutcome.SKIPPED)


class CollectionManager:
    def __init__(self, collection: DiagnosticCollection):
        self.collection = collection

    def apply(self, document_path: str, cwd: str, output: str) -> LintResult:
        """
        Replaces the collection's contents with the diagnostics in output.

        The whole collection is cleared first: a compile unit spans several
        files, and any of them may have been fixed since the last run.
        Error-format output replaces its file's list; warning-format output
        accumulates, possibly across several files.
        """
        with self.collection.lock:
            self.collection.clear()
            fmt, records = extract_records(output)

            if fmt is OutputFormat.CLEAN:
                self.collection.delete(document_path)
                logger.info("Clean: %s", document_path)
                return LintResult(document_path, RunOutcome.SUCCESS, fmt, [], output)

            severity = Severity.ERROR if fmt is OutputFormat.ERROR else Severity.WARNING
            diagnostics = [project(record, severity, cwd) for record in records]
            for diagnostic in diagnostics:
                if severity is Severity.ERROR:
                    self.collection.set(diagnostic.file_uri, [diagnostic])
                else:
                    self.collection.append(diagnostic.file_uri, diagnostic)

            logger.info("%s: %d %s diagnostic(s)", document_path, len(diagnostics), fmt.value)
            return LintResult(document_path, RunOutcome.FAILURE, fmt, diagnostics, output)

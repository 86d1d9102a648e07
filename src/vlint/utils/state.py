import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..collection import LintResult, RunOutcome
from ..parsing.diagnostics import PositionedDiagnostic, Severity


@dataclass
class LintState:
    """
    What the UI shows: the latest run's outcome plus a snapshot of the collection.
    """
    document_path: str = ""
    workspace_root: str = ""
    compiler_output: str = ""
    outcome: Optional[RunOutcome] = None
    diagnostics: Dict[str, List[PositionedDiagnostic]] = field(default_factory=dict)
    error_message: str = ""
    last_update: float = 0.0

    @property
    def all_diagnostics(self) -> List[PositionedDiagnostic]:
        return [d for path in sorted(self.diagnostics) for d in self.diagnostics[path]]

    @property
    def error_count(self) -> int:
        return sum(1 for d in self.all_diagnostics if d.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for d in self.all_diagnostics if d.severity == Severity.WARNING)

    @property
    def has_errors(self) -> bool:
        """Returns True if any diagnostic is marked as an error."""
        return self.error_count > 0

    def update(self, result: LintResult, snapshot: Dict[str, List[PositionedDiagnostic]]):
        self.document_path = result.document_path
        self.outcome = result.outcome
        self.error_message = str(result.error) if result.error else ""
        # A run that never reached the compiler leaves the previous output and diagnostics in place
        if result.outcome is not RunOutcome.INVOCATION_FAILED:
            self.compiler_output = result.output
            self.diagnostics = snapshot
        self.last_update = time.time()

"""
Error taxonomy for the lint pipeline.

Extraction anomalies are never raised out of the extractors. They are
handed to report_anomaly() so a single bad line cannot lose the rest of
the run's diagnostics.
"""
import logging

logger = logging.getLogger(__name__)


class VLintError(Exception):
    """Base class for all vlint errors."""


class DiagnosticExtractionError(VLintError):
    """A non-fatal problem found while recovering structure from compiler output."""


class MalformedDiagnosticLine(DiagnosticExtractionError):
    def __init__(self, line: str, reason: str):
        super().__init__(f"Malformed diagnostic line ({reason}): {line!r}")
        self.line = line
        self.reason = reason


class OrphanContinuation(DiagnosticExtractionError):
    def __init__(self, fragment):
        super().__init__(
            f"Continuation line has no preceding record, dropped: {fragment.content!r}"
        )
        self.fragment = fragment


class MisclassifiedOutput(DiagnosticExtractionError):
    """
    Known limitation of the 7-character "warning" prefix check.
    Never raised; kept so the limitation has a name callers can refer to.
    """


class ProcessInvocationFailure(VLintError):
    """The compiler process could not be started at all."""


def report_anomaly(anomaly: DiagnosticExtractionError) -> None:
    logger.warning("%s: %s", type(anomaly).__name__, anomaly)

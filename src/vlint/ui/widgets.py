"""
Custom widgets: DiagnosticsTable and StatusBar.
"""

from __future__ import annotations

from textual.widgets import DataTable, Static

from ..parsing.diagnostics import PositionedDiagnostic
from .render import location_label, severity_text


class DiagnosticsTable(DataTable):
    """
    Main pane, one row per diagnostic.
    ID: #diagnostics
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(id="diagnostics", cursor_type="row", zebra_stripes=True, **kwargs)

    def on_mount(self) -> None:
        self._ensure_columns()

    def _ensure_columns(self) -> None:
        if not self.columns:
            self.add_columns("Location", "Severity", "Message")

    def set_diagnostics(self, diagnostics: list[PositionedDiagnostic], root: str = "") -> None:
        self._ensure_columns()
        self.clear()
        for diagnostic in diagnostics:
            self.add_row(
                location_label(diagnostic, root),
                severity_text(diagnostic.severity),
                diagnostic.message,
            )


class StatusBar(Static):
    """
    Bottom bar: current file, lint status, error and warning counts.
    ID: #status-bar
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(id="status-bar", **kwargs)
        self._file: str = ""
        self._status: str = "idle"
        self._errors: int = 0
        self._warnings: int = 0

    def set_status(
        self,
        *,
        file: str | None = None,
        status: str | None = None,
        errors: int | None = None,
        warnings: int | None = None,
    ) -> None:
        if file is not None:
            self._file = file
        if status is not None:
            self._status = status
        if errors is not None:
            self._errors = errors
        if warnings is not None:
            self._warnings = warnings
        self._render_bar()

    @property
    def bar_text(self) -> str:
        parts = []
        if self._file:
            parts.append(f"📄 {self._file}")
        parts.append(f"● {self._status}")
        if self._errors:
            parts.append(f"❌ {self._errors} error(s)")
        if self._warnings:
            parts.append(f"⚠ {self._warnings} warning(s)")
        return "  │  ".join(parts)

    def _render_bar(self) -> None:
        self.update(self.bar_text)

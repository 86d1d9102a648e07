"""
Rich rendering of positioned diagnostics, shared by the CLI report and the TUI.
"""
import os
from typing import Dict, List

from rich.table import Table
from rich.text import Text

from ..parsing.diagnostics import Number, PositionedDiagnostic, Severity
from ..parsing.tokenizer import is_number

SEVERITY_STYLES = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "bold yellow",
}


def format_number(value: Number) -> str:
    return str(value) if is_number(value) else "?"


def location_label(diagnostic: PositionedDiagnostic, root: str = "") -> str:
    """file:line:col with 1-based line and column, as the compiler prints them."""
    path = os.path.relpath(diagnostic.file_uri, root) if root else diagnostic.file_uri
    start = diagnostic.range.start
    return f"{path}:{format_number(start.line + 1)}:{format_number(start.character)}"


def severity_text(severity: Severity) -> Text:
    return Text(severity.value, style=SEVERITY_STYLES.get(severity, ""))


def diagnostic_text(diagnostic: PositionedDiagnostic, root: str = "") -> Text:
    row = Text()
    row.append(location_label(diagnostic, root), style="bold")
    row.append(": ")
    row.append_text(severity_text(diagnostic.severity))
    row.append(f": {diagnostic.message}")
    return row


def build_report(diagnostics: Dict[str, List[PositionedDiagnostic]], root: str = "") -> Table:
    table = Table(title="V diagnostics", show_lines=False, expand=False)
    table.add_column("Location", no_wrap=True)
    table.add_column("Severity", no_wrap=True)
    table.add_column("Message")
    for path in sorted(diagnostics):
        for diagnostic in diagnostics[path]:
            table.add_row(
                location_label(diagnostic, root),
                severity_text(diagnostic.severity),
                diagnostic.message,
            )
    return table

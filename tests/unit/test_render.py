"""Tests for Rich rendering of diagnostics."""
import os

from rich.console import Console
from rich.table import Table

from vlint.parsing.diagnostics import DiagnosticRecord, Severity, project
from vlint.parsing.tokenizer import NAN
from vlint.ui.render import build_report, diagnostic_text, format_number, location_label

CWD = os.path.abspath("/work")


def _diag(file="main.v", line=3, column=1, severity=Severity.ERROR):
    return project(DiagnosticRecord(file, line, column, "unexpected token"), severity, CWD)


def test_location_label_uses_one_based_line():
    assert location_label(_diag(), CWD) == "main.v:3:1"


def test_location_label_absolute_without_root():
    assert location_label(_diag()) == os.path.join(CWD, "main.v") + ":3:1"


def test_nan_position_shown_as_question_mark():
    assert format_number(NAN) == "?"
    assert location_label(_diag(line=NAN, column=NAN), CWD) == "main.v:?:?"


def test_diagnostic_text():
    text = diagnostic_text(_diag(), CWD)
    assert text.plain == "main.v:3:1: error: unexpected token"


def test_build_report_rows():
    table = build_report({
        os.path.join(CWD, "b.v"): [_diag("b.v", severity=Severity.WARNING)],
        os.path.join(CWD, "a.v"): [_diag("a.v")],
    }, CWD)
    assert isinstance(table, Table)
    assert table.row_count == 2
    console = Console(record=True, width=120)
    console.print(table)
    output = console.export_text()
    assert output.index("a.v:3:1") < output.index("b.v:3:1")

"""
Tests for widgets.py
====================
Verifies DiagnosticsTable and StatusBar in isolation using Textual's
built-in async test harness.
"""

from __future__ import annotations

import os

import pytest
from textual.app import App, ComposeResult

from vlint.parsing.diagnostics import DiagnosticRecord, Severity, project
from vlint.ui.widgets import DiagnosticsTable, StatusBar

CWD = os.path.abspath("/work")


class _WidgetTestApp(App):
    """Headless Textual app that composes every widget."""

    def compose(self) -> ComposeResult:
        yield DiagnosticsTable()
        yield StatusBar()


def _diag(line: int, severity: Severity = Severity.WARNING):
    return project(DiagnosticRecord("main.v", line, 0, f"message {line}"), severity, CWD)


class TestDiagnosticsTable:

    @pytest.mark.asyncio
    async def test_has_correct_id(self):
        async with _WidgetTestApp().run_test() as pilot:
            table = pilot.app.query_one("#diagnostics", DiagnosticsTable)
            assert table.id == "diagnostics"
            assert len(table.columns) == 3

    @pytest.mark.asyncio
    async def test_set_diagnostics_adds_rows(self):
        async with _WidgetTestApp().run_test() as pilot:
            table = pilot.app.query_one("#diagnostics", DiagnosticsTable)
            table.set_diagnostics([_diag(1), _diag(2, Severity.ERROR)], CWD)
            await pilot.pause()
            assert table.row_count == 2

    @pytest.mark.asyncio
    async def test_set_diagnostics_replaces_previous(self):
        async with _WidgetTestApp().run_test() as pilot:
            table = pilot.app.query_one("#diagnostics", DiagnosticsTable)
            table.set_diagnostics([_diag(1), _diag(2)], CWD)
            table.set_diagnostics([_diag(3)], CWD)
            await pilot.pause()
            assert table.row_count == 1

    @pytest.mark.asyncio
    async def test_empty_list(self):
        async with _WidgetTestApp().run_test() as pilot:
            table = pilot.app.query_one("#diagnostics", DiagnosticsTable)
            table.set_diagnostics([], CWD)
            await pilot.pause()
            assert table.row_count == 0


class TestStatusBar:

    @pytest.mark.asyncio
    async def test_status_bar_has_correct_id(self):
        async with _WidgetTestApp().run_test() as pilot:
            sb = pilot.app.query_one("#status-bar", StatusBar)
            assert sb.id == "status-bar"

    @pytest.mark.asyncio
    async def test_set_status_partial_update(self):
        """Setting only one field should not reset the others."""
        async with _WidgetTestApp().run_test() as pilot:
            sb = pilot.app.query_one("#status-bar", StatusBar)
            sb.set_status(file="main.v", status="linting", errors=0, warnings=2)
            sb.set_status(status="problems found")
            assert sb._file == "main.v"
            assert sb._status == "problems found"
            assert sb._warnings == 2

    @pytest.mark.asyncio
    async def test_bar_text(self):
        async with _WidgetTestApp().run_test() as pilot:
            sb = pilot.app.query_one("#status-bar", StatusBar)
            sb.set_status(file="main.v", status="clean")
            assert "main.v" in sb.bar_text
            assert "error" not in sb.bar_text
            sb.set_status(errors=1, warnings=3)
            assert "1 error(s)" in sb.bar_text
            assert "3 warning(s)" in sb.bar_text

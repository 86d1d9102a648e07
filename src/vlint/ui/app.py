import os

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Footer, TextArea

from ..collection import RunOutcome
from ..engine import LintEngine
from ..utils.config import ConfigManager
from ..utils.state import LintState
from .widgets import DiagnosticsTable, StatusBar

# Palette
C_BG = "#EBEEEE"
C_TEXT = "#191A1A"
C_ACCENT1 = "#45d3ee"  # Cyan
C_ACCENT2 = "#9FBFC5"  # Muted Blue

_STATUS_LABELS = {
    RunOutcome.SUCCESS: "clean",
    RunOutcome.FAILURE: "problems found",
    RunOutcome.SKIPPED: "outside workspace",
    RunOutcome.INVOCATION_FAILED: "compiler failed to run",
}


class VLintApp(App):
    """Live diagnostics for a V file: re-lints whenever a file in its module is saved."""

    CSS = f"""
    Screen {{
        background: {C_BG};
        color: {C_TEXT};
    }}

    #main-layout {{ height: 1fr; width: 100%; }}

    #diagnostics {{
        height: 1fr;
        border: solid {C_ACCENT2};
        margin: 1 1;
    }}

    #raw-output {{ display: none; height: 1fr; margin: 1 2; }}

    #status-bar {{ height: 1; padding: 0 1; }}

    Footer {{ background: {C_TEXT}; color: {C_ACCENT1}; }}
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("r", "refresh", "Re-lint", show=True),
        Binding("o", "toggle_output", "Raw output", show=True),
    ]

    class StateUpdated(Message):
        def __init__(self, state: LintState) -> None:
            super().__init__()
            self.state = state

    def __init__(
        self,
        source_file: str,
        workspace_root: str,
        engine: LintEngine | None = None,
        config: ConfigManager | None = None,
    ):
        super().__init__()
        self.source_file = os.path.abspath(source_file)
        self.engine = engine if engine else LintEngine(workspace_root, config_manager=config)
        self.engine.on_update_callback = lambda state: self.post_message(self.StateUpdated(state))

    def compose(self) -> ComposeResult:
        with Vertical(id="main-layout"):
            yield DiagnosticsTable()
            yield TextArea(id="raw-output", read_only=True)
        yield StatusBar()
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#status-bar", StatusBar).set_status(
            file=os.path.relpath(self.source_file, self.engine.workspace_root),
            status="linting",
        )
        self.engine.start(self.source_file)

    def action_refresh(self) -> None:
        self.query_one("#status-bar", StatusBar).set_status(status="linting")
        self.engine.refresh()

    def action_toggle_output(self) -> None:
        raw = self.query_one("#raw-output", TextArea)
        table = self.query_one("#diagnostics", DiagnosticsTable)
        raw.display, table.display = not raw.display, raw.display

    def on_vlint_app_state_updated(self, message: StateUpdated) -> None:
        state = message.state
        table = self.query_one("#diagnostics", DiagnosticsTable)
        table.set_diagnostics(state.all_diagnostics, state.workspace_root)
        self.query_one("#raw-output", TextArea).text = state.error_message or state.compiler_output
        self.query_one("#status-bar", StatusBar).set_status(
            status=_STATUS_LABELS.get(state.outcome, "idle"),
            errors=state.error_count,
            warnings=state.warning_count,
        )

    def on_unmount(self) -> None:
        self.engine.stop()


def run_tui(source_file: str, workspace_root: str, config: ConfigManager | None = None):
    app = VLintApp(source_file, workspace_root, config=config)
    app.run()

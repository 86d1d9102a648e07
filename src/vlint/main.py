import sys
import os
import argparse

from rich.console import Console

from .collection import RunOutcome
from .engine import LintEngine
from .ui.app import run_tui
from .ui.render import build_report
from .utils.config import ConfigManager
from .utils.lang import is_supported
from .utils.logging_setup import setup_logging


def _build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(description="vlint: V compiler diagnostics in your terminal")
    parser.add_argument("file", nargs="?", help="V source file to lint")
    parser.add_argument("--workspace", default=None, help="Workspace root the compiler runs in (default: current directory)")
    parser.add_argument("--once", action="store_true", help="Lint once, print a report and exit")
    parser.add_argument("--compiler", default=None, help="V compiler executable for this session")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def lint_once(abs_path: str, workspace: str, config: ConfigManager) -> int:
    console = Console()
    engine = LintEngine(workspace, config_manager=config)
    try:
        result = engine.lint(abs_path).result()
        if result.outcome is RunOutcome.INVOCATION_FAILED:
            console.print(f"[red]Error:[/red] {result.error}")
        elif result.outcome is RunOutcome.SKIPPED:
            console.print(f"Skipped: {abs_path} is outside {workspace}")
        elif result.failed:
            console.print(build_report(engine.collection.items(), workspace))
        else:
            console.print("[green]No problems found.[/green]")
    finally:
        engine.stop()
    return 1 if result.failed else 0


def run():
    parser = _build_parser()
    args = parser.parse_args()

    if not args.file:
        print("Error: No source file specified.")
        print("Usage: vlint <file.v>")
        sys.exit(1)

    # Resolve to absolute path immediately
    abs_path = os.path.abspath(args.file)
    workspace = os.path.abspath(args.workspace or os.getcwd())

    if not os.path.exists(abs_path):
        print(f"Error: File not found: {abs_path}")
        sys.exit(1)

    if not is_supported(abs_path):
        print("Error: Unsupported file type. Use .v")
        sys.exit(1)

    config = ConfigManager()
    if args.compiler:
        config.config["compiler"] = args.compiler
    setup_logging(config, console=args.once, verbose=args.verbose)

    if args.once:
        sys.exit(lint_once(abs_path, workspace, config))

    try:
        run_tui(abs_path, workspace, config)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"Fatal Error: {e}")
        sys.exit(1)

if __name__ == "__main__":
    run()

import logging
import os
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional

from .collection import CollectionManager, DiagnosticCollection, LintResult, RunOutcome
from .compiler.driver import VCompilerDriver
from .compiler.target import is_within, resolve_compile_target
from .errors import ProcessInvocationFailure
from .utils.config import ConfigManager
from .utils.state import LintState
from .utils.watcher import FileWatcher

logger = logging.getLogger(__name__)


class LintEngine:
    """
    Runs the compiler for a document and publishes its diagnostics.

    Runs are queued on a single worker thread, so one run's clear/populate
    sequence never interleaves with another's. Results are only available
    through the returned Future or on_update_callback, both of which fire
    after the collection has been populated.
    """
    def __init__(
        self,
        workspace_root: str,
        config_manager: Optional[ConfigManager] = None,
        collection: Optional[DiagnosticCollection] = None,
        driver: Optional[VCompilerDriver] = None,
    ):
        self.config = config_manager if config_manager else ConfigManager()
        self.workspace_root = os.path.abspath(workspace_root)
        self.collection = collection if collection is not None else DiagnosticCollection()
        self.manager = CollectionManager(self.collection)
        self.driver = driver if driver else VCompilerDriver(self.config)
        self.watcher = FileWatcher(self.config.get("debounce_seconds", 0.5))
        self.state = LintState(workspace_root=self.workspace_root)
        self.on_update_callback: Optional[Callable[[LintState], None]] = None
        self.document_path: Optional[str] = None
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="vlint")

    def start(self, document_path: str) -> Future:
        self.document_path = os.path.abspath(document_path)
        future = self.lint(self.document_path)
        self.watcher.start_watching(self.document_path, self._on_file_saved)
        return future

    def stop(self):
        self.watcher.stop_watching()
        self._executor.shutdown(wait=True)
        self.collection.dispose()

    def _on_file_saved(self, path: str):
        self.lint(self.document_path or path)

    def refresh(self) -> Optional[Future]:
        if not self.document_path:
            return None
        return self.lint(self.document_path)

    def lint(self, document_path: str) -> "Future[LintResult]":
        future = self._executor.submit(self.run, os.path.abspath(document_path))
        future.add_done_callback(_log_run_failure)
        return future

    def run(self, document_path: str) -> LintResult:
        """One synchronous lint run. Call through lint() to get serialization."""
        if not is_within(document_path, self.workspace_root):
            logger.info("Skipping %s: outside workspace %s", document_path, self.workspace_root)
            return self._publish(LintResult(document_path, RunOutcome.SKIPPED))

        target = resolve_compile_target(document_path, self.workspace_root)
        logger.info("Linting %s (target %s)", document_path, target)

        compiled = self.driver.compile(target, cwd=self.workspace_root)
        if compiled.failed_to_run:
            error = ProcessInvocationFailure(compiled.invocation_error)
            logger.error("%s", error)
            # The collection is left untouched
            return self._publish(LintResult(document_path, RunOutcome.INVOCATION_FAILED, error=error))

        result = self.manager.apply(document_path, self.workspace_root, compiled.diagnostic_output)
        return self._publish(result)

    def _publish(self, result: LintResult) -> LintResult:
        self.state.update(result, self.collection.items())
        if self.on_update_callback:
            self.on_update_callback(self.state)
        return result


def _log_run_failure(future: Future):
    if not future.cancelled() and future.exception() is not None:
        logger.error("Lint run crashed", exc_info=future.exception())

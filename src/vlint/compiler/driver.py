import logging
import os
import shutil
import subprocess
import tempfile
from dataclasses import dataclass
from typing import List, Optional

from ..utils.config import ConfigManager

logger = logging.getLogger(__name__)

OUTPUT_NAME = "lint.c"


@dataclass
class CompileResult:
    stdout: str = ""
    stderr: str = ""
    returncode: int = 0
    # Set when the compiler could not be started at all.
    invocation_error: Optional[str] = None

    @property
    def failed_to_run(self) -> bool:
        return self.invocation_error is not None

    @property
    def diagnostic_output(self) -> str:
        """
        The text to classify. The compiler writes diagnostics to stderr,
        but some failures only show up on stdout.
        """
        if self.returncode != 0 or len(self.stderr.strip()) > 1:
            return self.stderr or self.stdout
        return ""


class VCompilerDriver:
    def __init__(self, config_manager: Optional[ConfigManager] = None):
        # Use provided config or load default
        self.config = config_manager if config_manager else ConfigManager()
        self.set_compiler(self.config.get("compiler", "v"))

    def set_compiler(self, compiler: str):
        """
        Updates the compiler used by the driver.
        """
        path = shutil.which(compiler)
        if not path:
            # Don't raise so the app can start with a stale config.
            # Every lint run reports the problem instead.
            logger.warning("V compiler '%s' not found.", compiler)
        self.compiler = compiler
        self.compiler_path = path

    def output_path(self) -> str:
        out_dir = self.config.get("output_dir") or os.path.join(tempfile.gettempdir(), "vlint")
        return os.path.join(out_dir, OUTPUT_NAME)

    def build_command(self, target: str) -> List[str]:
        command = [self.compiler_path or self.compiler]
        command.extend(self.config.get("flags", []) or [])
        command.extend(["-o", self.output_path(), target])
        return command

    def compile(self, target: str, cwd: str) -> CompileResult:
        """
        Compiles target (relative to cwd) and captures the compiler's output.
        The generated C file is throwaway; only the diagnostics matter.
        """
        if not self.compiler_path:
            return CompileResult(invocation_error=f"Compiler '{self.compiler}' not configured or not found.")

        command = self.build_command(target)
        logger.debug("Running %s in %s", command, cwd)

        try:
            os.makedirs(os.path.dirname(self.output_path()), exist_ok=True)
            result = subprocess.run(
                command,
                cwd=cwd,
                capture_output=True,
                text=True,
                check=False
            )
        except OSError as e:
            return CompileResult(invocation_error=f"Failed to run '{self.compiler}': {e}")

        return CompileResult(stdout=result.stdout, stderr=result.stderr, returncode=result.returncode)

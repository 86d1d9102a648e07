from .driver import CompileResult, VCompilerDriver
from .target import is_within, resolve_compile_target

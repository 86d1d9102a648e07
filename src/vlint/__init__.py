"""vlint: turns V compiler output into positioned diagnostics."""
from .parsing import extract_diagnostics, extract_records

__version__ = "0.1.0"

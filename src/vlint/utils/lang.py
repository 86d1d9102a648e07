"""
Source file detection. V is the only language vlint understands; this
module is the single place that knows what a V source file looks like.
"""
import os
from pathlib import Path

SOURCE_EXTENSION = ".v"


def is_supported(file_path: str) -> bool:
    """Return True if the file extension is a V source extension."""
    return Path(file_path).suffix == SOURCE_EXTENSION


def count_sources(directory: str) -> int:
    """Number of V source files directly inside directory."""
    return sum(1 for name in os.listdir(directory) if name.endswith(SOURCE_EXTENSION))

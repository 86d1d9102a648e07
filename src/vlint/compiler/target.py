import os
from ..utils.lang import count_sources


def is_within(path: str, root: str) -> bool:
    """True if path is root itself or lives below it."""
    path = os.path.abspath(path)
    root = os.path.abspath(root)
    try:
        return os.path.commonpath([path, root]) == root
    except ValueError:
        # Different drives on Windows
        return False


def resolve_compile_target(document_path: str, workspace_root: str) -> str:
    """
    Picks what to hand the compiler for a document:
      - the file itself (relative) when it is the only V file in its directory,
      - otherwise its directory relative to the workspace root,
      - or "." when that directory is the workspace root.
    All files of a directory form one V module, so siblings compile together.
    """
    document_path = os.path.abspath(document_path)
    workspace_root = os.path.abspath(workspace_root)
    folder = os.path.dirname(document_path)

    if count_sources(folder) == 1:
        return os.path.relpath(document_path, workspace_root)
    if folder == workspace_root:
        return "."
    return os.path.relpath(folder, workspace_root)

from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the per-user data directory used for persistent configuration
and logs, and persists exported reports to disk.
"""

import os
from typing import Optional, Tuple

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "FsVisitor"
UNIX_APP_DIR_NAME = ".fsvisitor"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/FsVisitor
    - Linux/Mac: ~/.fsvisitor

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str = "") -> str:
    """
    Expand '~' and environment variables and return an absolute path.

    Args:
        path: Raw input path string.
        fallback: Path used when the input is empty.

    Returns:
        str: Normalized absolute path, or '' if both inputs are empty.
    """
    p = (path or "").strip() or fallback
    if not p:
        return ""
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))

# -----------------------------------------------------------------------------
# OUTPUT PERSISTENCE
# -----------------------------------------------------------------------------

def write_text_output(file_path: str, text: str) -> Tuple[bool, Optional[str]]:
    """
    Write an exported report to disk, creating parent directories.

    Args:
        file_path: Target file path.
        text: Report content.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        parent = os.path.dirname(os.path.abspath(file_path))
        os.makedirs(parent, exist_ok=True)
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(text)
        return True, None
    except OSError as e:
        return False, str(e)

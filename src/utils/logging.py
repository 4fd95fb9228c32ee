"""
Error log for NBA Players Browser.

Failures from background page loads, settings I/O and the main loop
are appended to a plain text file under the data directory, one block
per entry.
"""

import os
import platform
import sys
from datetime import datetime
from typing import Optional

from constants import APP_NAME, APP_VERSION, LOG_FILE

SEPARATOR = "=" * 60

_log_file: str = LOG_FILE


def get_log_file() -> str:
    return _log_file


def set_log_file(path: str) -> None:
    """Redirect all further entries to ``path``."""
    global _log_file
    _log_file = path


def _now() -> str:
    return datetime.now().isoformat(sep=" ", timespec="seconds")


def _write(text: str, mode: str = "a") -> bool:
    """Write ``text`` to the log file, echoing it to stderr on failure."""
    try:
        with open(_log_file, mode, encoding="utf-8") as f:
            f.write(text)
        return True
    except OSError as e:
        print(f"Cannot write {_log_file}: {e}", file=sys.stderr)
        print(text, file=sys.stderr, end="")
        return False


def format_entry(
    error_msg: str,
    error_type: Optional[str] = None,
    traceback_str: Optional[str] = None,
) -> str:
    """
    Build one log block.

    Args:
        error_msg: Human readable description
        error_type: Exception class name or short category
        traceback_str: Formatted traceback, if one was captured

    Returns:
        The block text, ending with a separator line
    """
    kind = f" ({error_type})" if error_type else ""
    lines = [f"{_now()} ERROR{kind}: {error_msg}"]
    if traceback_str:
        lines.append("Traceback:")
        lines.extend("    " + line for line in traceback_str.rstrip().splitlines())
    lines.append(SEPARATOR)
    return "\n".join(lines) + "\n"


def log_error(
    error_msg: str,
    error_type: Optional[str] = None,
    traceback_str: Optional[str] = None,
) -> None:
    """Append an error entry to the log file."""
    _write(format_entry(error_msg, error_type, traceback_str))


def init_log_file() -> bool:
    """
    Start a fresh log for this run.

    Creates the data directory if needed and truncates the log with a
    header naming the app version and the runtime.

    Returns:
        True if the header was written
    """
    try:
        os.makedirs(os.path.dirname(_log_file) or ".", exist_ok=True)
    except OSError as e:
        print(f"Cannot create log directory: {e}", file=sys.stderr)
        return False

    header = (
        f"{APP_NAME} {APP_VERSION} log opened {_now()}\n"
        f"Python {platform.python_version()} on {platform.platform()}\n"
        f"{SEPARATOR}\n"
    )
    return _write(header, mode="w")

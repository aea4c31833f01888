"""Bounded, never-raising I/O helpers shared by the collectors."""

import subprocess
import threading
from pathlib import Path

# Upper bounds on how much text a single read returns. Parsing is
# best-effort, so truncating oversized sources is acceptable.
MAX_FILE_BYTES = 32 * 1024
MAX_OUTPUT_BYTES = 64 * 1024


def run_cmd(cmd: list[str], timeout: float = 30, limit: int = MAX_OUTPUT_BYTES) -> str:
    """Run a command and return at most *limit* bytes of its stdout as a string.

    Only *limit* bytes are ever read from the pipe; the child is killed if it
    is still running after *timeout* seconds. stderr is discarded and the exit
    status is ignored.
    Never raises: returns '' on any failure.
    """
    try:
        proc = subprocess.Popen(cmd, stdout=subprocess.PIPE, stderr=subprocess.DEVNULL)
    except (OSError, subprocess.SubprocessError, ValueError):
        return ""

    # Killing the child also ends a read that is blocked on its pipe.
    timer = threading.Timer(timeout, proc.kill)
    timer.start()
    try:
        with proc:
            raw = proc.stdout.read(limit)
    except OSError:
        return ""
    finally:
        timer.cancel()
    return raw.decode("utf-8", errors="replace")


def read_text(path: str | Path, limit: int = MAX_FILE_BYTES) -> str | None:
    """Read up to *limit* bytes of a text file.

    Returns ``None`` when the file cannot be opened or read.
    """
    try:
        with open(path, "rb") as fh:
            raw = fh.read(limit)
    except OSError:
        return None
    return raw.decode("utf-8", errors="replace")

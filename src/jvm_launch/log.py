"""Timestamped diagnostics + GitHub Actions annotations.

The child's stdout is relayed to ours, so every message goes to stderr.
"""

import os
import sys
from datetime import datetime


def _timestamp() -> str:
    return datetime.now().strftime("%H:%M:%S")


def _is_github_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS") == "true"


def _debug_enabled() -> bool:
    return os.environ.get("JVM_LAUNCH_DEBUG", "").lower() in ("1", "true", "yes")


def debug(msg: str) -> None:
    if not _debug_enabled():
        return
    print(f"[{_timestamp()}] DEBUG: {msg}", file=sys.stderr, flush=True)


def warning(msg: str) -> None:
    if _is_github_actions():
        print(f"::warning::{msg}", file=sys.stderr, flush=True)
    print(f"[{_timestamp()}] WARNING: {msg}", file=sys.stderr, flush=True)


def error(msg: str) -> None:
    if _is_github_actions():
        print(f"::error::{msg}", file=sys.stderr, flush=True)
    print(f"[{_timestamp()}] ERROR: {msg}", file=sys.stderr, flush=True)

"""Subprocess wrapper — the single mock seam for all tests."""

import subprocess


def spawn(args: list[str], env: dict[str, str], cwd: str | None = None) -> subprocess.Popen:
    """Start a command with piped text stdout/stderr.

    ``env`` replaces the environment entirely; nothing from os.environ is merged in.
    stdin is not forwarded.
    """
    return subprocess.Popen(
        args,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        errors="replace",
        env=env,
        cwd=cwd,
    )

"""Shared test fixtures."""

import io
import os
import stat

import pytest

from jvm_launch.host import HostSnapshot, PlatformFamily

FAKE_JAVA = """#!/bin/sh
echo "O1"
echo "E1" >&2
for arg in "$@"; do
    echo "ARG:$arg"
done
/usr/bin/env | while IFS= read -r line; do
    echo "ENV:$line"
done
exit 3
"""


@pytest.fixture
def mock_process(monkeypatch):
    """Mock process.spawn; the fake child prints whatever `outputs` holds."""
    from jvm_launch import process

    calls = []
    outputs = {"stdout": "", "stderr": "", "returncode": 0}

    class FakeProc:
        def __init__(self):
            self.stdout = io.StringIO(outputs["stdout"])
            self.stderr = io.StringIO(outputs["stderr"])
            self.returncode = outputs["returncode"]

        def poll(self):
            return self.returncode

        def wait(self):
            return self.returncode

        def kill(self):
            calls.append(("kill",))

    def fake_spawn(args, env, cwd=None):
        calls.append(("spawn", args, env, cwd))
        return FakeProc()

    monkeypatch.setattr(process, "spawn", fake_spawn)

    return type("MockProcess", (), {"calls": calls, "outputs": outputs})()


@pytest.fixture
def java_home(tmp_path):
    """A runtime home whose bin/java is a shell script standing in for the JVM."""
    bin_dir = tmp_path / "jdk" / "bin"
    bin_dir.mkdir(parents=True)
    java = bin_dir / "java"
    java.write_text(FAKE_JAVA)
    java.chmod(java.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(tmp_path / "jdk")


@pytest.fixture
def host(java_home):
    """A Unix host snapshot pointing at the fake runtime home."""
    return HostSnapshot(
        environment={"PATH": os.defpath, "HOME": "/home/tester"},
        runtime_home=java_home,
        os_name="Linux",
        platform_family=PlatformFamily.UNIX,
        max_memory_megabytes=None,
        class_path=None,
        library_path=None,
    )


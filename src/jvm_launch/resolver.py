"""Locate the java executable under a runtime home."""

import os

from jvm_launch import log
from jvm_launch.host import HostSnapshot, PlatformFamily

EXECUTABLE_NAME = "java"


def resolve_executable(
    runtime_home: str | None,
    platform_family: PlatformFamily | None,
    name: str = EXECUTABLE_NAME,
) -> str | None:
    """Return <home>/bin/<name>[.exe] if it exists, else None.

    Missing host information is reported as a warning, never raised.
    """
    if runtime_home is None or platform_family is None:
        if runtime_home is None:
            log.warning("could not determine the java home")
        if platform_family is None:
            log.warning("could not determine the OS family")
        return None

    path = os.path.join(runtime_home, "bin", name)
    if platform_family is PlatformFamily.WINDOWS:
        path += ".exe"

    if not os.path.exists(path):
        log.warning(f"could not find the java executable at the expected location: {path}")
        return None
    return path


class ExecutableResolver:
    def __init__(self, host: HostSnapshot, name: str = EXECUTABLE_NAME):
        self.host = host
        self.name = name

    def resolve(self) -> str | None:
        return resolve_executable(self.host.runtime_home, self.host.platform_family, self.name)

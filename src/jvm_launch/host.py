"""One-time snapshot of the host facts a launch depends on."""

import os
import platform
from dataclasses import dataclass, field
from enum import Enum

BYTES_PER_MEGABYTE = 1 << 20


class PlatformFamily(Enum):
    WINDOWS = "windows"
    MAC = "mac"
    UNIX = "unix"


@dataclass(frozen=True)
class HostSnapshot:
    environment: dict[str, str] = field(default_factory=dict)
    runtime_home: str | None = None
    os_name: str | None = None
    platform_family: PlatformFamily | None = None
    max_memory_megabytes: int | None = None
    class_path: str | None = None
    library_path: str | None = None


def platform_family_for(os_name: str | None) -> PlatformFamily | None:
    """Classify an OS name as reported by platform.system()."""
    if not os_name:
        return None
    name = os_name.lower()
    if name.startswith("windows") or name.startswith("cygwin") or name.startswith("msys"):
        return PlatformFamily.WINDOWS
    if name == "darwin" or name.startswith("mac"):
        return PlatformFamily.MAC
    return PlatformFamily.UNIX


def library_path_variable(family: PlatformFamily | None) -> str:
    """Name of the environment variable the platform searches for native libraries."""
    if family is PlatformFamily.WINDOWS:
        return "PATH"
    if family is PlatformFamily.MAC:
        return "DYLD_LIBRARY_PATH"
    return "LD_LIBRARY_PATH"


def _max_memory_megabytes() -> int | None:
    """Address-space ceiling of this process in MiB, or None when unlimited/unknown."""
    if os.name != "posix":
        return None
    import resource

    soft, _hard = resource.getrlimit(resource.RLIMIT_AS)
    if soft == resource.RLIM_INFINITY or soft <= 0:
        return None
    return soft // BYTES_PER_MEGABYTE


def snapshot() -> HostSnapshot:
    """Read the host environment once.

    Nothing downstream re-reads os.environ; callers that want a different
    view of the host build their own HostSnapshot.
    """
    environment = dict(os.environ)
    os_name = platform.system() or None
    family = platform_family_for(os_name)
    return HostSnapshot(
        environment=environment,
        runtime_home=environment.get("JAVA_HOME") or None,
        os_name=os_name,
        platform_family=family,
        max_memory_megabytes=_max_memory_megabytes(),
        class_path=environment.get("CLASSPATH") or None,
        library_path=environment.get(library_path_variable(family)) or None,
    )

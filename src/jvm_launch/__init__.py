try:
    from importlib.metadata import version

    __version__ = version("jvm-launch")
except Exception:
    __version__ = "0.0.0"

from jvm_launch.errors import ErrorKind, LaunchError  # noqa: E402
from jvm_launch.launcher import ProcessLauncher, launch  # noqa: E402
from jvm_launch.settings import LaunchConfiguration  # noqa: E402

__all__ = ["ErrorKind", "LaunchConfiguration", "LaunchError", "ProcessLauncher", "launch"]

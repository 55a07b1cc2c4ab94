"""Resolve java, build the command, spawn, relay output."""

from typing import IO

from jvm_launch import log, process
from jvm_launch.command import build_command, format_command
from jvm_launch.errors import ErrorKind, LaunchError
from jvm_launch.host import HostSnapshot, snapshot
from jvm_launch.merger import StreamMerger
from jvm_launch.resolver import ExecutableResolver
from jvm_launch.settings import LaunchConfiguration


def launch(
    config: LaunchConfiguration,
    host: HostSnapshot | None = None,
    stdout: IO[str] | None = None,
    stderr: IO[str] | None = None,
    wait: bool = False,
) -> int | None:
    """Launch a JVM and relay its output until both of its streams close.

    Returns the child's exit status if it has already exited by then, else
    None; the child is not waited on unless ``wait`` is set, in which case
    the exit status is always returned. If relaying fails the child is
    killed. Raises LaunchError.
    """
    try:
        executable = ExecutableResolver(host if host is not None else snapshot()).resolve()
        if executable is None:
            raise LaunchError(ErrorKind.EXECUTABLE_NOT_FOUND, "failed to locate the java executable")

        args = build_command(executable, config)
        log.debug(f"Launching JVM as: {format_command(args)}")

        proc = process.spawn(args, env=dict(config.environment))
        try:
            StreamMerger(stdout=stdout, stderr=stderr).merge(
                proc.stdout, proc.stderr, on_abort=proc.kill
            )
        finally:
            proc.stdout.close()
            proc.stderr.close()
        if wait:
            return proc.wait()
        return proc.poll()
    except LaunchError:
        raise
    except Exception as e:
        raise LaunchError(ErrorKind.LAUNCH_FAILED, f"failed to launch the JVM: {e}", cause=e) from e


class ProcessLauncher:
    """Launcher bound to a host snapshot, taken on first use if not given."""

    def __init__(self, host: HostSnapshot | None = None):
        self.host = host

    def launch(
        self,
        config: LaunchConfiguration,
        stdout: IO[str] | None = None,
        stderr: IO[str] | None = None,
        wait: bool = False,
    ) -> int | None:
        if self.host is None:
            self.host = snapshot()
        return launch(config, host=self.host, stdout=stdout, stderr=stderr, wait=wait)

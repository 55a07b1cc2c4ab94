"""Click entry point — all commands."""

import os
import sys

import click

from jvm_launch import __version__, config, log
from jvm_launch import host as host_mod
from jvm_launch import launcher as launcher_mod
from jvm_launch.command import build_command, format_command
from jvm_launch.errors import LaunchError
from jvm_launch.resolver import ExecutableResolver


def _parse_pairs(ctx, param, values):
    """KEY=VALUE options → list of (key, value), order kept."""
    pairs = []
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}", ctx=ctx, param=param)
        pairs.append((key, value))
    return pairs


def launch_options(f):
    """Options shared by `run` and `command`."""
    decorators = [
        click.option("--file", "-f", "launch_file", type=click.Path(dir_okay=False),
                     help="YAML launch file"),
        click.option("--memory", "-m", type=int, default=None, help="Max heap in megabytes (-Xmx)"),
        click.option("--define", "-D", multiple=True, callback=_parse_pairs,
                     help="Runtime property KEY=VALUE"),
        click.option("--classpath", "--cp", multiple=True, help="Classpath entry (replaces CLASSPATH)"),
        click.option("--library-path", multiple=True, help="Prepend to the native library path"),
        click.option("--env", multiple=True, callback=_parse_pairs, help="Set environment KEY=VALUE"),
        click.option("--prepend-env", multiple=True, callback=_parse_pairs,
                     help="Prepend VALUE to environment KEY (case-insensitive)"),
        click.option("--clean-env", is_flag=True, help="Do not inherit the current environment"),
        click.argument("main_class", required=False),
        click.argument("app_args", nargs=-1, type=click.UNPROCESSED),
    ]
    for decorator in reversed(decorators):
        f = decorator(f)
    return f


def _build_config(snap, launch_file, main_class, app_args, memory, define, classpath,
                  library_path, env, prepend_env, clean_env):
    data = config.load(launch_file) if launch_file else {}
    if clean_env:
        data["inherit_environment"] = False
    cfg = config.parse_launch(data, snap)

    # Command-line values win over the file
    if main_class:
        cfg.main_entry_point = main_class
    if app_args:
        cfg.application_arguments = list(app_args)
    if memory is not None:
        cfg.set_memory_limit(memory)
    for key, value in define:
        cfg.set_property(key, value)
    if classpath:
        cfg.search_path = os.pathsep.join(classpath)
    if library_path:
        cfg.prepend_to_resource_path(os.pathsep.join(library_path))
    for key, value in env:
        cfg.environment[key] = value
    for key, value in prepend_env:
        cfg.prepend_to_environment_case_insensitive(key, value)

    if not cfg.main_entry_point:
        raise click.UsageError("No main class given (argument or 'main' in --file)")
    return cfg


@click.group()
@click.version_option(version=__version__, prog_name="jvm-launch")
def main():
    """Launch a JVM and relay its output."""


@main.command(context_settings={"ignore_unknown_options": True})
@launch_options
def run(**options):
    """Launch MAIN_CLASS and relay its stdout/stderr until they close."""
    snap = host_mod.snapshot()
    try:
        cfg = _build_config(snap, **options)
        code = launcher_mod.launch(cfg, host=snap, wait=True)
    except (config.ConfigError, LaunchError) as e:
        log.error(str(e))
        sys.exit(1)
    sys.exit(code or 0)


@main.command(context_settings={"ignore_unknown_options": True})
@launch_options
def command(**options):
    """Print the command `run` would execute."""
    snap = host_mod.snapshot()
    try:
        cfg = _build_config(snap, **options)
    except config.ConfigError as e:
        log.error(str(e))
        sys.exit(1)

    executable = ExecutableResolver(snap).resolve()
    if executable is None:
        log.error("failed to locate the java executable (is JAVA_HOME set?)")
        sys.exit(1)
    click.echo(format_command(build_command(executable, cfg)))


@main.command()
def resolve():
    """Print the path of the java executable that would be launched."""
    executable = ExecutableResolver(host_mod.snapshot()).resolve()
    if executable is None:
        log.error("failed to locate the java executable (is JAVA_HOME set?)")
        sys.exit(1)
    click.echo(executable)


if __name__ == "__main__":
    main()

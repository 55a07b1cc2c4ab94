"""Turn a LaunchConfiguration into a java argument vector."""

import shlex

from jvm_launch.settings import LaunchConfiguration

CLASSPATH_FLAG = "-classpath"


def memory_flag(megabytes: int) -> str:
    return f"-Xmx{megabytes}M"


def property_flag(key: str, value: str) -> str:
    return f"-D{key}={value}"


def build_command(executable: str, config: LaunchConfiguration) -> list[str]:
    """Build the full command. Pure: reads config, never modifies it.

    Order: executable, -Xmx (unless default), -D flags in insertion order,
    -classpath (if set), main entry point, application arguments.
    Values are passed as single tokens and never re-split.
    """
    args = [executable]
    if not config.use_default_memory_limit:
        args.append(memory_flag(config.memory_limit_megabytes))

    for key, value in config.runtime_properties.items():
        args.append(property_flag(key, value))

    if config.search_path is not None:
        args.extend([CLASSPATH_FLAG, config.search_path])

    args.append(config.main_entry_point)
    args.extend(config.application_arguments)
    return args


def format_command(args: list[str]) -> str:
    """Shell-quoted rendering for logs and dry runs."""
    return shlex.join(args)

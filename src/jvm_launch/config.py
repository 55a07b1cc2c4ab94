"""Parse YAML launch files into LaunchConfiguration objects."""

import os

import yaml

from jvm_launch.host import HostSnapshot
from jvm_launch.settings import LaunchConfiguration

KNOWN_KEYS = {
    "main",
    "memory",
    "classpath",
    "library_path",
    "properties",
    "inherit_environment",
    "environment",
    "prepend_environment",
    "args",
}


class ConfigError(ValueError):
    pass


def load(path: str) -> dict:
    """Read a launch file. An empty file is an empty launch description."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    return data


def _path_list(value, key: str) -> str | None:
    """Accept a list of entries or a pre-joined string."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return os.pathsep.join(str(v) for v in value)
    raise ConfigError(f"{key}: expected a string or a list")


def _str_mapping(value, key: str) -> dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{key}: expected a mapping")
    # YAML turns `on`, 512, 1.0 into non-strings; the child only sees text
    return {str(k): _scalar(v, f"{key}.{k}") for k, v in value.items()}


def _scalar(value, key: str) -> str:
    if value is None or isinstance(value, (dict, list)):
        raise ConfigError(f"{key}: expected a scalar value")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def parse_launch(data: dict, host: HostSnapshot | None = None) -> LaunchConfiguration:
    """Build a LaunchConfiguration from a parsed launch file.

    With inherit_environment (the default) the configuration is seeded from
    the host, so classpath replaces the host CLASSPATH and library_path is
    prepended to the host library path.
    """
    unknown = sorted(set(data) - KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"unknown keys: {', '.join(unknown)}")

    inherit = data.get("inherit_environment", True)
    if not isinstance(inherit, bool):
        raise ConfigError("inherit_environment: expected true or false")

    if inherit:
        config = LaunchConfiguration.from_host(host)
    else:
        config = LaunchConfiguration()

    main = data.get("main")
    if main is not None:
        config.main_entry_point = _scalar(main, "main")

    memory = data.get("memory")
    if memory is not None:
        if isinstance(memory, bool) or not isinstance(memory, int):
            raise ConfigError("memory: expected an integer number of megabytes")
        config.set_memory_limit(memory)

    classpath = _path_list(data.get("classpath"), "classpath")
    if classpath is not None:
        config.search_path = classpath

    library_path = _path_list(data.get("library_path"), "library_path")
    if library_path is not None:
        config.prepend_to_resource_path(library_path)

    for key, value in _str_mapping(data.get("properties"), "properties").items():
        config.set_property(key, value)

    config.environment.update(_str_mapping(data.get("environment"), "environment"))

    prepends = _str_mapping(data.get("prepend_environment"), "prepend_environment")
    for key, value in prepends.items():
        config.prepend_to_environment_case_insensitive(key, value)

    args = data.get("args")
    if args is not None:
        if not isinstance(args, list):
            raise ConfigError("args: expected a list")
        config.application_arguments = [_scalar(a, "args") for a in args]

    return config

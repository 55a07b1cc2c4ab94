"""LaunchConfiguration — everything the child JVM needs."""

import os
from dataclasses import dataclass, field

from jvm_launch.host import HostSnapshot, snapshot

LIBRARY_PATH_PROPERTY = "java.library.path"


def _prepend(head: str, current: str | None) -> str:
    if current is None:
        return head
    return head + os.pathsep + current


@dataclass
class LaunchConfiguration:
    """Settings for one launch.

    ``resource_path`` is not a field of its own: it reads and writes the
    ``java.library.path`` entry of ``runtime_properties``, so it is emitted
    as a ``-D`` flag like any other property.
    """

    main_entry_point: str | None = None
    memory_limit_megabytes: int = 0
    use_default_memory_limit: bool = True
    environment: dict[str, str] = field(default_factory=dict)
    runtime_properties: dict[str, str] = field(default_factory=dict)
    search_path: str | None = None
    application_arguments: list[str] = field(default_factory=list)

    def __post_init__(self):
        if self.environment is None:
            raise TypeError("environment must be a mapping, not None")
        if self.runtime_properties is None:
            raise TypeError("runtime_properties must be a mapping, not None")
        for key, value in self.runtime_properties.items():
            if value is None:
                raise TypeError(f"runtime property {key!r} has no value")

    @classmethod
    def from_host(cls, host: HostSnapshot | None = None) -> "LaunchConfiguration":
        """Seed a configuration from a host snapshot (taken now if not given)."""
        if host is None:
            host = snapshot()
        config = cls(
            memory_limit_megabytes=host.max_memory_megabytes or 0,
            environment=dict(host.environment),
            search_path=host.class_path,
        )
        config.resource_path = host.library_path
        return config

    def set_memory_limit(self, megabytes: int) -> None:
        """Use an explicit -Xmx. No bounds checking."""
        self.use_default_memory_limit = False
        self.memory_limit_megabytes = megabytes

    def set_property(self, key: str, value: str | None) -> None:
        """Set a runtime property; None removes it."""
        if value is None:
            self.runtime_properties.pop(key, None)
        else:
            self.runtime_properties[key] = value

    @property
    def resource_path(self) -> str | None:
        return self.runtime_properties.get(LIBRARY_PATH_PROPERTY)

    @resource_path.setter
    def resource_path(self, value: str | None) -> None:
        self.set_property(LIBRARY_PATH_PROPERTY, value)

    def prepend_to_search_path(self, head: str) -> None:
        self.search_path = _prepend(head, self.search_path)

    def prepend_to_resource_path(self, head: str) -> None:
        self.resource_path = _prepend(head, self.resource_path)

    def prepend_to_environment(self, key: str, value: str) -> None:
        """Prepend to an environment variable, creating it if missing. Key match is exact."""
        self.environment[key] = _prepend(value, self.environment.get(key))

    def environment_key_case_insensitive(self, key: str) -> str | None:
        """Return the first stored key matching ``key`` ignoring case, or None.

        If two stored keys differ only by case, the first in iteration order wins.
        """
        wanted = key.lower()
        for stored in self.environment:
            if stored.lower() == wanted:
                return stored
        return None

    def prepend_to_environment_case_insensitive(self, key: str, value: str) -> None:
        """Like prepend_to_environment, but reuses an existing key whatever its case."""
        matching = self.environment_key_case_insensitive(key)
        self.prepend_to_environment(matching if matching is not None else key, value)

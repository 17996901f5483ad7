"""Configuration of the agent core, read from TOML."""

from __future__ import annotations

import enum
import tomllib
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any, ClassVar

from amico.errors import ConfigError

ParamValue = Any
Params = dict[str, ParamValue]

_U32_MAX = 2**32 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class WithParams:
    """Mixin giving keyed access to an optional parameter table.

    The attribute holding the table is named by ``params_field``.
    """

    params_field: ClassVar[str] = "params"

    def param(self, key: str) -> ParamValue | None:
        """Return the parameter stored under ``key``, or None."""
        params = getattr(self, self.params_field)
        if params is None:
            return None
        return params.get(key)


class RuntimeConfig(enum.Enum):
    """How the agent runtime is hosted."""

    STANDALONE = "standalone"


@dataclass
class EventConfig:
    """Event settings."""

    expiry_time: int  # seconds


def _field(table: dict[str, Any], key: str) -> Any:
    try:
        return table[key]
    except KeyError:
        raise ConfigError(f"missing field `{key}`") from None


def _integer(value: Any, key: str, low: int, high: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"field `{key}` must be an integer")
    if not low <= value <= high:
        raise ConfigError(f"field `{key}` is out of range")
    return value


def _string(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"field `{key}` must be a string")
    return value


@dataclass
class CoreConfig:
    """Top-level configuration of an agent."""

    VERSION: ClassVar[int] = 0

    name: str
    version: int
    runtime: RuntimeConfig
    plugins: list[str] = field(default_factory=list)
    event_config: EventConfig = field(default_factory=lambda: EventConfig(0))

    @classmethod
    def from_toml_str(cls, s: str) -> CoreConfig:
        """Parse a configuration from TOML text; raise ConfigError if invalid."""
        try:
            doc = tomllib.loads(s)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(str(exc)) from exc

        name = _string(_field(doc, "name"), "name")
        version = _integer(_field(doc, "version"), "version", 0, _U32_MAX)

        runtime_raw = _string(_field(doc, "runtime"), "runtime")
        try:
            runtime = RuntimeConfig(runtime_raw)
        except ValueError:
            raise ConfigError(f"unknown runtime `{runtime_raw}`") from None

        plugins = _field(doc, "plugins")
        if not isinstance(plugins, list):
            raise ConfigError("field `plugins` must be an array")
        plugins = [_string(plugin, "plugins") for plugin in plugins]

        event_table = _field(doc, "event_config")
        if not isinstance(event_table, dict):
            raise ConfigError("field `event_config` must be a table")
        expiry = _integer(
            _field(event_table, "expiry_time"), "expiry_time", _I64_MIN, _I64_MAX
        )

        return cls(
            name=name,
            version=version,
            runtime=runtime,
            plugins=plugins,
            event_config=EventConfig(expiry_time=expiry),
        )

    @classmethod
    def load(cls, path: str | PathLike[str]) -> CoreConfig:
        """Read and parse a configuration file."""
        return cls.from_toml_str(Path(path).read_text(encoding="utf-8"))
"""Server configuration loaded from a TOML file."""

import tomllib
from dataclasses import dataclass, field, fields
from typing import Any

__all__ = [
    "ConfigError",
    "DbConfig",
    "LoginConfig",
    "WorldConfig",
    "ChannelConfig",
    "FullConfig",
    "load_config",
    "login_config_from_file",
    "world_config_from_file",
    "channel_config_from_file",
]

_INT64 = (-(1 << 63), (1 << 63) - 1)
_BYTE = {"range": (0, 255)}
_INT16 = {"range": (-(1 << 15), (1 << 15) - 1)}


class ConfigError(ValueError):
    """The configuration file could not be decoded."""


@dataclass
class DbConfig:
    address: str = ""
    port: str = ""
    user: str = ""
    password: str = ""
    database: str = ""


@dataclass
class LoginConfig:
    client_listen_address: str = ""
    client_listen_port: str = ""
    server_listen_address: str = ""
    server_listen_port: str = ""
    packet_queue_size: int = 0
    latency: int = 0
    jitter: int = 0


@dataclass
class WorldConfig:
    message: str = ""
    ribbon: int = field(default=0, metadata=_BYTE)
    login_address: str = ""
    login_port: str = ""
    listen_address: str = ""
    listen_port: str = ""
    packet_queue_size: int = 0


@dataclass
class ChannelConfig:
    world_address: str = ""
    world_port: str = ""
    listen_address: str = ""
    client_connection_address: str = ""
    listen_port: str = ""
    packet_queue_size: int = 0
    max_pop: int = field(default=0, metadata=_INT16)
    latency: int = 0
    jitter: int = 0


@dataclass
class FullConfig:
    database: DbConfig = field(default_factory=DbConfig)
    login: LoginConfig = field(default_factory=LoginConfig)
    world: WorldConfig = field(default_factory=WorldConfig)
    channel: ChannelConfig = field(default_factory=ChannelConfig)


def _normalise(key: str) -> str:
    return key.replace("_", "").lower()


def _build(cls: type, table: Any, section: str) -> Any:
    if not isinstance(table, dict):
        raise ConfigError(f"section {section!r} must be a table")
    lookup = {_normalise(key): value for key, value in table.items()}
    values = {}
    for spec in fields(cls):
        key = _normalise(spec.name)
        if key not in lookup:
            continue
        value = lookup[key]
        if spec.type is str:
            if not isinstance(value, str):
                raise ConfigError(f"{section}.{spec.name} must be a string, got {value!r}")
        elif spec.type is int:
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{section}.{spec.name} must be an integer, got {value!r}")
            low, high = spec.metadata.get("range", _INT64)
            if not low <= value <= high:
                raise ConfigError(f"{section}.{spec.name} is out of range: {value}")
        values[spec.name] = value
    return cls(**values)


def load_config(path) -> FullConfig:
    """Read every section of a configuration file."""
    with open(path, "rb") as handle:
        try:
            data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"{path}: {exc}") from exc
    sections = {_normalise(key): value for key, value in data.items()}
    parts = {}
    for spec in fields(FullConfig):
        table = sections.get(_normalise(spec.name), {})
        parts[spec.name] = _build(spec.default_factory().__class__, table, spec.name)
    return FullConfig(**parts)


def login_config_from_file(path) -> tuple[LoginConfig, DbConfig]:
    config = load_config(path)
    return config.login, config.database


def world_config_from_file(path) -> tuple[WorldConfig, DbConfig]:
    config = load_config(path)
    return config.world, config.database


def channel_config_from_file(path) -> tuple[ChannelConfig, DbConfig]:
    config = load_config(path)
    return config.channel, config.database
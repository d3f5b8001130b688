"""Configuration of the external systems the application talks to."""

from __future__ import annotations

from dataclasses import dataclass, field


class ConfigError(ValueError):
    """Raised when a configuration is invalid."""


@dataclass
class RedisConfig:
    """Information necessary for connecting to Redis."""

    host: str = ""
    port: int = 0
    # Several passwords may be given to make password changes easier.
    password: list[str] = field(default_factory=list)
    enabled: bool = False

    def validate(self) -> None:
        """Raise ConfigError unless the configuration is usable."""
        if not self.enabled:
            return
        if not self.host:
            raise ConfigError("redis host is required")
        if self.port == 0:
            raise ConfigError("redis port is required")

    def server(self) -> str:
        """Return the host-port pair for the connection."""
        return f"{self.host}:{self.port}"


@dataclass
class JaegerConfig:
    """Information necessary for sending traces to Jaeger."""

    collector_endpoint: str = ""
    agent_endpoint: str = ""
    username: str = ""
    password: str = ""
    service_name: str = ""

    def validate(self) -> None:
        """Raise ConfigError unless an endpoint is configured."""
        if not self.collector_endpoint and not self.agent_endpoint:
            raise ConfigError("either collector endpoint or agent endpoint must be configured")


@dataclass
class PrometheusConfig:
    """Information for configuring the Prometheus exporter."""

    namespace: str = ""

    def validate(self) -> None:
        """Raise ConfigError if the namespace is not a string; any string is accepted."""
        if not isinstance(self.namespace, str):
            raise ConfigError("prometheus namespace must be a string")


@dataclass
class CassandraConfig:
    """Cassandra related configuration."""

    enabled: bool = False
    hosts: list[str] = field(default_factory=list)
    port: int = 0
    keyspace: str = ""
    table: str = ""
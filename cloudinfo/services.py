"""Access to the services supported by a provider."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from cloudinfo import types


class ServiceStore(ABC):
    """Retrieves services."""

    @abstractmethod
    def get_services(self, provider: str) -> list[types.Service]:
        """Return the supported services for a provider."""


@dataclass
class InMemoryServiceStore(ServiceStore):
    """Keeps services in memory; meant for tests and demos."""

    services: dict[str, list[types.Service]] = field(default_factory=dict)

    def get_services(self, provider: str) -> list[types.Service]:
        return self.services.get(provider, [])


@dataclass
class Service:
    """A single service offered by a provider."""

    code: str
    provider_name: str = ""


class ServiceListError(Exception):
    """Raised when services cannot be listed."""


class ServiceService:
    """Lists the services supported by a provider."""

    def __init__(self, store: ServiceStore) -> None:
        self.store = store

    def list_services(self, provider: str) -> list[Service]:
        try:
            cloud_services = self.store.get_services(provider)
        except Exception as exc:
            raise ServiceListError("failed to list services") from exc
        return [Service(code=s.service, provider_name=provider) for s in cloud_services or []]
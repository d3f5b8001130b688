"""Access to the regions and zones supported by a service."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class RegionStore(ABC):
    """Retrieves regions and zones."""

    @abstractmethod
    def get_regions(self, provider: str, service: str) -> dict[str, str]:
        """Return the supported regions (code to name) for a service."""

    @abstractmethod
    def get_zones(self, provider: str, service: str, region: str) -> list[str]:
        """Return the supported zones within a region."""


@dataclass
class InMemoryRegionStore(RegionStore):
    """Keeps regions and zones in memory; meant for tests and demos."""

    regions: dict[str, dict[str, dict[str, str]]] = field(default_factory=dict)
    zones: dict[str, dict[str, dict[str, list[str]]]] = field(default_factory=dict)

    def get_regions(self, provider: str, service: str) -> dict[str, str]:
        return self.regions.get(provider, {}).get(service, {})

    def get_zones(self, provider: str, service: str, region: str) -> list[str]:
        return self.zones.get(provider, {}).get(service, {}).get(region, [])


@dataclass
class Region:
    """A general area in which a provider has services available."""

    code: str
    name: str
    provider_name: str = ""
    service_name: str = ""


@dataclass
class Zone:
    """A specific location within a region."""

    code: str


class RegionServiceError(Exception):
    """Raised when regions or zones cannot be listed."""

    def __init__(self, message: str, **details: str) -> None:
        super().__init__(message)
        self.details = details
        for key, value in details.items():
            setattr(self, key, value)


class RegionService:
    """Lists the regions and zones supported by a service."""

    def __init__(self, store: RegionStore) -> None:
        self.store = store

    def list_regions(self, provider: str, service: str) -> list[Region]:
        try:
            cloud_regions = self.store.get_regions(provider, service)
        except Exception as exc:
            raise RegionServiceError("failed to list regions") from exc
        return [
            Region(code=code, name=name, provider_name=provider, service_name=service)
            for code, name in (cloud_regions or {}).items()
        ]

    def list_zones(self, provider: str, service: str, region: str) -> list[Zone]:
        try:
            cloud_zones = self.store.get_zones(provider, service, region)
        except Exception as exc:
            raise RegionServiceError(
                "failed to list zones", provider=provider, service=service, region=region
            ) from exc
        return [Zone(code=code) for code in cloud_zones or []]
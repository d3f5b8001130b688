"""Storage interface for cloud information and its cache key layout."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO

from cloudinfo.types import Image, LocationVersion, Price, Service, VMInfo

VM_KEY_TEMPLATE = "/banzaicloud.com/cloudinfo/providers/%s/services/%s/regions/%s/vms"
PRICE_KEY_TEMPLATE = "/banzaicloud.com/cloudinfo/providers/%s/regions/%s/prices/%s"
ZONE_KEY_TEMPLATE = "/banzaicloud.com/cloudinfo/providers/%s/services/%s/regions/%s/zones/"
REGION_KEY_TEMPLATE = "/banzaicloud.com/cloudinfo/providers/%s/services/%s/regions/"
STATUS_KEY_TEMPLATE = "/banzaicloud.com/cloudinfo/providers/%s/status/"
IMAGE_KEY_TEMPLATE = "/banzaicloud.com/cloudinfo/providers/%s/services/%s/regions/%s/images"
VERSION_KEY_TEMPLATE = "/banzaicloud.com/cloudinfo/providers/%s/services/%s/regions/%s/versions"
SERVICES_KEY_TEMPLATE = "/banzaicloud.com/cloudinfo/providers/%s/services"


def vm_key(provider: str, service: str, region: str) -> str:
    return VM_KEY_TEMPLATE % (provider, service, region)


def price_key(provider: str, region: str, instance_type: str) -> str:
    return PRICE_KEY_TEMPLATE % (provider, region, instance_type)


def zone_key(provider: str, service: str, region: str) -> str:
    return ZONE_KEY_TEMPLATE % (provider, service, region)


def region_key(provider: str, service: str) -> str:
    return REGION_KEY_TEMPLATE % (provider, service)


def status_key(provider: str) -> str:
    return STATUS_KEY_TEMPLATE % provider


def image_key(provider: str, service: str, region: str) -> str:
    return IMAGE_KEY_TEMPLATE % (provider, service, region)


def version_key(provider: str, service: str, region: str) -> str:
    return VERSION_KEY_TEMPLATE % (provider, service, region)


def services_key(provider: str) -> str:
    return SERVICES_KEY_TEMPLATE % provider


class CloudInfoStore(ABC):
    """Storage operations for cloud information.

    Getters return None when nothing is stored under the key.
    """

    @abstractmethod
    def ready(self) -> bool:
        """Whether the store can serve requests."""

    @abstractmethod
    def store_regions(self, provider: str, service: str, regions: dict[str, str]) -> None:
        """Store the regions of a service."""

    @abstractmethod
    def get_regions(self, provider: str, service: str) -> dict[str, str] | None:
        """Return the regions of a service."""

    @abstractmethod
    def delete_regions(self, provider: str, service: str) -> None:
        """Remove the regions of a service."""

    @abstractmethod
    def store_zones(self, provider: str, service: str, region: str, zones: list[str]) -> None:
        """Store the zones of a region."""

    @abstractmethod
    def get_zones(self, provider: str, service: str, region: str) -> list[str] | None:
        """Return the zones of a region."""

    @abstractmethod
    def delete_zones(self, provider: str, service: str, region: str) -> None:
        """Remove the zones of a region."""

    @abstractmethod
    def store_price(self, provider: str, region: str, instance_type: str, price: Price) -> None:
        """Store the price of an instance type."""

    @abstractmethod
    def get_price(self, provider: str, region: str, instance_type: str) -> Price | None:
        """Return the price of an instance type."""

    @abstractmethod
    def store_vm(self, provider: str, service: str, region: str, vms: list[VMInfo]) -> None:
        """Store the virtual machines of a region."""

    @abstractmethod
    def get_vm(self, provider: str, service: str, region: str) -> list[VMInfo] | None:
        """Return the virtual machines of a region."""

    @abstractmethod
    def delete_vm(self, provider: str, service: str, region: str) -> None:
        """Remove the virtual machines of a region."""

    @abstractmethod
    def store_image(self, provider: str, service: str, region: str, images: list[Image]) -> None:
        """Store the images of a region."""

    @abstractmethod
    def get_image(self, provider: str, service: str, region: str) -> list[Image] | None:
        """Return the images of a region."""

    @abstractmethod
    def delete_image(self, provider: str, service: str, region: str) -> None:
        """Remove the images of a region."""

    @abstractmethod
    def store_version(
        self, provider: str, service: str, region: str, versions: list[LocationVersion]
    ) -> None:
        """Store the versions of a region."""

    @abstractmethod
    def get_version(self, provider: str, service: str, region: str) -> list[LocationVersion] | None:
        """Return the versions of a region."""

    @abstractmethod
    def delete_version(self, provider: str, service: str, region: str) -> None:
        """Remove the versions of a region."""

    @abstractmethod
    def store_status(self, provider: str, status: str) -> None:
        """Store the scrape status of a provider."""

    @abstractmethod
    def get_status(self, provider: str) -> str | None:
        """Return the scrape status of a provider."""

    @abstractmethod
    def store_services(self, provider: str, services: list[Service]) -> None:
        """Store the services of a provider."""

    @abstractmethod
    def get_services(self, provider: str) -> list[Service] | None:
        """Return the services of a provider."""

    @abstractmethod
    def export_to(self, stream: BinaryIO) -> None:
        """Write the whole store content to a stream."""

    @abstractmethod
    def import_from(self, stream: BinaryIO) -> None:
        """Load store content from a stream."""

    @abstractmethod
    def close(self) -> None:
        """Release resources held by the store."""
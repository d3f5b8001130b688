"""Core data types describing providers, services, images and virtual machines."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime

MEMORY = "memory"
CPU = "cpu"

NTW_LOW = "low"
NTW_MEDIUM = "medium"
NTW_HIGH = "high"
NTW_EXTRA = "extra"

CATEGORY_GENERAL = "General purpose"
CATEGORY_COMPUTE = "Compute optimized"
CATEGORY_MEMORY = "Memory optimized"
CATEGORY_GPU = "GPU instance"
CATEGORY_STORAGE = "Storage optimized"

CONTINENT_NORTH_AMERICA = "North America"
CONTINENT_SOUTH_AMERICA = "South America"
CONTINENT_EUROPE = "Europe"
CONTINENT_AFRICA = "Africa"
CONTINENT_ASIA = "Asia"
CONTINENT_AUSTRALIA = "Australia"


@dataclass
class ZonePrice:
    """Price of an instance type in one availability zone."""

    zone: str
    price: float


@dataclass
class LocationVersion:
    """Versions available in a location, with the default one."""

    location: str
    versions: list[str] = field(default_factory=list)
    default: str = ""


def new_location_version(location: str, versions: list[str], default: str) -> LocationVersion:
    """Build a LocationVersion; an empty default falls back to the first version."""
    if versions and not default:
        default = versions[0]
    return LocationVersion(location=location, versions=versions, default=default)


@dataclass
class Service:
    """A service supported by a provider."""

    service: str
    is_static: bool = False

    def service_name(self) -> str:
        return self.service


@dataclass
class Provider:
    """A cloud provider and the services it offers."""

    provider: str
    services: list[Service] = field(default_factory=list)

    def provider_name(self) -> str:
        return self.provider


@dataclass
class Image:
    """A machine image."""

    name: str
    creation_date: datetime | None = None
    version: str = ""
    gpu_available: bool = False
    tags: dict[str, str] = field(default_factory=dict)


@dataclass
class Version:
    """A single version string."""

    version: str

    def version_name(self) -> str:
        return self.version


@dataclass
class Region:
    """Identifier and display name of a provider region."""

    id: str
    name: str


@dataclass
class Price:
    """On-demand price and spot prices per availability zone."""

    on_demand_price: float = 0.0
    spot_price: dict[str, float] = field(default_factory=dict)


@dataclass
class VMInfo:
    """Characteristics and prices of a virtual machine type."""

    category: str = ""
    type: str = ""
    on_demand_price: float = 0.0
    spot_price: list[ZonePrice] = field(default_factory=list)
    cpus: float = 0.0
    mem: float = 0.0
    gpus: float = 0.0
    ntw_perf: str = ""
    ntw_perf_cat: str = ""
    zones: list[str] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)
    current_gen: bool = False

    def is_burst(self) -> bool:
        """True when the instance type is a burstable ("T" family) type."""
        return self.type.upper().startswith("T")


@dataclass
class ProductDetails(VMInfo):
    """Extended view of a virtual machine with derived attributes."""

    burst: bool = False


def new_product_details(vm: VMInfo) -> ProductDetails:
    """Wrap a VMInfo into ProductDetails, deriving the burst flag."""
    values = {f.name: getattr(vm, f.name) for f in fields(VMInfo)}
    return ProductDetails(**values, burst=vm.is_burst())
"""Oracle cloud helpers: configuration, ITRA product prices and network mapping."""

from __future__ import annotations

import json
import logging
import urllib.request
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping
from urllib.parse import urlencode

from cloudinfo.types import NTW_EXTRA, NTW_HIGH, NTW_LOW, NTW_MEDIUM


@dataclass
class OracleConfig:
    """Credentials and location used to reach Oracle cloud."""

    tenancy: str = ""
    user: str = ""
    region: str = ""
    fingerprint: str = ""
    private_key: str = ""
    private_key_passphrase: str | None = None
    config_file_path: str = ""
    profile: str = ""


@dataclass
class ITRAPriceInfo:
    """A price under one pricing model."""

    model: str
    value: float


@dataclass
class ITRACloudInfo:
    """Product information with its prices."""

    part_number: str
    prices: list[ITRAPriceInfo] = field(default_factory=list)

    def get_price(self, model: str) -> float:
        """Return the price of the given model, or 0 when there is none."""
        return next((price.value for price in self.prices if price.model == model), 0.0)


@dataclass
class ITRAResponse:
    """Response of an ITRA product info request."""

    items: list[ITRACloudInfo] = field(default_factory=list)
    link: str = ""
    has_more: bool = False
    limit: int = 0
    offset: int = 0

    @classmethod
    def from_json(cls, data: str | bytes | Mapping[str, Any]) -> "ITRAResponse":
        """Build a response from a JSON document or its decoded mapping."""
        if isinstance(data, (str, bytes, bytearray)):
            data = json.loads(data)
        items = [
            ITRACloudInfo(
                part_number=item.get("partNumber", ""),
                prices=[
                    ITRAPriceInfo(model=price.get("model", ""), value=float(price.get("value", 0)))
                    for price in item.get("prices") or []
                ],
            )
            for item in data.get("items") or []
        ]
        return cls(
            items=items,
            link=data.get("canonicalLink", ""),
            has_more=bool(data.get("hasMore", False)),
            limit=int(data.get("limit", 0)),
            offset=int(data.get("offset", 0)),
        )


class ITRAError(Exception):
    """Raised when product information cannot be retrieved."""

    def __init__(self, message: str, part_number: str) -> None:
        super().__init__(message)
        self.part_number = part_number


def _http_get(url: str) -> bytes:
    with urllib.request.urlopen(url) as response:
        return response.read()


class ITRAClient:
    """Retrieves product information by part number, caching the answers."""

    def __init__(
        self,
        base_url: str,
        fetch: Callable[[str], bytes | str] | None = None,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> None:
        self.base_url = base_url
        self._fetch = fetch or _http_get
        self._cache: dict[str, ITRACloudInfo] = {}
        self.log = logger or logging.getLogger(__name__)

    def get_cloud_info(self, part_number: str) -> ITRACloudInfo:
        """Return the product information of a part number."""
        cached = self._cache.get(part_number)
        if cached is not None:
            self.log.debug("getting product info for part number - from cache", extra={"PN": part_number})
            return cached

        self.log.debug("getting product info", extra={"PN": part_number})
        url = f"{self.base_url}?{urlencode({'partNumber': part_number})}"
        try:
            body = self._fetch(url)
        except OSError as exc:
            raise ITRAError(f"failed to retrieve product information: {exc}", part_number) from exc

        try:
            response = ITRAResponse.from_json(body)
        except (ValueError, TypeError, AttributeError) as exc:
            raise ITRAError(f"invalid product information: {exc}", part_number) from exc

        if not response.items:
            raise ITRAError("no product information was found", part_number)

        self._cache[part_number] = response.items[0]
        return response.items[0]


_NTW_PERF_MAP: dict[str, tuple[str, ...]] = {
    NTW_LOW: ("0.6 Gbps", "0.7 Gbps"),
    NTW_MEDIUM: ("1 Gbps", "1.2 Gbps", "1.4 Gbps", "2 Gbps", "2.4 Gbps"),
    NTW_HIGH: ("4.1 Gbps", "4.8 Gbps", "8.2 Gbps"),
    NTW_EXTRA: ("16.4 Gbps", "24.6 Gbps"),
}


def contains(values: Iterable[str], value: str) -> bool:
    """Return whether the value is among the values."""
    return value in values


class NetworkPerfError(ValueError):
    """Raised when a network performance has no category."""


class OCINetworkMapper:
    """Maps Oracle network performance values to categories."""

    def map_network_perf(self, ntw_perf: str) -> str:
        for category, values in _NTW_PERF_MAP.items():
            if contains(values, ntw_perf):
                return category
        raise NetworkPerfError(f"could not determine network performance: {ntw_perf}")


class Strings:
    """An immutable sequence of strings with a membership check."""

    def __init__(self, strings: Iterable[str] = ()) -> None:
        self._strings = list(strings)

    def has(self, value: str) -> bool:
        return value in self._strings

    def get(self) -> list[str]:
        return list(self._strings)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Strings) and self._strings == other._strings

    def __repr__(self) -> str:
        return f"Strings({self._strings!r})"


@dataclass
class NodePoolOptions:
    """Node pool options of a container engine cluster."""

    images: Strings = field(default_factory=Strings)
    kubernetes_versions: Strings = field(default_factory=Strings)
    shapes: Strings = field(default_factory=Strings)
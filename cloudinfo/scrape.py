"""Periodic renewal of provider information into the cloud info store."""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from typing import Any, Iterable, Mapping, Protocol

from cloudinfo.store import CloudInfoStore
from cloudinfo.types import Image, LocationVersion, Price, Service, VMInfo

_NA = "N/A"


class _CloudInfoer(Protocol):
    """What a provider-specific information source offers."""

    def initialize(self) -> Mapping[str, Mapping[str, Price]]: ...

    def get_products(self, vms: list[VMInfo] | None, service: str, region: str) -> list[VMInfo]: ...

    def has_images(self) -> bool: ...

    def get_service_images(self, service: str, region: str) -> list[Image]: ...

    def get_versions(self, service: str, region: str) -> list[LocationVersion]: ...

    def get_zones(self, region: str) -> list[str]: ...

    def get_regions(self, service: str) -> Mapping[str, str]: ...

    def get_current_prices(self, region: str) -> Mapping[str, Price]: ...

    def has_short_lived_price_info(self) -> bool: ...


class _LoggingErrorHandler:
    def __init__(self, logger: logging.Logger | logging.LoggerAdapter) -> None:
        self._logger = logger

    def handle(self, err: BaseException) -> None:
        self._logger.error("%s", err, exc_info=err)


class _FieldsAdapter(logging.LoggerAdapter):
    """Logger adapter that merges its own fields with per-call extras."""

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def _bind(logger: logging.Logger | logging.LoggerAdapter, **fields: Any) -> _FieldsAdapter:
    if isinstance(logger, logging.LoggerAdapter):
        base_fields = dict(logger.extra or {})
        return _FieldsAdapter(logger.logger, {**base_fields, **fields})
    return _FieldsAdapter(logger, fields)


class ScrapeError(Exception):
    """Raised when scraping provider information fails."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.details = details

    @classmethod
    def wrap(cls, err: BaseException, message: str | None = None, **details: Any) -> "ScrapeError":
        """Build an error from another one, keeping its details and adding new ones."""
        text = f"{message}: {err}" if message else str(err)
        merged = {**getattr(err, "details", {}), **details}
        return cls(text, **merged)


class ScrapingManager:
    """Retrieves information of one provider and keeps the store up to date."""

    def __init__(
        self,
        provider: str,
        infoer: _CloudInfoer,
        store: CloudInfoStore,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
        metrics: Any = None,
        event_bus: Any = None,
        error_handler: Any = None,
    ) -> None:
        self.provider = provider
        self.infoer = infoer
        self.store = store
        self.log = _bind(
            logger or logging.getLogger(__name__),
            component="scraping-manager",
            provider=provider,
        )
        self.metrics = metrics
        self.event_bus = event_bus
        self.error_handler = error_handler or _LoggingErrorHandler(self.log)

    def _report(self, method: str, *args: Any) -> None:
        """Forward a measurement to the metrics reporter, if one is configured."""
        if self.metrics is not None:
            getattr(self.metrics, method)(*args)

    def initialize(self) -> None:
        """Load the initial price information of the provider."""
        self.log.info("initializing cloud product information")
        try:
            prices = self.infoer.initialize()
        except Exception as err:
            self.log.error("failed to initialize cloud product information")
            self.error_handler.handle(err)
            return

        for region, region_prices in (prices or {}).items():
            for instance_type, price in region_prices.items():
                self.store.store_price(self.provider, region, instance_type, price)
                self._report(
                    "set_on_demand_price", self.provider, region, instance_type, price.on_demand_price
                )
        self.log.info("finished initializing cloud product information")

    def scrape_service_region_products(self, service: str, region_id: str) -> None:
        """Scrape the virtual machines of a service in a region."""
        logger = _bind(self.log, service=service, region=region_id)
        logger.debug("retrieving regional product information")
        vms = self.store.get_vm(self.provider, service, region_id)
        if vms is None:
            logger.debug("VMs not yet cached, proceeding to scraping them...")

        try:
            values = self.infoer.get_products(vms, service, region_id)
        except Exception as err:
            raise ScrapeError.wrap(err, "failed to retrieve products for region") from err

        for vm in values:
            if vm.on_demand_price > 0:
                self._report("set_on_demand_price", self.provider, region_id, vm.type, vm.on_demand_price)

        self.store.store_vm(self.provider, service, region_id, values)
        self.update_virtual_machines(service, region_id)

    def scrape_service_region_images(self, service: str, region_id: str) -> None:
        """Scrape the images of a service in a region, if the provider has any."""
        if not self.infoer.has_images():
            return
        self.log.debug(
            "retrieving regional image information", extra={"service": service, "region": region_id}
        )
        try:
            images = self.infoer.get_service_images(service, region_id)
        except Exception as err:
            raise ScrapeError.wrap(err, "failed to retrieve service images for region") from err

        self.store.delete_image(self.provider, service, region_id)
        self.store.store_image(self.provider, service, region_id, images)

    def scrape_service_region_versions(self, service: str, region_id: str) -> None:
        """Scrape the versions of a service in a region."""
        try:
            versions = self.infoer.get_versions(service, region_id)
        except Exception as err:
            raise ScrapeError.wrap(err, "failed to retrieve service versions for region") from err

        self.store.delete_version(self.provider, service, region_id)
        self.store.store_version(self.provider, service, region_id, versions)

    def scrape_service_region_zones(self, service: str, region: str) -> None:
        """Scrape the zones of a region."""
        try:
            zones = self.infoer.get_zones(region)
        except Exception as err:
            raise ScrapeError.wrap(err, "failed to retrieve zones for region") from err

        self.store.delete_zones(self.provider, service, region)
        self.store.store_zones(self.provider, service, region, zones)

    def scrape_service_region_info(self, services: Iterable[Service]) -> None:
        """Scrape region dependent information of every service.

        Failures in single regions are logged and the scrape goes on; the last
        such failure is raised once all services were processed.
        """
        last_error: ScrapeError | None = None
        steps = (
            (self.scrape_service_region_zones, "failed to scrape zones for region", False),
            (self.scrape_service_region_products, "failed to scrape products for region", True),
            (self.scrape_service_region_images, "failed to scrape images for region", True),
            (self.scrape_service_region_versions, "failed to scrape versions for region", True),
        )

        for service in services:
            name = service.service_name()
            self.log.info("start to scrape service region information", extra={"service": name})

            if service.is_static:
                try:
                    self.scrape_pke_images(service)
                except Exception as err:
                    self.error_handler.handle(err)
                self.log.info(
                    "service is static, skip scraping for region information", extra={"service": name}
                )
                continue

            try:
                regions = self.infoer.get_regions(name)
            except Exception as err:
                self._report("report_scrape_failure", self.provider, name, _NA)
                raise ScrapeError.wrap(err, "failed to retrieve regions", service=name) from err

            self.store.delete_regions(self.provider, name)
            self.store.store_regions(self.provider, name, regions)

            for region_id in regions:
                start = time.monotonic()
                for step, message, report in steps:
                    try:
                        step(name, region_id)
                    except ScrapeError as err:
                        if report:
                            self._report("report_scrape_failure", self.provider, name, region_id)
                        last_error = ScrapeError.wrap(
                            err, provider=self.provider, service=name, region=region_id
                        )
                        self.log.error(message, extra={"error": str(last_error), "region": region_id})
                        break
                else:
                    self._report("report_scrape_region_completed", self.provider, name, region_id, start)

        if last_error is not None:
            raise last_error

    def update_status(self) -> None:
        """Store the current time in milliseconds as the provider's status."""
        value = str(time.time_ns() // 1_000_000)
        self.log.info("updating status for provider")
        self.store.store_status(self.provider, value)

    def scrape_service_information(self) -> None:
        """Scrape service and region dependent information and store it."""
        services = self.store.get_services(self.provider)
        if services is None:
            self._report("report_scrape_failure", self.provider, _NA, _NA)
            self.log.error("failed to retrieve services")
            return

        try:
            self.scrape_service_region_info(services)
        except Exception as err:
            self.log.error("failed to load service region information")
            self.error_handler.handle(err)
            return

        self.update_status()

    def scrape_prices_in_region(self, region: str) -> None:
        """Scrape the current (short lived) prices in a region."""
        start = time.monotonic()
        prices: Mapping[str, Price] = {}
        try:
            prices = self.infoer.get_current_prices(region) or {}
        except Exception as err:
            self._report("report_scrape_short_lived_failure", self.provider, region)
            self.log.error("failed to scrape spot prices in region")
            self.error_handler.handle(err)

        for instance_type, price in prices.items():
            self.store.store_price(self.provider, region, instance_type, price)

        self._report("report_scrape_region_short_lived_completed", self.provider, region, start)

    def scrape_prices_in_all_regions(self) -> None:
        """Scrape current prices in every compute region concurrently."""
        self.log.info("start scraping prices")
        start = time.monotonic()
        regions: Mapping[str, str] = {}
        try:
            regions = self.infoer.get_regions("compute") or {}
        except Exception as err:
            self.log.error("failed to retrieve regions")
            self.error_handler.handle(err)

        if regions:
            with ThreadPoolExecutor(max_workers=len(regions)) as pool:
                list(pool.map(self.scrape_prices_in_region, regions))

        self._report("report_scrape_provider_short_lived_completed", self.provider, start)

    def update_virtual_machines(self, service: str, region: str) -> None:
        """Apply stored prices to cached virtual machines, dropping unpriced ones."""
        vms = self.store.get_vm(self.provider, service, region)
        if vms is None:
            self.log.debug("VMs not yet cached, update suspended")
            raise ScrapeError(
                "VMs not yet cached", provider=self.provider, service=service, region=region
            )

        updated: list[VMInfo] = []
        for vm in vms:
            price = self.store.get_price(self.provider, region, vm.type)
            if price is not None and price.on_demand_price > 0:
                vm = replace(vm, on_demand_price=price.on_demand_price)
            if vm.on_demand_price != 0:
                updated.append(vm)

        self.store.delete_vm(self.provider, service, region)
        self.store.store_vm(self.provider, service, region, updated)

    def scrape(self) -> None:
        """Run a full scrape of the provider and announce its completion."""
        self.log.info("start scraping for provider information")
        start = time.monotonic()

        self.initialize()
        self.scrape_service_information()

        if self.event_bus is not None:
            self.event_bus.publish_scraping_complete(self.provider)
        self._report("report_scrape_provider_completed", self.provider, start)

    def scrape_pke_images(self, service: Service) -> None:
        """Scrape images of the static "pke" service in every region."""
        name = service.service_name()
        if name != "pke":
            return

        try:
            regions = self.infoer.get_regions(name)
        except Exception as err:
            self._report("report_scrape_failure", self.provider, name, _NA)
            raise ScrapeError.wrap(err, "failed to retrieve regions", service=name) from err

        for region_id in regions:
            try:
                self.scrape_service_region_images(name, region_id)
            except ScrapeError as err:
                self._report("report_scrape_failure", self.provider, name, region_id)
                raise ScrapeError.wrap(
                    err, provider=self.provider, service=name, region=region_id
                ) from err


class ScrapingDriver:
    """Drives scraping of every configured provider."""

    def __init__(
        self,
        renewal_interval: float,
        infoers: Mapping[str, _CloudInfoer],
        store: CloudInfoStore,
        event_bus: Any = None,
        metrics: Any = None,
        error_handler: Any = None,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> None:
        base_logger = logger or logging.getLogger(__name__)
        self.scraping_managers = [
            ScrapingManager(provider, infoer, store, base_logger, metrics, event_bus, error_handler)
            for provider, infoer in infoers.items()
        ]
        self.renewal_interval = renewal_interval
        self.error_handler = error_handler
        self.log = _bind(base_logger, component="scraping-driver")

    @staticmethod
    def _spawn(target: Any) -> threading.Thread:
        thread = threading.Thread(target=target, daemon=True)
        thread.start()
        return thread

    def renew_all(self) -> list[threading.Thread]:
        """Start a full scrape of every provider in the background."""
        return [self._spawn(manager.scrape) for manager in self.scraping_managers]

    def renew_short_lived(self) -> list[threading.Thread]:
        """Start scraping current prices of providers that have short lived prices."""
        threads = []
        for manager in self.scraping_managers:
            if not manager.infoer.has_short_lived_price_info():
                manager.log.debug("skip scraping for short lived prices (not applicable for provider)")
                continue
            threads.append(self._spawn(manager.scrape_prices_in_all_regions))
        return threads

    def refresh_provider(self, provider: str) -> None:
        """Scrape the given provider right away."""
        for manager in self.scraping_managers:
            if manager.provider == provider:
                manager.scrape()
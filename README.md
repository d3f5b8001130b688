# cloudinfo

Building blocks for collecting cloud provider product information: virtual
machine types, prices, regions, zones, images and versions. The package has
no dependencies outside the standard library.

## Modules

- `cloudinfo.types`: the data model as dataclasses: `VMInfo` (with
  `is_burst()`, true for types starting with "T"), `ProductDetails`, `Price`,
  `ZonePrice`, `Service`, `Provider`, `Image`, `Version`, `Region` and
  `LocationVersion`. `new_location_version()` falls back to the first version
  when no default is given; `new_product_details()` derives the `burst` flag.
- `cloudinfo.query`: `FloatFilter` and `IntFilter` with the optional
  operators `lt`, `lte`, `gt`, `gte`, `eq`, `ne`, `in_` and `nin`;
  `matches(value)`, or `apply_float_filter()` / `apply_int_filter()`, tells
  whether a value passes every operator that is set.
- `cloudinfo.regions`: `RegionService.list_regions()` and `list_zones()` over
  a `RegionStore`; `InMemoryRegionStore` for tests and demos. Store failures
  are raised as `RegionServiceError`.
- `cloudinfo.services`: `ServiceService.list_services()` over a
  `ServiceStore`; `InMemoryServiceStore` for tests and demos. Store failures
  are raised as `ServiceListError`.
- `cloudinfo.store`: the abstract `CloudInfoStore` interface and cache key
  helpers (`vm_key`, `price_key`, `zone_key`, `region_key`, `status_key`,
  `image_key`, `version_key`, `services_key`).
- `cloudinfo.scrape`: `ScrapingManager` pulls prices, regions, zones,
  products, images and versions of one provider from an information source
  and writes them into a `CloudInfoStore`; `ScrapingDriver` runs managers for
  several providers (`renew_all()`, `renew_short_lived()` start background
  threads, `refresh_provider()` scrapes one provider right away). Failures are
  raised as `ScrapeError`, with details in its `details` attribute. Metrics
  reporter and event bus are optional objects called by method name.
- `cloudinfo.configs`: `RedisConfig` (`validate()`, `server()`),
  `JaegerConfig`, `PrometheusConfig` and `CassandraConfig`; invalid settings
  raise `ConfigError`.
- `cloudinfo.logs`: `LogConfig`, `new_logger()` (logfmt or JSON to standard
  output), `with_fields()`, `to_map()` and `set_standard_logger()`.
- `cloudinfo.errorhandler`: `LoggingErrorHandler` logs errors with their
  details; `PanicHandler` raises them.
- `cloudinfo.buildinfo`: `BuildInfo` and `new_build_info()`, filled in with
  details of the running interpreter; `fields()` gives log context fields.
- `cloudinfo.oracle`: `OracleConfig`, `ITRAClient` (cached price lookups by
  part number, raising `ITRAError`), `ITRAResponse.from_json()`,
  `ITRACloudInfo.get_price()`, `OCINetworkMapper.map_network_perf()`
  (raising `NetworkPerfError`), `Strings` and `NodePoolOptions`.

## Installation

```
pip install .
```

## Examples

```python
from cloudinfo.regions import InMemoryRegionStore, RegionService

store = InMemoryRegionStore()
store.regions = {"amazon": {"compute": {"eu-west-1": "EU (Ireland)"}}}

for region in RegionService(store).list_regions("amazon", "compute"):
    print(region.code, region.name)
```

```python
from cloudinfo.query import FloatFilter

cheap = FloatFilter(lte=0.5)
cheap.matches(0.25)   # True
cheap.matches(1.0)    # False
```

```python
from cloudinfo.configs import RedisConfig

config = RedisConfig(host="127.0.0.1", port=6379, enabled=True)
config.validate()
print(config.server())  # 127.0.0.1:6379
```

```python
from cloudinfo.oracle import OCINetworkMapper

OCINetworkMapper().map_network_perf("1 Gbps")  # "medium"
```

## What the package does not do

- There is no command and no HTTP or GraphQL server; the package is a library.
- `CloudInfoStore` is an interface only: no Redis, Cassandra or other
  persistent store implementation is included.
- No provider information sources are included; `ScrapingManager` needs an
  object you supply with methods such as `initialize`, `get_regions`,
  `get_products` and `get_current_prices`. The Oracle module holds only helpers.
- `ScrapingDriver` keeps a `renewal_interval` but does not schedule runs
  itself; call `renew_all()` and `renew_short_lived()` from your own timer.
- The configuration classes only validate settings; they open no connections
  and create no exporters.

## Running the tests

```
pip install .[test]
pytest
```
import pytest

from cloudinfo.regions import (
    InMemoryRegionStore,
    Region,
    RegionService,
    RegionServiceError,
    RegionStore,
    Zone,
)


class _FailingStore(RegionStore):
    def get_regions(self, provider, service):
        raise RuntimeError("boom")

    def get_zones(self, provider, service, region):
        raise RuntimeError("boom")


def test_list_regions():
    store = InMemoryRegionStore()
    store.regions = {"amazon": {"compute": {"eu-west-1": "EU (Ireland)"}}}
    service = RegionService(store)

    regions = service.list_regions("amazon", "compute")

    assert regions == [
        Region(code="eu-west-1", name="EU (Ireland)", provider_name="amazon", service_name="compute")
    ]


def test_list_zones():
    store = InMemoryRegionStore()
    store.zones = {
        "amazon": {"compute": {"eu-west-1": ["eu-west-1a", "eu-west-1b", "eu-west-1c"]}}
    }
    service = RegionService(store)

    zones = service.list_zones("amazon", "compute", "eu-west-1")

    assert zones == [Zone(code="eu-west-1a"), Zone(code="eu-west-1b"), Zone(code="eu-west-1c")]


def test_unknown_provider_gives_empty_lists():
    service = RegionService(InMemoryRegionStore())
    assert service.list_regions("amazon", "compute") == []
    assert service.list_zones("amazon", "compute", "eu-west-1") == []


def test_list_regions_wraps_store_error():
    service = RegionService(_FailingStore())
    with pytest.raises(RegionServiceError, match="failed to list regions") as info:
        service.list_regions("amazon", "compute")
    assert isinstance(info.value.__cause__, RuntimeError)


def test_list_zones_wraps_store_error_with_details():
    service = RegionService(_FailingStore())
    with pytest.raises(RegionServiceError, match="failed to list zones") as info:
        service.list_zones("amazon", "compute", "eu-west-1")
    assert info.value.details == {
        "provider": "amazon",
        "service": "compute",
        "region": "eu-west-1",
    }
    assert info.value.region == "eu-west-1"
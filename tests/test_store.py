import pytest

from cloudinfo.store import (
    CloudInfoStore,
    image_key,
    price_key,
    region_key,
    services_key,
    status_key,
    version_key,
    vm_key,
    zone_key,
)

PREFIX = "/banzaicloud.com/cloudinfo/providers/"


def test_vm_key_pinned():
    assert vm_key("amazon", "compute", "eu-west-1") == (
        "/banzaicloud.com/cloudinfo/providers/amazon/services/compute/regions/eu-west-1/vms"
    )


def test_services_key_pinned():
    assert services_key("amazon") == "/banzaicloud.com/cloudinfo/providers/amazon/services"


@pytest.mark.parametrize(
    "key, parts, suffix",
    [
        (price_key("amazon", "eu-west-1", "m5.large"), ["amazon", "eu-west-1", "m5.large"], "m5.large"),
        (zone_key("amazon", "compute", "eu-west-1"), ["amazon", "compute", "eu-west-1"], "/zones/"),
        (region_key("amazon", "compute"), ["amazon", "compute"], "/regions/"),
        (status_key("amazon"), ["amazon"], "/status/"),
        (image_key("amazon", "compute", "eu-west-1"), ["amazon", "compute", "eu-west-1"], "/images"),
        (version_key("amazon", "compute", "eu-west-1"), ["amazon", "compute", "eu-west-1"], "/versions"),
    ],
)
def test_keys_share_prefix_and_contain_parts(key, parts, suffix):
    assert key.startswith(PREFIX)
    assert key.endswith(suffix)
    for part in parts:
        assert f"/{part}" in key


def test_keys_differ_per_region():
    assert vm_key("amazon", "compute", "a") != vm_key("amazon", "compute", "b")
    assert region_key("amazon", "compute") == zone_key("amazon", "compute", "x")[: len(region_key("amazon", "compute"))]


def test_store_interface_is_abstract():
    with pytest.raises(TypeError):
        CloudInfoStore()
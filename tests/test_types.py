from cloudinfo.types import (
    CATEGORY_GENERAL,
    Image,
    Price,
    ProductDetails,
    Provider,
    Service,
    Version,
    VMInfo,
    ZonePrice,
    new_location_version,
    new_product_details,
)


def test_location_version_defaults_to_first_version():
    lv = new_location_version("eu-west-1", ["1.15", "1.14"], "")
    assert lv.default == "1.15"
    assert lv.versions == ["1.15", "1.14"]
    assert lv.location == "eu-west-1"


def test_location_version_keeps_explicit_default():
    lv = new_location_version("eu-west-1", ["1.15", "1.14"], "1.14")
    assert lv.default == "1.14"


def test_location_version_without_versions_has_empty_default():
    lv = new_location_version("eu-west-1", [], "")
    assert lv.default == ""
    assert lv.versions == []


def test_is_burst_depends_on_type_prefix():
    assert VMInfo(type="t2.micro").is_burst() is True
    assert VMInfo(type="T3.large").is_burst() is True
    assert VMInfo(type="m5.large").is_burst() is False
    assert VMInfo().is_burst() is False


def test_new_product_details_copies_vm_and_sets_burst():
    vm = VMInfo(
        category=CATEGORY_GENERAL,
        type="t2.small",
        on_demand_price=0.5,
        spot_price=[ZonePrice("eu-west-1a", 0.2)],
        cpus=1,
        mem=2,
        zones=["eu-west-1a"],
    )
    pd = new_product_details(vm)
    assert isinstance(pd, ProductDetails)
    assert pd.burst is True
    assert pd.type == "t2.small"
    assert pd.on_demand_price == 0.5
    assert pd.spot_price == [ZonePrice("eu-west-1a", 0.2)]
    assert pd.category == CATEGORY_GENERAL


def test_new_product_details_non_burst():
    pd = new_product_details(VMInfo(type="c5.xlarge"))
    assert pd.burst is False


def test_names():
    assert Service("eks", is_static=True).service_name() == "eks"
    assert Provider("amazon").provider_name() == "amazon"
    assert Provider("amazon").services == []
    assert Version("1.15").version_name() == "1.15"


def test_defaults_are_independent():
    a, b = Price(), Price()
    a.spot_price["zone"] = 1.0
    assert b.spot_price == {}
    img = Image("ubuntu", version="18.04")
    assert img.tags == {}
    assert img.gpu_available is False
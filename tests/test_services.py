import pytest

from cloudinfo import types
from cloudinfo.services import (
    InMemoryServiceStore,
    Service,
    ServiceListError,
    ServiceService,
    ServiceStore,
)


class _FailingStore(ServiceStore):
    def get_services(self, provider):
        raise RuntimeError("boom")


def test_list_services():
    store = InMemoryServiceStore()
    store.services = {
        "amazon": [types.Service(service="compute"), types.Service(service="eks")],
        "google": [types.Service(service="compute"), types.Service(service="gke")],
    }
    service_service = ServiceService(store)

    services = service_service.list_services("amazon")

    assert services == [
        Service(code="compute", provider_name="amazon"),
        Service(code="eks", provider_name="amazon"),
    ]


def test_unknown_provider_gives_empty_list():
    assert ServiceService(InMemoryServiceStore()).list_services("azure") == []


def test_store_error_is_wrapped():
    with pytest.raises(ServiceListError, match="failed to list services") as info:
        ServiceService(_FailingStore()).list_services("amazon")
    assert isinstance(info.value.__cause__, RuntimeError)
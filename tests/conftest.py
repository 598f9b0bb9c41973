import pytest
from google.cloud import compute_v1

from gcloud_backup.cloud.gcp.api import ComputeClients
from tests.fakes import FakeAddressesClient, FakeListClient


@pytest.fixture
def firewalls():
    return [
        compute_v1.Firewall(
            name="allow-ssh",
            network="global/networks/default",
            source_ranges=["0.0.0.0/0"],
        ),
        compute_v1.Firewall(name="allow-internal", priority=1000),
    ]


@pytest.fixture
def routes():
    return [compute_v1.Route(name="default-route", dest_range="0.0.0.0/0")]


@pytest.fixture
def networks():
    return [compute_v1.Network(name="default", auto_create_subnetworks=True)]


@pytest.fixture
def address_scopes():
    return {
        "regions/us-central1": compute_v1.AddressesScopedList(
            addresses=[
                compute_v1.Address(name="web-ip", address="203.0.113.10"),
                compute_v1.Address(name="db-ip", address="203.0.113.11"),
            ]
        ),
        "regions/europe-west1": compute_v1.AddressesScopedList(),
    }


@pytest.fixture
def fake_clients(firewalls, routes, networks, address_scopes):
    return ComputeClients(
        firewalls=FakeListClient(firewalls),
        routes=FakeListClient(routes),
        networks=FakeListClient(networks),
        addresses=FakeAddressesClient(address_scopes),
    )

"""Shared test fixtures."""

import pytest

from occi_render.domain.models import Action, Attribute, Category, Kind, Link, Mixin, Resource
from occi_render.resolution.location_registry import LocationRegistry


EXAMPLE_SCHEME = 'http://schemas.example.org/occi/infrastructure#'
EXAMPLE_ACTION_SCHEME = 'http://schemas.example.org/occi/infrastructure/compute/action#'


class SpyResponse:
    """Response sink recording every write."""

    def __init__(self, status: int = 200) -> None:
        self._status = status
        self.writes: list[bytes] = []

    def status(self) -> int:
        return self._status

    def write(self, body: bytes) -> None:
        self.writes.append(body)


# ── Category Fixtures ────────────────────────────────────────────────────

@pytest.fixture
def start_action():
    return Action(Category('start', EXAMPLE_ACTION_SCHEME, title='Start'))


@pytest.fixture
def stop_action():
    return Action(
        Category('stop', EXAMPLE_ACTION_SCHEME, title='Stop'),
        parameters={'method': 'graceful'},
    )


@pytest.fixture
def compute_kind(start_action, stop_action):
    return Kind(
        'compute', EXAMPLE_SCHEME, title='Compute', location='/compute/',
        attributes={
            'occi.compute.cores': Attribute(type='integer'),
            'occi.compute.state': Attribute(mutable=False, range='active,inactive', default='inactive'),
        },
        actions=[start_action, stop_action],
    )


@pytest.fixture
def network_kind():
    return Kind('network', EXAMPLE_SCHEME, title='Network', location='/network/')


@pytest.fixture
def link_kind():
    return Kind('networkinterface', EXAMPLE_SCHEME, title='Network Interface', location='/networkinterface/')


@pytest.fixture
def os_mixin():
    return Mixin('ubuntu', 'http://schemas.example.org/templates/os#', title='Ubuntu', location='/os/ubuntu/')


@pytest.fixture
def size_mixin():
    return Mixin('small', 'http://schemas.example.org/templates/resource#', title='Small', location='/size/small/')


# ── Entity Fixtures ──────────────────────────────────────────────────────

@pytest.fixture
def registry():
    return LocationRegistry()


@pytest.fixture
def network(registry, network_kind):
    resource = Resource(id='net-1', kind=network_kind, location='/network/1')
    registry.register('/network/1', resource)
    return resource


@pytest.fixture
def network_link(link_kind):
    return Link(
        id='nic-1',
        kind=link_kind,
        attributes={
            'occi.core.title': 'eth0',
            'occi.core.source': '/compute/7',
            'occi.core.target': '/network/1',
        },
        location='/networkinterface/1',
    )


@pytest.fixture
def compute(registry, compute_kind, os_mixin, start_action):
    resource = Resource(
        id='vm-7',
        kind=compute_kind,
        mixins=[os_mixin],
        attributes={'occi.compute.cores': 2, 'occi.core.title': 'vm7'},
        actions=[start_action],
        location='/compute/7',
    )
    registry.register('/compute/7', resource)
    return resource


@pytest.fixture
def make_response():
    """Factory for spy responses with a given status."""
    def _make(status: int = 200) -> SpyResponse:
        return SpyResponse(status)
    return _make

"""
Built-in OCCI Core and Infrastructure categories.

Provides the standard kinds (entity, resource, link, compute, network,
storage, networkinterface, storagelink), their action categories, and the
IP networking mixins, following the OCCI Infrastructure model.

Example:
    >>> from occi_render.domain.infrastructure import COMPUTE, get_category
    >>> COMPUTE.location
    '/compute/'
    >>> get_category('http://schemas.ogf.org/occi/infrastructure#compute') is COMPUTE
    True
"""

from typing import Optional

from occi_render.domain.constants import (
    ATTR_ID,
    ATTR_SOURCE,
    ATTR_SUMMARY,
    ATTR_TARGET,
    ATTR_TITLE,
    COMPUTE_ACTION_SCHEME,
    CORE_SCHEME,
    INFRASTRUCTURE_SCHEME,
    NETWORK_ACTION_SCHEME,
    NETWORK_MIXIN_SCHEME,
    NETWORKINTERFACE_MIXIN_SCHEME,
    STORAGE_ACTION_SCHEME,
)
from occi_render.domain.models import Action, Attribute, Category, Kind, Mixin


def _action(scheme: str, term: str, title: str, **parameters: Attribute) -> Action:
    return Action(Category(term, scheme, title=title, attributes=dict(parameters)))


def _immutable(type_: str = 'string', range_: str = '', default=None) -> Attribute:
    return Attribute(mutable=False, type=type_, range=range_, default=default)


# ── Core ─────────────────────────────────────────────────────────────────

ENTITY = Kind(
    'entity', CORE_SCHEME, title='Entity', location='/entity/',
    attributes={
        ATTR_ID: _immutable(),
        ATTR_TITLE: Attribute(),
    },
)

RESOURCE = Kind(
    'resource', CORE_SCHEME, title='Resource', location='/resource/', related=ENTITY,
    attributes={ATTR_SUMMARY: Attribute()},
)

LINK = Kind(
    'link', CORE_SCHEME, title='Link', location='/link/', related=ENTITY,
    attributes={
        ATTR_SOURCE: Attribute(required=True),
        ATTR_TARGET: Attribute(required=True),
    },
)

# ── Actions ──────────────────────────────────────────────────────────────

COMPUTE_START = _action(COMPUTE_ACTION_SCHEME, 'start', 'Start Compute Resource')
COMPUTE_STOP = _action(
    COMPUTE_ACTION_SCHEME, 'stop', 'Stop Compute Resource',
    method=Attribute(range='graceful,acpioff,poweroff', default='poweroff'),
)
COMPUTE_RESTART = _action(
    COMPUTE_ACTION_SCHEME, 'restart', 'Restart Compute Resource',
    method=Attribute(range='graceful,warm,cold', default='cold'),
)
COMPUTE_SUSPEND = _action(
    COMPUTE_ACTION_SCHEME, 'suspend', 'Suspend Compute Resource',
    method=Attribute(range='hibernate,suspend', default='suspend'),
)

NETWORK_UP = _action(NETWORK_ACTION_SCHEME, 'up', 'Activate Network')
NETWORK_DOWN = _action(NETWORK_ACTION_SCHEME, 'down', 'Deactivate Network')

STORAGE_ONLINE = _action(STORAGE_ACTION_SCHEME, 'online', 'Activate Storage')
STORAGE_OFFLINE = _action(STORAGE_ACTION_SCHEME, 'offline', 'Deactivate Storage')
STORAGE_BACKUP = _action(STORAGE_ACTION_SCHEME, 'backup', 'Backup Storage')
STORAGE_SNAPSHOT = _action(STORAGE_ACTION_SCHEME, 'snapshot', 'Snapshot Storage')
STORAGE_RESIZE = _action(
    STORAGE_ACTION_SCHEME, 'resize', 'Resize Storage',
    size=Attribute(type='float', required=True),
)

# ── Infrastructure Kinds ─────────────────────────────────────────────────

COMPUTE = Kind(
    'compute', INFRASTRUCTURE_SCHEME, title='Compute Resource', location='/compute/',
    related=RESOURCE,
    actions=[COMPUTE_START, COMPUTE_STOP, COMPUTE_RESTART, COMPUTE_SUSPEND],
    attributes={
        'occi.compute.architecture': Attribute(range='x86,x64'),
        'occi.compute.cores': Attribute(type='integer'),
        'occi.compute.hostname': Attribute(),
        'occi.compute.speed': Attribute(type='float'),
        'occi.compute.memory': Attribute(type='float'),
        'occi.compute.state': _immutable(range_='active,inactive,suspended', default='inactive'),
    },
)

NETWORK = Kind(
    'network', INFRASTRUCTURE_SCHEME, title='Network Resource', location='/network/',
    related=RESOURCE,
    actions=[NETWORK_UP, NETWORK_DOWN],
    attributes={
        'occi.network.vlan': Attribute(type='integer', range='0-4095'),
        'occi.network.label': Attribute(),
        'occi.network.state': _immutable(range_='active,inactive', default='inactive'),
    },
)

STORAGE = Kind(
    'storage', INFRASTRUCTURE_SCHEME, title='Storage Resource', location='/storage/',
    related=RESOURCE,
    actions=[STORAGE_ONLINE, STORAGE_OFFLINE, STORAGE_BACKUP, STORAGE_SNAPSHOT, STORAGE_RESIZE],
    attributes={
        'occi.storage.size': Attribute(type='float', required=True),
        'occi.storage.state': _immutable(
            range_='online,offline,backup,snapshot,resize,degraded', default='offline',
        ),
    },
)

NETWORKINTERFACE = Kind(
    'networkinterface', INFRASTRUCTURE_SCHEME, title='Network Interface',
    location='/networkinterface/', related=LINK,
    attributes={
        'occi.networkinterface.interface': _immutable(),
        'occi.networkinterface.mac': Attribute(),
        'occi.networkinterface.state': _immutable(range_='active,inactive', default='inactive'),
    },
)

STORAGELINK = Kind(
    'storagelink', INFRASTRUCTURE_SCHEME, title='Storage Link',
    location='/storagelink/', related=LINK,
    attributes={
        'occi.storagelink.deviceid': Attribute(required=True),
        'occi.storagelink.mountpoint': Attribute(),
        'occi.storagelink.state': _immutable(range_='active,inactive', default='inactive'),
    },
)

# ── Mixins ───────────────────────────────────────────────────────────────

IPNETWORK = Mixin(
    'ipnetwork', NETWORK_MIXIN_SCHEME, title='IP Networking Mixin',
    location='/mixins/ipnetwork/',
    attributes={
        'occi.network.address': Attribute(),
        'occi.network.gateway': Attribute(),
        'occi.network.allocation': Attribute(range='dynamic,static'),
    },
)

IPNETWORKINTERFACE = Mixin(
    'ipnetworkinterface', NETWORKINTERFACE_MIXIN_SCHEME, title='IP Network Interface Mixin',
    location='/mixins/ipnetworkinterface/',
    attributes={
        'occi.networkinterface.address': Attribute(),
        'occi.networkinterface.gateway': Attribute(),
        'occi.networkinterface.allocation': Attribute(range='dynamic,static'),
    },
)

KINDS: list[Kind] = [
    ENTITY, RESOURCE, LINK, COMPUTE, NETWORK, STORAGE, NETWORKINTERFACE, STORAGELINK,
]
MIXINS: list[Mixin] = [IPNETWORK, IPNETWORKINTERFACE]


def default_categories() -> list[Category]:
    """
    All built-in categories in registration order.

    Kinds first, then each kind's action categories, then mixins.

    Returns:
        A new list; callers may reorder or extend it freely.
    """
    categories: list[Category] = list(KINDS)
    for kind in KINDS:
        categories.extend(action.category for action in kind.actions)
    categories.extend(MIXINS)
    return categories


def get_category(type_identifier: Optional[str]) -> Optional[Category]:
    """
    Look up a built-in category by type identifier (scheme + term).

    Args:
        type_identifier: e.g. 'http://schemas.ogf.org/occi/infrastructure#compute'

    Returns:
        The category, or None if it is not built in.
    """
    if not type_identifier:
        return None
    for category in default_categories():
        if category.type_identifier == type_identifier:
            return category
    return None

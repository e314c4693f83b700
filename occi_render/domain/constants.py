"""Shared constants: OCCI schemes, core attribute names, document keys.

Centralizes the literal names that appear on the wire so the builders,
resolvers, and tests agree on them.
"""

from http import HTTPStatus

from occi_render.domain.enums import CategoryVariant

# ── OCCI Schemes ─────────────────────────────────────────────────────────

CORE_SCHEME = 'http://schemas.ogf.org/occi/core#'
INFRASTRUCTURE_SCHEME = 'http://schemas.ogf.org/occi/infrastructure#'
COMPUTE_ACTION_SCHEME = 'http://schemas.ogf.org/occi/infrastructure/compute/action#'
NETWORK_ACTION_SCHEME = 'http://schemas.ogf.org/occi/infrastructure/network/action#'
STORAGE_ACTION_SCHEME = 'http://schemas.ogf.org/occi/infrastructure/storage/action#'
NETWORK_MIXIN_SCHEME = 'http://schemas.ogf.org/occi/infrastructure/network#'
NETWORKINTERFACE_MIXIN_SCHEME = 'http://schemas.ogf.org/occi/infrastructure/networkinterface#'

# ── Core Attribute Names ─────────────────────────────────────────────────

ATTR_ID = 'occi.core.id'
ATTR_TITLE = 'occi.core.title'
ATTR_SUMMARY = 'occi.core.summary'
ATTR_SOURCE = 'occi.core.source'
ATTR_TARGET = 'occi.core.target'

# ── Action Invocation ────────────────────────────────────────────────────

# Query separator between a resource location and an action term
ACTION_QUERY_SEPARATOR = '?action='

# ── Document Keys ────────────────────────────────────────────────────────

KEY_CATEGORIES = 'categories'
KEY_MIXINS = 'mixins'
KEY_KINDS = 'kinds'
KEY_COLLECTION = 'collection'
KEY_LOCATION = 'Location'

# Category variant → listing collection
VARIANT_TO_COLLECTION: dict[CategoryVariant, str] = {
    CategoryVariant.PLAIN: KEY_CATEGORIES,
    CategoryVariant.MIXIN: KEY_MIXINS,
    CategoryVariant.KIND: KEY_KINDS,
}

# ── Response ─────────────────────────────────────────────────────────────

HTTP_OK = int(HTTPStatus.OK)

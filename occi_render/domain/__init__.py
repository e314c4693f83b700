"""
OCCI domain model for the renderer.

Example:
    >>> from occi_render.domain import Kind, Resource
    >>> compute = Kind('compute', 'http://schemas.ogf.org/occi/infrastructure#',
    ...                title='Compute', location='/compute/')
    >>> vm = Resource(id='1', kind=compute, location='/compute/1')
    >>> vm.type_identifier
    'http://schemas.ogf.org/occi/infrastructure#compute'

Module Contents:
    CategoryVariant: Closed variant tag (plain category, kind, mixin)
    Attribute, Category, Kind, Mixin, Action: Long-lived category model
    Entity, Resource, Link: Per-request model objects
    RenderOptions: JSON emission options
"""

from occi_render.domain.enums import CategoryVariant
from occi_render.domain.models import (
    Action,
    Attribute,
    Category,
    Entity,
    Kind,
    Link,
    Mixin,
    RenderOptions,
    Resource,
)

__all__ = [
    'Action',
    'Attribute',
    'Category',
    'CategoryVariant',
    'Entity',
    'Kind',
    'Link',
    'Mixin',
    'RenderOptions',
    'Resource',
]

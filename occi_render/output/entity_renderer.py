"""Renders entities into records of the document's ``collection``."""

from typing import Any

from occi_render.domain.constants import KEY_COLLECTION
from occi_render.domain.models import Entity, Resource
from occi_render.output.category_builder import CategoryHashBuilder
from occi_render.output.render_document import RenderDocument
from occi_render.resolution.action_resolver import ActionReferenceResolver
from occi_render.resolution.link_resolver import LinkReferenceResolver
from occi_render.resolution.location_registry import LocationResolver


class EntityRenderer:
    """Composes kind, mixins, actions, attributes, links, and location of an entity.

    Output record::

        {
            'kind': {term, scheme},
            'mixins': [{term, scheme}, ...],
            'actions': [{title, uri, type}, ...],
            'attributes': {...},            # passed through unmodified
            'links': [{...}, ...],          # Resources only
            'location': '/compute/1',
        }

    Args:
        registry: Location registry for link targets and action owners.
    """

    def __init__(self, registry: LocationResolver) -> None:
        self.links = LinkReferenceResolver(registry)
        self.actions = ActionReferenceResolver(registry)

    def build(self, entity: Entity) -> dict[str, Any]:
        """Build the record for one entity.

        Raises:
            UnresolvedReferenceError: A link target or the entity itself
                (as owner of its actions) is not registered.
        """
        record: dict[str, Any] = {
            'kind': CategoryHashBuilder.build_short(entity.kind),
            'mixins': [CategoryHashBuilder.build_short(m) for m in entity.mixins],
            'actions': [self.actions.resolve(a, entity) for a in entity.actions],
            'attributes': entity.attributes,
        }
        if isinstance(entity, Resource):
            record['links'] = [self.links.resolve(link) for link in entity.links]
        record['location'] = entity.location
        return record

    def render(self, entity: Entity, document: RenderDocument) -> RenderDocument:
        """Prepend the entity's record to ``collection``.

        The record is built completely first, so a resolution failure leaves
        the document unchanged.
        """
        record = self.build(entity)
        document.prepend(KEY_COLLECTION, record)
        return document

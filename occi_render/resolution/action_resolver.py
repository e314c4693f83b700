"""Action reference resolver.

Binds an action to its owning resource and builds the invocation URI
``<resource location>?action=<term>``.
"""

from typing import Any

from occi_render.domain.constants import ACTION_QUERY_SEPARATOR
from occi_render.domain.models import Action, Entity
from occi_render.errors import UnresolvedReferenceError
from occi_render.resolution.location_registry import LocationResolver


class ActionReferenceResolver:
    """Builds ``{title, uri, type}`` records for actions bound to a resource.

    Args:
        registry: Location registry used to locate the owning resource.
    """

    def __init__(self, registry: LocationResolver) -> None:
        self._registry = registry

    def resolve(self, action: Action, resource: Entity) -> dict[str, Any]:
        """Render one action reference.

        Raises:
            UnresolvedReferenceError: The owning resource is not registered.
        """
        return {
            'title': action.category.title,
            'uri': self.action_uri(action, resource),
            'type': action.type_identifier,
        }

    def action_uri(self, action: Action, resource: Entity) -> str:
        location = self._registry.resolve_location(resource)
        if location is None:
            raise UnresolvedReferenceError(
                resource, f"Resource not registered: {resource.id!r}",
            )
        return f"{location}{ACTION_QUERY_SEPARATOR}{action.category.term}"

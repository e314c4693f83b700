"""Link reference resolver.

Renders a link as a reference record, resolving the link's target location
to the registered object to read its type identifier.
"""

from typing import Any

from occi_render.domain.models import Link
from occi_render.errors import UnresolvedReferenceError
from occi_render.resolution.location_registry import LocationResolver


class LinkReferenceResolver:
    """Builds ``{title, target, target_type, location, type, attributes}`` records.

    Args:
        registry: Location registry used to look up link targets.
    """

    def __init__(self, registry: LocationResolver) -> None:
        self._registry = registry

    def resolve(self, link: Link) -> dict[str, Any]:
        """Render one link reference.

        Raises:
            UnresolvedReferenceError: No object is registered at the link's target.
        """
        target_object = self._registry.resolve_object(link.target)
        if target_object is None:
            raise UnresolvedReferenceError(
                link.target, f"Link target not registered: {link.target!r}",
            )

        return {
            'title': link.title,
            'target': link.target,
            'target_type': target_object.type_identifier,
            'location': link.location,
            'type': link.type_identifier,
            'attributes': link.attributes,
        }

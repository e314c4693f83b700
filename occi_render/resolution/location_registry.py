"""Location registry: maps resolvable locations to live model objects.

The renderer only depends on the ``LocationResolver`` protocol. The
in-memory ``LocationRegistry`` is the implementation used by the CLI and
tests; a server may supply its own.
"""

import logging
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class LocationResolver(Protocol):
    """Read side of a location registry."""

    def resolve_object(self, location: str) -> Any | None: ...

    def resolve_location(self, obj: Any) -> str | None: ...


class LocationRegistry:
    """In-memory bidirectional location ↔ object registry.

    Objects are tracked by identity, so two equal-but-distinct objects can be
    registered at different locations.
    """

    def __init__(self) -> None:
        self._objects: dict[str, Any] = {}
        self._locations: dict[int, str] = {}

    def register(self, location: str, obj: Any) -> None:
        """Register ``obj`` at ``location``, replacing whatever was there."""
        previous = self._objects.get(location)
        if previous is not None:
            self._locations.pop(id(previous), None)
        old_location = self._locations.get(id(obj))
        if old_location is not None and old_location != location:
            self._objects.pop(old_location, None)

        self._objects[location] = obj
        self._locations[id(obj)] = location
        logger.debug("Registered %s at %s", type(obj).__name__, location)

    def unregister(self, location: str) -> None:
        """Remove the object at ``location``; unknown locations are ignored."""
        obj = self._objects.pop(location, None)
        if obj is not None:
            self._locations.pop(id(obj), None)

    def resolve_object(self, location: str) -> Any | None:
        return self._objects.get(location)

    def resolve_location(self, obj: Any) -> str | None:
        return self._locations.get(id(obj))

    def __contains__(self, location: object) -> bool:
        return location in self._objects

    def __len__(self) -> int:
        return len(self._objects)

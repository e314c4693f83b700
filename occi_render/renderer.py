"""JSON rendering session for OCCI models.

``JSONRenderer`` owns one ``RenderDocument`` per session. Construction and
``prepare_renderer()`` both start from an empty document; every render
operation mutates the current document and returns it, and
``render_response()`` emits it once.

Usage::

    renderer = JSONRenderer(registry)
    renderer.render_entity(vm)
    renderer.render_response(FlaskResponseSink(response))
"""

import logging
from typing import Any, Iterable

from occi_render.domain.constants import KEY_LOCATION
from occi_render.domain.models import Action, Category, Entity, Link, RenderOptions
from occi_render.output.category_builder import CategoryHashBuilder
from occi_render.output.category_classifier import CategoryCollectionClassifier
from occi_render.output.entity_renderer import EntityRenderer
from occi_render.output.render_document import RenderDocument
from occi_render.output.response_emitter import ResponseEmitter, ResponseSink
from occi_render.resolution.location_registry import LocationResolver

logger = logging.getLogger(__name__)


class JSONRenderer:
    """Renders categories, entities, and locations into a JSON document.

    One instance serves one request at a time; call ``prepare_renderer()``
    before reusing it for another request. The document is emitted at most
    once per session.

    Args:
        registry: Location registry for link targets and action owners.
        options: Emission options.
    """

    def __init__(self, registry: LocationResolver, options: RenderOptions | None = None) -> None:
        self._classifier = CategoryCollectionClassifier()
        self._entities = EntityRenderer(registry)
        self._emitter = ResponseEmitter(options)
        self._document = RenderDocument()
        self._emitted = False

    @property
    def data(self) -> RenderDocument:
        return self._document

    def prepare_renderer(self) -> RenderDocument:
        """Start a new session with an empty document."""
        self._document = RenderDocument()
        self._emitted = False
        return self._document

    def render_category_type(self, categories: Iterable[Category]) -> RenderDocument:
        return self._classifier.classify(categories, self._document)

    @staticmethod
    def render_category_short(category: Category) -> dict[str, Any]:
        return CategoryHashBuilder.build_short(category)

    def render_location(self, location: str) -> RenderDocument:
        """Surface a newly created resource's location as ``Location``."""
        self._document.merge({KEY_LOCATION: location})
        return self._document

    def render_locations(self, locations: Iterable[str]) -> RenderDocument:
        """No-op: location lists are served as text/uri-list, not JSON."""
        return self._document

    def render_link_reference(self, link: Link) -> dict[str, Any]:
        return self._entities.links.resolve(link)

    def render_action_reference(self, action: Action, resource: Entity) -> dict[str, Any]:
        return self._entities.actions.resolve(action, resource)

    @staticmethod
    def render_attributes(attributes: dict[str, Any]) -> dict[str, Any]:
        return attributes

    def render_entity(self, entity: Entity) -> RenderDocument:
        return self._entities.render(entity, self._document)

    def render_response(self, response: ResponseSink) -> bool:
        """Emit the session document; repeated calls in one session write nothing."""
        if self._emitted:
            logger.debug("Document already emitted for this session")
            return False
        self._emitted = self._emitter.emit(self._document, response)
        return self._emitted

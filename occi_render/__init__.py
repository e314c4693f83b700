"""
OCCI JSON rendering.

Module Contents:
    JSONRenderer: Per-request rendering session
    LocationRegistry: In-memory location ↔ object registry
    RenderError, UnresolvedReferenceError: Rendering failures
"""

from occi_render.errors import RenderError, UnresolvedReferenceError
from occi_render.renderer import JSONRenderer
from occi_render.resolution.location_registry import LocationRegistry

__all__ = [
    'JSONRenderer',
    'LocationRegistry',
    'RenderError',
    'UnresolvedReferenceError',
]

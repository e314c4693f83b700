"""Writes the render document to a response, gated by response status."""

import json
import logging
from typing import Protocol

from occi_render.domain.models import RenderOptions
from occi_render.output.render_document import RenderDocument

logger = logging.getLogger(__name__)


class ResponseSink(Protocol):
    """The part of an HTTP response the emitter needs."""

    def status(self) -> int: ...

    def write(self, body: bytes) -> None: ...


class ResponseEmitter:
    """Serializes a render document to JSON and writes it once.

    Nothing is written unless the response status is the configured success
    status; error bodies are produced elsewhere.

    Args:
        options: Emission options (pretty printing, success status).
    """

    def __init__(self, options: RenderOptions | None = None) -> None:
        self._options = options or RenderOptions()

    def serialize(self, document: RenderDocument) -> bytes:
        """JSON-encode ``document`` as UTF-8.

        Strings that cannot be encoded as UTF-8 (lone surrogates) fall back to
        ASCII escapes, which is still valid JSON.
        """
        data = document.to_dict()
        text = json.dumps(data, indent=self._options.indent, ensure_ascii=self._options.ensure_ascii)
        try:
            return text.encode('utf-8')
        except UnicodeEncodeError:
            logger.debug("Body not UTF-8 encodable, escaping non-ASCII characters")
            return json.dumps(data, indent=self._options.indent, ensure_ascii=True).encode('ascii')

    def emit(self, document: RenderDocument, response: ResponseSink) -> bool:
        """Write ``document`` to ``response`` if its status indicates success.

        Returns:
            True if the body was written, False if emission was skipped.
        """
        status = response.status()
        if status != self._options.success_status:
            logger.debug("Skipping body for status %s", status)
            return False

        body = self.serialize(document)
        response.write(body)
        logger.debug("Wrote %d bytes", len(body))
        return True

"""Flask response adapter for the response emitter."""

from flask import Response


class FlaskResponseSink:
    """Exposes a ``flask.Response`` as a ``ResponseSink``.

    Args:
        response: The response whose body the renderer fills.
        mimetype: Content type set when a body is written.
    """

    def __init__(self, response: Response, mimetype: str = 'application/json') -> None:
        self._response = response
        self._mimetype = mimetype

    def status(self) -> int:
        return self._response.status_code

    def write(self, body: bytes) -> None:
        self._response.set_data(body)
        self._response.mimetype = self._mimetype

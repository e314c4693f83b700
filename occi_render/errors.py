"""Renderer exceptions."""


class RenderError(Exception):
    """Base error for rendering failures."""
    pass


class UnresolvedReferenceError(RenderError):
    """A referenced location or object is not registered.

    Raised when a link target or the owning resource of an action cannot be
    resolved through the location registry.

    Args:
        reference: The location string or model object that failed to resolve.
        message: Optional override for the error message.
    """

    def __init__(self, reference, message: str | None = None) -> None:
        self.reference = reference
        super().__init__(message or f"Unresolved reference: {reference!r}")

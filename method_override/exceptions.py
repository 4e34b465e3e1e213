class MethodOverrideError(Exception):
    """Base class for all method override errors."""


class InvalidDispatcher(TypeError, MethodOverrideError):
    """Raised when the dispatcher passed to the middleware is not an ASGI callable."""

from __future__ import annotations

from starlette.applications import Starlette
from starlette.requests import HTTPConnection
from starlette.types import ASGIApp, Receive, Scope, Send

from method_override.exceptions import InvalidDispatcher
from method_override.filter import MethodOverrideFilter, Redispatch


class MethodOverrideMiddleware:
    """
    Handle POST requests as the method named in X-HTTP-Method-Override header.

    The overridden request is not passed down the chain. It is sent to `dispatcher` which routes it from scratch.
    If no dispatcher given, the wrapped application is used.
    """

    def __init__(self, app: ASGIApp, dispatcher: ASGIApp | None = None) -> None:
        if dispatcher is not None and not callable(dispatcher):
            raise InvalidDispatcher(f"Dispatcher must be an ASGI callable, got {type(dispatcher).__name__}.")

        self.app = app
        self.filter = MethodOverrideFilter(dispatcher if dispatcher is not None else app)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            return await self.app(scope, receive, send)

        if isinstance(self.filter.apply(scope), Redispatch):
            await self.filter.redispatch(scope, receive, send)
            return

        await self.app(scope, receive, send)


def install(app: Starlette) -> None:
    """Register method override as the outermost middleware of the application, re-dispatching through the app."""
    app.add_middleware(MethodOverrideMiddleware, dispatcher=app)


def get_original_method(request: HTTPConnection) -> str:
    """Return the method the client has sent, before any override."""
    return request.scope.get("original_method", request.scope["method"])

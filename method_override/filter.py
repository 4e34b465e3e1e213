from __future__ import annotations

import dataclasses
import typing
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Receive, Scope, Send

HEADER_NAME = "X-HTTP-Method-Override"

HTTP_METHODS = frozenset(
    [
        "GET",
        "POST",
        "PATCH",
        "PUT",
        "DELETE",
        "HEAD",
        "OPTIONS",
        "CONNECT",
        "TRACE",
    ]
)


@dataclasses.dataclass(frozen=True)
class Continue:
    """Leave the request alone and let the current chain proceed."""


@dataclasses.dataclass(frozen=True)
class Redispatch:
    """The request method was rewritten, the current chain must stop and the request has to be routed again."""

    method: str
    original_method: str


FilterResult: typing.TypeAlias = Continue | Redispatch


def resolve_override(method: str, headers: typing.Mapping[str, str]) -> str | None:
    """
    Return the method the request should be handled with, or None when the request keeps its own.

    Only POST requests can be overridden. The header value is compared case-insensitively against HTTP_METHODS,
    unknown values are ignored.
    """
    if method != "POST":
        return None

    override = headers.get(HEADER_NAME, "")
    if not override:
        return None

    override = override.upper()
    if override == method or override not in HTTP_METHODS:
        return None
    return override


class MethodOverrideFilter:
    """
    Rewrites the method of POST requests carrying X-HTTP-Method-Override.

    `apply` decides and mutates the scope, `redispatch` hands the mutated scope to the dispatcher so the request
    gets routed as if it had arrived with the new method.
    """

    def __init__(self, dispatcher: ASGIApp) -> None:
        self.dispatcher = dispatcher

    def apply(self, scope: Scope | None) -> FilterResult:
        if not isinstance(scope, typing.MutableMapping) or scope.get("headers") is None:
            return Continue()

        method = scope.get("method", "")
        override = resolve_override(method, Headers(scope=scope))
        if override is None:
            return Continue()

        scope["original_method"] = method
        scope["method"] = override
        return Redispatch(method=override, original_method=method)

    async def redispatch(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.dispatcher(scope, receive, send)

from method_override.exceptions import InvalidDispatcher, MethodOverrideError
from method_override.filter import (
    HEADER_NAME,
    HTTP_METHODS,
    Continue,
    FilterResult,
    MethodOverrideFilter,
    Redispatch,
    resolve_override,
)
from method_override.middleware import MethodOverrideMiddleware, get_original_method, install

__all__ = [
    "HEADER_NAME",
    "HTTP_METHODS",
    "Continue",
    "FilterResult",
    "Redispatch",
    "MethodOverrideFilter",
    "MethodOverrideMiddleware",
    "MethodOverrideError",
    "InvalidDispatcher",
    "resolve_override",
    "get_original_method",
    "install",
]

__version__ = "0.1.0"

# noqa: D104
"""Top-level package for bitly_api."""
from __future__ import annotations

__version__ = "0.1.0"
__all__ = [
    "BitlyClient",
    "BitlyError",
    "TransportError",
    "ApiError",
    "DecodeError",
    "NotFoundError",
    "InvalidInputError",
]

_EXCEPTIONS = {
    "BitlyError",
    "TransportError",
    "ApiError",
    "DecodeError",
    "NotFoundError",
    "InvalidInputError",
}


def __getattr__(name):  # type: ignore[override]
    if name == "BitlyClient":
        from .client import BitlyClient

        return BitlyClient
    if name in _EXCEPTIONS:
        from . import exceptions

        return getattr(exceptions, name)
    raise AttributeError(name)

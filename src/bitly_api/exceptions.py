"""bitly_api.exceptions

Error taxonomy for the bit.ly client.  Every failure surfaces as a
``BitlyError`` subclass carrying a ``kind``, a ``message`` and a numeric
``code``.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

import requests

__all__ = [
    "ErrorKind",
    "BitlyError",
    "TransportError",
    "ApiError",
    "DecodeError",
    "NotFoundError",
    "InvalidInputError",
    "REQUEST_FAILED",
    "COULDNT_CONNECT",
    "OPERATION_TIMEDOUT",
    "SSL_CONNECT_ERROR",
]

# Transport codes follow libcurl's numbering.
REQUEST_FAILED = 1
COULDNT_CONNECT = 7
OPERATION_TIMEDOUT = 28
SSL_CONNECT_ERROR = 35


def _find_errno(exc: BaseException) -> Optional[int]:
    """First OS errno in ``exc`` or the exceptions it wraps (args, reason, cause, context)."""
    seen = set()
    pending = [exc]
    while pending:
        current = pending.pop(0)
        if id(current) in seen:
            continue
        seen.add(id(current))
        errno = getattr(current, "errno", None)
        if isinstance(errno, int):
            return errno
        linked = [current.__cause__, current.__context__, getattr(current, "reason", None), *current.args]
        pending.extend(e for e in linked if isinstance(e, BaseException))
    return None


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    API = "api"
    DECODE = "decode"
    VALIDATION = "validation"


class BitlyError(Exception):
    """Base class for all client errors."""

    kind: ErrorKind = ErrorKind.API

    def __init__(self, message: str, code: int = 0):
        self.message = message
        self.code = code
        super().__init__(message, code)

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message} (#{self.code})"


class TransportError(BitlyError):
    """The HTTP round trip itself failed (DNS, connect, TLS, timeout)."""

    kind = ErrorKind.TRANSPORT

    @classmethod
    def from_exception(cls, exc: requests.RequestException) -> "TransportError":
        # SSLError and ConnectTimeout both subclass ConnectionError; order matters.
        if isinstance(exc, requests.exceptions.Timeout):
            code = OPERATION_TIMEDOUT
        elif isinstance(exc, requests.exceptions.SSLError):
            code = SSL_CONNECT_ERROR
        elif isinstance(exc, requests.exceptions.ConnectionError):
            code = COULDNT_CONNECT
        else:
            code = REQUEST_FAILED
        message = str(exc) or exc.__class__.__name__
        errno = _find_errno(exc)
        if errno is not None:
            message = f"{message} [errno {errno}]"
        return cls(message, code)


class ApiError(BitlyError):
    """bit.ly answered, but reported a failure in ``errorMessage``."""

    kind = ErrorKind.API


class DecodeError(BitlyError):
    """The response body was not the JSON shape the operation expects."""

    kind = ErrorKind.DECODE


class NotFoundError(DecodeError):
    """The hash is unknown to bit.ly (empty or error-tagged result entry)."""


class InvalidInputError(BitlyError):
    kind = ErrorKind.VALIDATION

"""bitly_api.client

Client for the bit.ly REST API (v3): shorten, expand, clicks and errors.

Example::

    from bitly_api import BitlyClient

    client = BitlyClient("myname", "R_0123456789abcdef")
    short = client.shorten("http://www.google.com")   # "http://bit.ly/SD3eqa"
    client.expand(short)                               # "http://www.google.com"
    client.clicks("SD3eqa").user_clicks

Each call is one GET request with no retries.  Request and response values
live only for the duration of the call, so one client can be shared
between threads.
"""
from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterable, List, Optional, Tuple

import requests
from pydantic import BaseModel, Field, ValidationError

from . import __version__
from .exceptions import ApiError, DecodeError, InvalidInputError, NotFoundError, TransportError
from .models import ClickInfo, Credentials, ErrorCode
from .utils import build_query, dig, hash_from_url

__all__ = ["BitlyClient"]

logger = logging.getLogger(__name__)


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


@contextmanager
def _http_status(status: int):
    """Stamp decode errors raised while reading a payload with its HTTP status."""
    try:
        yield
    except DecodeError as exc:
        if not exc.code:
            exc.code = status
            exc.args = (exc.message, status)
        raise


class BitlyClient:
    """Public client for the bit.ly URL-shortening API."""

    class Valves(BaseModel):
        """Connection options for the bit.ly client."""

        base_url: str = Field(
            default="http://api.bit.ly",
            description="API host; plain HTTP on port 80 unless an https:// URL is given",
        )
        api_version: str = Field(
            default="3",
            description="Version segment of the request path (/v<version>/<action>)",
        )
        user_agent: str = Field(
            default=f"Python Bit.ly/{__version__}",
            description="User-Agent header sent with every request",
        )
        timeout: float = Field(
            default=30,
            gt=0,
            description="Seconds to wait for the API before giving up",
        )

    def __init__(self, login: str, api_key: str, valves: Optional["BitlyClient.Valves"] = None):
        self._credentials = Credentials(login=login, api_key=api_key)
        self.valves = valves or self.Valves()
        self._errors: Optional[List[ErrorCode]] = None
        self._errors_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(login={self._credentials.login!r})"

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    # ------------------------------------------------------------------
    # API actions
    # ------------------------------------------------------------------

    def shorten(self, long_url: str) -> str:
        """Shorten ``long_url`` and return the bit.ly URL."""
        if not long_url or not long_url.strip():
            raise InvalidInputError("long URL must not be empty")
        payload, status = self._request("shorten", [("longUrl", long_url)])
        with _http_status(status):
            return self._string(payload, "data.url")

    def expand(self, url_or_hash: str) -> str:
        """Return the original long URL for a bit.ly URL or hash."""
        hash_ = self._hash(url_or_hash)
        payload, status = self._request("expand", [("hash", hash_)])
        with _http_status(status):
            self._result_entry(payload, "data.expand[0]", hash_)
            return self._string(payload, "data.expand[0].long_url")

    def clicks(self, url_or_hash: str) -> ClickInfo:
        """Return click counts (global and per-user) for a bit.ly URL or hash."""
        hash_ = self._hash(url_or_hash)
        payload, status = self._request("clicks", [("hash", hash_)])
        with _http_status(status):
            entry = self._result_entry(payload, "data.clicks[0]", hash_)
            try:
                return ClickInfo.model_validate(entry)
            except ValidationError as exc:
                raise DecodeError(f"unexpected clicks entry for '{hash_}': {exc.error_count()} invalid field(s)") from exc

    def errors(self) -> List[ErrorCode]:
        """Return bit.ly's list of error codes.

        Fetched once per client and cached; later calls never hit the API.
        """
        if self._errors is None:
            with self._errors_lock:
                if self._errors is None:
                    payload, status = self._request("errors")
                    with _http_status(status):
                        results = dig(payload, "results")
                        if not isinstance(results, list):
                            raise DecodeError("expected a list at 'results'")
                        try:
                            self._errors = [ErrorCode.model_validate(item) for item in results]
                        except ValidationError as exc:
                            raise DecodeError(f"unexpected entry in 'results': {exc.error_count()} invalid field(s)") from exc
                    logger.debug("Cached %d bit.ly error codes", len(self._errors))
        return list(self._errors)

    # ------------------------------------------------------------------
    # Request plumbing
    # ------------------------------------------------------------------

    def request_url(self, action: str, params: Iterable[Tuple[str, str]] = ()) -> str:
        """Full GET URL for ``action``, credentials first, then ``params``."""
        base = self.valves.base_url.rstrip("/")
        query = build_query(self._credentials.query_pairs() + list(params))
        return f"{base}/v{self.valves.api_version}/{action}?{query}"

    def _request(self, action: str, params: Iterable[Tuple[str, str]] = ()) -> Tuple[Dict[str, Any], int]:
        """Perform one GET for ``action``; return the decoded payload and HTTP status."""
        params = list(params)
        url = self.request_url(action, params)
        logger.debug("GET /v%s/%s %s", self.valves.api_version, action, build_query(params))

        try:
            resp = requests.get(
                url,
                headers={"User-Agent": self.valves.user_agent, "Accept": "application/json"},
                timeout=self.valves.timeout,
            )
        except requests.RequestException as exc:
            err = TransportError.from_exception(exc)
            logger.warning("bit.ly %s request failed: %s", action, err)
            raise err from exc

        try:
            payload = resp.json()
        except ValueError as exc:
            raise DecodeError(f"response to '{action}' is not JSON", resp.status_code) from exc
        if not isinstance(payload, dict):
            raise DecodeError(f"response to '{action}' is not a JSON object", resp.status_code)

        message = payload.get("errorMessage")
        code = payload.get("errorCode")
        # v3 reports failures as status_code/status_txt instead.
        if not message and "status_txt" in payload and _as_int(payload.get("status_code")) not in (0, 200):
            message = payload["status_txt"]
            code = payload["status_code"]
        if message:
            err = ApiError(str(message), _as_int(code))
            logger.info("bit.ly %s returned an error: %s", action, err)
            raise err
        return payload, resp.status_code

    @staticmethod
    def _hash(url_or_hash: str) -> str:
        hash_ = hash_from_url(url_or_hash or "")
        if not hash_:
            raise InvalidInputError(f"no bit.ly hash in {url_or_hash!r}")
        return hash_

    @staticmethod
    def _result_entry(payload: Dict[str, Any], path: str, hash_: str) -> Dict[str, Any]:
        entry = dig(payload, path)
        if not isinstance(entry, dict):
            raise DecodeError(f"expected an object at '{path}'")
        if entry.get("error"):
            raise NotFoundError(f"{hash_}: {entry['error']}")
        return entry

    @staticmethod
    def _string(payload: Dict[str, Any], path: str) -> str:
        value = dig(payload, path)
        if not isinstance(value, str):
            raise DecodeError(f"expected a string at '{path}'")
        return value

"""bitly_api.utils

Pure helpers shared by the client: hash extraction, query assembly and
walking decoded JSON payloads.
"""
from __future__ import annotations

import re
from typing import Any, Iterable, List, Tuple, Union
from urllib.parse import urlencode

from .exceptions import DecodeError, NotFoundError

__all__ = [
    "hash_from_url",
    "build_query",
    "dig",
]

_path_re = re.compile(r"([^.\[\]]+)|\[(\d+)\]")


def hash_from_url(text: str) -> str:
    """Return the bit.ly hash from a short URL or a bare hash.

    ``"http://bit.ly/3CzY1f"`` and ``"3CzY1f"`` both give ``"3CzY1f"``.
    This is a plain split on ``/``: query strings are kept and a trailing
    slash yields ``""``.
    """
    return text.split("/")[-1]


def build_query(pairs: Iterable[Tuple[str, str]]) -> str:
    """Percent-encode ``pairs`` as a form query string (spaces become ``+``)."""
    return urlencode(list(pairs))


def _split_path(path: str) -> List[Union[str, int]]:
    steps: List[Union[str, int]] = []
    for key, index in _path_re.findall(path):
        steps.append(int(index) if index else key)
    return steps


def dig(payload: Any, path: str) -> Any:
    """Follow a dotted ``path`` such as ``data.expand[0].long_url`` into ``payload``.

    Raises ``NotFoundError`` when an indexed list is empty and
    ``DecodeError`` for any other missing key, short list or container of
    the wrong type.
    """
    node = payload
    walked = ""
    for step in _split_path(path):
        if isinstance(step, int):
            here = f"{walked}[{step}]"
            if not isinstance(node, list):
                raise DecodeError(f"expected a list at '{walked}'")
            if not node:
                raise NotFoundError(f"no entries at '{walked}'")
            if step >= len(node):
                raise DecodeError(f"missing field '{here}'")
            node = node[step]
        else:
            here = f"{walked}.{step}" if walked else step
            if not isinstance(node, dict) or step not in node:
                raise DecodeError(f"missing field '{here}'")
            node = node[step]
        walked = here
    return node

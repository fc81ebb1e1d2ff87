"""Immutable query string parameters.

Implements ``Mapping[str, str]`` over the raw query string. Injecting
parameters produces a new ``QueryParams``; the original is never touched.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qs, unquote_plus, urlencode


class QueryParams(Mapping[str, str]):
    """Immutable query string parameters.

    Attributes:
        _data: Parsed query string as field name -> list of values.
        _raw: Raw query string bytes.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.
    """

    _data: dict[str, list[str]]
    _raw: bytes

    __slots__ = ("_data", "_raw")

    def __init__(self, query_string: bytes = b"") -> None:
        object.__setattr__(self, "_raw", query_string)
        parsed = parse_qs(query_string.decode("latin-1"), keep_blank_values=True)
        object.__setattr__(self, "_data", parsed)

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"QueryParams({{{items}}})"

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        return list(self._data.get(key, []))

    @property
    def raw(self) -> bytes:
        """The raw query string bytes."""
        return self._raw

    def with_params(self, params: Mapping[str, str]) -> QueryParams:
        """Return new params with *params* set, replacing any existing values.

        Every other original field is kept byte-for-byte in its original
        position; the injected fields are appended at the end::

            QueryParams(b"code=abc&page=x").with_params({"page": "auth"})
            # -> b"code=abc&page=auth"
        """
        kept = [
            part
            for part in self._raw.decode("latin-1").split("&")
            if part and unquote_plus(part.partition("=")[0]) not in params
        ]
        kept.append(urlencode(list(params.items())))
        return QueryParams("&".join(kept).encode("latin-1"))

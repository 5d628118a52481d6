"""Immutable query string parameters.

Implements ``Mapping[str, str]`` with ``get_list`` for repeated keys.
Parsing never raises: malformed pairs are dropped, undecodable bytes are
replaced.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qsl


def split_url(url: str) -> tuple[str, str]:
    """Split *url* into ``(path, query_string)``, discarding any fragment.

    ``"/talk/3?ref=home#top"`` -> ``("/talk/3", "ref=home")``
    """
    url = url.split("#", 1)[0]
    path, _, query = url.partition("?")
    return path, query


class QueryParams(Mapping[str, str]):
    """Immutable query string parameters.

    Attributes:
        _data: Parsed query string as field name -> list of values.
        _raw: Raw query string.

    Repeated keys: ``__getitem__`` and ``get`` return the *last* value,
    ``get_list`` returns all of them.
    """

    _data: dict[str, list[str]]
    _raw: str

    __slots__ = ("_data", "_raw")

    def __init__(self, query_string: str = "") -> None:
        object.__setattr__(self, "_raw", query_string)
        data: dict[str, list[str]] = {}
        try:
            pairs = parse_qsl(query_string, keep_blank_values=True, errors="replace")
        except ValueError:
            pairs = []
        for key, value in pairs:
            if not key:
                continue
            data.setdefault(key, []).append(value)
        object.__setattr__(self, "_data", data)

    def __setattr__(self, name: str, value: object) -> None:
        msg = "QueryParams is immutable"
        raise AttributeError(msg)

    def __getitem__(self, key: str) -> str:
        return self._data[key][-1]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QueryParams):
            return self._data == other._data
        if isinstance(other, Mapping):
            return dict(self.items()) == dict(other.items())
        return NotImplemented

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"QueryParams({{{items}}})"

    @property
    def raw(self) -> str:
        """The undecoded query string."""
        return self._raw

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the last value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[-1]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        return list(self._data.get(key, []))


def parse_query_params(url: str) -> QueryParams:
    """Extract query parameters from a path+query string.

    Accepts a full navigation target (``/home?hi=everyone``), a bare query
    (``?hi=everyone``) or a path with no query at all::

        parse_query_params("/home?hi=everyone")  # QueryParams({'hi': 'everyone'})
        parse_query_params("/home")              # QueryParams({})
    """
    _, query = split_url(url)
    return QueryParams(query)

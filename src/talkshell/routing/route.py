"""Route, RouteContext, and NavigationRequest."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from talkshell.http.query import QueryParams


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route pattern.

    Static:  ``/talk``  (is_param=False)
    Param:   ``/:id``   (is_param=True, param_name="id")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route table entry.

    ``segments`` is ``None`` for the universal ``*`` pattern.
    """

    pattern: str
    handler: Callable[..., Any]
    segments: tuple[PathSegment, ...] | None
    name: str | None = None

    @property
    def is_universal(self) -> bool:
        return self.segments is None


@dataclass(frozen=True, slots=True)
class RouteContext:
    """Immutable snapshot produced once per navigation.

    ``params`` holds the route captures plus ``page``; ``query_params``
    is attached alongside and never merged into ``params``.
    """

    path: str
    params: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    query_params: QueryParams = field(default_factory=QueryParams)

    @property
    def page(self) -> str:
        """The raw requested page name (``""`` when unset)."""
        return self.params.get("page", "")


class NavigationRequest:
    """Mutable per-dispatch state handed through the route table.

    Middleware may attach ``query_params`` or stash values in ``state``;
    terminal handlers turn the request into a ``RouteContext`` with
    :meth:`resolve`.
    """

    __slots__ = ("params", "path", "query_params", "querystring", "state", "url")

    def __init__(self, url: str, path: str, querystring: str = "") -> None:
        self.url = url
        self.path = path
        self.querystring = querystring
        self.params: dict[str, str] = {}
        self.query_params = QueryParams()
        self.state: dict[str, Any] = {}

    def resolve(self, **overrides: str) -> RouteContext:
        """Freeze this request into a ``RouteContext``.

        *overrides* are merged over the captured params, e.g.
        ``request.resolve(page="talk")``.
        """
        params = {**self.params, **overrides}
        return RouteContext(
            path=self.path,
            params=MappingProxyType(params),
            query_params=self.query_params,
        )

    def __repr__(self) -> str:
        return f"NavigationRequest({self.url!r}, params={self.params!r})"

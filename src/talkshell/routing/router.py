"""Ordered route table with middleware semantics.

Routes are registered during setup and frozen with ``compile()``.
Dispatch walks the table in registration order: the universal ``*``
pattern matches every path, literal segments match exactly, and
``:name`` segments capture one non-empty path segment.
"""

import logging
import re
from functools import partial
from urllib.parse import unquote

from talkshell.errors import ConfigurationError
from talkshell.http.query import split_url
from talkshell.routing.protocol import Next, RouteHandler
from talkshell.routing.route import NavigationRequest, PathSegment, Route, RouteContext

logger = logging.getLogger("talkshell.routing")

_PARAM_RE = re.compile(r"^:(\w+)$")


def parse_pattern(pattern: str) -> tuple[PathSegment, ...] | None:
    """Parse a route pattern into segments.

    Examples::

        "*"          -> None (universal)
        "/"          -> ()
        "/talk/:id"  -> (PathSegment("talk"), PathSegment(":id", is_param=True, param_name="id"))
        "/:page"     -> (PathSegment(":page", is_param=True, param_name="page"),)
    """
    if pattern == "*":
        return None
    if not pattern.startswith("/"):
        msg = f"Route pattern {pattern!r} must start with '/' or be '*'."
        raise ConfigurationError(msg)

    segments: list[PathSegment] = []
    for part in pattern.strip("/").split("/"):
        if not part:
            continue
        if (part.startswith("{") and part.endswith("}")) or (
            part.startswith("<") and part.endswith(">")
        ):
            msg = (
                f"Route pattern {pattern!r} uses {part!r}; "
                f"captures are written as :param (e.g. /talk/:id)."
            )
            raise ConfigurationError(msg)
        if part.startswith(":"):
            m = _PARAM_RE.match(part)
            if m is None:
                msg = f"Invalid capture {part!r} in route pattern {pattern!r}."
                raise ConfigurationError(msg)
            segments.append(PathSegment(value=part, is_param=True, param_name=m.group(1)))
        else:
            segments.append(PathSegment(value=part))
    return tuple(segments)


def split_path(path: str) -> list[str]:
    """Split a URL path into percent-decoded, non-empty segments."""
    return [unquote(p) for p in path.strip("/").split("/") if p]


def _match_segments(
    segments: tuple[PathSegment, ...],
    parts: list[str],
) -> dict[str, str] | None:
    if len(segments) != len(parts):
        return None
    params: dict[str, str] = {}
    for seg, part in zip(segments, parts, strict=True):
        if seg.is_param:
            params[seg.param_name or ""] = part
        elif seg.value != part:
            return None
    return params


class Router:
    """Ordered route table.

    Usage::

        router = Router()
        router.add("*", query_middleware)
        router.add("/talk/:id", talk_handler)
        router.compile()
        context = router.dispatch("/talk/3?ref=home")
    """

    __slots__ = ("_compiled", "_routes")

    def __init__(self) -> None:
        self._routes: list[Route] = []
        self._compiled = False

    def add(self, pattern: str, handler: RouteHandler, *, name: str | None = None) -> None:
        """Append an entry to the table. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise ConfigurationError(msg)
        route = Route(
            pattern=pattern,
            handler=handler,
            segments=parse_pattern(pattern),
            name=name,
        )
        self._routes.append(route)

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes in evaluation order."""
        return list(self._routes)

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def dispatch(self, url: str) -> RouteContext:
        """Evaluate the table against *url* and return the resulting context.

        Always returns a fully built ``RouteContext``. When no terminal
        handler claims the path the context carries ``page=""``.
        """
        path, querystring = split_url(url)
        path = "/" + path.strip("/")
        parts = split_path(path)
        request = NavigationRequest(url=url, path=path, querystring=querystring)
        routes = tuple(self._routes)

        def call(start: int, req: NavigationRequest) -> RouteContext | None:
            for index in range(start, len(routes)):
                route = routes[index]
                if route.segments is None:
                    params: dict[str, str] | None = {}
                else:
                    params = _match_segments(route.segments, parts)
                if params is None:
                    continue
                req.params = params
                following: Next = partial(call, index + 1)
                return route.handler(req, following)
            return None

        context = call(0, request)
        if context is None:
            logger.debug("No route claimed %r", url)
            request.params = {}
            context = request.resolve(page="")
        return context

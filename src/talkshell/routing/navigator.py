"""History-aware navigation on top of the route table.

The navigator plays the part of the browser's location and history: in-app
links call ``navigate``, back/forward walk the history stack. Every
navigation dispatches once and publishes exactly one ``RouteContext``.
"""

import logging
from collections.abc import Callable

from talkshell.routing.route import RouteContext
from talkshell.routing.router import Router

logger = logging.getLogger("talkshell.routing")


class Navigator:
    """URL history plus dispatch.

    Usage::

        navigator = Navigator(router, on_route=shell.on_route)
        navigator.start("/")
        navigator.navigate("/talk/3")
        navigator.back()   # republishes "/"
    """

    __slots__ = ("_current", "_entries", "_index", "_on_route", "_router")

    def __init__(self, router: Router, on_route: Callable[[RouteContext], None]) -> None:
        self._router = router
        self._on_route = on_route
        self._entries: list[str] = []
        self._index = -1
        self._current: RouteContext | None = None

    @property
    def current(self) -> RouteContext | None:
        """The last published context, ``None`` before ``start``."""
        return self._current

    @property
    def url(self) -> str | None:
        """The URL of the current history entry."""
        if self._index < 0:
            return None
        return self._entries[self._index]

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._entries)

    @property
    def can_go_back(self) -> bool:
        return self._index > 0

    @property
    def can_go_forward(self) -> bool:
        return 0 <= self._index < len(self._entries) - 1

    def start(self, url: str = "/") -> RouteContext:
        """Reset history to *url* and publish its context."""
        self._entries = [url]
        self._index = 0
        return self._publish(url)

    def navigate(self, url: str) -> RouteContext:
        """In-app link activation: push *url* and publish.

        Following a link to the current URL re-dispatches without growing
        history. Forward entries are discarded on push.
        """
        if self._index < 0:
            return self.start(url)
        if self._entries[self._index] != url:
            del self._entries[self._index + 1 :]
            self._entries.append(url)
            self._index += 1
        return self._publish(url)

    def replace(self, url: str) -> RouteContext:
        """Swap the current history entry for *url* and publish."""
        if self._index < 0:
            return self.start(url)
        self._entries[self._index] = url
        return self._publish(url)

    def back(self) -> RouteContext | None:
        """Step back one entry. No-op (``None``) at the start of history."""
        if not self.can_go_back:
            return None
        self._index -= 1
        return self._publish(self._entries[self._index])

    def forward(self) -> RouteContext | None:
        """Step forward one entry. No-op (``None``) at the end of history."""
        if not self.can_go_forward:
            return None
        self._index += 1
        return self._publish(self._entries[self._index])

    def _publish(self, url: str) -> RouteContext:
        context = self._router.dispatch(url)
        self._current = context
        logger.debug("Navigated to %s (page=%r)", url, context.page)
        self._on_route(context)
        return context

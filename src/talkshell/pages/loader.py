"""Lazy, idempotent activation of page modules.

``request()`` is fire-and-forget: it schedules the load on the shell's task
group and returns immediately, so navigation never waits on a module.
``ensure()`` is the awaitable form used by the scheduled task and by tests.

Guarantees:
    - A page is loaded at most once while it is loading or ready.
    - Concurrent requests for a loading page wait on the same load.
    - A failing factory marks the page ``FAILED``; the next request retries.
    - Nothing raised by a factory escapes the loader.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

import anyio

from talkshell.errors import PageLoadError
from talkshell.pages.types import LoadStatus, PageFactory, PageId, PageView

if TYPE_CHECKING:
    from anyio.abc import TaskGroup

    from talkshell.analytics import Analytics

logger = logging.getLogger("talkshell.pages")


class PageLoader:
    """Activates page modules from an explicit ``PageId -> factory`` registry.

    Usage::

        loader = PageLoader(DEFAULT_PAGES)
        async with anyio.create_task_group() as tg:
            loader.bind(tg)
            loader.request(PageId.TALK)   # returns immediately
        loader.view(PageId.TALK)          # PageView once loaded
    """

    __slots__ = ("_analytics", "_events", "_factories", "_pending", "_status", "_task_group", "_views")

    def __init__(
        self,
        factories: Mapping[PageId, PageFactory],
        *,
        analytics: Analytics | None = None,
    ) -> None:
        self._factories = dict(factories)
        self._analytics = analytics
        self._status: dict[PageId, LoadStatus] = {}
        self._views: dict[PageId, PageView] = {}
        self._events: dict[PageId, anyio.Event] = {}
        self._pending: list[PageId] = []
        self._task_group: TaskGroup | None = None

    def bind(self, task_group: TaskGroup | None) -> None:
        """Attach (or detach, with ``None``) the task group loads run on.

        Requests made while unbound are queued and started on bind.
        """
        self._task_group = task_group
        if task_group is None:
            return
        pending, self._pending = self._pending, []
        for page in pending:
            self.request(page)

    def status(self, page: PageId) -> LoadStatus:
        return self._status.get(page, LoadStatus.NOT_LOADED)

    def view(self, page: PageId) -> PageView | None:
        """Return the loaded view for *page*, or ``None`` if not ready."""
        return self._views.get(page)

    def request(self, page: PageId) -> None:
        """Schedule activation of *page* without waiting for it."""
        if self.status(page) in (LoadStatus.LOADING, LoadStatus.READY):
            return
        if self._task_group is None:
            if page not in self._pending:
                self._pending.append(page)
            return
        event = self._begin(page)
        self._task_group.start_soon(self._load, page, event, name=f"load-page-{page}")

    async def ensure(self, page: PageId) -> PageView | None:
        """Activate *page* and return its view (``None`` on failure)."""
        status = self.status(page)
        if status is LoadStatus.READY:
            return self._views[page]
        if status is LoadStatus.LOADING:
            await self._events[page].wait()
            return self._views.get(page)
        event = self._begin(page)
        await self._load(page, event)
        return self._views.get(page)

    def _begin(self, page: PageId) -> anyio.Event:
        event = anyio.Event()
        self._events[page] = event
        self._status[page] = LoadStatus.LOADING
        return event

    async def _load(self, page: PageId, event: anyio.Event) -> None:
        try:
            factory = self._factories.get(page)
            if factory is None:
                raise PageLoadError(page.value, "no module registered")
            view = await factory()
        except Exception as exc:
            self._status[page] = LoadStatus.FAILED
            logger.warning("Page %r failed to load: %s", page.value, exc)
            if self._analytics is not None:
                error = exc if isinstance(exc, PageLoadError) else PageLoadError(page.value, str(exc))
                self._analytics.track_exception(error)
        else:
            self._views[page] = view
            self._status[page] = LoadStatus.READY
            logger.debug("Page %r ready", page.value)
        finally:
            self._events.pop(page, None)
            event.set()

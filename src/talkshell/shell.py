"""The shell — owner of all client state.

Routes navigation into page changes, lazily activates page modules, and
keeps the favourite talk ids in sync with the favourites store.

Mutations are plain synchronous assignments. Their side effects (store
writes, page loads, hydration) run as tasks on the shell's anyio task group,
which exists while ``Shell.running()`` is active.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import AsyncIterator, Callable, Mapping
from typing import TYPE_CHECKING, Any, TypeAlias

import anyio

from talkshell.analytics import Analytics, LoggingAnalytics
from talkshell.catalogue import Catalogue, CatalogueClient, TalkRecord
from talkshell.config import ShellConfig
from talkshell.errors import ShellError
from talkshell.http.query import QueryParams, parse_query_params
from talkshell.pages.loader import PageLoader
from talkshell.pages.registry import DEFAULT_PAGES
from talkshell.pages.types import PageFactory, PageId
from talkshell.pages.validate import validate_page
from talkshell.routing.navigator import Navigator
from talkshell.routing.protocol import Next
from talkshell.routing.route import NavigationRequest, RouteContext
from talkshell.routing.router import Router
from talkshell.signals import FavouriteSignal, SignalBus, TalkFavourited, TalkUnfavourited
from talkshell.state import FavouriteSet, ShellState, StateChange, add_favourite, remove_favourite
from talkshell.storage.favourites import FavouritesStore
from talkshell.storage.medium import KeyValueMedium, MemoryMedium, SqliteMedium
from talkshell.ui import Drawer

if TYPE_CHECKING:
    from anyio.abc import TaskGroup

logger = logging.getLogger("talkshell.shell")

StateListener: TypeAlias = Callable[[StateChange], None]


class Shell:
    """The application shell.

    Usage::

        shell = Shell(ShellConfig(initial_url="/talk/3"))
        async with shell.running():
            shell.navigator.navigate("/favourites")
            shell.signals.favourite("3")
        # leaving the block waits for pending writes and page loads
    """

    __slots__ = (
        "_favourites",
        "_is_error",
        "_is_loading",
        "_listeners",
        "_owned_medium",
        "_page",
        "_route",
        "_talks",
        "_task_group",
        "analytics",
        "catalogue",
        "config",
        "drawer",
        "loader",
        "navigator",
        "router",
        "signals",
        "store",
    )

    def __init__(
        self,
        config: ShellConfig | None = None,
        *,
        medium: KeyValueMedium | None = None,
        catalogue: Catalogue | None = None,
        analytics: Analytics | None = None,
        pages: Mapping[PageId, PageFactory] | None = None,
        drawer: Drawer | None = None,
        signals: SignalBus | None = None,
    ) -> None:
        self.config: ShellConfig = config or ShellConfig()
        # Closed when running() exits; caller-supplied media are left alone
        self._owned_medium: SqliteMedium | None = None
        if medium is None:
            if self.config.storage_path is not None:
                medium = self._owned_medium = SqliteMedium(self.config.storage_path)
            else:
                medium = MemoryMedium()
        self.store = FavouritesStore(medium, key=self.config.favourites_key)
        self.catalogue: Catalogue = catalogue or CatalogueClient(
            self.config.catalogue_url, timeout=self.config.fetch_timeout,
        )
        self.analytics: Analytics = analytics or LoggingAnalytics()
        self.loader = PageLoader(DEFAULT_PAGES if pages is None else pages, analytics=self.analytics)
        self.drawer = drawer or Drawer()
        self.signals = signals or SignalBus()

        # Live state: replaced wholesale, never mutated in place
        self._page: PageId | None = None
        self._route = RouteContext(path="/")
        self._favourites: FavouriteSet = ()
        self._talks: tuple[TalkRecord, ...] = ()
        self._is_loading = False
        self._is_error = False

        self._listeners: list[StateListener] = []
        self._task_group: TaskGroup | None = None

        self.router = Router()
        self.routing()
        self.navigator = Navigator(self.router, self.on_route)

    # -- State accessors --

    @property
    def page(self) -> PageId | None:
        return self._page

    @property
    def route(self) -> RouteContext:
        return self._route

    @property
    def query_params(self) -> QueryParams:
        return self._route.query_params

    @property
    def favourites(self) -> FavouriteSet:
        return self._favourites

    @property
    def talks(self) -> tuple[TalkRecord, ...]:
        return self._talks

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def is_error(self) -> bool:
        return self._is_error

    @property
    def is_running(self) -> bool:
        return self._task_group is not None

    def snapshot(self) -> ShellState:
        """Return a frozen view of the current state."""
        return ShellState(
            page=self._page,
            route=self._route,
            favourites=self._favourites,
            talks=self._talks,
            is_loading=self._is_loading,
            is_error=self._is_error,
        )

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register *listener* for state changes. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            with contextlib.suppress(ValueError):
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, *changed: str) -> None:
        if not self._listeners:
            return
        change = StateChange(changed=frozenset(changed), state=self.snapshot())
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception:
                logger.exception("State listener %r failed", listener)

    # -- Routing --

    def routing(self) -> None:
        """Build the route table. Order matters: first terminal match wins."""

        # Parses the query string off every URL:
        # /home?hi=everyone -> {"hi": "everyone"}
        def query(request: NavigationRequest, next: Next) -> RouteContext | None:
            request.query_params = parse_query_params(request.url)
            return next(request)

        def root(request: NavigationRequest, next: Next) -> RouteContext:
            return request.resolve(page=PageId.HOME.value)

        def talk(request: NavigationRequest, next: Next) -> RouteContext:
            return request.resolve(page=PageId.TALK.value)

        def page(request: NavigationRequest, next: Next) -> RouteContext:
            return request.resolve()

        self.router.add("*", query, name="query")
        self.router.add("/", root, name="root")
        self.router.add("/talk/:id", talk, name="talk")
        self.router.add("/:page", page, name="page")
        self.router.compile()

    def on_route(self, context: RouteContext) -> None:
        """Apply a new route: validate the page, activate it, report the view."""
        self._route = context
        changed = ["route"]
        page = validate_page(context.params.get("page"))
        if page is not self._page:
            self._page = page
            changed.append("page")
            self.loader.request(page)
            self.drawer.close()
        # Raw name, so invalid routes show up in analytics
        self.analytics.track_page_view(context.page)
        self._notify(*changed)

    def toggle_drawer(self) -> None:
        self.drawer.toggle()

    def render(self) -> str:
        """Render the current page, or ``""`` while its module is not ready."""
        if self._page is None:
            return ""
        view = self.loader.view(self._page)
        if view is None:
            return ""
        return view.render(self.snapshot())

    # -- Favourites --

    def handle_signal(self, signal: FavouriteSignal) -> None:
        """Entry point for the signal bus."""
        if isinstance(signal, TalkFavourited):
            self.favourite(signal.talk_id)
        elif isinstance(signal, TalkUnfavourited):
            self.unfavourite(signal.talk_id)
        else:
            logger.warning("Ignoring unknown signal %r", signal)

    def favourite(self, talk_id: str) -> None:
        """Add *talk_id* to the favourites. No-op if already present."""
        updated = add_favourite(self._favourites, talk_id)
        if updated is not self._favourites:
            self._replace_favourites(updated)

    def unfavourite(self, talk_id: str) -> None:
        """Remove *talk_id* from the favourites. No-op if absent."""
        updated = remove_favourite(self._favourites, talk_id)
        if updated is not self._favourites:
            self._replace_favourites(updated)

    def _replace_favourites(self, updated: FavouriteSet) -> None:
        task_group = self._require_running()
        self._favourites = updated
        self._notify("favourites")
        task_group.start_soon(self._persist_favourites, name="persist-favourites")

    async def _persist_favourites(self) -> None:
        # Always write the current full set: the last write to land wins
        try:
            await self.store.save(self._favourites)
        except Exception as exc:
            logger.warning("Could not save favourites: %s", exc)
            self.analytics.track_exception(exc)

    # -- Hydration --

    async def hydrate(self) -> None:
        """Load the catalogue and stored favourites concurrently.

        The two sources are independent: one failing sets ``is_error`` but
        does not stop the other. ``is_loading`` clears once both settle.
        """
        self._is_loading = True
        self._notify("is_loading")
        try:
            async with anyio.create_task_group() as tg:
                tg.start_soon(self.load_talks, name="load-talks")
                tg.start_soon(self.load_favourites, name="load-favourites")
        finally:
            self._is_loading = False
            self._notify("is_loading")

    async def load_talks(self) -> None:
        """Fetch the catalogue. On failure the current talks are kept."""
        try:
            talks = await self.catalogue.fetch()
        except Exception as exc:
            self._hydration_failed("catalogue", exc)
            return
        self._talks = tuple(talks)
        self._notify("talks")

    async def load_favourites(self) -> None:
        """Replace the in-memory favourites with the stored ones.

        Changes made while the read was in flight win: stored ids come
        first (minus any removed meanwhile), then ids added in memory, and
        the merged set is written back.
        """
        before = self._favourites
        try:
            ids = await self.store.load()
        except Exception as exc:
            self._hydration_failed("favourites", exc)
            return
        current = self._favourites
        if current is before:
            self._favourites = tuple(ids)
            self._notify("favourites")
            return
        removed = set(before) - set(current)
        merged = tuple(i for i in ids if i not in removed)
        merged += tuple(i for i in current if i not in merged)
        self._favourites = merged
        self._notify("favourites")
        if self._task_group is not None:
            self._task_group.start_soon(self._persist_favourites, name="persist-favourites")

    def _hydration_failed(self, source: str, exc: Exception) -> None:
        logger.warning("Loading %s failed: %s", source, exc)
        self._is_error = True
        self.analytics.track_exception(exc)
        self._notify("is_error")

    # -- Lifecycle --

    def _require_running(self) -> TaskGroup:
        if self._task_group is None:
            msg = "Shell is not running; use 'async with shell.running():'"
            raise ShellError(msg)
        return self._task_group

    @contextlib.asynccontextmanager
    async def running(self, *, hydrate: bool = True) -> AsyncIterator[Shell]:
        """Run the shell: bind signals, route the initial URL, hydrate.

        Leaving the block waits for every pending background task, then
        closes the SQLite medium if the shell opened it from ``storage_path``.
        """
        if self._task_group is not None:
            msg = "Shell is already running"
            raise ShellError(msg)
        try:
            async with anyio.create_task_group() as tg:
                self._task_group = tg
                self.loader.bind(tg)
                self.signals.bind(self.handle_signal)
                try:
                    if self.navigator.current is None:
                        self.navigator.start(self.config.initial_url)
                    if hydrate:
                        tg.start_soon(self.hydrate, name="hydrate")
                    yield self
                finally:
                    self.signals.unbind()
        finally:
            self.loader.bind(None)
            self._task_group = None
            if self._owned_medium is not None:
                self._owned_medium.close()

    def __repr__(self) -> str:
        state: dict[str, Any] = {
            "page": self._page,
            "favourites": self._favourites,
            "talks": len(self._talks),
        }
        return f"Shell({state!r})"

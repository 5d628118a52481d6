"""Startup-time registry of page modules.

Each ``PageId`` maps to a factory that imports its view module on first use.
The mapping is explicit: pages are looked up by enum value, never by
resolving module names at runtime.
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType, ModuleType

from anyio.lowlevel import checkpoint

from talkshell.pages.types import PageFactory, PageId, PageView


def lazy_view(importer: Callable[[], ModuleType]) -> PageFactory:
    """Wrap a module importer as an async factory returning ``module.view``."""

    async def factory() -> PageView:
        # Yield first so activation never runs inside the navigation call
        await checkpoint()
        module = importer()
        return module.view

    return factory


def _home() -> ModuleType:
    from talkshell.views import home

    return home


def _favourites() -> ModuleType:
    from talkshell.views import favourites

    return favourites


def _talk() -> ModuleType:
    from talkshell.views import talk

    return talk


def _privacy() -> ModuleType:
    from talkshell.views import privacy

    return privacy


def _terms() -> ModuleType:
    from talkshell.views import terms

    return terms


def _sponsors() -> ModuleType:
    from talkshell.views import sponsors

    return sponsors


def _lost() -> ModuleType:
    from talkshell.views import lost

    return lost


DEFAULT_PAGES: Mapping[PageId, PageFactory] = MappingProxyType({
    PageId.HOME: lazy_view(_home),
    PageId.FAVOURITES: lazy_view(_favourites),
    PageId.TALK: lazy_view(_talk),
    PageId.PRIVACY: lazy_view(_privacy),
    PageId.TERMS: lazy_view(_terms),
    PageId.SPONSORS: lazy_view(_sponsors),
    PageId.LOST: lazy_view(_lost),
})

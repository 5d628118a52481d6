"""Page identifiers, load status, and the PageView contract."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from talkshell.state import ShellState


class PageId(StrEnum):
    """The closed set of pages the shell can show.

    ``LOST`` is the not-found fallback.
    """

    HOME = "home"
    FAVOURITES = "favourites"
    TALK = "talk"
    PRIVACY = "privacy"
    TERMS = "terms"
    SPONSORS = "sponsors"
    LOST = "lost"


class LoadStatus(StrEnum):
    """Lifecycle of a lazily activated page module."""

    NOT_LOADED = "not-loaded"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class PageView:
    """A loaded page module, registered for rendering.

    ``render`` receives the shell's current snapshot and returns the page
    body. Views never mutate the snapshot.
    """

    page: PageId
    title: str
    render: Callable[[ShellState], str]


# An async callable that activates a page module and returns its view
PageFactory: TypeAlias = Callable[[], Awaitable[PageView]]

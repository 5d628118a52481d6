"""Shell state snapshots and favourite-set operations.

The shell owns the live values; everything else sees frozen ``ShellState``
snapshots. Favourite sets are tuples, so every change produces a new value
and older snapshots stay consistent.
"""

from dataclasses import dataclass, field
from typing import TypeAlias

from talkshell.catalogue import TalkRecord
from talkshell.pages.types import PageId
from talkshell.routing.route import RouteContext

# Ordered, duplicate-free favourite talk ids
FavouriteSet: TypeAlias = tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ShellState:
    """Read-only view of the shell at one point in time.

    ``page`` is ``None`` until the first navigation has been routed.
    """

    page: PageId | None = None
    route: RouteContext = field(default_factory=lambda: RouteContext(path="/"))
    favourites: FavouriteSet = ()
    talks: tuple[TalkRecord, ...] = ()
    is_loading: bool = False
    is_error: bool = False

    def is_favourite(self, talk_id: str) -> bool:
        return talk_id in self.favourites


@dataclass(frozen=True, slots=True)
class StateChange:
    """Delivered to shell listeners after each mutation.

    Attributes:
        changed: Names of the ``ShellState`` fields that changed.
        state: Snapshot taken after the change.
    """

    changed: frozenset[str]
    state: ShellState


def add_favourite(favourites: FavouriteSet, talk_id: str) -> FavouriteSet:
    """Return *favourites* with *talk_id* appended.

    Returns the same tuple object when *talk_id* is already present.
    """
    if talk_id in favourites:
        return favourites
    return (*favourites, talk_id)


def remove_favourite(favourites: FavouriteSet, talk_id: str) -> FavouriteSet:
    """Return *favourites* without the first occurrence of *talk_id*.

    Returns the same tuple object when *talk_id* is absent.
    """
    try:
        index = favourites.index(talk_id)
    except ValueError:
        return favourites
    return favourites[:index] + favourites[index + 1 :]


def unique_ids(ids: object) -> FavouriteSet | None:
    """Normalise a decoded payload into a favourite set.

    Returns ``None`` unless *ids* is a list of strings. Duplicates are
    dropped, keeping the first occurrence.
    """
    if not isinstance(ids, list) or not all(isinstance(i, str) for i in ids):
        return None
    return tuple(dict.fromkeys(ids))

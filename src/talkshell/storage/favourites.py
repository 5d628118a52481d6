"""Persistence boundary for the favourite talk ids.

The whole collection lives under one fixed key as a JSON array of strings.
Loading never fails the caller: a missing key, an unreadable medium, or a
corrupt payload all yield an empty list.
"""

import json
import logging
from collections.abc import Iterable

from talkshell.errors import StorageError
from talkshell.state import unique_ids
from talkshell.storage.medium import KeyValueMedium

logger = logging.getLogger("talkshell.storage")

FAVOURITES_KEY = "favourite-talks"


class FavouritesStore:
    """Load, save, and clear the favourite ids on a ``KeyValueMedium``."""

    __slots__ = ("key", "medium")

    def __init__(self, medium: KeyValueMedium, key: str = FAVOURITES_KEY) -> None:
        self.medium = medium
        self.key = key

    async def load(self) -> list[str]:
        try:
            raw = await self.medium.get(self.key)
        except StorageError as exc:
            logger.warning("Could not read favourites: %s", exc)
            return []
        if raw is None:
            return []
        try:
            decoded = json.loads(raw)
        except (ValueError, RecursionError):
            logger.warning("Discarding corrupt favourites payload under %r", self.key)
            return []
        ids = unique_ids(decoded)
        if ids is None:
            logger.warning("Discarding favourites payload under %r: not a list of strings", self.key)
            return []
        return list(ids)

    async def save(self, ids: Iterable[str]) -> None:
        """Overwrite the stored collection. Raises ``StorageError`` on failure."""
        await self.medium.set(self.key, json.dumps(list(ids)))

    async def clear(self) -> None:
        await self.medium.delete(self.key)

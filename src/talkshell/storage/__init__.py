"""Storage — durable client state (favourite talks)."""

from talkshell.storage.favourites import FAVOURITES_KEY, FavouritesStore
from talkshell.storage.medium import KeyValueMedium, MemoryMedium, SqliteMedium

__all__ = [
    "FAVOURITES_KEY",
    "FavouritesStore",
    "KeyValueMedium",
    "MemoryMedium",
    "SqliteMedium",
]

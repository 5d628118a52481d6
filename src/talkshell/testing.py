"""Test doubles for talkshell collaborators.

Usage::

    analytics = RecordingAnalytics()
    shell = Shell(catalogue=static_catalogue(SAMPLE_TALKS), analytics=analytics)
    async with shell.running():
        shell.signals.favourite("1")
    assert analytics.exceptions == []
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from talkshell.catalogue import TalkRecord, parse_talks
from talkshell.errors import StorageError
from talkshell.storage.medium import MemoryMedium

# Shaped like the published catalogue; the first record has no "id"
SAMPLE_TALKS: list[dict[str, object]] = [
    {
        "title": "Talk",
        "date": "2020-02-11T20:18:20.026Z",
        "speaker": "Roger",
        "description": "blblbllblblblbl",
    },
    {
        "id": "open-data",
        "title": "Open Data in Leeds",
        "date": "2020-04-21T18:00:00Z",
        "speaker": "Ada",
        "description": "Publishing council data.",
    },
]


@dataclass(slots=True)
class RecordingAnalytics:
    """Analytics sink that keeps everything it is told."""

    __test__ = False

    page_views: list[str] = field(default_factory=list)
    exceptions: list[BaseException] = field(default_factory=list)

    def track_page_view(self, name: str) -> None:
        self.page_views.append(name)

    def track_exception(self, error: BaseException) -> None:
        self.exceptions.append(error)


class StaticCatalogue:
    """Catalogue that returns fixed talks, or raises a fixed error."""

    __test__ = False
    __slots__ = ("calls", "error", "talks")

    def __init__(self, talks: Sequence[TalkRecord] = (), error: Exception | None = None) -> None:
        self.talks = tuple(talks)
        self.error = error
        self.calls = 0

    async def fetch(self) -> tuple[TalkRecord, ...]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.talks


def static_catalogue(
    talks: Sequence[TalkRecord] | list[dict[str, object]] = (),
    *,
    error: Exception | None = None,
) -> StaticCatalogue:
    """Build a ``StaticCatalogue`` from records or raw JSON-style dicts."""
    if talks and isinstance(talks[0], dict):
        talks = parse_talks(list(talks))
    return StaticCatalogue(talks, error=error)  # type: ignore[arg-type]


class FailingMedium(MemoryMedium):
    """Memory medium whose reads and/or writes raise ``StorageError``."""

    __test__ = False
    __slots__ = ("fail_reads", "fail_writes", "writes")

    def __init__(
        self,
        initial: dict[str, str] | None = None,
        *,
        fail_reads: bool = False,
        fail_writes: bool = True,
    ) -> None:
        super().__init__(initial)
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.writes = 0

    async def get(self, key: str) -> str | None:
        if self.fail_reads:
            msg = f"read of {key!r} failed"
            raise StorageError(msg)
        return await super().get(key)

    async def set(self, key: str, value: str) -> None:
        self.writes += 1
        if self.fail_writes:
            msg = f"write of {key!r} failed"
            raise StorageError(msg)
        await super().set(key, value)

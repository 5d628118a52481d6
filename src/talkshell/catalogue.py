"""Talk records and the catalogue client.

The catalogue is a single read-only JSON endpoint returning an array of
talk objects. Any non-success status, transport failure, or malformed body
raises ``CatalogueError``.
"""

import json
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Protocol

import anyio
import httpx

from talkshell.errors import CatalogueError


@dataclass(frozen=True, slots=True)
class TalkRecord:
    """A single talk. Read-only once fetched.

    ``id`` is the favouriting identifier: the record's ``"id"`` field when
    the catalogue provides one, otherwise its position in the catalogue.
    ``date`` stays a string when it is not ISO 8601.
    """

    id: str
    title: str
    date: datetime | str
    speaker: str
    description: str


def _parse_date(value: Any) -> datetime | str:
    if not isinstance(value, str):
        return _text(value)
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def parse_talk(raw: Any, position: int) -> TalkRecord:
    """Build a ``TalkRecord`` from one decoded JSON object."""
    if not isinstance(raw, dict):
        msg = f"talk #{position} is not an object"
        raise CatalogueError(msg)
    raw_id = raw.get("id")
    return TalkRecord(
        id=str(position) if raw_id is None else str(raw_id),
        title=_text(raw.get("title")),
        date=_parse_date(raw.get("date")),
        speaker=_text(raw.get("speaker")),
        description=_text(raw.get("description")),
    )


def parse_talks(payload: Any) -> tuple[TalkRecord, ...]:
    """Decode the catalogue body. The payload must be a JSON array."""
    if not isinstance(payload, list):
        msg = f"expected a JSON array of talks, got {type(payload).__name__}"
        raise CatalogueError(msg)
    return tuple(parse_talk(raw, i) for i, raw in enumerate(payload))


def find_talk(talks: Sequence[TalkRecord], talk_id: str) -> TalkRecord | None:
    """Return the talk with *talk_id*, or ``None``."""
    for talk in talks:
        if talk.id == talk_id:
            return talk
    return None


class Catalogue(Protocol):
    """Anything that can produce the talk list."""

    async def fetch(self) -> Sequence[TalkRecord]: ...


class CatalogueClient:
    """Fetches the catalogue over HTTP with ``httpx``.

    Usage::

        client = CatalogueClient("https://example.org/talks.json")
        talks = await client.fetch()

    Pass ``transport=httpx.MockTransport(handler)`` to serve canned
    responses in tests.
    """

    __slots__ = ("timeout", "transport", "url")

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.transport = transport

    async def fetch(self) -> tuple[TalkRecord, ...]:
        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
                response = await client.get(self.url, headers={"Accept": "application/json"})
        except httpx.HTTPError as exc:
            msg = f"request to {self.url} failed: {exc}"
            raise CatalogueError(msg) from exc

        if not response.is_success:
            raise CatalogueError(response.reason_phrase, status=response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            msg = "catalogue body is not valid JSON"
            raise CatalogueError(msg) from exc
        return parse_talks(payload)


class FileCatalogue:
    """Reads the catalogue from a local JSON file (offline use)."""

    __slots__ = ("path",)

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    async def fetch(self) -> tuple[TalkRecord, ...]:
        try:
            text = await anyio.Path(self.path).read_text(encoding="utf-8")
        except OSError as exc:
            msg = f"cannot read {self.path}: {exc}"
            raise CatalogueError(msg) from exc
        try:
            payload = json.loads(text)
        except ValueError as exc:
            msg = f"{self.path} is not valid JSON"
            raise CatalogueError(msg) from exc
        return parse_talks(payload)

"""Tests for talkshell.catalogue — talk records and the HTTP client."""

import json
from datetime import UTC, datetime

import httpx
import pytest

from talkshell.catalogue import CatalogueClient, FileCatalogue, find_talk, parse_talks
from talkshell.errors import CatalogueError

from talkshell.testing import SAMPLE_TALKS as RAW_TALKS

URL = "https://example.test/talks.json"


def _client(handler) -> CatalogueClient:
    return CatalogueClient(URL, transport=httpx.MockTransport(handler))


class TestParseTalks:
    def test_fields(self) -> None:
        talk = parse_talks(RAW_TALKS)[0]
        assert talk.title == "Talk"
        assert talk.speaker == "Roger"
        assert talk.description == "blblbllblblblbl"
        assert talk.date == datetime(2020, 2, 11, 20, 18, 20, 26000, tzinfo=UTC)

    def test_id_falls_back_to_position(self) -> None:
        talks = parse_talks(RAW_TALKS)
        assert talks[0].id == "0"
        assert talks[1].id == "open-data"

    def test_numeric_id_stringified(self) -> None:
        assert parse_talks([{"id": 7, "title": "x"}])[0].id == "7"

    def test_unparseable_date_kept(self) -> None:
        assert parse_talks([{"date": "next tuesday"}])[0].date == "next tuesday"

    def test_missing_fields_default_empty(self) -> None:
        talk = parse_talks([{}])[0]
        assert (talk.title, talk.speaker, talk.description, talk.date) == ("", "", "", "")

    def test_null_fields_are_empty(self) -> None:
        raw = {"title": None, "speaker": None, "description": None, "date": None}
        talk = parse_talks([raw])[0]
        assert (talk.title, talk.speaker, talk.description, talk.date) == ("", "", "", "")

    def test_not_a_list(self) -> None:
        with pytest.raises(CatalogueError):
            parse_talks({"talks": []})

    def test_entry_not_an_object(self) -> None:
        with pytest.raises(CatalogueError):
            parse_talks(["talk"])

    def test_records_are_frozen(self) -> None:
        talk = parse_talks(RAW_TALKS)[0]
        with pytest.raises(AttributeError):
            talk.title = "changed"  # type: ignore[misc]

    def test_find_talk(self) -> None:
        talks = parse_talks(RAW_TALKS)
        assert find_talk(talks, "open-data") is talks[1]
        assert find_talk(talks, "missing") is None


class TestCatalogueClient:
    @pytest.mark.anyio
    async def test_ok_response(self) -> None:
        requested: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(request)
            return httpx.Response(200, json=RAW_TALKS)

        talks = await _client(handler).fetch()
        assert [t.title for t in talks] == ["Talk", "Open Data in Leeds"]
        assert len(requested) == 1
        assert str(requested[0].url) == URL

    @pytest.mark.anyio
    async def test_non_success_status_skips_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            # Body would parse; it must not be used
            return httpx.Response(503, json=[{"notA": "Talk"}])

        with pytest.raises(CatalogueError) as exc_info:
            await _client(handler).fetch()
        assert exc_info.value.status == 503
        assert "503" in str(exc_info.value)

    @pytest.mark.anyio
    async def test_not_found(self) -> None:
        with pytest.raises(CatalogueError) as exc_info:
            await _client(lambda request: httpx.Response(404)).fetch()
        assert exc_info.value.status == 404

    @pytest.mark.anyio
    async def test_transport_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            msg = "connection refused"
            raise httpx.ConnectError(msg, request=request)

        with pytest.raises(CatalogueError) as exc_info:
            await _client(handler).fetch()
        assert exc_info.value.status is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.anyio
    async def test_invalid_json(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>oops</html>")

        with pytest.raises(CatalogueError):
            await _client(handler).fetch()


class TestFileCatalogue:
    @pytest.mark.anyio
    async def test_reads_file(self, tmp_path) -> None:
        path = tmp_path / "talks.json"
        path.write_text(json.dumps(RAW_TALKS), encoding="utf-8")
        talks = await FileCatalogue(path).fetch()
        assert len(talks) == 2

    @pytest.mark.anyio
    async def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(CatalogueError):
            await FileCatalogue(tmp_path / "nope.json").fetch()

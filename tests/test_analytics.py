"""Tests for talkshell.analytics — the logging analytics sink."""

import logging

import pytest

from talkshell.analytics import LoggingAnalytics
from talkshell.errors import CatalogueError


class TestLoggingAnalytics:
    def test_takes_no_settings(self) -> None:
        with pytest.raises(TypeError):
            LoggingAnalytics("key")  # type: ignore[call-arg]

    def test_page_view_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="talkshell.analytics"):
            LoggingAnalytics().track_page_view("talk")
            LoggingAnalytics().track_page_view("")
        assert [r.getMessage() for r in caplog.records] == ["page view: talk", "page view: <none>"]

    def test_exception_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="talkshell.analytics"):
            LoggingAnalytics().track_exception(CatalogueError("timed out"))
        assert caplog.records[0].getMessage() == "exception: CatalogueError: timed out"

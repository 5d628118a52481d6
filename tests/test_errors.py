"""Tests for talkshell.errors — exception hierarchy and messages."""

from talkshell.errors import (
    CatalogueError,
    ConfigurationError,
    PageLoadError,
    ShellError,
    StorageError,
)


class TestHierarchy:
    def test_all_are_shell_errors(self) -> None:
        for cls in (CatalogueError, ConfigurationError, PageLoadError, StorageError):
            assert issubclass(cls, ShellError)


class TestCatalogueError:
    def test_with_status(self) -> None:
        err = CatalogueError("Not Found", status=404)
        assert err.status == 404
        assert str(err) == "404: Not Found"

    def test_status_without_detail(self) -> None:
        assert str(CatalogueError(status=500)) == "500"

    def test_transport(self) -> None:
        err = CatalogueError("timed out")
        assert err.status is None
        assert str(err) == "timed out"

    def test_default_message(self) -> None:
        assert str(CatalogueError()) == "catalogue unavailable"


class TestPageLoadError:
    def test_message(self) -> None:
        err = PageLoadError("talk", "no module registered")
        assert err.page == "talk"
        assert str(err) == "Failed to load page 'talk': no module registered"

    def test_without_detail(self) -> None:
        assert str(PageLoadError("home")) == "Failed to load page 'home'"

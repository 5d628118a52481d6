"""Tests for talkshell.config — ShellConfig frozen dataclass."""

from pathlib import Path

import pytest

from talkshell.config import ShellConfig
from talkshell.errors import ConfigurationError


class TestShellConfig:
    def test_defaults(self) -> None:
        cfg = ShellConfig()
        assert cfg.catalogue_url.endswith("/talks.json")
        assert cfg.fetch_timeout == 10.0
        assert cfg.storage_path is None
        assert cfg.favourites_key == "favourite-talks"
        assert cfg.initial_url == "/"
        assert cfg.log_level == "info"

    def test_override(self) -> None:
        cfg = ShellConfig(initial_url="/favourites", storage_path=Path("favs.db"))
        assert cfg.initial_url == "/favourites"
        assert cfg.storage_path == Path("favs.db")

    def test_frozen(self) -> None:
        cfg = ShellConfig()
        with pytest.raises(AttributeError):
            cfg.initial_url = "/home"  # type: ignore[misc]


class TestFromEnv:
    def test_empty_env_is_defaults(self) -> None:
        assert ShellConfig.from_env({}) == ShellConfig()

    def test_reads_prefixed_variables(self) -> None:
        cfg = ShellConfig.from_env({
            "TALKSHELL_CATALOGUE_URL": "https://example.test/t.json",
            "TALKSHELL_FETCH_TIMEOUT": "2.5",
            "TALKSHELL_STORAGE_PATH": "/tmp/favs.db",
            "TALKSHELL_LOG_LEVEL": "debug",
            "UNRELATED": "x",
        })
        assert cfg.catalogue_url == "https://example.test/t.json"
        assert cfg.fetch_timeout == 2.5
        assert cfg.storage_path == "/tmp/favs.db"
        assert cfg.log_level == "debug"

    def test_bad_timeout(self) -> None:
        with pytest.raises(ConfigurationError):
            ShellConfig.from_env({"TALKSHELL_FETCH_TIMEOUT": "soon"})

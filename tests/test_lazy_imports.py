"""Tests for the talkshell top-level exports."""

import importlib

import pytest

import talkshell


class TestExports:
    @pytest.mark.parametrize("name", talkshell.__all__)
    def test_resolves_to_defining_module(self, name: str) -> None:
        obj = getattr(talkshell, name)
        module = importlib.import_module(talkshell._LAZY_IMPORTS[name])
        assert obj is getattr(module, name)

    def test_registry_matches_all(self) -> None:
        assert sorted(talkshell._LAZY_IMPORTS) == sorted(talkshell.__all__)

    def test_unknown_name(self) -> None:
        with pytest.raises(AttributeError, match="has no attribute 'Nope'"):
            talkshell.__getattr__("Nope")

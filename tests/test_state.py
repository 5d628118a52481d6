"""Tests for talkshell.state — snapshots and favourite-set operations."""

import pytest

from talkshell.state import ShellState, add_favourite, remove_favourite, unique_ids


class TestAddFavourite:
    def test_appends(self) -> None:
        assert add_favourite(("1",), "2") == ("1", "2")

    def test_present_returns_same_object(self) -> None:
        favourites = ("1", "2")
        assert add_favourite(favourites, "1") is favourites


class TestRemoveFavourite:
    def test_removes(self) -> None:
        assert remove_favourite(("1", "2", "3"), "2") == ("1", "3")

    def test_absent_returns_same_object(self) -> None:
        favourites = ("1",)
        assert remove_favourite(favourites, "9") is favourites

    def test_removes_first_occurrence_only(self) -> None:
        assert remove_favourite(("1", "2", "1"), "1") == ("2", "1")


class TestUniqueIds:
    def test_dedupes_keeping_first(self) -> None:
        assert unique_ids(["b", "a", "b"]) == ("b", "a")

    @pytest.mark.parametrize("payload", [None, "1", {"1": 1}, [1], ["1", 2]])
    def test_rejects_non_string_lists(self, payload: object) -> None:
        assert unique_ids(payload) is None


class TestShellState:
    def test_defaults(self) -> None:
        state = ShellState()
        assert state.page is None
        assert state.route.path == "/"
        assert state.favourites == ()
        assert state.talks == ()
        assert state.is_loading is False
        assert state.is_error is False

    def test_loading_and_error_independent(self) -> None:
        state = ShellState(is_loading=False, is_error=True)
        assert (state.is_loading, state.is_error) == (False, True)

    def test_is_favourite(self) -> None:
        assert ShellState(favourites=("1",)).is_favourite("1") is True
        assert ShellState().is_favourite("1") is False

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            ShellState().favourites = ("1",)  # type: ignore[misc]

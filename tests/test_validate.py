"""Tests for talkshell.pages.validate — page fallback policy."""

import pytest

from talkshell.pages.types import PageId
from talkshell.pages.validate import validate_page


def test_empty_is_home() -> None:
    assert validate_page("") is PageId.HOME


def test_none_is_home() -> None:
    assert validate_page(None) is PageId.HOME


def test_unknown_is_lost() -> None:
    assert validate_page("nonexistent") is PageId.LOST


@pytest.mark.parametrize("page", list(PageId))
def test_known_pages_unchanged(page: PageId) -> None:
    assert validate_page(page.value) is page


@pytest.mark.parametrize("candidate", ["Home", "home ", "talk/1", "../home", "HOME"])
def test_near_misses_are_lost(candidate: str) -> None:
    assert validate_page(candidate) is PageId.LOST

"""Shared fixtures for talkshell tests."""

import pytest

from talkshell.catalogue import TalkRecord, parse_talks
from talkshell.shell import Shell
from talkshell.storage.medium import MemoryMedium
from talkshell.testing import SAMPLE_TALKS, RecordingAnalytics, static_catalogue


@pytest.fixture
def talks() -> tuple[TalkRecord, ...]:
    return parse_talks(SAMPLE_TALKS)


@pytest.fixture
def analytics() -> RecordingAnalytics:
    return RecordingAnalytics()


@pytest.fixture
def medium() -> MemoryMedium:
    return MemoryMedium()


@pytest.fixture
def shell(talks, analytics, medium) -> Shell:
    return Shell(medium=medium, catalogue=static_catalogue(talks), analytics=analytics)

"""Sponsors page."""

from talkshell.pages.types import PageId, PageView
from talkshell.state import ShellState


def render(state: ShellState) -> str:
    return "The festival is free to attend thanks to its sponsors."


view = PageView(page=PageId.SPONSORS, title="Sponsors", render=render)

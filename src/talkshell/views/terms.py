"""Terms page."""

from talkshell.pages.types import PageId, PageView
from talkshell.state import ShellState


def render(state: ShellState) -> str:
    return "Talk details are supplied by speakers and may change without notice."


view = PageView(page=PageId.TERMS, title="Terms", render=render)

"""Favourite talks page."""

from talkshell.catalogue import find_talk
from talkshell.pages.types import PageId, PageView
from talkshell.state import ShellState
from talkshell.views._common import status_line, talk_line


def render(state: ShellState) -> str:
    banner = status_line(state)
    if banner is not None:
        return banner
    talks = [find_talk(state.talks, talk_id) for talk_id in state.favourites]
    rows = [talk_line(state, talk) for talk in talks if talk is not None]
    if not rows:
        return "You have not favourited any talks yet."
    return "\n".join(rows)


view = PageView(page=PageId.FAVOURITES, title="Favourite talks", render=render)

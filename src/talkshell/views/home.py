"""Home page: the full talk list."""

from talkshell.pages.types import PageId, PageView
from talkshell.state import ShellState
from talkshell.views._common import status_line, talk_line


def render(state: ShellState) -> str:
    banner = status_line(state)
    if banner is not None:
        return banner
    if not state.talks:
        return "No talks announced yet."
    return "\n".join(talk_line(state, talk) for talk in state.talks)


view = PageView(page=PageId.HOME, title="Home", render=render)

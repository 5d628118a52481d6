"""Not-found page."""

from talkshell.pages.types import PageId, PageView
from talkshell.state import ShellState


def render(state: ShellState) -> str:
    return f"Nothing lives at {state.route.path}. Head back to /home."


view = PageView(page=PageId.LOST, title="Page not found", render=render)

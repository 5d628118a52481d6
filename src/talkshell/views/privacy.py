"""Privacy page."""

from talkshell.pages.types import PageId, PageView
from talkshell.state import ShellState


def render(state: ShellState) -> str:
    return (
        "Your favourite talks are stored on this device only.\n"
        "Page views and errors are reported anonymously to help us fix problems."
    )


view = PageView(page=PageId.PRIVACY, title="Privacy", render=render)

"""Single talk page, addressed as ``/talk/:id``."""

from talkshell.catalogue import find_talk
from talkshell.pages.types import PageId, PageView
from talkshell.state import ShellState
from talkshell.views._common import format_date, status_line


def render(state: ShellState) -> str:
    banner = status_line(state)
    if banner is not None:
        return banner
    talk_id = state.route.params.get("id", "")
    talk = find_talk(state.talks, talk_id)
    if talk is None:
        return f"Talk {talk_id!r} was not found."
    favourite = "Favourited" if state.is_favourite(talk.id) else "Not favourited"
    return "\n".join([
        talk.title,
        f"{talk.speaker} — {format_date(talk.date)}",
        "",
        talk.description,
        "",
        favourite,
    ])


view = PageView(page=PageId.TALK, title="Talk", render=render)

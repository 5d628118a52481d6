"""Rendering helpers shared by the talk-listing pages."""

from datetime import datetime

from talkshell.catalogue import TalkRecord
from talkshell.signals import SignalBus
from talkshell.state import ShellState


def format_date(value: datetime | str) -> str:
    if isinstance(value, datetime):
        return value.strftime("%a %d %b %H:%M")
    return value


def talk_line(state: ShellState, talk: TalkRecord) -> str:
    """One list row: marker, title, speaker, date."""
    marker = "*" if state.is_favourite(talk.id) else " "
    return f"[{marker}] {talk.title} — {talk.speaker} ({format_date(talk.date)}) /talk/{talk.id}"


def status_line(state: ShellState) -> str | None:
    """Loading/error banner, or ``None`` when the catalogue is usable."""
    if state.is_loading:
        return "Loading talks..."
    if state.is_error and not state.talks:
        return "Talks could not be loaded."
    return None


def toggle_favourite(bus: SignalBus, state: ShellState, talk_id: str) -> None:
    """Raise the signal that flips *talk_id*'s favourite state."""
    if state.is_favourite(talk_id):
        bus.unfavourite(talk_id)
    else:
        bus.favourite(talk_id)

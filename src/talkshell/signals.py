"""Favourite/unfavourite signals and the bus that carries them.

Any page component may raise a signal; exactly one handler (the shell)
receives it.
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

from talkshell.errors import ConfigurationError

logger = logging.getLogger("talkshell.shell")


@dataclass(frozen=True, slots=True)
class TalkFavourited:
    """A page asked for *talk_id* to be added to the favourites."""

    talk_id: str


@dataclass(frozen=True, slots=True)
class TalkUnfavourited:
    """A page asked for *talk_id* to be removed from the favourites."""

    talk_id: str


FavouriteSignal: TypeAlias = TalkFavourited | TalkUnfavourited
SignalHandler: TypeAlias = Callable[[FavouriteSignal], None]


class SignalBus:
    """Single-consumer channel from page components to the shell.

    Usage::

        bus = SignalBus()
        bus.bind(shell.handle_signal)
        bus.favourite("3")            # same as bus.emit(TalkFavourited("3"))

    Binding a second handler raises ``ConfigurationError``. Signals emitted
    while nothing is bound are logged and dropped.
    """

    __slots__ = ("_handler", "_lock")

    def __init__(self) -> None:
        self._handler: SignalHandler | None = None
        self._lock = threading.Lock()

    @property
    def bound(self) -> bool:
        return self._handler is not None

    def bind(self, handler: SignalHandler) -> None:
        with self._lock:
            if self._handler is not None:
                msg = "SignalBus already has a handler; only one consumer may bind."
                raise ConfigurationError(msg)
            self._handler = handler

    def unbind(self) -> None:
        with self._lock:
            self._handler = None

    def emit(self, signal: FavouriteSignal) -> None:
        handler = self._handler
        if handler is None:
            logger.warning("Dropped %r: no handler bound", signal)
            return
        handler(signal)

    def favourite(self, talk_id: str) -> None:
        self.emit(TalkFavourited(talk_id))

    def unfavourite(self, talk_id: str) -> None:
        self.emit(TalkUnfavourited(talk_id))

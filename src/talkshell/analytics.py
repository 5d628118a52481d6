"""Analytics collaborator.

The shell reports page views and exceptions through this narrow protocol.
Reporting is fire-and-forget: the shell never inspects the outcome.
"""

import logging
from typing import Protocol

logger = logging.getLogger("talkshell.analytics")


class Analytics(Protocol):
    """Protocol for analytics sinks."""

    def track_page_view(self, name: str) -> None: ...

    def track_exception(self, error: BaseException) -> None: ...


class LoggingAnalytics:
    """Default sink: writes events to the ``talkshell.analytics`` logger."""

    __slots__ = ()

    def track_page_view(self, name: str) -> None:
        logger.info("page view: %s", name or "<none>")

    def track_exception(self, error: BaseException) -> None:
        logger.error("exception: %s: %s", type(error).__name__, error)

"""Map a requested page name onto the closed ``PageId`` set."""

from talkshell.pages.types import PageId

_KNOWN: frozenset[str] = frozenset(p.value for p in PageId)


def validate_page(candidate: str | None) -> PageId:
    """Return the ``PageId`` for *candidate*.

    Empty or missing -> ``HOME``; unknown -> ``LOST``. Never raises.
    """
    if not candidate:
        return PageId.HOME
    if candidate not in _KNOWN:
        return PageId.LOST
    return PageId(candidate)

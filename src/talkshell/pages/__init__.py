"""Pages — validation, lazy activation, and the page registry."""

from talkshell.pages.loader import PageLoader
from talkshell.pages.registry import DEFAULT_PAGES, lazy_view
from talkshell.pages.types import LoadStatus, PageFactory, PageId, PageView
from talkshell.pages.validate import validate_page

__all__ = [
    "DEFAULT_PAGES",
    "LoadStatus",
    "PageFactory",
    "PageId",
    "PageLoader",
    "PageView",
    "lazy_view",
    "validate_page",
]

"""talkshell exception hierarchy.

Shared across the router, loader, storage, catalogue, and shell so every
module raises and catches the same types.
"""


class ShellError(Exception):
    """Base for all talkshell-specific errors."""


class ConfigurationError(ShellError):
    """Raised when the shell or one of its tables is wired incorrectly.

    Typically raised at setup time: a malformed route pattern, routes added
    after ``Router.compile()``, or a second signal handler.
    """


class CatalogueError(ShellError):
    """The talks catalogue could not be loaded.

    ``status`` is the HTTP status when the server answered with a
    non-success response, ``None`` for transport or decoding failures.
    """

    def __init__(self, detail: str = "", status: int | None = None) -> None:
        self.detail = detail
        self.status = status
        super().__init__(detail)

    def __str__(self) -> str:
        if self.status is not None:
            return f"{self.status}: {self.detail}" if self.detail else str(self.status)
        return self.detail or "catalogue unavailable"


class StorageError(ShellError):
    """Raised when the key-value medium cannot be read or written."""


class PageLoadError(ShellError):
    """Raised when a page's UI module fails to activate.

    Never escapes the loader; kept as a type so analytics reports carry
    the page name.
    """

    def __init__(self, page: str, detail: str = "") -> None:
        self.page = page
        self.detail = detail
        super().__init__(f"Failed to load page {page!r}" + (f": {detail}" if detail else ""))

"""talkshell — navigation and client-state core for a talks app shell.

Maps URLs to pages, lazily activates page modules, and keeps favourite talks
in sync between memory and a local store.

Basic usage::

    from talkshell import Shell, ShellConfig

    shell = Shell(ShellConfig(storage_path="favourites.db"))

    async with shell.running():
        shell.navigator.navigate("/talk/3")
        shell.signals.favourite("3")
"""

__version__ = "0.1.0"
__all__ = [
    "Analytics",
    "CatalogueClient",
    "CatalogueError",
    "ConfigurationError",
    "Drawer",
    "FavouritesStore",
    "Navigator",
    "PageId",
    "PageLoadError",
    "PageLoader",
    "RouteContext",
    "Router",
    "Shell",
    "ShellConfig",
    "ShellError",
    "ShellState",
    "SignalBus",
    "StorageError",
    "TalkFavourited",
    "TalkRecord",
    "TalkUnfavourited",
    "parse_query_params",
    "validate_page",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "Analytics": "talkshell.analytics",
    "CatalogueClient": "talkshell.catalogue",
    "TalkRecord": "talkshell.catalogue",
    "ShellConfig": "talkshell.config",
    "CatalogueError": "talkshell.errors",
    "ConfigurationError": "talkshell.errors",
    "PageLoadError": "talkshell.errors",
    "ShellError": "talkshell.errors",
    "StorageError": "talkshell.errors",
    "parse_query_params": "talkshell.http.query",
    "PageLoader": "talkshell.pages.loader",
    "PageId": "talkshell.pages.types",
    "validate_page": "talkshell.pages.validate",
    "Navigator": "talkshell.routing.navigator",
    "RouteContext": "talkshell.routing.route",
    "Router": "talkshell.routing.router",
    "Shell": "talkshell.shell",
    "SignalBus": "talkshell.signals",
    "TalkFavourited": "talkshell.signals",
    "TalkUnfavourited": "talkshell.signals",
    "ShellState": "talkshell.state",
    "FavouritesStore": "talkshell.storage.favourites",
    "Drawer": "talkshell.ui",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import talkshell`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    import importlib

    return getattr(importlib.import_module(module_name), name)

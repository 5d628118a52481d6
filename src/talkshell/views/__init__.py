"""Page view modules, imported lazily by ``talkshell.pages.registry``.

Do not import the page modules here; importing this package must stay cheap.
"""

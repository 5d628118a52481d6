"""Route handler protocol and Next type alias.

A route handler is any callable matching::

    def handler(request: NavigationRequest, next: Next) -> RouteContext | None: ...

No base class required. Middleware calls ``next(request)`` and returns its
result; terminal handlers return ``request.resolve(...)`` and never call
``next``.
"""

from collections.abc import Callable
from typing import Protocol, TypeAlias

from talkshell.routing.route import NavigationRequest, RouteContext

# The rest of the route table after the current entry
Next: TypeAlias = Callable[[NavigationRequest], RouteContext | None]


class RouteHandler(Protocol):
    """Protocol for route table entries.

    Accepts both functions and callable objects::

        # Middleware
        def stamp(request: NavigationRequest, next: Next) -> RouteContext | None:
            request.state["seen"] = True
            return next(request)

        # Terminal
        def talk(request: NavigationRequest, next: Next) -> RouteContext:
            return request.resolve(page="talk")
    """

    def __call__(self, request: NavigationRequest, next: Next) -> RouteContext | None: ...

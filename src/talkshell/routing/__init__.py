"""Routing — ordered route table with middleware semantics.

Entries are evaluated in registration order. Middleware continues the
chain with ``next``; the first terminal handler ends it.
"""

from talkshell.routing.navigator import Navigator
from talkshell.routing.route import NavigationRequest, Route, RouteContext
from talkshell.routing.router import Router, parse_pattern

__all__ = [
    "NavigationRequest",
    "Navigator",
    "Route",
    "RouteContext",
    "Router",
    "parse_pattern",
]

"""``talkshell routes`` — list the route table."""

import argparse

from talkshell.shell import Shell


def run_routes(args: argparse.Namespace) -> None:
    """Print the shell's routes in the order they are evaluated."""
    shell = Shell()
    rows = [
        (str(i), route.pattern, route.name or getattr(route.handler, "__name__", "?"))
        for i, route in enumerate(shell.router.routes, start=1)
    ]
    max_pattern = max(max(len(r[1]) for r in rows), 7)  # "PATTERN" header
    fmt = f"{{:<5}}  {{:<{max_pattern}}}  {{}}"
    print(fmt.format("ORDER", "PATTERN", "HANDLER"))
    print("-" * (max_pattern + 20))
    for row in rows:
        print(fmt.format(*row))

"""talkshell CLI — drive the shell from a terminal.

Entry point registered as ``talkshell`` in ``pyproject.toml``::

    [project.scripts]
    talkshell = "talkshell.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``talkshell`` command."""
    parser = argparse.ArgumentParser(
        prog="talkshell",
        description="talkshell — navigation and favourites for the talks app.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: info)")
    subparsers = parser.add_subparsers(dest="command")

    # -- talkshell visit ---------------------------------------------------
    visit_parser = subparsers.add_parser("visit", help="Navigate to URLs and print each page")
    visit_parser.add_argument("urls", nargs="+", help="Paths to visit in order (e.g. /talk/3)")
    visit_parser.add_argument("--catalogue", default=None, help="Catalogue URL")
    visit_parser.add_argument(
        "--catalogue-file",
        default=None,
        help="Read the catalogue from a local JSON file instead of the network",
    )
    visit_parser.add_argument("--store", default=None, help="SQLite file holding favourites")

    # -- talkshell routes --------------------------------------------------
    subparsers.add_parser("routes", help="List the route table in evaluation order")

    # -- talkshell favourites ----------------------------------------------
    fav_parser = subparsers.add_parser("favourites", help="Inspect or edit stored favourites")
    fav_parser.add_argument("action", choices=["list", "add", "remove", "clear"])
    fav_parser.add_argument("ids", nargs="*", help="Talk ids for add/remove")
    fav_parser.add_argument("--store", required=True, help="SQLite file holding favourites")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from talkshell.cli._run import configure_logging

    configure_logging(args.log_level)

    if args.command == "visit":
        from talkshell.cli._run import run_visit

        run_visit(args)
    elif args.command == "routes":
        from talkshell.cli._routes import run_routes

        run_routes(args)
    elif args.command == "favourites":
        from talkshell.cli._favourites import run_favourites

        run_favourites(args)

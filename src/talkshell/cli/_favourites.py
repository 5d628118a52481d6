"""``talkshell favourites`` — inspect or edit the stored favourites."""

import argparse
import sys

import anyio

from talkshell.config import ShellConfig
from talkshell.shell import Shell
from talkshell.storage.medium import SqliteMedium


async def apply(shell: Shell, action: str, ids: list[str]) -> list[str]:
    """Run *action* against the shell's store and return the stored ids."""
    if action == "clear":
        await shell.store.clear()
        return []
    async with shell.running(hydrate=False):
        await shell.load_favourites()
        for talk_id in ids:
            if action == "add":
                shell.signals.favourite(talk_id)
            elif action == "remove":
                shell.signals.unfavourite(talk_id)
    return await shell.store.load()


def run_favourites(args: argparse.Namespace) -> None:
    if args.action in ("add", "remove") and not args.ids:
        print(f"Error: 'favourites {args.action}' needs at least one id", file=sys.stderr)
        raise SystemExit(2)
    medium = SqliteMedium(args.store)
    shell = Shell(ShellConfig(storage_path=args.store), medium=medium)
    try:
        ids = anyio.run(apply, shell, args.action, args.ids)
    finally:
        medium.close()
    for talk_id in ids:
        print(talk_id)

"""``talkshell visit`` — navigate through URLs and print what renders."""

import argparse
import dataclasses
import logging
import sys

import anyio

from talkshell.catalogue import Catalogue, CatalogueClient, FileCatalogue
from talkshell.config import ShellConfig
from talkshell.errors import ConfigurationError
from talkshell.shell import Shell


def load_config(args: argparse.Namespace) -> ShellConfig:
    """Environment config with command-line overrides applied."""
    try:
        config = ShellConfig.from_env()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    overrides: dict[str, object] = {}
    if getattr(args, "catalogue", None):
        overrides["catalogue_url"] = args.catalogue
    if getattr(args, "store", None):
        overrides["storage_path"] = args.store
    if getattr(args, "log_level", None):
        overrides["log_level"] = args.log_level
    return dataclasses.replace(config, **overrides)  # type: ignore[arg-type]


def configure_logging(level: str | None) -> None:
    name = (level or ShellConfig.from_env().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
    )


async def visit(shell: Shell, urls: list[str]) -> list[str]:
    """Hydrate, then navigate to each URL and render it once its page is ready."""
    blocks: list[str] = []
    async with shell.running(hydrate=False):
        await shell.hydrate()
        for url in urls:
            context = shell.navigator.navigate(url)
            page = shell.page
            if page is not None:
                await shell.loader.ensure(page)
            header = f"== {url} -> {page} {dict(context.params)}"
            if context.query_params:
                header += f" query={dict(context.query_params)}"
            blocks.append(f"{header}\n{shell.render()}")
    return blocks


def run_visit(args: argparse.Namespace) -> None:
    config = load_config(args)
    catalogue: Catalogue
    if args.catalogue_file:
        catalogue = FileCatalogue(args.catalogue_file)
    else:
        catalogue = CatalogueClient(config.catalogue_url, timeout=config.fetch_timeout)
    shell = Shell(config, catalogue=catalogue)
    blocks = anyio.run(visit, shell, args.urls)
    print("\n\n".join(blocks))
    if shell.is_error:
        print("warning: the catalogue could not be loaded", file=sys.stderr)

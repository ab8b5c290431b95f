"""CLI entry point for ghfetch."""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from ghfetch import __version__
from ghfetch.commands import download, releases, resolve

console = Console()


def configure_logging(verbose: bool) -> None:
    """Send ghfetch log records to stderr through rich."""
    logger = logging.getLogger("ghfetch")
    if not logger.handlers:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.group()
@click.version_option(version=__version__, prog_name="ghfetch")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """ghfetch - Download platform binaries from GitHub releases.

    Resolve a release by semver range, pick the asset built for this
    platform and download it.

    Examples:

        ghfetch releases dgraph-io/dgraph

        ghfetch resolve dgraph-io/dgraph --range "^1.0"

        ghfetch download dgraph-io/dgraph --dir ./bin
    """
    configure_logging(verbose)


# Register commands
main.add_command(releases.releases)
main.add_command(resolve.resolve)
main.add_command(download.download)


if __name__ == "__main__":
    main()

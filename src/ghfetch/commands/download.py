"""Download command implementation."""

from pathlib import Path

import click
from rich.console import Console
from rich.progress import (
    Progress,
    BarColumn,
    DownloadColumn,
    TransferSpeedColumn,
    TimeRemainingColumn,
)

from ghfetch.core.downloader import DownloadError
from ghfetch.core.fetcher import download_release
from ghfetch.core.github import NetworkError, parse_repo_spec
from ghfetch.core.platform import NoMatchError
from ghfetch.core.version import LATEST, ResolutionError
from ghfetch.models.release import Asset, Release

console = Console()


@click.command()
@click.argument("repo_spec")
@click.option("--range", "-r", "constraint", default=LATEST, help="Semver range or 'latest'")
@click.option(
    "--dir",
    "-d",
    "directory",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory to save into (defaults to the current directory)",
)
@click.option("--platform", "-p", "platform_name", help="Platform to match (defaults to this host)")
@click.option("--arch", "-a", help="Architecture to match (defaults to this host)")
@click.option("--quiet", "-q", is_flag=True, help="Don't show a progress bar")
def download(
    repo_spec: str,
    constraint: str,
    directory: Path | None,
    platform_name: str | None,
    arch: str | None,
    quiet: bool,
):
    """Download the release asset built for a platform.

    REPO_SPEC can be:
      - owner/repo format (e.g., dgraph-io/dgraph)
      - Full GitHub URL (e.g., https://github.com/dgraph-io/dgraph)
    """
    try:
        repo = parse_repo_spec(repo_spec)

        with Progress(
            "[progress.description]{task.description}",
            BarColumn(),
            DownloadColumn(),
            TransferSpeedColumn(),
            TimeRemainingColumn(),
            console=console,
            disable=quiet,
        ) as progress:
            task = progress.add_task("Resolving", total=None)

            def selected(release: Release, asset: Asset) -> None:
                console.print(f"  Found release: [green]{release.tag_name}[/green]")
                console.print(f"  Selected asset: [cyan]{asset.name}[/cyan]")
                # Only create the directory once there is something to save
                if directory is not None:
                    directory.mkdir(parents=True, exist_ok=True)
                progress.update(
                    task,
                    description=f"Downloading {asset.name}",
                    total=asset.size if asset.size > 0 else None,
                )

            path = download_release(
                repo,
                constraint,
                directory,
                platform_name,
                arch,
                progress=lambda n: progress.update(task, advance=n),
                on_asset=selected,
            )
    except (ValueError, OSError, NetworkError, ResolutionError, NoMatchError, DownloadError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    console.print(f"\n[green]✓[/green] Downloaded {path}")

"""Releases command implementation."""

import click
from rich.console import Console
from rich.table import Table

from ghfetch.core.github import NetworkError, list_releases, parse_repo_spec

console = Console()


@click.command()
@click.argument("repo_spec")
@click.option("--limit", "-n", default=30, help="Number of releases to show")
def releases(repo_spec: str, limit: int):
    """List the releases of a repository, newest first.

    REPO_SPEC can be:
      - owner/repo format (e.g., dgraph-io/dgraph)
      - Full GitHub URL (e.g., https://github.com/dgraph-io/dgraph)
    """
    try:
        repo = parse_repo_spec(repo_spec)
        found = list_releases(repo)
    except (ValueError, NetworkError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if not found:
        console.print(f"No releases found for {repo}")
        raise SystemExit(0)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Tag")
    table.add_column("Version")
    table.add_column("Published")
    table.add_column("Assets", justify="right")

    for release in found[:limit]:
        version = release.version
        tag = release.tag_name
        if release.prerelease:
            tag += " [yellow](prerelease)[/yellow]"
        table.add_row(
            tag,
            str(version) if version else "[dim]-[/dim]",
            release.published_at[:10],
            str(len(release.assets)),
        )

    console.print(table)

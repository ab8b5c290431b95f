"""Resolve command implementation."""

import click
from rich.console import Console

from ghfetch.core.github import NetworkError, parse_repo_spec
from ghfetch.core.platform import NoMatchError, find_assets, match_asset
from ghfetch.core.version import LATEST, ResolutionError, resolve_release

console = Console()


@click.command()
@click.argument("repo_spec")
@click.option("--range", "-r", "constraint", default=LATEST, help="Semver range or 'latest'")
@click.option("--platform", "-p", "platform_name", help="Platform to match (defaults to this host)")
@click.option("--arch", "-a", help="Architecture to match (defaults to this host)")
@click.option("--all-assets", is_flag=True, help="Show every matching asset, not only the selected one")
def resolve(repo_spec: str, constraint: str, platform_name: str | None, arch: str | None, all_assets: bool):
    """Show which release and asset a download would use."""
    try:
        repo = parse_repo_spec(repo_spec)
        release = resolve_release(repo, constraint)
    except (ValueError, NetworkError, ResolutionError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    console.print(
        f"Release: [green]{release.tag_name}[/green] ({release.version}) "
        f"published {release.published_at[:10] or 'unknown'}"
    )

    try:
        asset = match_asset(release, platform_name, arch)
    except NoMatchError as e:
        console.print(f"[red]Error:[/red] {e}")
        console.print("Available assets:")
        for a in release.assets:
            console.print(f"  - {a.name}")
        raise SystemExit(1)

    if all_assets:
        console.print("Matching assets:")
        for a in find_assets(release, platform_name, arch):
            marker = " [green](selected)[/green]" if a is asset else ""
            console.print(f"  - {a.name}{marker}")

    size_mb = asset.size / (1024 * 1024)
    console.print(f"Asset:   [cyan]{asset.name}[/cyan] ({size_mb:.1f} MB)")
    console.print(f"URL:     {asset.download_url}")

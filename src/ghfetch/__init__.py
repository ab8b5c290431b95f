"""ghfetch - download platform binaries from GitHub releases."""

__version__ = "0.1.0"

from ghfetch.core.downloader import ArgumentError, DownloadError, download_asset
from ghfetch.core.fetcher import download_release
from ghfetch.core.github import GitHubClient, NetworkError, list_releases
from ghfetch.core.platform import NoMatchError, match_asset
from ghfetch.core.version import LATEST, ResolutionError, resolve_release
from ghfetch.models.release import Asset, Release

__all__ = [
    "__version__",
    "ArgumentError",
    "Asset",
    "DownloadError",
    "GitHubClient",
    "LATEST",
    "NetworkError",
    "NoMatchError",
    "Release",
    "ResolutionError",
    "download_asset",
    "download_release",
    "list_releases",
    "match_asset",
    "resolve_release",
]

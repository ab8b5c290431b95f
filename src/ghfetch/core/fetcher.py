"""Resolve, match and download a release asset in one call."""

import logging
import os
from pathlib import Path
from typing import Callable

from ghfetch.core.downloader import check_progress, download_asset
from ghfetch.core.platform import match_asset
from ghfetch.core.version import LATEST, resolve_release
from ghfetch.models.release import Asset, Release

logger = logging.getLogger(__name__)


def download_release(
    repo: str,
    constraint: str = LATEST,
    directory: str | os.PathLike | None = None,
    platform: str | None = None,
    arch: str | None = None,
    progress: Callable[[int], object] | None = None,
    on_asset: Callable[[Release, Asset], object] | None = None,
) -> Path:
    """Download the asset of a repository's release built for a platform.

    ``on_asset`` is called with the resolved release and matched asset right
    before the download starts.

    Stops at the first failing step; see resolve_release, match_asset and
    download_asset for the errors each one raises.
    """
    check_progress(progress)

    release = resolve_release(repo, constraint)
    asset = match_asset(release, platform, arch)
    logger.info("Selected %s from %s %s", asset.name, repo, release.tag_name)
    if on_asset is not None:
        on_asset(release, asset)
    return download_asset(asset.download_url, asset.name, directory, progress)

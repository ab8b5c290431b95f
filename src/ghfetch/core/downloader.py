"""Streaming download of release assets."""

import logging
import os
from pathlib import Path
from typing import Callable

import httpx

from ghfetch.core.config import get_config

logger = logging.getLogger(__name__)


class DownloadError(Exception):
    """Error during download."""

    def __init__(self, file_name: str, url: str, cause: object):
        super().__init__(f"Failed to download {file_name} from {url}: {cause}")
        self.file_name = file_name
        self.url = url
        self.cause = cause


class ArgumentError(ValueError):
    """Invalid argument passed to a download function."""

    pass


def check_progress(progress: Callable[[int], object] | None) -> None:
    """Reject a progress argument that cannot be called."""
    if progress is not None and not callable(progress):
        raise ArgumentError("Progress is not a valid callback")


def download_asset(
    url: str,
    file_name: str,
    directory: str | os.PathLike | None = None,
    progress: Callable[[int], object] | None = None,
    chunk_size: int | None = None,
) -> Path:
    """Download a file from URL.

    Args:
        url: URL to download from
        file_name: Name to save the file as
        directory: Destination directory (defaults to the working directory)
        progress: Called with the byte length of every chunk received
        chunk_size: Bytes per chunk (defaults to the configured size)

    Returns:
        Absolute path to the downloaded file

    Raises:
        ArgumentError: if progress is given but not callable
        DownloadError: if the transfer fails or the file cannot be written
            (including a missing directory); partial output is removed
    """
    check_progress(progress)

    config = get_config()
    if directory is None:
        directory = Path.cwd()
    if chunk_size is None:
        chunk_size = config.chunk_size

    file_path = Path(directory).absolute() / file_name
    logger.info("Downloading %s to %s", url, file_path)

    written = 0
    created = False
    try:
        with httpx.stream(
            "GET",
            url,
            headers={"User-Agent": config.user_agent},
            follow_redirects=True,
            timeout=config.timeout,
        ) as response:
            if response.status_code != 200:
                raise DownloadError(file_name, url, f"HTTP {response.status_code}")

            with open(file_path, "wb") as f:
                created = True
                for chunk in response.iter_bytes(chunk_size=chunk_size):
                    f.write(chunk)
                    written += len(chunk)
                    if progress is not None:
                        progress(len(chunk))
    except (httpx.HTTPError, OSError) as e:
        if created:
            file_path.unlink(missing_ok=True)
        raise DownloadError(file_name, url, e) from e
    except BaseException:
        # Errors raised by the progress callback propagate unchanged
        if created:
            file_path.unlink(missing_ok=True)
        raise

    logger.info("Downloaded %d bytes to %s", written, file_path)
    return file_path

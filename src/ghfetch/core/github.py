"""GitHub API client for listing releases."""

import logging
import re

import httpx

from ghfetch.core.config import get_config
from ghfetch.models.release import Release

logger = logging.getLogger(__name__)


class NetworkError(Exception):
    """Error fetching data from the GitHub API."""

    pass


def parse_repo_spec(spec: str) -> str:
    """Normalize a repo spec to "owner/repo".

    Accepts:
    - owner/repo
    - https://github.com/owner/repo
    - github.com/owner/repo
    """
    # Handle full URLs
    url_pattern = r"(?:https?://)?github\.com/([^/]+)/([^/]+?)(?:\.git)?/?$"
    match = re.match(url_pattern, spec)
    if match:
        return f"{match.group(1)}/{match.group(2)}"

    parts = spec.split("/")
    if len(parts) == 2 and all(parts):
        return spec

    raise ValueError(f"Invalid repo spec: {spec}. Use 'owner/repo' or GitHub URL.")


class GitHubClient:
    """Client for the GitHub releases API."""

    def __init__(self):
        config = get_config()
        self.client = httpx.Client(
            base_url=config.api_url,
            headers={
                "Accept": "application/vnd.github+json",
                "User-Agent": config.user_agent,
            },
            timeout=config.timeout,
        )

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.client.close()

    def list_releases(self, repo: str) -> list[Release]:
        """Get the first page of releases for a repository, newest first.

        Only one page is requested, so releases older than the provider's
        default page size are not returned.
        """
        path = f"/repos/{repo}/releases"
        logger.debug("Fetching releases from %s%s", self.client.base_url, path)

        try:
            response = self.client.get(path)
        except httpx.HTTPError as e:
            raise NetworkError(f"Failed to fetch releases for {repo}: {e}") from e

        if response.status_code == 404:
            raise NetworkError(f"Repository {repo} not found")
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NetworkError(
                f"GitHub API returned HTTP {response.status_code} for {repo}"
            ) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise NetworkError(f"GitHub API returned invalid JSON for {repo}") from e

        releases = [Release.from_api_response(data) for data in payload]
        logger.debug("Found %d releases for %s", len(releases), repo)
        return releases


def list_releases(repo: str, client: GitHubClient | None = None) -> list[Release]:
    """List releases of a repository, opening a client if none is given."""
    if client is not None:
        return client.list_releases(repo)
    with GitHubClient() as client:
        return client.list_releases(repo)

"""Release resolution against a version constraint."""

import logging

from ghfetch.core.github import GitHubClient, list_releases
from ghfetch.core.semver import InvalidRange, VersionRange
from ghfetch.models.release import Release

logger = logging.getLogger(__name__)

LATEST = "latest"


class ResolutionError(Exception):
    """No release could be resolved for a constraint."""

    pass


def select_release(
    releases: list[Release], constraint: str = LATEST, repo: str = ""
) -> Release:
    """Pick the release matching a constraint from an already fetched list.

    Releases whose tag holds no semantic version are ignored. The rest keep
    the provider's newest-first order, so "latest" is the first of them and a
    range resolves to the first release satisfying it. The list is never
    sorted locally.
    """
    candidates = [(release.version, release) for release in releases]
    candidates = [(version, release) for version, release in candidates if version is not None]
    versions = [version for version, _ in candidates]

    if constraint == LATEST:
        if not versions:
            raise ResolutionError(f"No release of {repo or 'repository'} has a valid semver tag")
    else:
        try:
            version_range = VersionRange.parse(constraint)
        except InvalidRange as e:
            raise ResolutionError(f"Range {constraint} is not a valid semver string") from e

        versions = [version for version in versions if version in version_range]
        if not versions:
            raise ResolutionError(f"No version satisfies range {constraint}")

    chosen = versions[0]
    # Releases with the same coerced version: the first in provider order wins
    release = next(release for version, release in candidates if version == chosen)
    logger.debug("Resolved %s to %s (%s)", constraint, release.tag_name, chosen)
    return release


def resolve_release(
    repo: str, constraint: str = LATEST, client: GitHubClient | None = None
) -> Release:
    """Fetch the releases of a repository and pick the one matching a constraint.

    Args:
        repo: Repository in "owner/repo" form
        constraint: "latest" or an npm-style semver range such as "^1.0"
        client: Optional open GitHubClient to reuse

    Raises:
        NetworkError: if the release list could not be fetched
        ResolutionError: if the constraint is invalid or nothing satisfies it
    """
    releases = list_releases(repo, client)
    return select_release(releases, constraint, repo=repo)

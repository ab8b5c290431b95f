"""GitHub release data models."""

from dataclasses import dataclass, field

from packaging.version import Version

from ghfetch.core.semver import coerce_version


@dataclass
class Asset:
    """Represents a GitHub release asset."""

    name: str
    url: str
    size: int
    content_type: str
    browser_download_url: str = ""

    @classmethod
    def from_api_response(cls, data: dict) -> "Asset":
        """Create Asset from GitHub API response."""
        return cls(
            name=data["name"],
            url=data.get("url", ""),
            size=data.get("size", 0),
            content_type=data.get("content_type", "application/octet-stream"),
            browser_download_url=data.get("browser_download_url", ""),
        )

    @property
    def download_url(self) -> str:
        """URL serving the asset's raw bytes."""
        return self.browser_download_url or self.url


@dataclass
class Release:
    """Represents a GitHub release.

    ``tag_name`` is kept exactly as published; the semantic version used for
    comparisons is derived from it on access through :attr:`version`.
    """

    tag_name: str
    name: str
    created_at: str
    published_at: str
    assets: list[Asset] = field(default_factory=list)
    prerelease: bool = False
    draft: bool = False

    @classmethod
    def from_api_response(cls, data: dict) -> "Release":
        """Create Release from GitHub API response."""
        assets = [Asset.from_api_response(a) for a in data.get("assets") or []]
        return cls(
            tag_name=data["tag_name"],
            name=data.get("name") or data["tag_name"],
            created_at=data.get("created_at") or "",
            published_at=data.get("published_at") or "",
            assets=assets,
            prerelease=data.get("prerelease", False),
            draft=data.get("draft", False),
        )

    @property
    def version(self) -> Version | None:
        """Semantic version coerced from the tag, or None if it has none."""
        return coerce_version(self.tag_name)

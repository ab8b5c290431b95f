"""Shared fixtures for ghfetch tests."""

import pytest

from ghfetch.core.config import GhfetchConfig, set_config
from ghfetch.models.release import Release

RELEASES_URL = "https://api.github.com/repos/dgraph-io/dgraph/releases"
DOWNLOAD_BASE = "https://github.com/dgraph-io/dgraph/releases/download"


def make_asset(tag: str, name: str, asset_id: int, size: int = 1024) -> dict:
    return {
        "url": f"https://api.github.com/repos/dgraph-io/dgraph/releases/assets/{asset_id}",
        "browser_download_url": f"{DOWNLOAD_BASE}/{tag}/{name}",
        "name": name,
        "content_type": "application/gzip",
        "size": size,
    }


def make_release(tag: str, published: str, asset_names: list[str], **extra) -> dict:
    assets = [
        make_asset(tag, name, index) for index, name in enumerate(asset_names, 1)
    ]
    data = {
        "tag_name": tag,
        "name": f"Dgraph {tag}",
        "created_at": f"{published}T10:00:00Z",
        "published_at": f"{published}T12:00:00Z",
        "prerelease": False,
        "draft": False,
        "assets": assets,
    }
    data.update(extra)
    return data


DGRAPH_ASSETS = [
    "dgraph-darwin-amd64.tar.gz",
    "dgraph-linux-amd64.tar.gz",
    "dgraph-windows-amd64.zip",
]

# Newest first, the way the releases endpoint orders them
DGRAPH_RELEASES = [
    make_release("nightly", "2019-01-20", ["dgraph-linux-amd64.tar.gz"], prerelease=True),
    make_release("v1.0.11", "2018-12-17", DGRAPH_ASSETS),
    make_release("v1.0.10", "2018-11-05", DGRAPH_ASSETS),
    make_release("v1.0.10-rc1", "2018-10-29", DGRAPH_ASSETS, prerelease=True),
    make_release("v0.9.4", "2018-02-06", ["dgraph-linux-amd64.tar.gz"]),
]


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against the built-in defaults."""
    set_config(GhfetchConfig())
    yield
    set_config(None)


@pytest.fixture
def releases_payload() -> list[dict]:
    return [dict(release) for release in DGRAPH_RELEASES]


@pytest.fixture
def releases(releases_payload) -> list[Release]:
    return [Release.from_api_response(data) for data in releases_payload]

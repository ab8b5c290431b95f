"""Tests for the command-line interface."""

import httpx
import respx
from click.testing import CliRunner

from ghfetch import __version__
from ghfetch.cli import main

from tests.conftest import DOWNLOAD_BASE, RELEASES_URL


def test_version():
    result = CliRunner().invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@respx.mock
def test_releases_command(releases_payload):
    respx.get(RELEASES_URL).mock(return_value=httpx.Response(200, json=releases_payload))

    result = CliRunner().invoke(main, ["releases", "https://github.com/dgraph-io/dgraph"])

    assert result.exit_code == 0
    assert "v1.0.11" in result.output
    assert "nightly" in result.output


@respx.mock
def test_releases_command_empty():
    respx.get(RELEASES_URL).mock(return_value=httpx.Response(200, json=[]))

    result = CliRunner().invoke(main, ["releases", "dgraph-io/dgraph"])

    assert result.exit_code == 0
    assert "No releases found" in result.output


def test_releases_command_bad_repo():
    result = CliRunner().invoke(main, ["releases", "not-a-repo"])

    assert result.exit_code == 1
    assert "Invalid repo spec" in result.output


@respx.mock
def test_resolve_command(releases_payload):
    respx.get(RELEASES_URL).mock(return_value=httpx.Response(200, json=releases_payload))

    result = CliRunner().invoke(
        main,
        ["resolve", "dgraph-io/dgraph", "--range", "~1.0.10", "--platform", "darwin", "--arch", "x64"],
    )

    assert result.exit_code == 0
    assert "v1.0.11" in result.output
    assert "dgraph-darwin-amd64.tar.gz" in result.output


@respx.mock
def test_resolve_command_invalid_range(releases_payload):
    respx.get(RELEASES_URL).mock(return_value=httpx.Response(200, json=releases_payload))

    result = CliRunner().invoke(main, ["resolve", "dgraph-io/dgraph", "-r", "abc"])

    assert result.exit_code == 1
    assert "not a valid semver string" in result.output


@respx.mock
def test_resolve_command_no_asset(releases_payload):
    respx.get(RELEASES_URL).mock(return_value=httpx.Response(200, json=releases_payload))

    result = CliRunner().invoke(
        main, ["resolve", "dgraph-io/dgraph", "--platform", "aix", "--arch", "s390x"]
    )

    assert result.exit_code == 1
    assert "Available assets" in result.output
    assert "dgraph-windows-amd64.zip" in result.output


@respx.mock
def test_download_command(tmp_path, releases_payload):
    respx.get(RELEASES_URL).mock(return_value=httpx.Response(200, json=releases_payload))
    respx.get(f"{DOWNLOAD_BASE}/v1.0.11/dgraph-linux-amd64.tar.gz").mock(
        return_value=httpx.Response(200, content=b"binary")
    )
    target = tmp_path / "bin"

    result = CliRunner().invoke(
        main,
        ["download", "dgraph-io/dgraph", "--dir", str(target), "--platform", "linux", "--arch", "x64", "--quiet"],
    )

    assert result.exit_code == 0, result.output
    assert (target / "dgraph-linux-amd64.tar.gz").read_bytes() == b"binary"


@respx.mock
def test_download_command_with_progress(tmp_path, releases_payload):
    respx.get(RELEASES_URL).mock(return_value=httpx.Response(200, json=releases_payload))
    respx.get(f"{DOWNLOAD_BASE}/v1.0.11/dgraph-darwin-amd64.tar.gz").mock(
        return_value=httpx.Response(200, content=b"x" * 1024)
    )

    result = CliRunner().invoke(
        main,
        ["download", "dgraph-io/dgraph", "-d", str(tmp_path), "-p", "darwin", "-a", "x64"],
    )

    assert result.exit_code == 0, result.output
    assert (tmp_path / "dgraph-darwin-amd64.tar.gz").stat().st_size == 1024


@respx.mock
def test_download_command_failure(tmp_path, releases_payload):
    respx.get(RELEASES_URL).mock(return_value=httpx.Response(200, json=releases_payload))
    respx.get(f"{DOWNLOAD_BASE}/v1.0.11/dgraph-linux-amd64.tar.gz").mock(
        return_value=httpx.Response(503)
    )

    result = CliRunner().invoke(
        main,
        ["download", "dgraph-io/dgraph", "-d", str(tmp_path), "-p", "linux", "-a", "x64", "-q"],
    )

    assert result.exit_code == 1
    assert "503" in result.output


def test_download_command_bad_repo_creates_no_directory(tmp_path):
    target = tmp_path / "bin"

    result = CliRunner().invoke(main, ["download", "not-a-repo", "--dir", str(target)])

    assert result.exit_code == 1
    assert not target.exists()


@respx.mock
def test_download_command_resolution_failure_creates_no_directory(tmp_path, releases_payload):
    respx.get(RELEASES_URL).mock(return_value=httpx.Response(200, json=releases_payload))
    target = tmp_path / "bin"

    result = CliRunner().invoke(
        main, ["download", "dgraph-io/dgraph", "-r", "^7.0", "-d", str(target), "-q"]
    )

    assert result.exit_code == 1
    assert "No version satisfies range" in result.output
    assert not target.exists()

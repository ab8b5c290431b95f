"""Platform detection and asset matching."""

import logging
import platform
import sys
from dataclasses import dataclass

from ghfetch.models.release import Asset, Release

logger = logging.getLogger(__name__)


class NoMatchError(Exception):
    """No asset of a release matches the requested platform."""

    pass


# Machine names reported by the OS, mapped to the identifiers used in asset names
ARCH_ALIASES = {
    "x86_64": "x64",
    "amd64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "ia32",
    "i686": "ia32",
    "x86": "ia32",
    "armv7l": "arm",
    "armv6l": "arm",
    "ppc64le": "ppc64",
}


@dataclass
class PlatformInfo:
    """Current platform information."""

    os: str  # linux, darwin, win32, freebsd, ...
    arch: str  # x64, arm64, ia32, ...

    @classmethod
    def detect(cls) -> "PlatformInfo":
        """Detect current platform."""
        os_name = sys.platform
        # Python reports "linux2" and "freebsd13" on some builds
        for prefix in ("linux", "freebsd", "openbsd"):
            if os_name.startswith(prefix):
                os_name = prefix

        machine = platform.machine().lower()
        return cls(os=os_name, arch=ARCH_ALIASES.get(machine, machine))


def host_platform() -> str:
    """Platform identifier of the running host."""
    return PlatformInfo.detect().os


def host_arch() -> str:
    """Architecture identifier of the running host."""
    return PlatformInfo.detect().arch


def normalize_arch(arch: str) -> str:
    """Reduce an architecture to the token asset names share.

    x64 builds are published as amd64, x86_64, linux64, win64 and so on,
    which all contain "64".
    """
    if arch == "x64":
        return "64"
    return arch


def find_assets(
    release: Release, platform: str | None = None, arch: str | None = None
) -> list[Asset]:
    """Find all assets whose name contains both platform and arch.

    None selects the host value; an empty string matches every asset.
    Matching is a plain case-sensitive substring test.
    """
    if platform is None:
        platform = host_platform()
    if arch is None:
        arch = host_arch()
    arch = normalize_arch(arch)

    return [
        asset
        for asset in release.assets
        if platform in asset.name and arch in asset.name
    ]


def match_asset(
    release: Release, platform: str | None = None, arch: str | None = None
) -> Asset:
    """Find the asset of a release built for a platform and architecture.

    When several assets match, the last one in release order is returned.

    Raises:
        NoMatchError: if no asset name contains both platform and arch
    """
    if platform is None:
        platform = host_platform()
    if arch is None:
        arch = host_arch()

    matches = find_assets(release, platform, arch)
    if not matches:
        raise NoMatchError(
            f"No asset for platform {platform} with arch {normalize_arch(arch)}"
        )

    asset = matches[-1]
    logger.debug(
        "Matched %s for %s/%s out of %d candidate(s)",
        asset.name,
        platform,
        arch,
        len(matches),
    )
    return asset

"""Shared StarDots SDK constants.

This module centralizes the endpoint, timeout and signing header names used
by the signer and the REST runtime so the client can stay small and focused.
"""

from __future__ import annotations

import platform
import sys

# SDK version reported in the x-stardots-extra header
SDK_VERSION = "1.0.0"

# Default StarDots server endpoint
ENDPOINT = "https://api.stardots.io"

# Default request timeout, unit: seconds
DEFAULT_REQUEST_TIMEOUT = 30.0

# Language literal reported in the x-stardots-extra header
SDK_LANGUAGE = "python"

# Signing header names (wire-exact)
HEADER_TIMESTAMP = "x-stardots-timestamp"
HEADER_NONCE = "x-stardots-nonce"
HEADER_KEY = "x-stardots-key"
HEADER_SIGN = "x-stardots-sign"
HEADER_EXTRA = "x-stardots-extra"

JSON_CONTENT_TYPE = "application/json; charset=utf-8"

# Environment variables read by StarDots.from_env()
ENV_CLIENT_KEY = "STARDOTS_CLIENT_KEY"
ENV_CLIENT_SECRET = "STARDOTS_CLIENT_SECRET"
ENV_ENDPOINT = "STARDOTS_ENDPOINT"

_OS_TAGS = {
    "linux": "linux",
    "darwin": "macos",
    "win32": "windows",
    "cygwin": "windows",
}

_ARCH_TAGS = {
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "arm64": "arm64",
    "aarch64": "arm64",
    "armv7l": "arm",
    "armv6l": "arm",
    "arm": "arm",
    "i386": "i386",
    "i686": "i386",
    "x86": "i386",
}


def get_os_tag(system: str | None = None) -> str:
    """Get the platform tag reported to the server.

    Examples:
        >>> get_os_tag("darwin")
        'macos'
        >>> get_os_tag("sunos5")
        'unknown'
    """
    name = (system or sys.platform).lower()
    if name.startswith("linux"):
        return "linux"
    return _OS_TAGS.get(name, "unknown")


def get_arch_tag(machine: str | None = None) -> str:
    """Get the CPU architecture tag reported to the server.

    Examples:
        >>> get_arch_tag("AMD64")
        'x86_64'
        >>> get_arch_tag("aarch64")
        'arm64'
    """
    name = (machine if machine is not None else platform.machine()).lower()
    return _ARCH_TAGS.get(name, "unknown")

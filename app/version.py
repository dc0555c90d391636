"""Application version helpers."""

from __future__ import annotations

from functools import lru_cache
import os
from importlib import metadata

_DISTRIBUTION = "tinymid"
_FALLBACK_VERSION = "0.1.0"


def _version_from_env() -> str | None:
    env_version = os.environ.get("TINYMID_VERSION")
    if not env_version:
        return None
    return _normalize(env_version)


def _version_from_metadata() -> str | None:
    try:
        return metadata.version(_DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return None


def _normalize(raw_version: str) -> str:
    version = raw_version.strip()
    if version.startswith("v"):
        version = version[1:]
    return version


@lru_cache(maxsize=1)
def get_app_version() -> str:
    """Return the tool version.

    The order of precedence is:
    1. The ``TINYMID_VERSION`` environment variable.
    2. Metadata of the installed ``tinymid`` distribution.
    3. A fallback version string.
    """

    for resolver in (_version_from_env, _version_from_metadata):
        version = resolver()
        if version:
            return version
    return _FALLBACK_VERSION


__all__ = ["get_app_version"]

"""Get sbsdiff package version (cached)."""

import importlib.metadata

from sbsdiff import __version__

_VERSION_CACHE: str | None = None


def get_package_version() -> str:
    """Get installed package version, falling back to the source version."""
    global _VERSION_CACHE
    if _VERSION_CACHE is None:
        try:
            _VERSION_CACHE = importlib.metadata.version("sbsdiff")
        except importlib.metadata.PackageNotFoundError:
            _VERSION_CACHE = __version__
    return _VERSION_CACHE

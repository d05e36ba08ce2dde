"""Minimal version helper for the panel_chrome package."""

from importlib.metadata import PackageNotFoundError, version

PACKAGE_NAME = "panel_chrome"
FALLBACK_VERSION = "0.0.0"


def get_version() -> str:
    """
    Get version for the package.

    :return: Version number, or ``FALLBACK_VERSION`` when running from an
        uninstalled source tree.
    """
    try:
        return version(PACKAGE_NAME)
    except PackageNotFoundError:
        return FALLBACK_VERSION


__all__ = ["get_version"]

"""panel_chrome: left-rounded clip shapes and rotation callbacks for Qt widgets."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._version import get_version
from .models import DEFAULT_CORNER_RADIUS, Orientation, Path, Rect
from .shapes import RoundedLeftShape, rounded_left_path

__version__ = get_version()

if TYPE_CHECKING:  # pragma: no cover - only for type checkers
    from .app import main as _main_type  # noqa: F401


def main() -> None:
    """Entry point for ``python -m panel_chrome`` and console scripts."""
    from .app import main as _main

    _main()


__all__ = [
    "main",
    "__version__",
    "get_version",
    "DEFAULT_CORNER_RADIUS",
    "Orientation",
    "Path",
    "Rect",
    "RoundedLeftShape",
    "rounded_left_path",
]

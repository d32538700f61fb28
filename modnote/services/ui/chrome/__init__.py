"""Frameless window chrome: rounded clip region, title-bar dragging, edge resizing."""

from .drag import WindowDragController
from .resize import EdgeResizeFilter, cursor_for_edges, hit_test
from .rounded_region import apply_chrome_region, rounded_path, rounded_region

__all__ = [
    "EdgeResizeFilter",
    "WindowDragController",
    "apply_chrome_region",
    "cursor_for_edges",
    "hit_test",
    "rounded_path",
    "rounded_region",
]

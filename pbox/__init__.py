"""
pinpox' box layout (pbox)

Distributes linear space among a line of resizable items.

This package provides:
- The BoxSizer record and the box_calc distribution algorithm
- A box layout that turns sizers into pixel geometry
- A layout manager wired to the Pypubsub event bus

Example usage:
    from pbox import BoxSizer, box_calc

    sizers = [BoxSizer(size_hint=10, max_size=100), BoxSizer(size_hint=10)]
    box_calc(sizers, 30)
    print([s.size for s in sizers])  # [15.0, 15.0]
"""

__version__ = "0.1.0"
__author__ = "pinpox"

from .sizer import BoxSizer
from .box_calc import box_calc, NEAR_ZERO
from .geometry import Area
from .layouts import Layout, LayoutGeometry, LayoutDirection, BoxLayout
from .config import BoxConfig
from .layout_manager import BoxLayoutManager

__all__ = [
    # Algorithm
    "BoxSizer",
    "box_calc",
    "NEAR_ZERO",
    # Layouts
    "Area",
    "Layout",
    "LayoutGeometry",
    "LayoutDirection",
    "BoxLayout",
    # Management
    "BoxConfig",
    "BoxLayoutManager",
]

"""
Layout System

Provides sizer based layout algorithms.
"""

from .layout_base import Layout, LayoutGeometry, LayoutDirection
from .layout_box import BoxLayout

__all__ = [
    # Base classes
    "Layout",
    "LayoutGeometry",
    "LayoutDirection",
    # Layout implementations
    "BoxLayout",
]

"""
Layout Base Classes

Provides the Layout interface and shared layout types.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import List

from ..geometry import Area
from ..sizer import BoxSizer


@dataclass
class LayoutGeometry:
    """Calculated geometry for one item in a layout."""

    x: int
    y: int
    width: int
    height: int


class LayoutDirection(Enum):
    """Main axis direction for layouts."""

    HORIZONTAL = auto()  # Items arranged left-to-right
    VERTICAL = auto()  # Items arranged top-to-bottom


class Layout(ABC):
    """Abstract base class for sizer based layouts."""

    @abstractmethod
    def calculate(self, sizers: List[BoxSizer], area: Area) -> List[LayoutGeometry]:
        """
        Calculate item positions and sizes.

        Args:
            sizers: One sizer per item, in layout order
            area: Available area for the layout

        Returns:
            Geometries in the same order as the sizers
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Layout name for display."""
        pass

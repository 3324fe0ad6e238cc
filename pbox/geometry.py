"""
Geometry Types

Plain rectangle records shared by the layouts.
"""

from dataclasses import dataclass


@dataclass
class Area:
    """Area with position and dimensions."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

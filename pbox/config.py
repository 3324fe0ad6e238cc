"""
Layout Configuration
"""

from __future__ import annotations
import os
from dataclasses import dataclass, field

from .layouts import BoxLayout, LayoutDirection


@dataclass
class BoxConfig:
    """Box layout configuration."""

    # Main axis of the line
    direction: LayoutDirection = LayoutDirection.HORIZONTAL

    # Pixels between neighbouring items and around the whole line
    spacing: int = 0
    margin: int = 0

    # Print every event published on the bus
    debug_events: bool = field(default_factory=lambda: bool(os.getenv("PBOX_DEBUG")))

    def __post_init__(self):
        """Validate spacing values."""
        if self.spacing < 0:
            raise ValueError(f"spacing must not be negative, got {self.spacing}")
        if self.margin < 0:
            raise ValueError(f"margin must not be negative, got {self.margin}")

    def get_layout(self) -> BoxLayout:
        """Build the configured layout."""
        return BoxLayout(self.direction, spacing=self.spacing, margin=self.margin)

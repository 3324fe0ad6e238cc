"""
Layout Manager

Keeps named layout lines and recomputes them on request.
"""

from __future__ import annotations
import time
from typing import Dict, List, Optional

from pubsub import pub

from . import topics
from .config import BoxConfig
from .geometry import Area
from .layouts import Layout, LayoutGeometry
from .sizer import BoxSizer


class BoxLayoutManager:
    """
    Manages the sizers of one or more layout lines.

    This component subscribes to CMD_RELAYOUT and publishes LAYOUT_COMPUTED
    and LAYOUT_CHANGED events.

    Responsibilities:
    - Own the sizer list of every named line
    - CMD_RELAYOUT: Run the layout for a line and publish the result
    - Swap the active layout
    """

    def __init__(
        self,
        bus,
        layout: Optional[Layout] = None,
        config: Optional[BoxConfig] = None,
    ):
        """Initialize layout manager.

        Args:
            bus: Event bus instance (Pypubsub)
            layout: Layout to use, built from the config when omitted
            config: Layout configuration
        """
        self.bus = bus
        self.config = config or BoxConfig()
        self.layout: Layout = layout if layout is not None else self.config.get_layout()
        self.lines: Dict[str, List[BoxSizer]] = {}

        if self.config.debug_events:
            self.bus.subscribe(self.debug_event_logger, pub.ALL_TOPICS)

        self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to events BoxLayoutManager cares about."""
        self.bus.subscribe(self._on_relayout, topics.CMD_RELAYOUT)

    def _on_relayout(self, line: str, area: Area):
        """Handle CMD_RELAYOUT event."""
        self.relayout(line, area)

    def debug_event_logger(self, topic=pub.AUTO_TOPIC, **kwargs):
        """Log all events published on the event bus."""
        timestamp = time.strftime("%H:%M:%S")
        topic_name = topic.getName()
        data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items() if k != "topic")
        print(f"[{timestamp}] EVENT: {topic_name} | {data_str}")

    def add_line(self, name: str, sizers: List[BoxSizer]):
        """Add or replace a layout line."""
        self.lines[name] = sizers

    def remove_line(self, name: str):
        """Remove a layout line."""
        self.lines.pop(name, None)

    def set_layout(self, layout: Layout):
        """Replace the active layout."""
        self.layout = layout
        self.bus.sendMessage(topics.LAYOUT_CHANGED, layout=layout)

    def relayout(self, name: str, area: Area) -> Optional[List[LayoutGeometry]]:
        """Lay out a line within an area.

        Args:
            name: Name of the line
            area: Available area for the line

        Returns:
            Geometries in sizer order, or None if the line is unknown
        """
        sizers = self.lines.get(name)
        if sizers is None:
            return None

        geometries = self.layout.calculate(sizers, area)
        self.bus.sendMessage(topics.LAYOUT_COMPUTED, line=name, geometries=geometries)
        return geometries

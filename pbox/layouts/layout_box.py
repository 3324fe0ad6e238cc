"""
Box Layout

Arranges items in a single row or column, sized by box_calc.
"""

from __future__ import annotations
from typing import List

from .layout_base import Layout, LayoutGeometry, LayoutDirection
from ..box_calc import box_calc
from ..geometry import Area
from ..sizer import BoxSizer


class BoxLayout(Layout):
    """
    Single line box layout.

    Items are placed one after another along the main axis and fill the
    cross axis. The main axis space is shared out by their sizers.
    """

    def __init__(
        self,
        direction: LayoutDirection = LayoutDirection.HORIZONTAL,
        spacing: int = 0,
        margin: int = 0,
    ):
        self.direction = direction
        self.spacing = spacing
        self.margin = margin

    @property
    def name(self) -> str:
        if self.direction == LayoutDirection.HORIZONTAL:
            return "box-horizontal"
        return "box-vertical"

    def calculate(self, sizers: List[BoxSizer], area: Area) -> List[LayoutGeometry]:
        if not sizers:
            return []

        # Apply margin to area
        usable = Area(
            area.x + self.margin,
            area.y + self.margin,
            area.width - 2 * self.margin,
            area.height - 2 * self.margin,
        )

        horizontal = self.direction == LayoutDirection.HORIZONTAL
        if horizontal:
            start, length, cross = usable.x, usable.width, usable.height
        else:
            start, length, cross = usable.y, usable.height, usable.width

        space = length - (len(sizers) - 1) * self.spacing
        box_calc(sizers, space)

        result = []
        offset = float(start)
        for sizer in sizers:
            # Round both edges so neighbours share a pixel boundary
            begin = round(offset)
            offset += sizer.size
            end = round(offset)
            offset += self.spacing

            if horizontal:
                result.append(LayoutGeometry(begin, usable.y, end - begin, cross))
            else:
                result.append(LayoutGeometry(usable.x, begin, cross, end - begin))

        return result

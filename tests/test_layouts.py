"""
Unit tests for the box layout.
"""

import pytest
from pbox import BoxSizer
from pbox.geometry import Area
from pbox.layouts import BoxLayout, LayoutGeometry
from pbox.layouts.layout_base import LayoutDirection


@pytest.mark.unit
class TestBoxLayout:
    """Test box layout calculations."""

    def test_names(self):
        assert BoxLayout(LayoutDirection.HORIZONTAL).name == "box-horizontal"
        assert BoxLayout(LayoutDirection.VERTICAL).name == "box-vertical"

    def test_empty_sizer_list(self, standard_area):
        """Empty sizer list should return empty result."""
        layout = BoxLayout(spacing=10, margin=10)
        assert layout.calculate([], standard_area) == []

    def test_equal_sizers_split_width(self, standard_area):
        layout = BoxLayout(LayoutDirection.HORIZONTAL)
        sizers = [BoxSizer() for _ in range(3)]

        result = layout.calculate(sizers, standard_area)

        assert result == [
            LayoutGeometry(0, 0, 640, 1080),
            LayoutGeometry(640, 0, 640, 1080),
            LayoutGeometry(1280, 0, 640, 1080),
        ]

    def test_spacing_between_items(self, small_area):
        layout = BoxLayout(LayoutDirection.HORIZONTAL, spacing=10)
        sizers = [BoxSizer() for _ in range(3)]

        result = layout.calculate(sizers, small_area)

        assert [g.x for g in result] == [0, 270, 540]
        assert [g.width for g in result] == [260, 260, 260]
        assert result[-1].x + result[-1].width == 800

    def test_margin_insets_area(self, small_area):
        layout = BoxLayout(LayoutDirection.HORIZONTAL, margin=20)
        sizers = [BoxSizer()]

        result = layout.calculate(sizers, small_area)

        assert result == [LayoutGeometry(20, 20, 760, 560)]

    def test_rounding_keeps_items_contiguous(self):
        """Fractional sizes are rounded without gaps or overlaps."""
        layout = BoxLayout(LayoutDirection.HORIZONTAL)
        sizers = [BoxSizer() for _ in range(3)]

        result = layout.calculate(sizers, Area(0, 0, 100, 50))

        assert [g.x for g in result] == [0, 33, 67]
        assert [g.width for g in result] == [33, 34, 33]
        assert sum(g.width for g in result) == 100

    def test_vertical_fixed_and_stretch(self, small_area):
        layout = BoxLayout(LayoutDirection.VERTICAL)
        header = BoxSizer(size_hint=100, min_size=100, max_size=100)
        body = BoxSizer()

        result = layout.calculate([header, body], small_area)

        assert result == [
            LayoutGeometry(0, 0, 800, 100),
            LayoutGeometry(0, 100, 800, 500),
        ]
        # Computed sizes stay readable on the sizers
        assert header.size == 100
        assert body.size == 500

    def test_offset_area(self):
        layout = BoxLayout(LayoutDirection.VERTICAL, spacing=4)
        sizers = [BoxSizer(), BoxSizer()]

        result = layout.calculate(sizers, Area(100, 50, 200, 204))

        assert result == [
            LayoutGeometry(100, 50, 200, 100),
            LayoutGeometry(100, 154, 200, 100),
        ]

    def test_overflowing_min_sizes(self, small_area):
        """Min sizes win over the available space."""
        layout = BoxLayout(LayoutDirection.HORIZONTAL)
        sizers = [BoxSizer(min_size=500), BoxSizer(min_size=500)]

        result = layout.calculate(sizers, small_area)

        assert [g.width for g in result] == [500, 500]
        assert result[1].x == 500

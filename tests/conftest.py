"""
Shared pytest fixtures for pbox tests.
"""

import pytest
from pubsub import pub
from pbox.geometry import Area
from pbox.sizer import BoxSizer


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external resources")


@pytest.fixture
def make_sizers():
    """Factory fixture building sizers from (hint, min, max, stretch) tuples."""

    def factory(*rows):
        return [
            BoxSizer(size_hint=hint, min_size=lo, max_size=hi, stretch=stretch)
            for hint, lo, hi, stretch in rows
        ]

    return factory


@pytest.fixture
def bus():
    """The Pypubsub bus, cleared of listeners after each test."""
    yield pub
    pub.unsubAll()


@pytest.fixture
def standard_area():
    """Standard 1920x1080 area for layout tests."""
    return Area(0, 0, 1920, 1080)


@pytest.fixture
def small_area():
    """Small 800x600 area for layout tests."""
    return Area(0, 0, 800, 600)

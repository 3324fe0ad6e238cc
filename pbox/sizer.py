"""
Box Sizer

The geometry record consumed and updated by the box layout algorithm.
"""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class BoxSizer:
    """
    Geometry information for one object along the layout orientation.

    A list of sizers representing a line of objects is passed to
    ``box_calc`` together with the available space. The algorithm writes
    the computed ``size`` of each sizer in place, so the same sizers can be
    reused on every layout pass.

    Treat this as a plain data record. It is not meant to be subclassed.
    """

    size_hint: float = 0  # Preferred size, clamped to [min_size, max_size]
    min_size: float = 0  # Assumed to lie in [0, inf) and be <= max_size
    max_size: float = float("inf")  # Assumed to lie in [0, inf] and be >= min_size
    stretch: int = 1  # Zero means "resize only after all stretch > 0 sizers"

    # Output of box_calc, always within [min_size, max_size] after a call
    size: float = 0

    # Scratch flag owned by box_calc, reset on every call
    done: bool = field(default=False, repr=False, compare=False)

"""
Box Layout Algorithm

Distributes a fixed amount of linear space among a line of box sizers.
"""

from __future__ import annotations
from typing import Sequence

from .sizer import BoxSizer

# Free space below this is considered exhausted. Using a near zero value
# instead of zero keeps the sub-pixel loops from chasing floating point
# residue forever.
NEAR_ZERO = 0.01


def box_calc(sizers: Sequence[BoxSizer], space: float) -> None:
    """
    Compute the layout sizes for a line of box sizers.

    The available space is distributed as follows:

    1. Each sizer's size is initialized to its size hint clamped to its
       bounds, and the totals of size, min size and max size are computed.
    2. If the total size equals the available space, return.
    3. If the space is at most the total min size, minimize every sizer.
    4. If the space is at least the total max size, maximize every sizer.
    5. Otherwise the delta is distributed in two phases:

       a. Sizers with a stretch factor greater than zero are shrunk or
          grown by an amount proportional to their stretch factor. A
          sizer that reaches its limit is pinned there and its stretch is
          removed from the computation.
       b. Any remaining delta is split evenly among the sizers which are
          not yet pinned. A sizer that reaches its limit is removed.

    Args:
        sizers: The sizers for one layout line, updated in place
        space: The available layout space for the sizers

    Results from a previous call have no effect on the new output, so the
    same sizers can be passed again on every layout pass.
    """
    count = len(sizers)
    if count == 0:
        return

    total_min = 0.0
    total_max = 0.0
    total_size = 0.0
    total_stretch = 0
    stretch_count = 0

    for sizer in sizers:
        _init_sizer(sizer)
        total_size += sizer.size
        total_min += sizer.min_size
        total_max += sizer.max_size
        if sizer.stretch > 0:
            total_stretch += sizer.stretch
            stretch_count += 1

    if space == total_size:
        return

    if space <= total_min:
        for sizer in sizers:
            sizer.size = sizer.min_size
        return

    if space >= total_max:
        for sizer in sizers:
            sizer.size = sizer.max_size
        return

    # Decremented whenever a sizer is pinned to a limit, so the loops end
    # even if some space is left over.
    not_done_count = count

    if space < total_size:
        free_space = total_size - space

        # Shrink stretchable sizers proportionally. Each pass distributes
        # against a snapshot of the free space and stretch total, so every
        # sizer gets its fair share regardless of earlier sizers hitting
        # their min size during the same pass.
        while stretch_count > 0 and free_space > NEAR_ZERO:
            dist_space = free_space
            dist_stretch = total_stretch
            for sizer in sizers:
                if sizer.done or sizer.stretch <= 0:
                    continue
                amt = sizer.stretch * dist_space / dist_stretch
                if sizer.size - amt <= sizer.min_size:
                    free_space -= sizer.size - sizer.min_size
                    total_stretch -= sizer.stretch
                    sizer.size = sizer.min_size
                    sizer.done = True
                    not_done_count -= 1
                    stretch_count -= 1
                else:
                    free_space -= amt
                    sizer.size -= amt

        # Spread what is left evenly over the remaining sizers.
        while not_done_count > 0 and free_space > NEAR_ZERO:
            amt = free_space / not_done_count
            for sizer in sizers:
                if sizer.done:
                    continue
                if sizer.size - amt <= sizer.min_size:
                    free_space -= sizer.size - sizer.min_size
                    sizer.size = sizer.min_size
                    sizer.done = True
                    not_done_count -= 1
                else:
                    free_space -= amt
                    sizer.size -= amt
    else:
        free_space = space - total_size

        # Grow stretchable sizers proportionally, same phases as above.
        while stretch_count > 0 and free_space > NEAR_ZERO:
            dist_space = free_space
            dist_stretch = total_stretch
            for sizer in sizers:
                if sizer.done or sizer.stretch <= 0:
                    continue
                amt = sizer.stretch * dist_space / dist_stretch
                if sizer.size + amt >= sizer.max_size:
                    free_space -= sizer.max_size - sizer.size
                    total_stretch -= sizer.stretch
                    sizer.size = sizer.max_size
                    sizer.done = True
                    not_done_count -= 1
                    stretch_count -= 1
                else:
                    free_space -= amt
                    sizer.size += amt

        while not_done_count > 0 and free_space > NEAR_ZERO:
            amt = free_space / not_done_count
            for sizer in sizers:
                if sizer.done:
                    continue
                if sizer.size + amt >= sizer.max_size:
                    free_space -= sizer.max_size - sizer.size
                    sizer.size = sizer.max_size
                    sizer.done = True
                    not_done_count -= 1
                else:
                    free_space -= amt
                    sizer.size += amt


def _init_sizer(sizer: BoxSizer):
    """(Re)initialize a sizer for a layout pass."""
    sizer.size = max(sizer.min_size, min(sizer.size_hint, sizer.max_size))
    sizer.done = False

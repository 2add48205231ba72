"""Breakpoint reference sets and the small helpers shared by the strategies."""
from __future__ import annotations

import re
from typing import Iterable, List, Optional, Union

Number = Union[int, float]

# Common device widths, from small phones to 4K displays.
DEFAULT_DEVICE_BREAKPOINTS = (480, 640, 750, 828, 1080, 1200, 1920, 2048, 3840)

# Common icon and thumbnail widths.
DEFAULT_IMAGE_BREAKPOINTS = (16, 32, 48, 64, 96, 128, 256, 384)

# Smallest device the sizes-based strategy assumes when filtering by vw.
MIN_DEVICE_WIDTH = min(DEFAULT_DEVICE_BREAKPOINTS)

_VW_PATTERN = re.compile(r"(\d+)vw")


def unique_sorted(*groups: Iterable[Number]) -> List[Number]:
    """Merge breakpoint groups, drop duplicates, then sort ascending."""

    merged: dict[Number, None] = {}
    for group in groups:
        for value in group:
            merged.setdefault(value, None)
    return sorted(merged)


def parse_smallest_vw(sizes: str) -> Optional[float]:
    """Return the smallest ``<n>vw`` value in *sizes* as a fraction of 1.

    ``"(min-width: 768px) 50vw, 100vw"`` gives ``0.5``; a string without any
    vw units gives ``None``.
    """

    values = [int(match) for match in _VW_PATTERN.findall(sizes)]
    if not values:
        return None
    return min(values) / 100


def format_width(width: Number) -> str:
    # 1600.0 -> "1600"
    if isinstance(width, float) and width.is_integer():
        return str(int(width))
    return str(width)

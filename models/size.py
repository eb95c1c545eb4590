"""
Size Resolver
=============

Reduces the 1 to 3 written dimensions of a nodule to one representative
size in millimeters:

- 1 value: the value itself
- 2 values: mean of both
- 3 values: mean of the two largest
"""

from typing import Sequence

from config import MM_PER_CM
from models.nodule import Unit


def _two_largest(first: float, second: float, third: float):
    """Keep the two largest of three values, replacing the smaller of the first two."""
    if first <= second:
        if third > first:
            first = third
    elif third > second:
        second = third
    return first, second


def resolve_size_mm(measurements: Sequence[float], unit: Unit) -> float:
    """
    Compute the representative nodule size.

    Args:
        measurements: 1 to 3 dimensions in ``unit``
        unit: Unit.MM or Unit.CM

    Returns:
        Size in millimeters
    """
    values = tuple(measurements)
    if len(values) == 1:
        size = values[0]
    elif len(values) == 2:
        size = (values[0] + values[1]) / 2
    elif len(values) == 3:
        first, second = _two_largest(*values)
        size = (first + second) / 2
    else:
        raise ValueError(f"Expected 1 to 3 measurements, got {len(values)}")

    if unit is Unit.CM:
        size *= MM_PER_CM
    return size

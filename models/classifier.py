"""
Category Classifier
===================

Maps (composition, multiplicity, size, calcification) to a follow-up
category 0-8:

    composition             multiplicity  size          category
    ----------------------  ------------  ------------  --------
    unspecified / solid     single        s < 6         1
    unspecified / solid     single        6 <= s <= 8   2
    unspecified / solid     single        s > 8         3
    unspecified / solid     multiple      s < 6         1
    unspecified / solid     multiple      s >= 6        6
    ground glass / part     multiple      s < 6         7
    ground glass / part     multiple      s >= 6        8
    ground glass            single        s < 6         0
    ground glass            single        s >= 6        4
    part solid              single        s < 6         0
    part solid              single        s >= 6        5

A calcified nodule is always category 0, whatever the table gives.
"""

import logging

from config import SMALL_NODULE_MM, LARGE_NODULE_MM
from models.nodule import Composition, Multiplicity, NoduleDescriptor

logger = logging.getLogger(__name__)

SUBSOLID = (Composition.GROUND_GLASS, Composition.PART_SOLID)


def _table_category(
    composition: Composition,
    multiplicity: Multiplicity,
    size_mm: float
) -> int:
    small = size_mm < SMALL_NODULE_MM

    if composition in SUBSOLID:
        if multiplicity is Multiplicity.MULTIPLE:
            return 7 if small else 8
        if small:
            return 0
        return 4 if composition is Composition.GROUND_GLASS else 5

    # Unspecified or solid
    if multiplicity is Multiplicity.MULTIPLE:
        return 1 if small else 6
    if small:
        return 1
    if size_mm <= LARGE_NODULE_MM:
        return 2
    return 3


def categorize(
    composition: Composition,
    multiplicity: Multiplicity,
    size_mm: float,
    calcified: bool
) -> int:
    """
    Compute the follow-up category.

    Args:
        composition: Nodule composition
        multiplicity: SINGLE or MULTIPLE
        size_mm: Representative size in millimeters
        calcified: Calcification state

    Returns:
        Category in 0..8
    """
    if not isinstance(composition, Composition):
        raise ValueError(f"Unknown composition: {composition!r}")
    if not isinstance(multiplicity, Multiplicity):
        raise ValueError(f"Unknown multiplicity: {multiplicity!r}")

    category = _table_category(composition, multiplicity, size_mm)
    if calcified:
        category = 0
    return category


def categorize_descriptor(descriptor: NoduleDescriptor, size_mm: float) -> int:
    """Compute the category for a descriptor whose size is already resolved."""
    category = categorize(
        descriptor.composition,
        descriptor.multiplicity,
        size_mm,
        descriptor.calcified,
    )
    logger.debug(
        "Category %d for %s/%s nodule of %.2f mm (calcified=%s)",
        category,
        descriptor.composition.value,
        descriptor.multiplicity.value,
        size_mm,
        descriptor.calcified,
    )
    return category

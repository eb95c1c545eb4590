"""
Models Module
=============

Nodule data records, size resolution and the follow-up category table.
"""

from .nodule import (
    Multiplicity,
    Composition,
    Unit,
    NoduleDescriptor,
    ClassificationResult,
)
from .size import resolve_size_mm
from .classifier import categorize, categorize_descriptor

__all__ = [
    'Multiplicity',
    'Composition',
    'Unit',
    'NoduleDescriptor',
    'ClassificationResult',
    'resolve_size_mm',
    'categorize',
    'categorize_descriptor',
]

"""
Nodule Data Model
=================

Immutable records produced by the extraction pipeline:

- NoduleDescriptor: attributes read from one report sentence
- ClassificationResult: descriptor plus size, category and recommendation

Both are frozen dataclasses; a descriptor is built in a single pass and is
never modified afterwards.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, Tuple


class Multiplicity(Enum):
    """Whether the sentence describes one nodule or several."""
    SINGLE = "single"
    MULTIPLE = "multiple"


class Composition(Enum):
    """Tissue character of a nodule."""
    UNSPECIFIED = "unspecified"
    SOLID = "solid"
    GROUND_GLASS = "ground_glass"
    PART_SOLID = "part_solid"


class Unit(Enum):
    """Measurement unit as written in the report."""
    MM = "mm"
    CM = "cm"

    @classmethod
    def from_token(cls, token: str) -> "Unit":
        """Map a unit token ("mm", "CM", ...) to a Unit."""
        return cls(token.lower())


@dataclass(frozen=True)
class NoduleDescriptor:
    """
    Structured lung nodule finding.

    Attributes:
        multiplicity: SINGLE unless the plural "nodules" appears
        composition: Tissue character after the token scan
        calcified: Calcification state; the last calcification token wins
        raw_measurement_text: Measurement substring exactly as matched
        unit: Unit of ``measurements``
        measurements: 1 to 3 positive values, left to right, unconverted
    """
    multiplicity: Multiplicity
    composition: Composition
    calcified: bool
    raw_measurement_text: str
    unit: Unit
    measurements: Tuple[float, ...]

    def __post_init__(self):
        if not 1 <= len(self.measurements) <= 3:
            raise ValueError(
                f"A descriptor needs 1 to 3 measurements, got {len(self.measurements)}"
            )
        if not isinstance(self.unit, Unit):
            raise ValueError(f"Unsupported unit: {self.unit!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "multiplicity": self.multiplicity.value,
            "composition": self.composition.value,
            "calcified": self.calcified,
            "raw_measurement_text": self.raw_measurement_text,
            "unit": self.unit.value,
            "measurements": list(self.measurements),
        }


@dataclass(frozen=True)
class ClassificationResult:
    """Final output for one sentence."""
    descriptor: NoduleDescriptor
    size_mm: float
    category: int
    recommendation: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "descriptor": self.descriptor.to_dict(),
            "size_mm": self.size_mm,
            "category": self.category,
            "recommendation": self.recommendation,
        }

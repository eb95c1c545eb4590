"""
Measurement Parser
==================

Finds the first nodule measurement in a sentence: one to three decimal
dimensions joined by "x" and followed by a mm or cm unit.

    "measuring 7 x 8 mm"      -> (7.0, 8.0), mm
    "1.5 X 1.5cm"             -> (1.5, 1.5), cm
    "6 x 4 x 8 mm"            -> (6.0, 4.0, 8.0), mm

Only the first match in left-to-right order is used. A sentence describing
several measurements is not disambiguated.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from models.nodule import Unit
from nlp.errors import MeasurementNotFound

logger = logging.getLogger(__name__)

_NUMBER = r'(\d+(?:\.\d+)?)'

MEASUREMENT_PATTERN = re.compile(
    _NUMBER
    + r'(?:\s*x\s*' + _NUMBER + r')?'
    + r'(?:\s*x\s*' + _NUMBER + r')?'
    + r'\s*(mm|cm)\b',
    flags=re.IGNORECASE,
)


@dataclass(frozen=True)
class Measurement:
    """Dimensions captured from a sentence, still in the written unit."""
    raw_text: str
    values: Tuple[float, ...]
    unit: Unit


def _parse_decimal(token: Optional[str]) -> Optional[float]:
    """Return the token as a positive float, or None if it is not one."""
    if token is None:
        return None
    try:
        value = float(token)
    except ValueError:
        return None
    if value <= 0:
        return None
    return value


def parse_measurement(sentence: str) -> Measurement:
    """
    Extract the first measurement from a normalized sentence.

    Args:
        sentence: Normalized sentence text

    Returns:
        Measurement with 1 to 3 values

    Raises:
        MeasurementNotFound: If no valid measurement pattern is present
    """
    match = MEASUREMENT_PATTERN.search(sentence)
    if match is None:
        raise MeasurementNotFound()

    values = tuple(
        value for value in (_parse_decimal(group) for group in match.groups()[:3])
        if value is not None
    )
    if not values:
        raise MeasurementNotFound()

    measurement = Measurement(
        raw_text=match.group(0),
        values=values,
        unit=Unit.from_token(match.group(4)),
    )
    logger.debug("Matched measurement %r -> %s", measurement.raw_text, measurement.values)
    return measurement

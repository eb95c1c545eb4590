"""
Nodule Follow-up Pipeline
=========================

Single entry point used by the CLI, the API and any host-application shim:

    raw sentence
        -> descriptor extraction + measurement parsing
        -> size resolution
        -> category classification
        -> recommendation lookup
        -> ClassificationResult

Every call is independent; nothing is shared between calls, so the
functions here may be used from several threads at once.

Usage:
    result = classify("Solid nodule measuring 7 x 8 mm.")
    print(format_summary(result))
"""

import logging
from typing import Iterable, Iterator, Tuple, Union

from knowledge.fleischner import get_recommendation
from models.classifier import categorize_descriptor
from models.nodule import ClassificationResult
from models.size import resolve_size_mm
from nlp.descriptor_extractor import extract_descriptor
from nlp.errors import NoduleExtractionError

logger = logging.getLogger(__name__)

Outcome = Union[ClassificationResult, NoduleExtractionError]

COMPOSITION_LABELS = {
    "unspecified": "Unspecified",
    "solid": "Solid",
    "ground_glass": "Ground glass",
    "part_solid": "Part solid",
}


def classify(text: str) -> ClassificationResult:
    """
    Classify one sentence describing a lung nodule.

    Args:
        text: Sentence or short passage of report text

    Returns:
        ClassificationResult

    Raises:
        NotANoduleReference: If the text does not mention a nodule
        MeasurementNotFound: If no mm/cm measurement is present
    """
    descriptor = extract_descriptor(text)
    size_mm = resolve_size_mm(descriptor.measurements, descriptor.unit)
    category = categorize_descriptor(descriptor, size_mm)
    return ClassificationResult(
        descriptor=descriptor,
        size_mm=size_mm,
        category=category,
        recommendation=get_recommendation(category),
    )


def try_classify(text: str) -> Outcome:
    """Like classify(), but return the typed failure instead of raising it."""
    try:
        return classify(text)
    except NoduleExtractionError as e:
        logger.debug("Classification failed (%s): %s", e.kind, e.message)
        return e


def classify_many(lines: Iterable[str]) -> Iterator[Tuple[str, Outcome]]:
    """Classify each non-blank line independently."""
    for line in lines:
        line = line.strip()
        if not line:
            continue
        yield line, try_classify(line)


def _format_size(value: float) -> str:
    return f"{value:g}"


def format_summary(result: ClassificationResult) -> str:
    """
    Build the multi-line summary shown to the user.

    Example:
        Multiplicity: Single
        Composition: Solid
        Calcified: No
        Measurement: 7 x 8 mm
        Size: 7.5 mm
        Category: 2
        Recommendation: CT in 6-12 months. ...
    """
    descriptor = result.descriptor
    lines = [
        f"Multiplicity: {descriptor.multiplicity.value.capitalize()}",
        f"Composition: {COMPOSITION_LABELS[descriptor.composition.value]}",
        f"Calcified: {'Yes' if descriptor.calcified else 'No'}",
        f"Measurement: {descriptor.raw_measurement_text}",
        f"Size: {_format_size(result.size_mm)} mm",
        f"Category: {result.category}",
        f"Recommendation: {result.recommendation}",
    ]
    return "\n".join(lines)


def format_insertion(result: ClassificationResult) -> str:
    """Text appended to the document right after the selected sentence."""
    return " " + result.recommendation

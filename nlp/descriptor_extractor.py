"""
Descriptor Extractor
====================

Builds a NoduleDescriptor from one report sentence.

The sentence is scanned once, left to right, as (token, lookahead) pairs.
Each pair is fed to a pure transition function that returns the next scan
state. Order matters:

- "solid" then "ground glass" (or the reverse) ends in PART_SOLID
- "part solid" / "part-solid" sets PART_SOLID directly and skips the next
  token; PART_SOLID never changes afterwards
- the last calcification token wins: "calcified ... noncalcified" is not
  calcified, "noncalcified ... calcified" is

Calcification and composition are not scoped to clauses. A phrase such as
"partially calcified" counts as calcified, and descriptors of a second
finding in the same sentence still affect the state.
"""

import logging
import re
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from models.nodule import Composition, Multiplicity, NoduleDescriptor
from nlp.errors import NotANoduleReference
from nlp.measurement_parser import parse_measurement
from nlp.normalize import normalize_sentence, tokenize, token_window

logger = logging.getLogger(__name__)

NODULE_REFERENCE_PATTERN = re.compile(r'\bnodules?\b', flags=re.IGNORECASE)

PLURAL_NODULE_PATTERN = re.compile(r'\bnodules\b', flags=re.IGNORECASE)
SOLID_TOKEN = "solid"
GROUND_GLASS_TOKENS = frozenset({"groundglass", "ground-glass"})
PART_SOLID_TOKEN = "part-solid"
CALCIFIED_TOKENS = frozenset({"calcified", "calcification", "calcifications"})
NONCALCIFIED_TOKENS = frozenset({"noncalcified", "non-calcified"})


@dataclass(frozen=True)
class ScanState:
    """Accumulated descriptor attributes during the token scan."""
    multiplicity: Multiplicity = Multiplicity.SINGLE
    composition: Composition = Composition.UNSPECIFIED
    calcified: bool = False


def _with_solid_evidence(composition: Composition) -> Composition:
    if composition is Composition.UNSPECIFIED:
        return Composition.SOLID
    if composition is Composition.GROUND_GLASS:
        return Composition.PART_SOLID
    return composition


def _with_ground_glass_evidence(composition: Composition) -> Composition:
    if composition is Composition.UNSPECIFIED:
        return Composition.GROUND_GLASS
    if composition is Composition.SOLID:
        return Composition.PART_SOLID
    return composition


def step(state: ScanState, token: str, lookahead: Optional[str]) -> Tuple[ScanState, bool]:
    """
    Apply every rule that matches one token.

    Args:
        state: State before the token
        token: Lowercase token
        lookahead: Following token, or None at the end of the sentence

    Returns:
        (new_state, skip_next): skip_next is True when the lookahead was
        consumed by "part solid" or "part-solid" and must not be scanned again
    """
    skip_next = False

    if token == SOLID_TOKEN:
        state = replace(state, composition=_with_solid_evidence(state.composition))

    if (token == "ground" and lookahead == "glass") or token in GROUND_GLASS_TOKENS:
        state = replace(state, composition=_with_ground_glass_evidence(state.composition))

    if token == "part" and lookahead == SOLID_TOKEN:
        state = replace(state, composition=Composition.PART_SOLID)
        skip_next = True
    elif token == PART_SOLID_TOKEN:
        state = replace(state, composition=Composition.PART_SOLID)
        skip_next = True

    if token in CALCIFIED_TOKENS:
        state = replace(state, calcified=True)
    elif token in NONCALCIFIED_TOKENS:
        state = replace(state, calcified=False)

    return state, skip_next


def scan_tokens(sentence: str) -> ScanState:
    """
    Fold the transition function over the tokens of a normalized sentence.

    Multiplicity is not a token rule: "nodules" anywhere in the sentence,
    including next to punctuation ("nodules;", "nodules."), makes it MULTIPLE.
    """
    state = ScanState()
    if PLURAL_NODULE_PATTERN.search(sentence):
        state = replace(state, multiplicity=Multiplicity.MULTIPLE)
    skip_next = False
    for token, lookahead in token_window(tokenize(sentence)):
        if skip_next:
            skip_next = False
            continue
        state, skip_next = step(state, token, lookahead)
    return state


def references_nodule(text: str) -> bool:
    """Check whether the text mentions "nodule" or "nodules"."""
    return NODULE_REFERENCE_PATTERN.search(text) is not None


def extract_descriptor(text: str) -> NoduleDescriptor:
    """
    Build a NoduleDescriptor from raw sentence text.

    Args:
        text: One sentence or short passage of report text

    Returns:
        Fully populated NoduleDescriptor

    Raises:
        NotANoduleReference: If the text does not mention a nodule
        MeasurementNotFound: If no mm/cm measurement is present
    """
    sentence = normalize_sentence(text)
    if not references_nodule(sentence):
        raise NotANoduleReference()

    state = scan_tokens(sentence)
    measurement = parse_measurement(sentence)

    descriptor = NoduleDescriptor(
        multiplicity=state.multiplicity,
        composition=state.composition,
        calcified=state.calcified,
        raw_measurement_text=measurement.raw_text,
        unit=measurement.unit,
        measurements=measurement.values,
    )
    logger.debug("Extracted descriptor: %s", descriptor.to_dict())
    return descriptor

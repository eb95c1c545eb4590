"""
NLP Module
==========

Rule-based extraction of lung nodule descriptors from report sentences:

- Normalization and tokenization with a one-token lookahead window
- Regex measurement parsing (1 to 3 dimensions, mm or cm)
- Order-dependent composition and calcification scanning
"""

from .errors import NoduleExtractionError, NotANoduleReference, MeasurementNotFound
from .measurement_parser import Measurement, parse_measurement
from .descriptor_extractor import extract_descriptor, scan_tokens, ScanState

__all__ = [
    'NoduleExtractionError',
    'NotANoduleReference',
    'MeasurementNotFound',
    'Measurement',
    'parse_measurement',
    'extract_descriptor',
    'scan_tokens',
    'ScanState',
]

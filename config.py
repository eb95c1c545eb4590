"""
Central Configuration for Nodule Follow-up
==========================================

This module provides a single source of truth for the guideline thresholds,
unit handling, logging and API server parameters.
"""

import os
from typing import Dict, Any

# =============================================================================
# VERSION
# =============================================================================

VERSION = "1.0.0"

# =============================================================================
# GUIDELINE THRESHOLDS (millimeters, inclusive as noted)
# =============================================================================

SMALL_NODULE_MM = 6.0   # s < 6 is "small"; s == 6 is not
LARGE_NODULE_MM = 8.0   # 6 <= s <= 8 is intermediate; s > 8 is large

# Conversion factor for centimeter measurements
MM_PER_CM = 10.0

# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.environ.get("NODULE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# =============================================================================
# API SERVER
# =============================================================================

API_TITLE = "Nodule Follow-up Recommendation API"
API_DESCRIPTION = (
    "Extracts a lung nodule descriptor from a report sentence and maps it "
    "to a follow-up recommendation category"
)
API_HOST = os.environ.get("NODULE_API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("NODULE_API_PORT", "8000"))

# Upper bound on items accepted by the batch endpoint
MAX_BATCH_SIZE = 500


def get_config() -> Dict[str, Any]:
    """Get all configuration as a dictionary."""
    return {
        "version": VERSION,
        "small_nodule_mm": SMALL_NODULE_MM,
        "large_nodule_mm": LARGE_NODULE_MM,
        "mm_per_cm": MM_PER_CM,
        "log_level": LOG_LEVEL,
        "api_host": API_HOST,
        "api_port": API_PORT,
        "max_batch_size": MAX_BATCH_SIZE,
    }

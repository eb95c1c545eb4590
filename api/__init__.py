"""
API Module for Nodule Follow-up Recommendations
================================================

Provides FastAPI REST endpoints for:
- Single sentence classification
- Batch classification
- The recommendation table
"""

from .main import app

__all__ = ["app"]

"""
Pydantic Schemas for API Request/Response Models
=================================================
"""

from pydantic import BaseModel, Field
from typing import List, Dict, Optional

from config import VERSION


class ClassifyRequest(BaseModel):
    """Request model for classifying one sentence."""
    text: str = Field(..., min_length=1, description="Report sentence describing a nodule")


class BatchClassifyRequest(BaseModel):
    """Request model for classifying several sentences."""
    texts: List[str]


class DescriptorResponse(BaseModel):
    """Response model for the extracted nodule descriptor."""
    multiplicity: str
    composition: str
    calcified: bool
    raw_measurement_text: str
    unit: str
    measurements: List[float]


class ClassificationResponse(BaseModel):
    """Response model for a successful classification."""
    descriptor: DescriptorResponse
    size_mm: float
    category: int
    recommendation: str
    summary: str
    insertion_text: str


class ErrorDetail(BaseModel):
    """Typed failure returned instead of a classification."""
    kind: str
    message: str


class BatchItemResponse(BaseModel):
    """Outcome for one sentence of a batch; exactly one of result/error is set."""
    text: str
    result: Optional[ClassificationResponse] = None
    error: Optional[ErrorDetail] = None


class BatchClassifyResponse(BaseModel):
    """Response model for batch classification."""
    total_count: int
    success_count: int
    items: List[BatchItemResponse]


class RecommendationTableResponse(BaseModel):
    """Response model for the category -> recommendation table."""
    recommendations: Dict[int, str]


class HealthResponse(BaseModel):
    """Response model for health check."""
    status: str = "healthy"
    version: str = VERSION

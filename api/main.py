"""
FastAPI Backend for Nodule Follow-up Recommendations
=====================================================

Provides REST API endpoints for:
- Classifying a single report sentence
- Classifying a batch of sentences
- Listing the category -> recommendation table
- Health checks
"""

import logging
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

# Local imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from api.schemas import (
    ClassifyRequest,
    BatchClassifyRequest,
    DescriptorResponse,
    ClassificationResponse,
    ErrorDetail,
    BatchItemResponse,
    BatchClassifyResponse,
    RecommendationTableResponse,
    HealthResponse,
)
from config import API_TITLE, API_DESCRIPTION, VERSION, LOG_FORMAT, LOG_LEVEL, MAX_BATCH_SIZE
from knowledge.fleischner import RECOMMENDATIONS
from models.nodule import ClassificationResult
from nlp.errors import NoduleExtractionError
from orchestrator import classify, try_classify, format_summary, format_insertion

# Configure logging
logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=VERSION,
)

# Host-application shims call the API from local origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def to_response(result: ClassificationResult) -> ClassificationResponse:
    """Convert a ClassificationResult to its API model."""
    return ClassificationResponse(
        descriptor=DescriptorResponse(**result.descriptor.to_dict()),
        size_mm=result.size_mm,
        category=result.category,
        recommendation=result.recommendation,
        summary=format_summary(result),
        insertion_text=format_insertion(result),
    )


# =============================================================================
# HEALTH CHECK
# =============================================================================

@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check API health status."""
    return HealthResponse(status="healthy", version=VERSION)


@app.get("/", tags=["System"])
async def root():
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url="/docs")


# =============================================================================
# CLASSIFICATION ENDPOINTS
# =============================================================================

@app.post("/classify", response_model=ClassificationResponse, tags=["Classification"])
async def classify_sentence(request: ClassifyRequest):
    """Classify one sentence and return the follow-up recommendation."""
    try:
        result = classify(request.text)
    except NoduleExtractionError as e:
        logger.info("Classification rejected: %s", e.kind)
        raise HTTPException(status_code=422, detail=e.to_dict())
    return to_response(result)


@app.post("/classify/batch", response_model=BatchClassifyResponse, tags=["Classification"])
async def classify_batch(request: BatchClassifyRequest):
    """Classify several sentences; a failure on one does not affect the others."""
    if len(request.texts) > MAX_BATCH_SIZE:
        raise HTTPException(
            status_code=413,
            detail=f"Batch too large: {len(request.texts)} > {MAX_BATCH_SIZE}"
        )

    items = []
    for text in request.texts:
        outcome = try_classify(text)
        if isinstance(outcome, NoduleExtractionError):
            items.append(BatchItemResponse(text=text, error=ErrorDetail(**outcome.to_dict())))
        else:
            items.append(BatchItemResponse(text=text, result=to_response(outcome)))

    success_count = sum(1 for item in items if item.result is not None)
    logger.info("Batch classified: %d/%d succeeded", success_count, len(items))
    return BatchClassifyResponse(
        total_count=len(items),
        success_count=success_count,
        items=items,
    )


@app.get("/recommendations", response_model=RecommendationTableResponse, tags=["Guideline"])
async def list_recommendations():
    """Return the full category -> recommendation table."""
    return RecommendationTableResponse(recommendations=dict(RECOMMENDATIONS))

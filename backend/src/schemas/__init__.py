"""Pydantic Schemas for the ops backend API"""

from .validation import (
    CheckResultResponse,
    RunSummaryResponse,
    ValidationRunResponse,
    ValidationResultResponse,
    ValidationResultsListResponse,
    ValidationSummaryResponse,
    ValidationSummaryEnvelope,
    AcknowledgeRequest,
    SuccessResponse,
    BatchValidationRequest,
    BatchValidationResponse,
    CheckTypesResponse,
)

__all__ = [
    "CheckResultResponse",
    "RunSummaryResponse",
    "ValidationRunResponse",
    "ValidationResultResponse",
    "ValidationResultsListResponse",
    "ValidationSummaryResponse",
    "ValidationSummaryEnvelope",
    "AcknowledgeRequest",
    "SuccessResponse",
    "BatchValidationRequest",
    "BatchValidationResponse",
    "CheckTypesResponse",
]

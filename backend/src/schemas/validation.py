"""Pydantic schemas for validation API requests and responses"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from domain.validation.models import ValidationSeverity, ValidationStatus


class CheckResultResponse(BaseModel):
    """One check outcome as returned from a validation run."""
    check_type: str
    status: ValidationStatus
    severity: ValidationSeverity
    message: str
    details: Optional[dict[str, Any]] = None
    suggested_action: Optional[str] = None
    related_entity_type: Optional[str] = None
    related_entity_id: Optional[str] = None

    class Config:
        use_enum_values = True


class RunSummaryResponse(BaseModel):
    total_checks: int
    passed: int
    warnings: int
    errors: int
    skipped: int


class ValidationRunResponse(BaseModel):
    """Response for POST /order/{id}, /design-job/{id}, /line-item/{id}."""
    entity_type: str
    entity_id: str
    overall_status: ValidationStatus
    results: list[CheckResultResponse]
    summary: RunSummaryResponse

    class Config:
        use_enum_values = True


class ValidationResultResponse(BaseModel):
    """Stored validation result row.

    Used in GET /{entity_type}/{entity_id}/results.
    """
    id: str
    entity_type: str
    entity_id: str
    check_type: str
    status: str
    severity: str
    message: str
    details: Optional[dict[str, Any]] = None
    suggested_action: Optional[str] = None
    related_entity_type: Optional[str] = None
    related_entity_id: Optional[str] = None
    expires_at: datetime
    created_by_user_id: Optional[str] = None

    acknowledged_at: Optional[datetime] = None
    acknowledged_by_user_id: Optional[str] = None
    acknowledgment_note: Optional[str] = None

    created_at: datetime

    class Config:
        from_attributes = True


class ValidationResultsListResponse(BaseModel):
    results: list[ValidationResultResponse]


class ValidationSummaryResponse(BaseModel):
    """Stored summary for an entity's latest run."""
    entity_type: str
    entity_id: str
    total_checks: int
    passed: int
    warnings: int
    errors: int
    skipped: int
    overall_status: str
    validated_at: datetime
    valid_until: Optional[datetime] = None
    updated_at: datetime

    class Config:
        from_attributes = True


class ValidationSummaryEnvelope(BaseModel):
    """Summary lookup; summary is null when the entity was never validated."""
    summary: Optional[ValidationSummaryResponse] = None
    message: Optional[str] = None


class AcknowledgeRequest(BaseModel):
    """Request body for acknowledging a validation result."""
    note: Optional[str] = Field(None, max_length=2000)


class SuccessResponse(BaseModel):
    success: bool = True


class BatchValidationRequest(BaseModel):
    """Request body for POST /orders/batch."""
    order_ids: list[int] = Field(..., max_length=500)


class BatchValidationResponse(BaseModel):
    results: list[ValidationRunResponse]


class CheckTypesResponse(BaseModel):
    """Catalogue of check identifiers keyed by constant name."""
    check_types: dict[str, str]

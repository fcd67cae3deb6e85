"""Validation API router - advisory checks for orders, design jobs, line items"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_db
from auth.dependencies import get_current_user
from models.user import User
from validation.service import ValidationService
from domain.validation.models import CheckType, EntityType
from schemas.validation import (
    AcknowledgeRequest,
    BatchValidationRequest,
    BatchValidationResponse,
    CheckTypesResponse,
    SuccessResponse,
    ValidationResultResponse,
    ValidationResultsListResponse,
    ValidationRunResponse,
    ValidationSummaryEnvelope,
    ValidationSummaryResponse,
)

router = APIRouter(prefix="/validation", tags=["validation"])


def get_validation_service(db: Session = Depends(get_db)) -> ValidationService:
    return ValidationService(db)


@router.get("/check-types", response_model=CheckTypesResponse)
def list_check_types(current_user: User = Depends(get_current_user)):
    """List every check identifier, keyed by constant name."""
    return CheckTypesResponse(
        check_types={
            check.name: check.value
            for check in CheckType
            if check is not CheckType.ENTITY_EXISTS
        }
    )


@router.post("/order/{order_id}", response_model=ValidationRunResponse)
def validate_order(
    order_id: int,
    service: ValidationService = Depends(get_validation_service),
    current_user: User = Depends(get_current_user)
):
    """Run validation for an order.

    A missing order yields overall_status "unable" (HTTP 200) rather than 404;
    validation is advisory and never fails the caller.
    """
    result = service.validate_order(order_id, current_user.id)
    return ValidationRunResponse.model_validate(result.to_dict())


@router.post("/design-job/{job_id}", response_model=ValidationRunResponse)
def validate_design_job(
    job_id: int,
    service: ValidationService = Depends(get_validation_service),
    current_user: User = Depends(get_current_user)
):
    """Run validation for a design job."""
    result = service.validate_design_job(job_id, current_user.id)
    return ValidationRunResponse.model_validate(result.to_dict())


@router.post("/line-item/{line_item_id}", response_model=ValidationRunResponse)
def validate_line_item(
    line_item_id: int,
    service: ValidationService = Depends(get_validation_service),
    current_user: User = Depends(get_current_user)
):
    """Run validation for a single line item."""
    result = service.validate_line_item(line_item_id, current_user.id)
    return ValidationRunResponse.model_validate(result.to_dict())


@router.post("/orders/batch", response_model=BatchValidationResponse)
def validate_orders_batch(
    request: BatchValidationRequest,
    service: ValidationService = Depends(get_validation_service),
    current_user: User = Depends(get_current_user)
):
    """Run validation for several orders; results keep the request order."""
    results = service.validate_orders(request.order_ids, current_user.id)
    return BatchValidationResponse(
        results=[ValidationRunResponse.model_validate(r.to_dict()) for r in results]
    )


@router.get(
    "/{entity_type}/{entity_id}/summary",
    response_model=ValidationSummaryEnvelope,
    response_model_exclude_unset=True
)
def get_validation_summary(
    entity_type: EntityType,
    entity_id: str,
    service: ValidationService = Depends(get_validation_service),
    current_user: User = Depends(get_current_user)
):
    """Get the latest validation summary for an entity.

    Returns summary=null with an explanatory message when no run exists.
    The message key is omitted when a summary is found.
    """
    summary = service.get_summary(entity_type.value, entity_id)

    if not summary:
        return ValidationSummaryEnvelope(
            summary=None,
            message="No validation has been run for this entity"
        )

    return ValidationSummaryEnvelope(
        summary=ValidationSummaryResponse.model_validate(summary)
    )


@router.get("/{entity_type}/{entity_id}/results", response_model=ValidationResultsListResponse)
def get_validation_results(
    entity_type: EntityType,
    entity_id: str,
    service: ValidationService = Depends(get_validation_service),
    current_user: User = Depends(get_current_user)
):
    """Get unexpired validation results for an entity, ordered by check type."""
    results = service.get_results(entity_type.value, entity_id)
    return ValidationResultsListResponse(
        results=[ValidationResultResponse.model_validate(r) for r in results]
    )


@router.post("/acknowledge/{result_id}", response_model=SuccessResponse)
def acknowledge_result(
    result_id: str,
    request: Optional[AcknowledgeRequest] = None,
    service: ValidationService = Depends(get_validation_service),
    current_user: User = Depends(get_current_user)
):
    """Acknowledge a validation result.

    Acknowledgement is informational only; it does not change the result's
    status or the entity's summary.
    """
    note = request.note if request else None
    updated = service.acknowledge_warning(result_id, current_user.id, note)

    if not updated:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Validation result {result_id} not found"
        )

    return SuccessResponse(success=True)


@router.delete("/acknowledge/{result_id}", response_model=SuccessResponse)
def clear_acknowledgment(
    result_id: str,
    service: ValidationService = Depends(get_validation_service),
    current_user: User = Depends(get_current_user)
):
    """Remove the acknowledgement from a validation result."""
    updated = service.clear_acknowledgment(result_id)

    if not updated:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Validation result {result_id} not found"
        )

    return SuccessResponse(success=True)

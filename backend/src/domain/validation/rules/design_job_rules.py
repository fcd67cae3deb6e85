"""Design job validation rules"""

from typing import Any

from ..models import (
    CheckResult,
    CheckType,
    ValidationStatus,
    ValidationSeverity,
    ValidationContext
)
from .common import is_blank, to_datetime, format_date

FINISHED_STATUSES = ("completed", "approved")
RENDITION_STATUSES = ("review", "approved", "completed")


def check_design_job_has_brief(job: Any, context: ValidationContext) -> CheckResult:
    if not is_blank(job.brief):
        return CheckResult(
            check_type=CheckType.DESIGN_JOB_HAS_BRIEF,
            status=ValidationStatus.PASS,
            severity=ValidationSeverity.INFO,
            message="Design brief is present",
        )

    return CheckResult(
        check_type=CheckType.DESIGN_JOB_HAS_BRIEF,
        status=ValidationStatus.WARNING,
        severity=ValidationSeverity.WARNING,
        message="No design brief provided",
        suggested_action="Add a design brief to guide the designer",
    )


def check_design_job_has_reference_files(job: Any, context: ValidationContext) -> CheckResult:
    """Either reference files or customer logos count as references."""
    if job.reference_files or job.logo_urls:
        return CheckResult(
            check_type=CheckType.DESIGN_JOB_HAS_REFERENCE_FILES,
            status=ValidationStatus.PASS,
            severity=ValidationSeverity.INFO,
            message="Reference files are attached",
        )

    return CheckResult(
        check_type=CheckType.DESIGN_JOB_HAS_REFERENCE_FILES,
        status=ValidationStatus.WARNING,
        severity=ValidationSeverity.INFO,
        message="No reference files attached",
        suggested_action="Consider adding reference files or logos",
    )


def check_design_job_has_designer(job: Any, context: ValidationContext) -> CheckResult:
    if job.assigned_designer_id:
        return CheckResult(
            check_type=CheckType.DESIGN_JOB_HAS_DESIGNER,
            status=ValidationStatus.PASS,
            severity=ValidationSeverity.INFO,
            message="Designer is assigned",
            related_entity_type="user",
            related_entity_id=str(job.assigned_designer_id),
        )

    # A pending job is expected to be unassigned; anything later is not
    if job.status == "pending":
        return CheckResult(
            check_type=CheckType.DESIGN_JOB_HAS_DESIGNER,
            status=ValidationStatus.WARNING,
            severity=ValidationSeverity.INFO,
            message="No designer assigned yet",
            suggested_action="Assign a designer to begin work",
        )

    return CheckResult(
        check_type=CheckType.DESIGN_JOB_HAS_DESIGNER,
        status=ValidationStatus.WARNING,
        severity=ValidationSeverity.WARNING,
        message="No designer assigned",
        suggested_action="Assign a designer immediately",
    )


def check_design_job_has_deadline(job: Any, context: ValidationContext) -> CheckResult:
    if job.deadline:
        return CheckResult(
            check_type=CheckType.DESIGN_JOB_HAS_DEADLINE,
            status=ValidationStatus.PASS,
            severity=ValidationSeverity.INFO,
            message=f"Deadline: {format_date(to_datetime(job.deadline))}",
        )

    return CheckResult(
        check_type=CheckType.DESIGN_JOB_HAS_DEADLINE,
        status=ValidationStatus.WARNING,
        severity=ValidationSeverity.INFO,
        message="No deadline set",
        suggested_action="Set a deadline for the design job",
    )


def check_design_job_deadline_not_past(job: Any, context: ValidationContext) -> CheckResult:
    if not job.deadline:
        return CheckResult(
            check_type=CheckType.DESIGN_JOB_DEADLINE_NOT_PAST,
            status=ValidationStatus.SKIPPED,
            severity=ValidationSeverity.INFO,
            message="No deadline to check",
        )

    if job.status in FINISHED_STATUSES:
        return CheckResult(
            check_type=CheckType.DESIGN_JOB_DEADLINE_NOT_PAST,
            status=ValidationStatus.SKIPPED,
            severity=ValidationSeverity.INFO,
            message="Job is already completed",
        )

    deadline = to_datetime(job.deadline)

    if deadline > context.now:
        return CheckResult(
            check_type=CheckType.DESIGN_JOB_DEADLINE_NOT_PAST,
            status=ValidationStatus.PASS,
            severity=ValidationSeverity.INFO,
            message="Deadline is in the future",
        )

    return CheckResult(
        check_type=CheckType.DESIGN_JOB_DEADLINE_NOT_PAST,
        status=ValidationStatus.WARNING,
        severity=ValidationSeverity.WARNING,
        message=f"Deadline has passed: {format_date(deadline)}",
        details={"deadline": format_date(deadline)},
        suggested_action="Update deadline or expedite the design work",
    )


def check_design_job_has_renditions(job: Any, context: ValidationContext) -> CheckResult:
    if job.status not in RENDITION_STATUSES:
        return CheckResult(
            check_type=CheckType.DESIGN_JOB_HAS_RENDITIONS,
            status=ValidationStatus.SKIPPED,
            severity=ValidationSeverity.INFO,
            message="Renditions not required at current status",
        )

    if job.rendition_urls:
        return CheckResult(
            check_type=CheckType.DESIGN_JOB_HAS_RENDITIONS,
            status=ValidationStatus.PASS,
            severity=ValidationSeverity.INFO,
            message=f"{len(job.rendition_urls)} rendition(s) uploaded",
        )

    return CheckResult(
        check_type=CheckType.DESIGN_JOB_HAS_RENDITIONS,
        status=ValidationStatus.WARNING,
        severity=ValidationSeverity.WARNING,
        message="No design renditions uploaded",
        suggested_action="Upload design renditions for review",
    )


DESIGN_JOB_RULES = [
    check_design_job_has_brief,
    check_design_job_has_reference_files,
    check_design_job_has_designer,
    check_design_job_has_deadline,
    check_design_job_deadline_not_past,
    check_design_job_has_renditions,
]

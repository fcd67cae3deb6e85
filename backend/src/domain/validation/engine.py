"""ValidationEngine - runs the check lists and aggregates outcomes"""

from typing import Any, Callable, Optional
import logging

from .models import (
    CheckResult,
    CheckType,
    EntityType,
    RunSummary,
    ValidationContext,
    ValidationRunResult,
    ValidationSeverity,
    ValidationStatus,
)
from .port import ValidatorPort
from .rules import ORDER_RULES, DESIGN_JOB_RULES, LINE_ITEM_RULES


logger = logging.getLogger(__name__)

Rule = Callable[[Any, ValidationContext], CheckResult]

DEFAULT_RULES: dict[EntityType, list[Rule]] = {
    EntityType.ORDER: ORDER_RULES,
    EntityType.DESIGN_JOB: DESIGN_JOB_RULES,
    EntityType.LINE_ITEM: LINE_ITEM_RULES,
}


def summarize(results: list[CheckResult]) -> RunSummary:
    """Count outcomes by status; UNABLE is folded into skipped."""
    return RunSummary(
        total_checks=len(results),
        passed=sum(1 for r in results if r.status == ValidationStatus.PASS),
        warnings=sum(1 for r in results if r.status == ValidationStatus.WARNING),
        errors=sum(1 for r in results if r.status == ValidationStatus.ERROR),
        skipped=sum(
            1 for r in results
            if r.status in (ValidationStatus.SKIPPED, ValidationStatus.UNABLE)
        ),
    )


def overall_status(summary: RunSummary) -> ValidationStatus:
    """Worst outcome wins: error > warning > pass.

    A run where every check was skipped is reported as pass.
    """
    if summary.errors > 0:
        return ValidationStatus.ERROR
    if summary.warnings > 0:
        return ValidationStatus.WARNING
    return ValidationStatus.PASS


def not_found_result(entity_type: str, entity_id: str, reason: str) -> ValidationRunResult:
    """Result returned when the entity to validate does not exist.

    Nothing is persisted for such runs.
    """
    return ValidationRunResult(
        entity_type=entity_type,
        entity_id=entity_id,
        overall_status=ValidationStatus.UNABLE,
        results=[
            CheckResult(
                check_type=CheckType.ENTITY_EXISTS,
                status=ValidationStatus.UNABLE,
                severity=ValidationSeverity.ERROR,
                message=reason,
            )
        ],
        summary=RunSummary(total_checks=1, skipped=1),
    )


class ValidationEngine(ValidatorPort):
    """Concrete implementation of ValidatorPort.

    Holds one ordered list of check functions per entity type. The default
    lists come from the rules package; tests and callers may pass their own.
    """

    def __init__(self, rules: Optional[dict[EntityType, list[Rule]]] = None):
        """
        Raises:
            ValueError: If a rule name does not map to a CheckType
        """
        self.rules = rules if rules is not None else DEFAULT_RULES
        self.check_types = {
            rule: _check_type_for(rule)
            for entity_rules in self.rules.values()
            for rule in entity_rules
        }

    def validate(
        self,
        entity_type: EntityType,
        entity: Any,
        context: ValidationContext
    ) -> list[CheckResult]:
        """Run all checks registered for an entity type.

        If a check raises, it is logged and recorded as an UNABLE result so
        the remaining checks still run (fail-open).

        Args:
            entity_type: Rule set to run
            entity: Entity to validate
            context: Validation context with clock and related rows

        Returns:
            List of CheckResult objects, one per check
        """
        entity_type = EntityType(entity_type)
        results = []

        for rule in self.rules.get(entity_type, []):
            try:
                results.append(rule(entity, context))
            except Exception as e:
                logger.error(
                    f"Validation check '{rule.__name__}' failed for "
                    f"{entity_type.value} {getattr(entity, 'id', None)}: {e}",
                    exc_info=True
                )
                results.append(CheckResult(
                    check_type=self.check_types[rule],
                    status=ValidationStatus.UNABLE,
                    severity=ValidationSeverity.WARNING,
                    message=f"Validation check '{rule.__name__}' failed to execute",
                    details={
                        "rule_name": rule.__name__,
                        "error": str(e)
                    }
                ))

        logger.debug(
            f"Validation ran {len(results)} checks for "
            f"{entity_type.value} {getattr(entity, 'id', None)}"
        )

        return results

    def run(
        self,
        entity_type: EntityType,
        entity_id: str,
        entity: Any,
        context: ValidationContext
    ) -> ValidationRunResult:
        """Validate and aggregate in one step (no persistence)."""
        results = self.validate(entity_type, entity, context)
        summary = summarize(results)
        return ValidationRunResult(
            entity_type=EntityType(entity_type).value,
            entity_id=str(entity_id),
            overall_status=overall_status(summary),
            results=results,
            summary=summary,
        )


def _check_type_for(rule: Rule) -> CheckType:
    """Map a check_<type> function name back to its CheckType."""
    name = rule.__name__
    if name.startswith("check_"):
        name = name[len("check_"):]
    try:
        check_type = CheckType(name)
    except ValueError:
        raise ValueError(f"Rule '{rule.__name__}' does not name a known check type") from None
    if check_type is CheckType.ENTITY_EXISTS:
        raise ValueError(f"Rule '{rule.__name__}' cannot report {check_type.value}")
    return check_type

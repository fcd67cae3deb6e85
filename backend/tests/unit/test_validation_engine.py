"""Unit tests for the validation engine and outcome aggregation"""

from datetime import date, datetime
from types import SimpleNamespace

import pytest

from domain.validation import (
    CheckResult,
    CheckType,
    EntityType,
    RunSummary,
    ValidationContext,
    ValidationEngine,
    ValidationSeverity,
    ValidationStatus,
    not_found_result,
    overall_status,
    summarize,
)

NOW = datetime(2026, 3, 10, 12, 0, 0)


def result(status):
    return CheckResult(
        check_type=CheckType.ORDER_HAS_DEPOSIT,
        status=status,
        severity=ValidationSeverity.INFO,
        message="x",
    )


class TestSummarize:
    def test_unable_counts_as_skipped(self):
        summary = summarize([
            result(ValidationStatus.PASS),
            result(ValidationStatus.WARNING),
            result(ValidationStatus.WARNING),
            result(ValidationStatus.ERROR),
            result(ValidationStatus.SKIPPED),
            result(ValidationStatus.UNABLE),
        ])

        assert summary == RunSummary(total_checks=6, passed=1, warnings=2, errors=1, skipped=2)

    def test_empty(self):
        assert summarize([]) == RunSummary()


class TestOverallStatus:
    def test_error_beats_warning(self):
        assert overall_status(RunSummary(total_checks=3, warnings=2, errors=1)) == ValidationStatus.ERROR

    def test_warning_beats_pass(self):
        assert overall_status(RunSummary(total_checks=2, passed=1, warnings=1)) == ValidationStatus.WARNING

    def test_all_skipped_is_pass(self):
        assert overall_status(RunSummary(total_checks=2, skipped=2)) == ValidationStatus.PASS


class TestNotFound:
    def test_shape(self):
        run = not_found_result("order", "99", "Order not found")

        assert run.overall_status == ValidationStatus.UNABLE
        assert len(run.results) == 1
        assert run.results[0].check_type == CheckType.ENTITY_EXISTS
        assert run.results[0].message == "Order not found"
        assert run.summary == RunSummary(total_checks=1, skipped=1)
        assert run.to_dict()["overall_status"] == "unable"


class TestValidationEngine:
    def test_runs_registered_rules_in_order(self):
        job = SimpleNamespace(
            id=5,
            status="review",
            brief="Brief",
            reference_files=["a.png"],
            logo_urls=None,
            assigned_designer_id="d-1",
            deadline=date(2026, 4, 1),
            rendition_urls=["r.png"],
        )
        run = ValidationEngine().run(EntityType.DESIGN_JOB, 5, job, ValidationContext(now=NOW))

        assert run.entity_type == "design_job"
        assert run.entity_id == "5"
        assert run.overall_status == ValidationStatus.PASS
        assert [r.check_type for r in run.results] == [
            CheckType.DESIGN_JOB_HAS_BRIEF,
            CheckType.DESIGN_JOB_HAS_REFERENCE_FILES,
            CheckType.DESIGN_JOB_HAS_DESIGNER,
            CheckType.DESIGN_JOB_HAS_DEADLINE,
            CheckType.DESIGN_JOB_DEADLINE_NOT_PAST,
            CheckType.DESIGN_JOB_HAS_RENDITIONS,
        ]
        assert run.summary.passed == 6

    def test_failing_rule_becomes_unable(self):
        """A rule that raises is recorded and the remaining rules still run"""
        def check_order_has_deposit(entity, context):
            raise RuntimeError("boom")

        def check_order_has_shipping_address(entity, context):
            return CheckResult(
                check_type=CheckType.ORDER_HAS_SHIPPING_ADDRESS,
                status=ValidationStatus.PASS,
                severity=ValidationSeverity.INFO,
                message="ok",
            )

        engine = ValidationEngine(rules={
            EntityType.ORDER: [check_order_has_deposit, check_order_has_shipping_address],
        })
        results = engine.validate(EntityType.ORDER, SimpleNamespace(id=1), ValidationContext(now=NOW))

        assert len(results) == 2
        assert results[0].check_type == CheckType.ORDER_HAS_DEPOSIT
        assert results[0].status == ValidationStatus.UNABLE
        assert results[0].severity == ValidationSeverity.WARNING
        assert results[0].details == {"rule_name": "check_order_has_deposit", "error": "boom"}
        assert results[1].status == ValidationStatus.PASS

        assert overall_status(summarize(results)) == ValidationStatus.PASS

    def test_accepts_entity_type_value(self):
        engine = ValidationEngine(rules={EntityType.LINE_ITEM: []})
        assert engine.validate("line_item", SimpleNamespace(id=1), ValidationContext(now=NOW)) == []

    def test_unmapped_rule_rejected_at_construction(self):
        def check_order_has_invoice(entity, context):
            raise AssertionError("never called")

        with pytest.raises(ValueError, match="check_order_has_invoice"):
            ValidationEngine(rules={EntityType.ORDER: [check_order_has_invoice]})

    def test_entity_exists_is_not_a_rule(self):
        def check_entity_exists(entity, context):
            raise AssertionError("never called")

        with pytest.raises(ValueError, match="entity_exists"):
            ValidationEngine(rules={EntityType.ORDER: [check_entity_exists]})

    def test_default_rules_all_map(self):
        engine = ValidationEngine()
        assert len(engine.check_types) == 15

"""Integration tests for the /api/v6/validation endpoints"""

import pytest
from fastapi.testclient import TestClient

from auth.jwt import create_access_token
from observability.health import ComponentHealth, HealthStatus


pytestmark = pytest.mark.integration

BASE = "/api/v6/validation"


class TestAuthentication:
    """Every validation endpoint requires a Bearer token"""

    @pytest.mark.parametrize("method,path", [
        ("post", f"{BASE}/order/1"),
        ("post", f"{BASE}/design-job/1"),
        ("post", f"{BASE}/line-item/1"),
        ("get", f"{BASE}/order/1/summary"),
        ("get", f"{BASE}/order/1/results"),
        ("get", f"{BASE}/check-types"),
        ("delete", f"{BASE}/acknowledge/abc"),
    ])
    def test_missing_token(self, client: TestClient, method, path):
        response = getattr(client, method)(path)

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_invalid_token(self, client: TestClient):
        response = client.get(
            f"{BASE}/check-types",
            headers={"Authorization": "Bearer not-a-jwt"}
        )
        assert response.status_code == 401

    def test_unknown_user(self, client: TestClient):
        token = create_access_token(user_id="ghost", role="ops", email="ghost@test.com")
        response = client.get(
            f"{BASE}/check-types",
            headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "User not found"

    def test_disabled_user(self, client: TestClient, db_session, ops_user):
        ops_user.status = "DISABLED"
        db_session.commit()
        token = create_access_token(user_id=ops_user.id, role="ops", email=ops_user.email)

        response = client.get(
            f"{BASE}/check-types",
            headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 403


class TestRunEndpoints:
    def test_validate_order(self, authenticated_client: TestClient, make_order):
        order = make_order(shipping_address=None)

        response = authenticated_client.post(f"{BASE}/order/{order.id}")

        assert response.status_code == 200
        body = response.json()
        assert body["entity_type"] == "order"
        assert body["entity_id"] == str(order.id)
        assert body["overall_status"] == "warning"
        assert body["summary"] == {
            "total_checks": 7,
            "passed": 4,
            "warnings": 1,
            "errors": 0,
            "skipped": 2,
        }
        shipping = next(r for r in body["results"] if r["check_type"] == "order_has_shipping_address")
        assert shipping["status"] == "warning"
        assert shipping["severity"] == "warning"
        assert shipping["suggested_action"] == "Add shipping address before invoicing"

    def test_missing_order_is_200_unable(self, authenticated_client: TestClient):
        response = authenticated_client.post(f"{BASE}/order/424242")

        assert response.status_code == 200
        body = response.json()
        assert body["overall_status"] == "unable"
        assert body["results"][0]["check_type"] == "entity_exists"
        assert body["summary"]["skipped"] == 1

    def test_non_integer_id(self, authenticated_client: TestClient):
        response = authenticated_client.post(f"{BASE}/order/abc")

        assert response.status_code == 422
        assert response.json()["error"] == "validation_error"

    def test_validate_design_job(self, authenticated_client: TestClient, make_design_job):
        job = make_design_job()

        response = authenticated_client.post(f"{BASE}/design-job/{job.id}")

        assert response.status_code == 200
        body = response.json()
        assert body["entity_type"] == "design_job"
        assert len(body["results"]) == 6

    def test_validate_line_item(self, authenticated_client: TestClient, make_order):
        item = make_order().line_items[0]

        response = authenticated_client.post(f"{BASE}/line-item/{item.id}")

        assert response.status_code == 200
        body = response.json()
        assert body["entity_type"] == "line_item"
        assert [r["check_type"] for r in body["results"]] == [
            "line_item_has_variant",
            "line_item_has_sizes",
        ]

    def test_batch(self, authenticated_client: TestClient, make_order):
        first = make_order()
        second = make_order(line_items=0)

        response = authenticated_client.post(
            f"{BASE}/orders/batch",
            json={"order_ids": [first.id, 999, second.id]}
        )

        assert response.status_code == 200
        statuses = [(r["entity_id"], r["overall_status"]) for r in response.json()["results"]]
        assert statuses == [(str(first.id), "pass"), ("999", "unable"), (str(second.id), "error")]

    def test_batch_requires_ids(self, authenticated_client: TestClient):
        response = authenticated_client.post(f"{BASE}/orders/batch", json={})
        assert response.status_code == 422


class TestReadEndpoints:
    def test_summary_before_any_run(self, authenticated_client: TestClient):
        response = authenticated_client.get(f"{BASE}/order/77/summary")

        assert response.status_code == 200
        assert response.json() == {
            "summary": None,
            "message": "No validation has been run for this entity",
        }

    def test_summary_after_run(self, authenticated_client: TestClient, make_order):
        order = make_order()
        authenticated_client.post(f"{BASE}/order/{order.id}")

        response = authenticated_client.get(f"{BASE}/order/{order.id}/summary")

        assert response.status_code == 200
        body = response.json()
        assert "message" not in body
        summary = body["summary"]
        assert summary["overall_status"] == "pass"
        assert summary["total_checks"] == 7
        assert summary["entity_id"] == str(order.id)

    def test_results_after_run(self, authenticated_client: TestClient, make_order, ops_user):
        order = make_order()
        authenticated_client.post(f"{BASE}/order/{order.id}")

        response = authenticated_client.get(f"{BASE}/order/{order.id}/results")

        assert response.status_code == 200
        results = response.json()["results"]
        assert len(results) == 7
        assert [r["check_type"] for r in results] == sorted(r["check_type"] for r in results)
        assert {r["created_by_user_id"] for r in results} == {ops_user.id}

    def test_results_empty_for_unvalidated(self, authenticated_client: TestClient):
        response = authenticated_client.get(f"{BASE}/design_job/5/results")

        assert response.status_code == 200
        assert response.json() == {"results": []}

    def test_unknown_entity_type(self, authenticated_client: TestClient):
        response = authenticated_client.get(f"{BASE}/invoice/1/summary")
        assert response.status_code == 422

    def test_check_types(self, authenticated_client: TestClient):
        response = authenticated_client.get(f"{BASE}/check-types")

        assert response.status_code == 200
        check_types = response.json()["check_types"]
        assert check_types["ORDER_HAS_CUSTOMER_INFO"] == "order_has_customer_info"
        assert check_types["LINE_ITEM_SIZE_TOTAL_MATCHES"] == "line_item_size_total_matches"
        assert check_types["ORDER_HAS_MANUFACTURER_ASSIGNED"] == "order_has_manufacturer_assigned"
        assert check_types["LINE_ITEM_HAS_MANUFACTURER"] == "line_item_has_manufacturer"
        assert "ENTITY_EXISTS" not in check_types


class TestAcknowledgeEndpoints:
    def _first_warning(self, client: TestClient, order_id: int) -> dict:
        client.post(f"{BASE}/order/{order_id}")
        results = client.get(f"{BASE}/order/{order_id}/results").json()["results"]
        return next(r for r in results if r["status"] == "warning")

    def test_acknowledge_and_clear(self, authenticated_client: TestClient, make_order, ops_user):
        order = make_order(contact_email=None)
        warning = self._first_warning(authenticated_client, order.id)

        response = authenticated_client.post(
            f"{BASE}/acknowledge/{warning['id']}",
            json={"note": "Customer emailing details"}
        )
        assert response.status_code == 200
        assert response.json() == {"success": True}

        results = authenticated_client.get(f"{BASE}/order/{order.id}/results").json()["results"]
        acked = next(r for r in results if r["id"] == warning["id"])
        assert acked["acknowledged_by_user_id"] == ops_user.id
        assert acked["acknowledgment_note"] == "Customer emailing details"
        assert acked["status"] == "warning"

        response = authenticated_client.delete(f"{BASE}/acknowledge/{warning['id']}")
        assert response.status_code == 200

        results = authenticated_client.get(f"{BASE}/order/{order.id}/results").json()["results"]
        cleared = next(r for r in results if r["id"] == warning["id"])
        assert cleared["acknowledged_at"] is None

    def test_acknowledge_without_body(self, authenticated_client: TestClient, make_order):
        order = make_order(contact_email=None)
        warning = self._first_warning(authenticated_client, order.id)

        response = authenticated_client.post(f"{BASE}/acknowledge/{warning['id']}")
        assert response.status_code == 200

    def test_unknown_result_is_404(self, authenticated_client: TestClient):
        assert authenticated_client.post(f"{BASE}/acknowledge/missing", json={}).status_code == 404
        assert authenticated_client.delete(f"{BASE}/acknowledge/missing").status_code == 404


class TestServiceEndpoints:
    def test_health(self, client: TestClient, monkeypatch):
        monkeypatch.setattr(
            "observability.router.check_redis_health",
            lambda: ComponentHealth(status=HealthStatus.HEALTHY, message="ok")
        )

        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["components"]["database"]["status"] == "healthy"

    def test_health_degraded_broker(self, client: TestClient, monkeypatch):
        monkeypatch.setattr(
            "observability.router.check_redis_health",
            lambda: ComponentHealth(status=HealthStatus.DEGRADED, message="down")
        )

        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "degraded"

    def test_metrics(self, authenticated_client: TestClient, make_order):
        order = make_order()
        authenticated_client.post(f"{BASE}/order/{order.id}")

        response = authenticated_client.get("/metrics")

        assert response.status_code == 200
        assert "richhabits_validation_runs_total" in response.text

    def test_request_id_is_echoed(self, client: TestClient):
        response = client.get("/", headers={"X-Request-ID": "req-123"})

        assert response.status_code == 200
        assert response.headers["X-Request-ID"] == "req-123"

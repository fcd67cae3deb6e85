"""Shared pytest fixtures.

Provides:
- An in-memory SQLite database, rebuilt for every test
- Factories for orders and design jobs
- Test clients with and without a Bearer token

Usage:
    def test_run_order(authenticated_client, make_order):
        order = make_order()
        response = authenticated_client.post(f"/api/v6/validation/order/{order.id}")
        assert response.status_code == 200
"""

import os
import sys
from datetime import date
from pathlib import Path
from typing import Generator

# Settings are cached on first use, so the environment must be in place
# before anything under backend/src is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-key-256-bits-minimum-length-required-for-security")
os.environ.setdefault("LOG_JSON", "false")
os.environ.setdefault("ENV", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

backend_src = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(backend_src))

from models import (
    Base,
    DesignJob,
    Order,
    OrderLineItem,
    Organization,
    User,
)
from auth.jwt import create_access_token
from database import get_db as database_get_db


test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test.

    Creates all tables before the test and drops them after.
    """
    Base.metadata.create_all(bind=test_engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(scope="function")
def test_org(db_session: Session) -> Organization:
    org = Organization(name="Lincoln High Wrestling", city="Lincoln", state="NE")
    db_session.add(org)
    db_session.commit()
    db_session.refresh(org)
    return org


@pytest.fixture(scope="function")
def ops_user(db_session: Session) -> User:
    user = User(email="ops@test.com", name="Ops User", role="ops", status="ACTIVE")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture(scope="function")
def designer_user(db_session: Session) -> User:
    user = User(email="designer@test.com", name="Designer", role="designer", status="ACTIVE")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture(scope="function")
def make_order(db_session: Session, test_org: Organization):
    """Factory for orders that pass every order check by default.

    Keyword arguments override order columns; ``sizes`` sets the size grid
    of each created line item and ``line_items=0`` creates none.
    """
    counter = {"n": 0}

    def _make(line_items: int = 1, sizes=None, **overrides) -> Order:
        counter["n"] += 1
        values = dict(
            order_code=f"ORD-{counter['n']:04d}",
            org_id=test_org.id,
            order_name="Spring warmups",
            status="new",
            contact_name="Pat Coach",
            contact_email="coach@school.test",
            contact_phone="555-0100",
            shipping_address="1 Gym Rd, Lincoln NE",
            est_delivery=date(2099, 6, 1),
        )
        values.update(overrides)
        grid = sizes if sizes is not None else {"m": 10, "l": 5}

        order = Order(**values)
        for _ in range(line_items):
            order.line_items.append(OrderLineItem(variant_id=42, item_name="Hoodie", **grid))
        db_session.add(order)
        db_session.commit()
        db_session.refresh(order)
        return order

    return _make


@pytest.fixture(scope="function")
def make_design_job(db_session: Session, test_org: Organization):
    """Factory for design jobs; defaults to a pending job with brief and references."""
    counter = {"n": 0}

    def _make(**overrides) -> DesignJob:
        counter["n"] += 1
        values = dict(
            job_code=f"DES-{counter['n']:04d}",
            org_id=test_org.id,
            brief="Navy and gold, bold block letters",
            status="pending",
            reference_files=["https://files.test/ref.png"],
            deadline=date(2099, 1, 15),
        )
        values.update(overrides)
        job = DesignJob(**values)
        db_session.add(job)
        db_session.commit()
        db_session.refresh(job)
        return job

    return _make


def _client_for(db_session: Session) -> TestClient:
    from main import app

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[database_get_db] = override_get_db
    return TestClient(app)


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Unauthenticated test client backed by the test database."""
    test_client = _client_for(db_session)
    yield test_client
    test_client.app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def authenticated_client(db_session: Session, ops_user: User) -> Generator[TestClient, None, None]:
    """Test client sending a Bearer token for ops_user."""
    test_client = _client_for(db_session)
    token = create_access_token(
        user_id=ops_user.id,
        role=ops_user.role,
        email=ops_user.email
    )
    test_client.headers["Authorization"] = f"Bearer {token}"
    yield test_client
    test_client.app.dependency_overrides.clear()

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from rentledger.main import app
from rentledger.api.deps import get_db
from rentledger.core.auth import User, get_current_user
from rentledger.core.database import Base

OWNER_ID = "owner-1"
OTHER_OWNER_ID = "owner-2"

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


class _Identity:
    owner_id = OWNER_ID


identity = _Identity()


def override_get_current_user():
    return User(user_id=identity.owner_id, email=f"{identity.owner_id}@example.com")


@pytest.fixture()
def client():
    Base.metadata.create_all(bind=engine)
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_current_user] = override_get_current_user
    identity.owner_id = OWNER_ID
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def as_owner():
    """Switch the authenticated owner for the rest of the test."""
    def switch(owner_id: str):
        identity.owner_id = owner_id
    yield switch
    identity.owner_id = OWNER_ID


@pytest.fixture()
def db_session():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


# ---------------------------------------------------------------------------
# API helpers
# ---------------------------------------------------------------------------

def make_building(client, name="Sunrise Apartments", address="12 Mabini St"):
    r = client.post("/buildings", json={"name": name, "address": address})
    assert r.status_code == 201, r.text
    return r.json()


def make_unit(client, building_id, unit_number="101", rent_amount=5000, status="vacant"):
    r = client.post(
        "/units",
        json={
            "building_id": building_id,
            "unit_number": unit_number,
            "floor": 1,
            "rent_amount": rent_amount,
            "status": status,
        },
    )
    assert r.status_code == 201, r.text
    return r.json()


def make_tenant(client, unit_id, name="Juan Dela Cruz", **extra):
    body = {
        "unit_id": unit_id,
        "name": name,
        "phone": "09171234567",
        "email": "juan@example.com",
        "move_in_date": "2026-01-01",
        "status": "active",
    }
    body.update(extra)
    r = client.post("/tenants", json=body)
    assert r.status_code == 201, r.text
    return r.json()


def make_bill(client, tenant_id, month=1, year=2026, **extra):
    body = {
        "tenant_id": tenant_id,
        "billing_month": month,
        "billing_year": year,
        "rent_amount": 5000,
        "elec_prev_reading": 100,
        "elec_curr_reading": 150,
        "elec_rate": 11,
        "water_amount": 200,
    }
    body.update(extra)
    r = client.post("/bills", json=body)
    assert r.status_code == 201, r.text
    return r.json()

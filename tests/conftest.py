"""
Test configuration for the hospital API.

The environment is set before the application is imported so that settings,
the engine and the upload directory all point at throw-away locations.
"""
import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="hospital-tests-")
TEST_DB_PATH = os.path.join(_TMP_DIR, "test.db")
UPLOAD_DIR = os.path.join(_TMP_DIR, "uploads")

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{TEST_DB_PATH}"
os.environ["UPLOAD_DIR"] = UPLOAD_DIR
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["BOOTSTRAP_ADMIN_EMAIL"] = "admin@hospital.com"
os.environ["BOOTSTRAP_ADMIN_PASSWORD"] = "admin-password"

import itertools  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from hospital.main import app  # noqa: E402

ADMIN_EMAIL = "admin@hospital.com"
ADMIN_PASSWORD = "admin-password"

_emails = itertools.count(1)


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


def register(client, role=None, name="Test User", email=None, password="secret-pass"):
    """Register through the public endpoint and return the response body."""
    body = {"name": name, "email": email or f"user{next(_emails)}@hospital.com", "password": password}
    if role is not None:
        body["role"] = role
    response = client.post("/api/auth/register", json=body)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture(scope="function")
def client():
    """
    A test client over a fresh database. The lifespan creates the tables and
    the bootstrap admin; the database file is removed afterwards.
    """
    with TestClient(app) as client:
        yield client
    app.dependency_overrides = {}
    if os.path.exists(TEST_DB_PATH):
        os.remove(TEST_DB_PATH)


@pytest.fixture
def admin_headers(client):
    response = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200, response.text
    return auth_headers(response.json()["token"])


@pytest.fixture
def role_headers(client, admin_headers):
    """Factory: headers for the admin or a freshly registered doctor, nurse or patient."""
    def make(role):
        if role == "admin":
            return admin_headers
        return auth_headers(register(client, role=role)["token"])
    return make

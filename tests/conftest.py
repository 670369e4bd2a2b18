import os
import uuid

# point the app at a throwaway database before anything imports app.config
os.environ.setdefault("DATABASE_URL", "sqlite:///./test_taskboard.db")

import pytest
from fastapi.testclient import TestClient
from app.main import app
from app.database import SessionLocal, Base, engine

PASSWORD = "SecurePass123!"


# Recreate all tables for each test
@pytest.fixture(autouse=True)
def setup_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


def signup(client, role="user", name=None, email=None, password=PASSWORD):
    email = email or f"{role}_{uuid.uuid4().hex[:8]}@example.com"
    body = {"name": name or f"{role.title()} Person", "email": email, "password": password, "role": role}
    r = client.post("/api/auth/signup", json=body)
    assert r.status_code == 201, r.text
    return r.json()["data"]


def login(client, email, password=PASSWORD):
    r = client.post("/api/auth/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['token']}"}


class Account:
    def __init__(self, client, role):
        data = signup(client, role=role)
        self.id = data["id"]
        self.email = data["email"]
        self.role = data["role"]
        self.headers = login(client, self.email)


@pytest.fixture
def make_account(client):
    def _make(role="user"):
        return Account(client, role)
    return _make


@pytest.fixture
def admin(make_account):
    return make_account("admin")


@pytest.fixture
def user(make_account):
    return make_account("user")


def create_project(client, account, name="P", description="D"):
    r = client.post(
        "/api/projects",
        json={"projectName": name, "projectDescription": description},
        headers=account.headers,
    )
    assert r.status_code == 201, r.text
    return r.json()["data"]


def create_task(client, account, project_id, assignee_id, name="Write docs", description="Describe every endpoint"):
    r = client.post(
        "/api/tasks",
        json={
            "taskName": name,
            "taskDescription": description,
            "projectId": project_id,
            "assignedTo": assignee_id,
        },
        headers=account.headers,
    )
    assert r.status_code == 201, r.text
    return r.json()["data"]

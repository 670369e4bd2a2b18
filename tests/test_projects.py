from fastapi.testclient import TestClient
from app.models.project import Project
from conftest import create_project, create_task


def test_create_and_read_project_as_owner(client: TestClient, admin, make_account):
    project = create_project(client, admin, name="P", description="D")
    assert project["createdBy"] == admin.id

    r = client.get(f"/api/projects/{project['id']}", headers=admin.headers)
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["projectName"] == "P"
    assert data["projectDescription"] == "D"
    assert data["createdBy"] == admin.id
    assert data["owner"]["email"] == admin.email

    other = make_account("admin")
    r = client.get(f"/api/projects/{project['id']}", headers=other.headers)
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "Project not found"}


def test_missing_and_foreign_projects_look_the_same(client: TestClient, admin, make_account):
    other = make_account("admin")
    project = create_project(client, other)
    foreign = client.get(f"/api/projects/{project['id']}", headers=admin.headers)
    missing = client.get("/api/projects/9999", headers=admin.headers)
    assert foreign.status_code == missing.status_code == 404
    assert foreign.json() == missing.json()


def test_non_admin_cannot_touch_projects(client: TestClient, admin, user, db):
    project = create_project(client, admin)

    r = client.post("/api/projects", json={"projectName": "X", "projectDescription": "Y"}, headers=user.headers)
    assert r.status_code == 403
    assert client.get("/api/projects", headers=user.headers).status_code == 403
    assert client.get(f"/api/projects/{project['id']}", headers=user.headers).status_code == 403
    r = client.put(f"/api/projects/{project['id']}", json={"projectName": "X"}, headers=user.headers)
    assert r.status_code == 403
    assert client.delete(f"/api/projects/{project['id']}", headers=user.headers).status_code == 403

    assert db.query(Project).count() == 1
    assert db.query(Project).one().project_name == "P"


def test_projects_require_token(client: TestClient):
    assert client.get("/api/projects").status_code == 401
    r = client.post("/api/projects", json={"projectName": "X", "projectDescription": "Y"})
    assert r.status_code == 401


def test_list_is_scoped_to_owner(client: TestClient, admin, make_account):
    other = make_account("admin")
    mine = [create_project(client, admin, name=f"mine {i}") for i in range(2)]
    create_project(client, other, name="theirs")

    r = client.get("/api/projects", headers=admin.headers)
    assert r.status_code == 200
    assert {p["id"] for p in r.json()["data"]} == {p["id"] for p in mine}

    r = client.get("/api/projects", headers=make_account("admin").headers)
    assert r.json()["data"] == []


def test_update_project_partial(client: TestClient, admin):
    project = create_project(client, admin, name="P", description="D")
    r = client.put(f"/api/projects/{project['id']}", json={"projectName": "Renamed"}, headers=admin.headers)
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["projectName"] == "Renamed"
    assert data["projectDescription"] == "D"


def test_update_foreign_project_is_not_found_and_idempotent(client: TestClient, admin, make_account, db):
    other = make_account("admin")
    project = create_project(client, other, name="P")
    for _ in range(2):
        r = client.put(f"/api/projects/{project['id']}", json={"projectName": "Hijacked"}, headers=admin.headers)
        assert r.status_code == 404
    assert db.query(Project).one().project_name == "P"


def test_update_validation_runs_before_ownership(client: TestClient, admin, make_account):
    other = make_account("admin")
    project = create_project(client, other)
    r = client.put(f"/api/projects/{project['id']}", json={"projectName": ""}, headers=admin.headers)
    assert r.status_code == 400
    assert r.json()["errors"][0]["field"] == "projectName"


def test_create_project_validation(client: TestClient, admin):
    r = client.post("/api/projects", json={"projectName": ""}, headers=admin.headers)
    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert {e["field"] for e in body["errors"]} == {"projectName", "projectDescription"}


def test_delete_project(client: TestClient, admin, make_account, db):
    other = make_account("admin")
    project = create_project(client, admin)

    for _ in range(2):
        assert client.delete(f"/api/projects/{project['id']}", headers=other.headers).status_code == 404
    assert db.query(Project).count() == 1

    r = client.delete(f"/api/projects/{project['id']}", headers=admin.headers)
    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Project deleted successfully"}
    assert client.get(f"/api/projects/{project['id']}", headers=admin.headers).status_code == 404


def test_delete_project_removes_its_tasks(client: TestClient, admin, user):
    project = create_project(client, admin)
    create_task(client, admin, project["id"], user.id)

    assert client.delete(f"/api/projects/{project['id']}", headers=admin.headers).status_code == 200
    r = client.get("/api/tasks", headers=user.headers)
    assert r.json()["data"] == []

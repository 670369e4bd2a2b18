from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.dependencies import require_admin
from app.permissions import project_scope, ensure_project_found
from app.schemas.common import success
from app.schemas.project import ProjectCreate, ProjectUpdate, ProjectOut
from app.stores import ProjectStore
from app.utils.auth import Identity

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.post("", status_code=201)
def create_project(payload: ProjectCreate, identity: Identity = Depends(require_admin), db: Session = Depends(get_db)):
    project = ProjectStore(db).create(
        project_name=payload.project_name,
        project_description=payload.project_description,
        created_by=identity.user_id,
    )
    return success(ProjectOut.model_validate(project), message="Project created successfully")


@router.get("")
def list_projects(identity: Identity = Depends(require_admin), db: Session = Depends(get_db)):
    projects = ProjectStore(db).find_many(**project_scope(identity))
    return success([ProjectOut.model_validate(p) for p in projects], message="Projects fetched successfully")


@router.get("/{project_id}")
def get_project(project_id: int, identity: Identity = Depends(require_admin), db: Session = Depends(get_db)):
    project = ProjectStore(db).find_one(id=project_id, **project_scope(identity))
    ensure_project_found(project)
    return success(ProjectOut.model_validate(project))


@router.put("/{project_id}")
def update_project(project_id: int, payload: ProjectUpdate, identity: Identity = Depends(require_admin), db: Session = Depends(get_db)):
    patch = payload.model_dump(exclude_unset=True)
    project = ProjectStore(db).find_one_and_update({"id": project_id, **project_scope(identity)}, patch)
    ensure_project_found(project)
    return success(ProjectOut.model_validate(project), message="Project updated successfully")


@router.delete("/{project_id}")
def delete_project(project_id: int, identity: Identity = Depends(require_admin), db: Session = Depends(get_db)):
    project = ProjectStore(db).find_one_and_delete(id=project_id, **project_scope(identity))
    ensure_project_found(project)
    return success(message="Project deleted successfully")

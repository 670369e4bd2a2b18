import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.dependencies import get_current_identity, require_admin
from app.errors import BadRequest
from app.permissions import (
    ensure_project_owned,
    ensure_task_found,
    ensure_task_status_editable,
    ensure_task_visible,
    task_list_scope,
    task_owner_scope,
    task_status_scope,
)
from app.schemas.common import success
from app.schemas.task import TaskCreate, TaskUpdate, TaskStatusUpdate, TaskOut
from app.stores import ProjectStore, TaskStore, UserStore
from app.utils.auth import Identity

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


def _ensure_assignee_exists(db: Session, user_id: int):
    if not UserStore(db).exists(id=user_id):
        raise BadRequest("Assigned user not found")


@router.post("", status_code=201)
def create_task(payload: TaskCreate, identity: Identity = Depends(require_admin), db: Session = Depends(get_db)):
    project = ProjectStore(db).find_by_id(payload.project_id)
    ensure_project_owned(identity, project)
    _ensure_assignee_exists(db, payload.assigned_to)

    task = TaskStore(db).create(
        task_name=payload.task_name,
        task_description=payload.task_description,
        project_id=project.id,
        assigned_to=payload.assigned_to,
        created_by=identity.user_id,
    )
    return success(TaskOut.model_validate(task), message="Task created successfully")


@router.get("")
def list_tasks(identity: Identity = Depends(get_current_identity), db: Session = Depends(get_db)):
    tasks = TaskStore(db).find_many(**task_list_scope(identity))
    return success([TaskOut.model_validate(t) for t in tasks])


@router.get("/{task_id}")
def get_task(task_id: int, identity: Identity = Depends(get_current_identity), db: Session = Depends(get_db)):
    task = TaskStore(db).find_by_id(task_id)
    ensure_task_visible(identity, task)
    return success(TaskOut.model_validate(task))


@router.put("/status/{task_id}")
def update_task_status(task_id: int, payload: TaskStatusUpdate, identity: Identity = Depends(get_current_identity), db: Session = Depends(get_db)):
    tasks = TaskStore(db)
    ensure_task_status_editable(identity, tasks.find_by_id(task_id))
    # status is the only field this path may write
    task = tasks.find_one_and_update({"id": task_id, **task_status_scope(identity)}, {"status": payload.status})
    ensure_task_found(task)
    logger.info("task %s status -> %s by user %s", task.id, task.status, identity.user_id)
    return success(TaskOut.model_validate(task), message="Task status updated successfully")


@router.put("/{task_id}")
def update_task(task_id: int, payload: TaskUpdate, identity: Identity = Depends(require_admin), db: Session = Depends(get_db)):
    tasks = TaskStore(db)
    scope = {"id": task_id, **task_owner_scope(identity)}
    ensure_task_found(tasks.find_one(**scope))

    patch = payload.model_dump(exclude_unset=True)
    if "assigned_to" in patch:
        _ensure_assignee_exists(db, patch["assigned_to"])

    task = tasks.find_one_and_update(scope, patch)
    ensure_task_found(task)
    return success(TaskOut.model_validate(task), message="Task updated successfully")


@router.delete("/{task_id}")
def delete_task(task_id: int, identity: Identity = Depends(require_admin), db: Session = Depends(get_db)):
    task = TaskStore(db).find_one_and_delete(id=task_id, **task_owner_scope(identity))
    ensure_task_found(task)
    return success(message="Task deleted successfully")

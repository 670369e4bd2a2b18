"""Who may see or change which project and task.

Nothing here talks to the database. Routers fetch records through the
stores and ask these rules for a decision, or ask for the filter that
narrows a query to what the caller may touch.

Status codes follow one rule set:

* role gate failed (not an admin) -> 403
* ``created_by`` does not match on a project/task read, update or delete -> 404,
  so another admin's record looks exactly like a missing one
* ``assigned_to`` does not match for a non-admin reading or moving a task -> 403
"""
import logging
from app.errors import Forbidden, NotFound
from app.utils.auth import Identity

logger = logging.getLogger(__name__)

ADMIN_REQUIRED = "Forbidden, admin access required"


def is_admin(identity: Identity) -> bool:
    return identity.is_admin


def ensure_admin(identity: Identity):
    if not is_admin(identity):
        logger.debug("user %s denied: admin required", identity.user_id)
        raise Forbidden(ADMIN_REQUIRED)


# projects

def project_scope(identity: Identity) -> dict:
    """Filter restricting project queries to the caller's own projects."""
    ensure_admin(identity)
    return {"created_by": identity.user_id}


def owns_project(identity: Identity, project) -> bool:
    return is_admin(identity) and project is not None and project.created_by == identity.user_id


def ensure_project_found(project):
    if project is None:
        raise NotFound("Project not found")
    return project


def ensure_project_owned(identity: Identity, project):
    """Task creation: the referenced project must belong to the caller."""
    if not owns_project(identity, project):
        logger.debug("user %s denied: does not own project", identity.user_id)
        raise Forbidden("Forbidden, you do not own this project")
    return project


# tasks

def task_list_scope(identity: Identity) -> dict:
    """Admins list the tasks they created, everyone else what is assigned to them."""
    if is_admin(identity):
        return {"created_by": identity.user_id}
    return {"assigned_to": identity.user_id}


def task_owner_scope(identity: Identity) -> dict:
    """Filter for mutating a task's content or deleting it."""
    ensure_admin(identity)
    return {"created_by": identity.user_id}


def is_assignee(identity: Identity, task) -> bool:
    return task.assigned_to == identity.user_id


def can_view_task(identity: Identity, task) -> bool:
    return is_admin(identity) or is_assignee(identity, task)


def can_update_task_status(identity: Identity, task) -> bool:
    return is_admin(identity) or is_assignee(identity, task)


def task_status_scope(identity: Identity) -> dict:
    """Filter guarding the status write itself, matching can_update_task_status."""
    if is_admin(identity):
        return {}
    return {"assigned_to": identity.user_id}


def ensure_task_found(task):
    if task is None:
        raise NotFound("Task not found")
    return task


def ensure_task_visible(identity: Identity, task):
    ensure_task_found(task)
    if not can_view_task(identity, task):
        logger.debug("user %s denied: task %s not assigned to them", identity.user_id, task.id)
        raise Forbidden("Forbidden, not authorized to access this task")
    return task


def ensure_task_status_editable(identity: Identity, task):
    ensure_task_found(task)
    if not can_update_task_status(identity, task):
        logger.debug("user %s denied: cannot change status of task %s", identity.user_id, task.id)
        raise Forbidden("Forbidden, not authorized to update this task")
    return task


def users_scope(identity: Identity) -> dict:
    ensure_admin(identity)
    return {}

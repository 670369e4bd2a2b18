from datetime import datetime
from typing import Literal, Optional
from pydantic import Field, field_validator
from app.models.task import STATUS_PENDING, STATUS_IN_PROGRESS, STATUS_COMPLETED
from app.schemas.common import CamelModel, strip_text
from app.schemas.project import ProjectRef
from app.schemas.user import UserRef

TaskStatus = Literal[STATUS_PENDING, STATUS_IN_PROGRESS, STATUS_COMPLETED]


class TaskCreate(CamelModel):
    task_name: str = Field(min_length=3)
    task_description: str = Field(min_length=5)
    project_id: int
    assigned_to: int

    @field_validator("task_name", "task_description", mode="before")
    @classmethod
    def strip_text_fields(cls, v):
        return strip_text(v)


class TaskUpdate(CamelModel):
    task_name: Optional[str] = Field(None, min_length=3)
    task_description: Optional[str] = Field(None, min_length=5)
    assigned_to: Optional[int] = None

    @field_validator("task_name", "task_description", mode="before")
    @classmethod
    def strip_text_fields(cls, v):
        return strip_text(v)

    @field_validator("task_name", "task_description", "assigned_to")
    @classmethod
    def not_null(cls, v):
        # omitted is fine, explicit null is not
        if v is None:
            raise ValueError("may not be null")
        return v


class TaskStatusUpdate(CamelModel):
    status: TaskStatus


class TaskOut(CamelModel):
    id: int
    task_name: str
    task_description: str
    project_id: int
    assigned_to: int
    created_by: int
    status: TaskStatus
    assignee: Optional[UserRef] = None
    project: Optional[ProjectRef] = None
    created_at: datetime
    updated_at: datetime

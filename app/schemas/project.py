from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator
from app.schemas.common import CamelModel, strip_text
from app.schemas.user import UserRef


class ProjectCreate(CamelModel):
    project_name: str = Field(min_length=1)
    project_description: str = Field(min_length=1)

    @field_validator("project_name", "project_description", mode="before")
    @classmethod
    def strip_text_fields(cls, v):
        return strip_text(v)


class ProjectUpdate(CamelModel):
    project_name: Optional[str] = Field(None, min_length=1)
    project_description: Optional[str] = Field(None, min_length=1)

    @field_validator("project_name", "project_description", mode="before")
    @classmethod
    def strip_text_fields(cls, v):
        return strip_text(v)

    @field_validator("project_name", "project_description")
    @classmethod
    def not_null(cls, v):
        # omitted is fine, explicit null is not
        if v is None:
            raise ValueError("may not be null")
        return v


class ProjectOut(CamelModel):
    id: int
    project_name: str
    project_description: str
    created_by: int
    owner: Optional[UserRef] = None
    created_at: datetime
    updated_at: datetime


class ProjectRef(CamelModel):
    id: int
    project_name: str

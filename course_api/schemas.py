"""Records passed between repositories and handlers, and response shapes."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class UserRecord(CamelModel):
    id: int
    first_name: str
    last_name: str
    email_address: str
    password: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CourseRecord(CamelModel):
    id: int
    user_id: int
    title: str
    description: str
    estimated_time: str | None = None
    materials_needed: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CurrentUserResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    email_address: str


class CourseSummaryResponse(CamelModel):
    id: int
    user_id: int
    title: str
    description: str
    estimated_time: str | None = None
    materials_needed: str | None = None

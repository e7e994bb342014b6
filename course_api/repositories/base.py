"""
Repository interfaces used by the request handlers.

Handlers only see these abstract classes and the records from
``course_api.schemas``; the SQLAlchemy implementations live beside them.
"""

from abc import ABC, abstractmethod
from typing import Any

from course_api.schemas import CourseRecord, UserRecord


class UserRepository(ABC):

    @abstractmethod
    def find_by_email(self, email_address: str) -> UserRecord | None:
        """Return the user whose email address matches exactly."""

    @abstractmethod
    def find_by_id(self, user_id: int) -> UserRecord | None:
        ...

    @abstractmethod
    def create(self, fields: dict[str, Any]) -> UserRecord:
        ...


class CourseRepository(ABC):

    @abstractmethod
    def find_by_id(self, course_id: int) -> CourseRecord | None:
        ...

    @abstractmethod
    def find_by_title(self, title: str) -> CourseRecord | None:
        """Return the course whose title matches exactly."""

    @abstractmethod
    def list_all(self) -> list[CourseRecord]:
        ...

    @abstractmethod
    def create(self, fields: dict[str, Any]) -> CourseRecord:
        ...

    @abstractmethod
    def update(self, course_id: int, fields: dict[str, Any]) -> None:
        ...

    @abstractmethod
    def delete(self, course_id: int) -> None:
        ...

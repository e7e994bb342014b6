"""SQLAlchemy implementations of the repository interfaces."""

from contextlib import contextmanager
from typing import Any

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from course_api.database import get_db
from course_api.models.course import Course
from course_api.models.user import User
from course_api.repositories.base import CourseRepository, UserRepository
from course_api.schemas import CourseRecord, UserRecord


@contextmanager
def _rollback_on_error(db: Session):
    try:
        yield
    except SQLAlchemyError:
        db.rollback()
        raise


class SqlAlchemyUserRepository(UserRepository):

    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email_address: str) -> UserRecord | None:
        user = self.db.query(User).filter(User.email_address == email_address).first()
        return UserRecord.model_validate(user) if user else None

    def find_by_id(self, user_id: int) -> UserRecord | None:
        user = self.db.get(User, user_id)
        return UserRecord.model_validate(user) if user else None

    def create(self, fields: dict[str, Any]) -> UserRecord:
        with _rollback_on_error(self.db):
            user = User(**fields)
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        return UserRecord.model_validate(user)


class SqlAlchemyCourseRepository(CourseRepository):

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, course_id: int) -> CourseRecord | None:
        course = self.db.get(Course, course_id)
        return CourseRecord.model_validate(course) if course else None

    def find_by_title(self, title: str) -> CourseRecord | None:
        course = self.db.query(Course).filter(Course.title == title).first()
        return CourseRecord.model_validate(course) if course else None

    def list_all(self) -> list[CourseRecord]:
        courses = self.db.query(Course).order_by(Course.id.asc()).all()
        return [CourseRecord.model_validate(course) for course in courses]

    def create(self, fields: dict[str, Any]) -> CourseRecord:
        with _rollback_on_error(self.db):
            course = Course(**fields)
            self.db.add(course)
            self.db.commit()
            self.db.refresh(course)
        return CourseRecord.model_validate(course)

    def update(self, course_id: int, fields: dict[str, Any]) -> None:
        with _rollback_on_error(self.db):
            course = self.db.get(Course, course_id)
            if course is None:
                return
            for name, value in fields.items():
                setattr(course, name, value)
            self.db.commit()

    def delete(self, course_id: int) -> None:
        with _rollback_on_error(self.db):
            self.db.query(Course).filter(Course.id == course_id).delete()
            self.db.commit()


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return SqlAlchemyUserRepository(db)


def get_course_repository(db: Session = Depends(get_db)) -> CourseRepository:
    return SqlAlchemyCourseRepository(db)

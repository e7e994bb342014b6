"""Course model definitions."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from course_api.database import Base


class Course(Base):
    """Represents a course owned by exactly one user."""
    __tablename__ = "Courses"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column("userId", Integer, ForeignKey("Users.id"), nullable=False)
    title = Column(String, nullable=False, unique=True, index=True)
    description = Column(String, nullable=False)
    estimated_time = Column("estimatedTime", String, nullable=True)
    materials_needed = Column("materialsNeeded", String, nullable=True)
    created_at = Column("createdAt", DateTime, nullable=False, server_default=func.now())
    updated_at = Column("updatedAt", DateTime, nullable=False, server_default=func.now(), onupdate=func.now())

    owner = relationship("User", back_populates="courses")

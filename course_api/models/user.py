"""User model definitions."""

from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from course_api.database import Base


class User(Base):
    """Represents a registered user who may own courses."""
    __tablename__ = "Users"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column("firstName", String, nullable=False)
    last_name = Column("lastName", String, nullable=False)
    email_address = Column("emailAddress", String, nullable=False, unique=True, index=True)
    password = Column(String, nullable=False)  # argon2 hash, never plaintext
    created_at = Column("createdAt", DateTime, nullable=False, server_default=func.now())
    updated_at = Column("updatedAt", DateTime, nullable=False, server_default=func.now(), onupdate=func.now())

    courses = relationship("Course", back_populates="owner")

import os

import pytest
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault('DATABASE_URL', 'sqlite:///./test.db')
os.environ.setdefault('ARGON2_TIME_COST', '1')
os.environ.setdefault('ARGON2_MEMORY_COST', '1024')
os.environ.setdefault('ARGON2_PARALLELISM', '1')

from course_api.auth.passwords import hash_password  # noqa: E402
from course_api.database import Base, build_engine  # noqa: E402
from course_api.models.course import Course  # noqa: E402
from course_api.models.user import User  # noqa: E402
from course_api.repositories.orm import SqlAlchemyCourseRepository, SqlAlchemyUserRepository  # noqa: E402


@pytest.fixture
def db_engine():
    engine = build_engine('sqlite://', poolclass=StaticPool)
    Base.metadata.create_all(bind=engine, tables=[User.__table__, Course.__table__])
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine, tables=[Course.__table__, User.__table__])
        engine.dispose()


@pytest.fixture
def db_session(db_engine):
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    db = testing_session_local()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def user_repository(db_session):
    return SqlAlchemyUserRepository(db_session)


@pytest.fixture
def course_repository(db_session):
    return SqlAlchemyCourseRepository(db_session)


@pytest.fixture
def make_user(user_repository):
    def _make_user(email_address='joe@smith.com', password='joepassword', first_name='Joe', last_name='Smith'):
        return user_repository.create({
            'first_name': first_name,
            'last_name': last_name,
            'email_address': email_address,
            'password': hash_password(password),
        })

    return _make_user


@pytest.fixture
def make_course(course_repository):
    def _make_course(owner, title='Build a Basic Bookcase', description='Woodworking for beginners.', **extra):
        return course_repository.create({
            'user_id': owner.id,
            'title': title,
            'description': description,
            **extra,
        })

    return _make_course

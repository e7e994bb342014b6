from datetime import datetime

import pytest
from sqlalchemy.exc import IntegrityError

from course_api.models.course import Course


def test_user_repository_finds_by_exact_email(make_user, user_repository) -> None:
    joe = make_user()

    assert user_repository.find_by_email('joe@smith.com').id == joe.id
    assert user_repository.find_by_email('Joe@Smith.com') is None
    assert user_repository.find_by_id(joe.id).first_name == 'Joe'
    assert user_repository.find_by_id(999) is None


def test_user_repository_sets_timestamps(make_user) -> None:
    joe = make_user()

    assert joe.created_at is not None
    assert joe.updated_at is not None


def test_user_repository_enforces_unique_email(make_user, user_repository) -> None:
    make_user()

    with pytest.raises(IntegrityError):
        make_user()

    # The failed insert was rolled back and the session is still usable.
    assert user_repository.find_by_email('joe@smith.com') is not None


def test_course_repository_round_trip(make_user, make_course, course_repository) -> None:
    joe = make_user()
    course = make_course(joe, estimated_time='12 hours')

    found = course_repository.find_by_id(course.id)
    assert found.user_id == joe.id
    assert found.estimated_time == '12 hours'
    assert found.materials_needed is None
    assert course_repository.find_by_title('Build a Basic Bookcase').id == course.id
    assert course_repository.find_by_title('Build a Basic Bookcase ') is None


def test_course_repository_lists_all_courses_in_id_order(make_user, make_course, course_repository) -> None:
    joe = make_user()
    first = make_course(joe, title='First')
    second = make_course(joe, title='Second')

    assert [course.id for course in course_repository.list_all()] == [first.id, second.id]


def test_course_repository_update_and_delete(make_user, make_course, course_repository, db_session) -> None:
    joe = make_user()
    course = make_course(joe)

    course_repository.update(course.id, {'title': 'Renamed', 'materials_needed': 'Saw'})
    updated = course_repository.find_by_id(course.id)
    assert updated.title == 'Renamed'
    assert updated.materials_needed == 'Saw'

    course_repository.delete(course.id)
    assert course_repository.find_by_id(course.id) is None
    assert db_session.query(Course).count() == 0


def test_course_repository_rejects_unknown_owner(course_repository) -> None:
    with pytest.raises(IntegrityError):
        course_repository.create({'user_id': 42, 'title': 'Orphan', 'description': 'No owner.'})


def test_course_repository_update_refreshes_updated_at(make_user, make_course, course_repository, db_session) -> None:
    course = make_course(make_user())
    backdated = datetime(2000, 1, 1)
    db_session.query(Course).filter(Course.id == course.id).update({Course.updated_at: backdated})
    db_session.commit()
    assert course_repository.find_by_id(course.id).updated_at == backdated

    course_repository.update(course.id, {'description': 'Changed.'})

    updated = course_repository.find_by_id(course.id)
    assert updated.updated_at > backdated
    assert updated.created_at == course.created_at

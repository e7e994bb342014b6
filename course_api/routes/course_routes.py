import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import Response

from course_api.auth.dependencies import get_current_user
from course_api.errors import CourseNotFound, DuplicateRecord, OwnershipViolation
from course_api.repositories.base import CourseRepository
from course_api.repositories.orm import get_course_repository
from course_api.schemas import CourseRecord, CourseSummaryResponse, UserRecord
from course_api.validation import COURSE_RULES, validate

router = APIRouter(tags=['courses'])

logger = logging.getLogger(__name__)

# Request body keys accepted for a course, mapped to record attributes.
COURSE_FIELDS = {
    'userId': 'user_id',
    'title': 'title',
    'description': 'description',
    'estimatedTime': 'estimated_time',
    'materialsNeeded': 'materials_needed',
}
# Ownership never changes after creation.
UPDATABLE_COURSE_FIELDS = {key: name for key, name in COURSE_FIELDS.items() if key != 'userId'}


def extract_course_fields(payload: dict, allowed: dict[str, str]) -> dict[str, Any]:
    return {name: payload[key] for key, name in allowed.items() if key in payload}


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def parse_course_id(raw_id: str) -> int | None:
    # Ids that are not plain digits match no course.
    return int(raw_id) if raw_id.isascii() and raw_id.isdigit() else None


def find_course(raw_id: str, courses: CourseRepository) -> CourseRecord | None:
    course_id = parse_course_id(raw_id)
    return courses.find_by_id(course_id) if course_id is not None else None


def get_owned_course(course_id: str, current_user: UserRecord, courses: CourseRepository, action: str) -> CourseRecord:
    course = find_course(course_id, courses)
    if course is None:
        raise CourseNotFound(course_id)

    if current_user.id != course.user_id:
        raise OwnershipViolation(f'Users can only {action} their own courses.')

    return course


@router.get('/courses', response_model=list[CourseSummaryResponse])
def list_courses(courses: CourseRepository = Depends(get_course_repository)):
    return [CourseSummaryResponse.model_validate(course) for course in courses.list_all()]


@router.get('/courses/{course_id}', response_model=CourseRecord | None)
def get_course(course_id: str, courses: CourseRepository = Depends(get_course_repository)):
    return find_course(course_id, courses)


@router.post('/courses', status_code=status.HTTP_201_CREATED)
def create_course(
    payload: Any = Body(default=None),
    current_user: UserRecord = Depends(get_current_user),
    courses: CourseRepository = Depends(get_course_repository),
):
    validate(payload, COURSE_RULES)

    if courses.find_by_title(_strip(payload['title'])) is not None:
        raise DuplicateRecord(f'Course with title "{payload["title"]}" already exists.')

    fields = extract_course_fields(payload, COURSE_FIELDS)
    fields.setdefault('user_id', current_user.id)
    if fields['user_id'] != current_user.id:
        logger.warning(
            'User %s created a course on behalf of user %s',
            current_user.id,
            fields['user_id'],
        )

    created_course = courses.create(fields)
    logger.info('User %s created course %s', current_user.id, created_course.id)

    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={'Location': f'/course/{created_course.id}'},
    )


@router.put('/courses/{course_id}', status_code=status.HTTP_204_NO_CONTENT)
def update_course(
    course_id: str,
    payload: Any = Body(default=None),
    current_user: UserRecord = Depends(get_current_user),
    courses: CourseRepository = Depends(get_course_repository),
):
    validate(payload, COURSE_RULES)

    course = get_owned_course(course_id, current_user, courses, action='edit')

    courses.update(course.id, extract_course_fields(payload, UPDATABLE_COURSE_FIELDS))
    logger.info('User %s updated course %s', current_user.id, course.id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete('/courses/{course_id}', status_code=status.HTTP_204_NO_CONTENT)
def delete_course(
    course_id: str,
    current_user: UserRecord = Depends(get_current_user),
    courses: CourseRepository = Depends(get_course_repository),
):
    course = get_owned_course(course_id, current_user, courses, action='delete')

    courses.delete(course.id)
    logger.info('User %s deleted course %s', current_user.id, course.id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)

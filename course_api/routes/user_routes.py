import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import Response

from course_api.auth.dependencies import get_current_user
from course_api.auth.passwords import hash_password
from course_api.errors import DuplicateRecord
from course_api.repositories.base import UserRepository
from course_api.repositories.orm import get_user_repository
from course_api.schemas import CurrentUserResponse, UserRecord
from course_api.validation import USER_RULES, validate

router = APIRouter(tags=['users'])

logger = logging.getLogger(__name__)


@router.get('/users', response_model=CurrentUserResponse)
def get_authenticated_user(current_user: UserRecord = Depends(get_current_user)):
    return CurrentUserResponse.model_validate(current_user)


@router.post('/users', status_code=status.HTTP_201_CREATED)
def create_user(
    payload: Any = Body(default=None),
    users: UserRepository = Depends(get_user_repository),
):
    validate(payload, USER_RULES)

    if users.find_by_email(payload['emailAddress'].strip()) is not None:
        raise DuplicateRecord('User already exists')

    created_user = users.create({
        'first_name': payload['firstName'],
        'last_name': payload['lastName'],
        'email_address': payload['emailAddress'],
        'password': hash_password(payload['password']),
    })
    logger.info('Created user %s (%s)', created_user.id, created_user.email_address)

    return Response(status_code=status.HTTP_201_CREATED, headers={'Location': '/'})

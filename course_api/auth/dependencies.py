import logging

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from course_api.auth.passwords import verify_password
from course_api.errors import AuthenticationFailed
from course_api.repositories.base import UserRepository
from course_api.repositories.orm import get_user_repository
from course_api.schemas import UserRecord

logger = logging.getLogger(__name__)

security = HTTPBasic(auto_error=False)


async def get_basic_credentials(request: Request) -> HTTPBasicCredentials | None:
    # Undecodable Basic headers are treated the same as a missing one.
    try:
        return await security(request)
    except HTTPException:
        return None


def get_current_user(
    credentials: HTTPBasicCredentials | None = Depends(get_basic_credentials),
    users: UserRepository = Depends(get_user_repository),
) -> UserRecord:
    if credentials is None:
        logger.warning('Auth header not found')
        raise AuthenticationFailed()

    user = users.find_by_email(credentials.username)
    if user is None:
        logger.warning('User not found for username: %s', credentials.username)
        raise AuthenticationFailed()

    if not verify_password(credentials.password, user.password):
        logger.warning('Authentication failure for username: %s', user.email_address)
        raise AuthenticationFailed()

    return user

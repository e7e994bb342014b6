"""Exceptions that map business failures onto HTTP responses."""

from fastapi import status


class ApiError(Exception):
    """Base class for failures rendered as a JSON response.

    ``body`` is sent verbatim as the response content with ``status_code``.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, body: dict):
        super().__init__(body)
        self.body = body


class RequestValidationFailed(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, messages: list[str]):
        super().__init__({'errors': messages})
        self.messages = messages


class AuthenticationFailed(ApiError):
    """Raised for every authentication failure; the cause is only logged."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self):
        super().__init__({'message': 'Access Denied'})


class OwnershipViolation(ApiError):
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str):
        super().__init__({'error': message})


class CourseNotFound(ApiError):
    # Reported as 400 rather than 404 to stay compatible with existing clients.
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, course_id: str):
        super().__init__({'error': f'Course with id: {course_id} not found.'})
        self.course_id = course_id


class DuplicateRecord(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__({'error': message})

"""Per-field request body rules.

A rule table is a sequence of :class:`Rule` objects. :func:`validate` runs
every rule, in declaration order, and raises a single
:class:`RequestValidationFailed` listing all failing messages.
"""

from dataclasses import dataclass
from typing import Any, Callable

from email_validator import EmailNotValidError, validate_email

from course_api.errors import RequestValidationFailed


def required_non_empty(value: Any) -> bool:
    return bool(value)


def required_email(value: Any) -> bool:
    if not required_non_empty(value) or not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False, test_environment=True)
    except EmailNotValidError:
        return False
    return True


@dataclass(frozen=True)
class Rule:
    field: str
    predicate: Callable[[Any], bool]
    message: str


def required(field: str) -> Rule:
    return Rule(field, required_non_empty, f'Please provide a value for "{field}"')


def required_email_address(field: str) -> Rule:
    return Rule(field, required_email, f'Please provide a value for "{field}"')


USER_RULES = (
    required('firstName'),
    required('lastName'),
    required('password'),
    required_email_address('emailAddress'),
)

COURSE_RULES = (
    required('title'),
    required('description'),
)


def collect_errors(body: Any, rules) -> list[str]:
    if not isinstance(body, dict):
        body = {}
    return [rule.message for rule in rules if not rule.predicate(body.get(rule.field))]


def validate(body: Any, rules) -> None:
    errors = collect_errors(body, rules)
    if errors:
        raise RequestValidationFailed(errors)

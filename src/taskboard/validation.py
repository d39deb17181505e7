"""Field validation rules for user and task payloads.

Rules run in a fixed order and stop at the first failure, so the error a
caller sees is always the earliest rule their payload breaks.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from .errors import ValidationError
from .models import TaskStatus

USER_ID_MIN_LENGTH = 4
TASK_ID_MIN_LENGTH = 4
NAME_MIN_LENGTH = 2
TITLE_MIN_LENGTH = 2
DELETABLE_USER_ID_PREFIX = "f"

# lowercase, uppercase, digit and one non-alphanumeric; 8 to 12 characters
PASSWORD_PATTERN = re.compile(r"(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[^\da-zA-Z]).{8,12}")
PASSWORD_RULE_MESSAGE = (
    "'password' must have between 8 and 12 characters, with uppercase and "
    "lowercase letters, at least one number and one special character"
)

# request key -> column name for the partial task update
TASK_UPDATE_FIELDS = {
    "id": "id",
    "title": "title",
    "description": "description",
    "createdAt": "created_at",
    "status": "status",
}


@dataclass
class NewUser:
    id: str
    name: str
    email: str
    password: str


@dataclass
class NewTask:
    id: str
    title: str
    description: str


def require_string(field: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError(field, f"'{field}' must be a string")
    return value


def require_min_length(field: str, value: str, min_length: int) -> str:
    if len(value) < min_length:
        raise ValidationError(field, f"'{field}' must have at least {min_length} characters")
    return value


def require_password(value: Any) -> str:
    if not isinstance(value, str) or PASSWORD_PATTERN.fullmatch(value) is None:
        raise ValidationError("password", PASSWORD_RULE_MESSAGE)
    return value


def require_status(value: Any) -> int:
    # bool is an int subclass; true/false are not accepted as a status
    allowed = {status.value for status in TaskStatus}
    if isinstance(value, bool) or not isinstance(value, int) or value not in allowed:
        raise ValidationError("status", "'status' must be 0 (incomplete) or 1 (complete)")
    return value


def validate_new_user(payload: Mapping[str, Any]) -> NewUser:
    """Check a user creation payload.

    Uniqueness of id and email is checked afterwards against the store.

    Raises:
        ValidationError: On the first rule the payload breaks
    """
    user_id = require_string("id", payload.get("id"))
    require_min_length("id", user_id, USER_ID_MIN_LENGTH)
    name = require_string("name", payload.get("name"))
    require_min_length("name", name, NAME_MIN_LENGTH)
    email = require_string("email", payload.get("email"))
    password = require_password(payload.get("password"))
    return NewUser(id=user_id, name=name, email=email, password=password)


def validate_new_task(payload: Mapping[str, Any]) -> NewTask:
    """Check a task creation payload.

    Raises:
        ValidationError: On the first rule the payload breaks
    """
    task_id = require_string("id", payload.get("id"))
    require_min_length("id", task_id, TASK_ID_MIN_LENGTH)
    title = require_string("title", payload.get("title"))
    require_min_length("title", title, TITLE_MIN_LENGTH)
    description = require_string("description", payload.get("description"))
    return NewTask(id=task_id, title=title, description=description)


def validate_task_update(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Check the fields a caller supplied for a partial task update.

    Keys that are absent or null are treated as not supplied.

    Returns:
        Supplied values keyed by column name
    """
    changes: Dict[str, Any] = {}
    for key, column in TASK_UPDATE_FIELDS.items():
        value = payload.get(key)
        if value is None:
            continue
        if key == "status":
            changes[column] = require_status(value)
            continue
        require_string(key, value)
        if key == "id":
            require_min_length(key, value, TASK_ID_MIN_LENGTH)
        elif key == "title":
            require_min_length(key, value, TITLE_MIN_LENGTH)
        changes[column] = value
    return changes


def validate_deletable_user_id(user_id: str) -> str:
    """Only ids starting with 'f' may be deleted; checked before any lookup."""
    if not user_id.startswith(DELETABLE_USER_ID_PREFIX):
        raise ValidationError("id", f"'id' must start with the letter '{DELETABLE_USER_ID_PREFIX}'")
    return user_id

"""User operations: validation, uniqueness checks and persistence."""

import logging
from typing import List, Optional

from fastapi import Depends
from sqlmodel import Session

from ..crud import UserStorage
from ..db.session import get_session
from ..errors import ConflictError, NotFoundError
from ..schemas.common import Message
from ..schemas.user import UserCreated, UserOut
from ..security import get_password_hash
from ..validation import validate_deletable_user_id, validate_new_user

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, storage: UserStorage):
        self.storage = storage

    def list_users(self, search: Optional[str] = None) -> List[UserOut]:
        return [UserOut.model_validate(user) for user in self.storage.list_users(search)]

    def create_user(self, payload: dict) -> UserCreated:
        """Validate and insert a user.

        Raises:
            ValidationError: If a field is malformed
            ConflictError: If the id or email is already registered
        """
        new_user = validate_new_user(payload)

        if self.storage.get_user_by_id(new_user.id) is not None:
            raise ConflictError("'id' already exists")
        if self.storage.get_user_by_email(new_user.email) is not None:
            raise ConflictError("'email' already exists")

        user = self.storage.add_user(
            user_id=new_user.id,
            name=new_user.name,
            email=new_user.email,
            password_hash=get_password_hash(new_user.password),
        )
        logger.info(f"User created: {user.id}")
        return UserCreated(message="User created successfully", user=UserOut.model_validate(user))

    def delete_user(self, user_id: str) -> Message:
        """Delete a user together with its task assignments.

        Raises:
            ValidationError: If the id does not start with 'f'
            NotFoundError: If no user has this id
        """
        validate_deletable_user_id(user_id)

        user = self.storage.get_user_by_id(user_id)
        if user is None:
            raise NotFoundError("'id' not found")

        self.storage.delete_user(user)
        logger.info(f"User deleted: {user_id}")
        return Message(message="User deleted successfully")


def get_user_service(session: Session = Depends(get_session)) -> UserService:
    return UserService(UserStorage(session))

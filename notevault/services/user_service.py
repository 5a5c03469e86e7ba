"""
NoteVault Backend — User Service
================================

What:  Profile reads and edits for the authenticated user.
Who:   Called by the /users route handlers.
"""

import logging
from typing import Any, Dict

from notevault.exceptions import ConflictError, DuplicateRecordError, NotFoundError
from notevault.models.user import User
from notevault.repositories.base import UserRepository
from notevault.schemas.auth import EditUserRequest, UserResponse
from notevault.services.auth_service import EMAIL_EXISTS_MESSAGE

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, users: UserRepository):
        self._users = users

    def to_response(self, user: User) -> UserResponse:
        return UserResponse.model_validate(user)

    async def get_user(self, user_id: int) -> UserResponse:
        user = await self._users.find_unique(id=user_id)
        if user is None:
            raise NotFoundError(resource="user", resource_id=str(user_id))
        return self.to_response(user)

    async def edit_user(self, user_id: int, patch: EditUserRequest) -> UserResponse:
        """
        Partially update email / firstname / lastname.

        Raises:
            ConflictError: the new email belongs to another user
            NotFoundError: the user vanished between authentication and update
        """
        changes: Dict[str, Any] = patch.model_dump(exclude_unset=True)
        try:
            user = await self._users.update(user_id, changes)
        except DuplicateRecordError as e:
            raise ConflictError(EMAIL_EXISTS_MESSAGE, field="email") from e

        if user is None:
            raise NotFoundError(resource="user", resource_id=str(user_id))

        if changes:
            logger.info("User %s updated profile (%s)", user_id, ", ".join(sorted(changes)))
        return self.to_response(user)

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Insert a new user and return it with its assigned ID.

        Raises UserAlreadyExistsError if the email is already taken.
        """
        pass

    @abstractmethod
    async def update(self, user_id: str, changes: Dict[str, Any]) -> Optional[User]:
        """
        Apply a partial update and return the updated user.

        ``changes`` is keyed by UserFields names. Returns None if no user
        has this ID.
        """
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """Delete user by ID. Returns False if nothing was deleted."""
        pass

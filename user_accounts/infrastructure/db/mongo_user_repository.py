# Standard library imports
import logging
from datetime import date, datetime
from typing import Any, Dict, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User, Gender
from ...domain.constants import UserFields
from ...core.exceptions import RepositoryError, UserAlreadyExistsError
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)


def _to_object_id(user_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(user_id)
    except (InvalidId, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
        except PyMongoError as e:
            raise RepositoryError(f"Error finding user by email: {str(e)}", operation="find_by_email") from e
        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise (including malformed IDs)
        """
        object_id = _to_object_id(user_id) if user_id else None
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RepositoryError(f"Error finding user by ID: {str(e)}", operation="find_by_id") from e
        if document is None:
            return None
        return self._document_to_user(document)

    async def create(self, user: User) -> User:
        """
        Insert a new user document

        Args:
            user: User domain model without an ID

        Returns:
            Saved User domain model with ID set

        Raises:
            UserAlreadyExistsError: If the unique email index rejects the insert
        """
        user_dict = self._user_to_dict(user)

        try:
            result = await self.user_collection.insert_one(user_dict)
            new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
        except DuplicateKeyError as e:
            raise UserAlreadyExistsError(user.email) from e
        except PyMongoError as e:
            raise RepositoryError(f"Error creating user: {str(e)}", operation="create") from e

        if new_document is None:
            raise RepositoryError("User was created but could not be retrieved", operation="create")
        return self._document_to_user(new_document)

    async def update(self, user_id: str, changes: Dict[str, Any]) -> Optional[User]:
        """
        Apply a partial update to a user document

        Args:
            user_id: ID of the user to update
            changes: Field values keyed by UserFields names

        Returns:
            Updated User domain model, or None if no such user
        """
        object_id = _to_object_id(user_id) if user_id else None
        if object_id is None:
            return None

        update_fields = {key: self._to_mongo_value(value) for key, value in changes.items()}
        try:
            if update_fields:
                document = await self.user_collection.find_one_and_update(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": update_fields},
                    return_document=ReturnDocument.AFTER,
                )
            else:
                document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except DuplicateKeyError as e:
            raise UserAlreadyExistsError(str(changes.get(UserFields.EMAIL, ""))) from e
        except PyMongoError as e:
            raise RepositoryError(f"Error updating user {user_id}: {str(e)}", operation="update") from e

        if document is None:
            return None
        return self._document_to_user(document)

    async def delete(self, user_id: str) -> bool:
        """
        Delete a user document

        Args:
            user_id: ID of the user to delete

        Returns:
            True if a document was deleted, False otherwise
        """
        object_id = _to_object_id(user_id) if user_id else None
        if object_id is None:
            return False

        try:
            result = await self.user_collection.delete_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RepositoryError(f"Error deleting user {user_id}: {str(e)}", operation="delete") from e
        return result.deleted_count > 0

    @staticmethod
    def _to_mongo_value(value: Any) -> Any:
        """BSON has no plain date type; dates are stored as midnight datetimes."""
        if isinstance(value, Gender):
            return value.value
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime(value.year, value.month, value.day)
        return value

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise RepositoryError("Invalid document: missing _id field", operation="decode")

        dob = document.get(UserFields.DOB)
        if isinstance(dob, datetime):
            dob = dob.date()

        try:
            return User(
                id=str(document[UserFields.MONGO_ID]),
                name=document.get(UserFields.NAME, ""),
                gender=document.get(UserFields.GENDER, ""),
                dob=dob,
                email=document.get(UserFields.EMAIL, ""),
                hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            )
        except ValueError as e:
            logger.error("Stored user %s is invalid: %s", document[UserFields.MONGO_ID], e)
            raise RepositoryError(f"Invalid user document: {e}", operation="decode") from e

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage (no _id; MongoDB assigns it)
        """
        return {
            UserFields.NAME: user.name,
            UserFields.GENDER: self._to_mongo_value(user.gender),
            UserFields.DOB: self._to_mongo_value(user.dob),
            UserFields.EMAIL: user.email,
            UserFields.HASHED_PASSWORD: user.hashed_password,
        }

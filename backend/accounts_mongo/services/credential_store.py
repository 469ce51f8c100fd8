"""
Credential storage service backed by MongoDB.

Persists password hashes, password reset tokens, email verification tokens
and email address records on user documents. Each operation is a single
read or update against the users collection.
"""
from typing import Any, Mapping, Optional, Union

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from accounts_mongo.config import DEFAULT_OPTIONS, MongoOptions
from accounts_mongo.core.exceptions import IndexSetupError, UserNotFoundError
from accounts_mongo.core.ids import to_mongo_id
from accounts_mongo.core.logging import get_logger
from accounts_mongo.database.accounts_db import USER_INDEXES, Fields
from accounts_mongo.models.user import User

logger = get_logger(__name__)

UserId = Union[str, ObjectId]


class CredentialStore:
    """Service for password and email credential persistence."""

    def __init__(
        self,
        db: AsyncIOMotorDatabase,
        options: Optional[Union[MongoOptions, Mapping[str, Any]]] = None,
    ):
        """Initialize with the accounts database and optional option overrides."""
        self.db = db
        self.options = DEFAULT_OPTIONS.merge(options)
        self.users_collection = db[self.options.collection_name]

    def _user_id(self, user_id: UserId) -> UserId:
        if self.options.convert_user_id_to_object_id:
            return to_mongo_id(user_id)
        return user_id

    def _now(self) -> Any:
        return self.options.date_provider()

    def _touch(self) -> dict:
        """$set fragment updating the user's last update timestamp."""
        return {self.options.timestamps.updated_at: self._now()}

    async def _update_user(self, user_id: UserId, query: dict, update: dict, operation: str) -> None:
        """Apply `update` to the single user matched by `query` or raise UserNotFoundError."""
        result = await self.users_collection.update_one(query, update)
        if result.matched_count == 0:
            logger.warning(f"{operation}: no user matched", extra={"user_id": str(user_id)})
            raise UserNotFoundError(details={"user_id": str(user_id)})
        logger.debug(f"{operation}: user updated", extra={"user_id": str(user_id)})

    async def setup_indexes(self) -> None:
        """
        Ensure unique sparse indexes on username and email addresses.

        Safe to call on every startup.

        Raises:
            IndexSetupError: If the database rejects index creation
        """
        try:
            for field in USER_INDEXES:
                await self.users_collection.create_index(field, unique=True, sparse=True)
        except PyMongoError as e:
            logger.error(f"Failed to create indexes on {self.options.collection_name}: {e}")
            raise IndexSetupError(details={"collection": self.options.collection_name}) from e

        logger.info(f"Indexes ensured on {self.options.collection_name}: {', '.join(USER_INDEXES)}")

    async def find_user_by_reset_password_token(self, token: str) -> Optional[User]:
        """
        Get the user holding a pending password reset token.

        Args:
            token: Reset token

        Returns:
            User model or None if no user holds the token
        """
        user_doc = await self.users_collection.find_one({Fields.PASSWORD_RESET_TOKEN: token})
        if not user_doc:
            return None
        return User.model_validate(user_doc)

    async def find_user_by_email_verification_token(self, token: str) -> Optional[User]:
        """
        Get the user holding a pending email verification token.

        Args:
            token: Verification token

        Returns:
            User model or None if no user holds the token
        """
        user_doc = await self.users_collection.find_one({Fields.VERIFICATION_TOKEN: token})
        if not user_doc:
            return None
        return User.model_validate(user_doc)

    async def find_password_hash(self, user_id: UserId) -> Optional[str]:
        """
        Get the stored password hash of a user.

        A missing user and a user without a password both return None.
        """
        user_doc = await self.users_collection.find_one({"_id": self._user_id(user_id)})
        if not user_doc:
            return None
        password = (user_doc.get("services") or {}).get("password") or {}
        return password.get("bcrypt") or None

    async def set_password(self, user_id: UserId, new_password: str) -> None:
        """
        Replace the password hash and drop all pending reset requests.

        Args:
            user_id: User ID
            new_password: Already hashed password

        Raises:
            UserNotFoundError: If no user has this id
        """
        await self._update_user(
            user_id,
            {"_id": self._user_id(user_id)},
            {
                "$set": {
                    Fields.PASSWORD_HASH: new_password,
                    **self._touch(),
                },
                "$unset": {Fields.PASSWORD_RESET: ""},
            },
            "set_password",
        )

    async def add_email_verification_token(self, user_id: UserId, email: str, token: str) -> None:
        """Append a verification token for `email` to the user."""
        await self.users_collection.update_one(
            {"_id": self._user_id(user_id)},
            {
                "$push": {
                    Fields.VERIFICATION_TOKENS: {
                        "token": token,
                        "address": email.lower(),
                        "when": self._now(),
                    },
                },
            },
        )

    async def add_reset_password_token(
        self,
        user_id: UserId,
        email: str,
        token: str,
        reason: str,
    ) -> None:
        """
        Append a password reset request to the user.

        Args:
            user_id: User ID
            email: Address the token was sent to
            token: Reset token
            reason: Flow tag, e.g. "reset" or "enroll"
        """
        await self.users_collection.update_one(
            {"_id": self._user_id(user_id)},
            {
                "$push": {
                    Fields.PASSWORD_RESET: {
                        "token": token,
                        "address": email.lower(),
                        "when": self._now(),
                        "reason": reason,
                    },
                },
            },
        )

    async def set_reset_password(self, user_id: UserId, email: str, new_password: str) -> None:
        """
        Set the password at the end of a reset flow.

        `email` is not used: the caller has already matched the token to its address.
        """
        await self.set_password(user_id, new_password)

    async def add_email(self, user_id: UserId, new_email: str, verified: bool) -> None:
        """
        Add an email address to the user unless the address is already present.

        An address already on the user is left as is, whatever its verified flag.

        Raises:
            UserNotFoundError: If no user has this id
        """
        _id = self._user_id(user_id)
        address = new_email.lower()
        result = await self.users_collection.update_one(
            {"_id": _id, Fields.EMAIL_ADDRESS: {"$ne": address}},
            {
                "$addToSet": {
                    Fields.EMAILS: {
                        "address": address,
                        "verified": verified,
                    },
                },
                "$set": self._touch(),
            },
        )
        if result.matched_count:
            logger.debug("add_email: user updated", extra={"user_id": str(user_id)})
            return

        if await self.users_collection.find_one({"_id": _id}, {"_id": 1}) is None:
            logger.warning("add_email: no user matched", extra={"user_id": str(user_id)})
            raise UserNotFoundError(details={"user_id": str(user_id)})
        logger.debug("add_email: address already present", extra={"user_id": str(user_id)})

    async def remove_email(self, user_id: UserId, email: str) -> None:
        """
        Remove an email address from the user.

        Removing an address the user does not have only updates the timestamp.

        Raises:
            UserNotFoundError: If no user has this id
        """
        await self._update_user(
            user_id,
            {"_id": self._user_id(user_id)},
            {
                "$pull": {Fields.EMAILS: {"address": email.lower()}},
                "$set": self._touch(),
            },
            "remove_email",
        )

    async def verify_email(self, user_id: UserId, email: str) -> None:
        """
        Mark an address verified and drop its pending verification tokens.

        Raises:
            UserNotFoundError: If the user does not exist or does not own the address
        """
        address = email.lower()
        await self._update_user(
            user_id,
            {"_id": self._user_id(user_id), Fields.EMAIL_ADDRESS: address},
            {
                "$set": {
                    Fields.EMAIL_VERIFIED: True,
                    **self._touch(),
                },
                "$pull": {Fields.VERIFICATION_TOKENS: {"address": address}},
            },
            "verify_email",
        )

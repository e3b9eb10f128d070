from typing import Any, Optional

import structlog
from email_validator import EmailNotValidError, validate_email
from sqlalchemy import select

from school_api.exceptions import AuthenticationError, ConflictError
from school_api.models.user_model import UserModel
from school_api.repositories.base_repository import ResourceRepository
from school_api.schemas.user_schema import UserCreate, UserUpdate
from school_api.services.passwords import dummy_verify, hash_password, verify_and_update
from school_api.utils.error_handling import handle_database_errors

logger = structlog.get_logger()


def normalize_email(email: str) -> str:
    """Normalize an address the way `EmailStr` does before it is stored.

    Invalid addresses are returned stripped; they can never match a stored user.
    """
    try:
        return validate_email(email.strip(), check_deliverability=False).normalized
    except EmailNotValidError:
        return email.strip()


class UserRepository(ResourceRepository[UserModel, UserCreate, UserUpdate]):
    """Users are addressed by email rather than id."""

    model = UserModel
    resource_name = "User"

    @property
    def key_column(self):
        return UserModel.email

    def _normalize_key(self, key: Any) -> Any:
        return normalize_email(key)

    async def _email_taken(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """Check every row, deleted ones included, since email is unique in the table."""
        query = select(UserModel.id).filter(UserModel.email == email)
        if exclude_id is not None:
            query = query.filter(UserModel.id != exclude_id)
        result = await self.db.execute(query)
        return result.first() is not None

    async def _values_for_create(self, data: UserCreate) -> dict[str, Any]:
        if await self._email_taken(data.email):
            raise ConflictError("A user with this email already exists")

        values = data.model_dump(exclude={"password"})
        values["password_hash"] = hash_password(data.password)
        return values

    async def _values_for_update(
        self, record: UserModel, data: UserUpdate
    ) -> dict[str, Any]:
        values = data.model_dump(exclude_unset=True)

        # null means "leave unchanged" for the credential fields
        password = values.pop("password", None)
        if password is not None:
            values["password_hash"] = hash_password(password)

        if "email" in values:
            if values["email"] is None:
                del values["email"]
            elif await self._email_taken(values["email"], exclude_id=record.id):
                raise ConflictError("A user with this email already exists")

        return values

    @handle_database_errors("authenticate user")
    async def authenticate(self, email: str, password: str) -> UserModel:
        """Check credentials against an active user.

        Unknown email, deleted account and wrong password all fail the same way.

        Raises:
            AuthenticationError: If the credentials do not match an active user
        """
        email = normalize_email(email)
        result = await self.db.execute(self._active().filter(UserModel.email == email))
        user = result.scalar_one_or_none()

        if user is None:
            dummy_verify()
            logger.warning("Login failed", reason="unknown_or_deleted")
            raise AuthenticationError("Invalid email or password")

        is_valid, new_hash = verify_and_update(password, user.password_hash)
        if not is_valid:
            logger.warning("Login failed", reason="password_mismatch", user_id=user.id)
            raise AuthenticationError("Invalid email or password")

        if new_hash is not None:
            user.password_hash = new_hash
            await self.db.commit()
            await self.db.refresh(user)

        logger.info("User logged in", user_id=user.id)
        return user

from typing import Optional

from passlib.context import CryptContext

# Password hashing, keep it here to avoid recreating the context for every request
pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
    pbkdf2_sha256__default_rounds=29000,
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


def verify_and_update(password: str, password_hash: str) -> tuple[bool, Optional[str]]:
    """Verify a password and report a replacement hash when the stored one is outdated.

    Returns:
        tuple: (is_valid, new_hash_or_None)
    """
    return pwd_context.verify_and_update(password, password_hash)


def dummy_verify() -> None:
    """Spend the same time as a real verification when no user matched."""
    pwd_context.dummy_verify()

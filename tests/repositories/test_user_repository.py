import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from school_api.exceptions import AuthenticationError, ConflictError
from school_api.repositories.user_repository import UserRepository
from school_api.schemas.user_schema import UserCreate, UserUpdate
from school_api.services.passwords import verify_password


@pytest.fixture
async def user(test_db: AsyncSession):
    repository = UserRepository(test_db)
    return await repository.create(
        UserCreate(email="ann.lee@example.com", password="s3cret-pass", first_name="Ann")
    )


async def test_password_is_stored_hashed(user):
    assert user.password_hash != "s3cret-pass"
    assert verify_password("s3cret-pass", user.password_hash)


async def test_users_are_keyed_by_email(test_db: AsyncSession, user):
    repository = UserRepository(test_db)

    found = await repository.get("ann.lee@example.com")

    assert found.id == user.id


async def test_authenticate_returns_user(test_db: AsyncSession, user):
    repository = UserRepository(test_db)

    authenticated = await repository.authenticate("ann.lee@example.com", "s3cret-pass")

    assert authenticated.id == user.id


async def test_authenticate_rejects_deleted_user(test_db: AsyncSession, user):
    repository = UserRepository(test_db)
    await repository.delete("ann.lee@example.com")

    with pytest.raises(AuthenticationError) as exc_info:
        await repository.authenticate("ann.lee@example.com", "s3cret-pass")

    assert exc_info.value.status_code == 401


async def test_password_update_rehashes(test_db: AsyncSession, user):
    repository = UserRepository(test_db)
    old_hash = user.password_hash

    updated = await repository.update(
        "ann.lee@example.com", UserUpdate(password="another-pass")
    )

    assert updated.password_hash != old_hash
    assert verify_password("another-pass", updated.password_hash)


async def test_null_password_leaves_hash_unchanged(test_db: AsyncSession, user):
    repository = UserRepository(test_db)
    old_hash = user.password_hash

    updated = await repository.update("ann.lee@example.com", UserUpdate(password=None))

    assert updated.password_hash == old_hash


async def test_duplicate_email_raises_conflict(test_db: AsyncSession, user):
    repository = UserRepository(test_db)

    with pytest.raises(ConflictError):
        await repository.create(
            UserCreate(email="ann.lee@example.com", password="other")
        )


async def test_lookup_and_login_normalize_email(test_db: AsyncSession):
    repository = UserRepository(test_db)
    user = await repository.create(
        UserCreate(email="Ann@Example.COM", password="s3cret-pass", first_name="Ann")
    )

    assert user.email == "Ann@example.com"
    assert (await repository.get("Ann@Example.COM")).id == user.id
    assert (await repository.get(" Ann@EXAMPLE.com ")).id == user.id
    assert (await repository.authenticate("Ann@Example.COM", "s3cret-pass")).id == user.id

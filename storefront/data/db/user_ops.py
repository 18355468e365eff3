"""Database operations for the User model."""
import asyncio
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from storefront.data.db.connection import db_connection
from storefront.data.models.db_entity.user import User
from storefront.utils.errors import DuplicateUsername, DuplicateEmail, UserNotFound, LoginFailed
from storefront.utils.logger import get_current_logger
from storefront.utils.passwords import hash_password, verify_password


@dataclass(frozen=True)
class CredentialCheck:
    """Outcome of a credential lookup. ``valid`` is never True when ``exists`` is False."""
    exists: bool
    valid: bool


async def find_user_by_username(username: str) -> User | None:
    """
    Find a user by username.

    Args:
        username: Username to search for

    Returns:
        User object if found, None otherwise
    """
    logger = get_current_logger()
    session = db_connection.get_session()
    try:
        async with session:
            result = await session.execute(
                select(User).filter(User.username == username)
            )
            return result.scalar_one_or_none()
    except Exception as e:
        logger.error(f"Error finding user {username}: {e}")
        raise


async def find_user_by_email(email: str) -> User | None:
    logger = get_current_logger()
    session = db_connection.get_session()
    try:
        async with session:
            result = await session.execute(
                select(User).filter(User.email == email)
            )
            return result.scalar_one_or_none()
    except Exception as e:
        logger.error(f"Error finding user by email {email}: {e}")
        raise


async def validate_credentials(username: str, password: str) -> CredentialCheck:
    """
    Check whether ``username`` exists and ``password`` matches its stored hash.

    An unknown user is a normal outcome, not an error.
    """
    logger = get_current_logger()
    if not username:
        return CredentialCheck(exists=False, valid=False)

    user = await find_user_by_username(username)
    if user is None:
        logger.debug(f"Credential check: user not found - {username}")
        return CredentialCheck(exists=False, valid=False)

    # Hash checks run in a worker thread
    valid = bool(password) and await asyncio.to_thread(
        verify_password, password, user.hashed_password
    )
    if not valid:
        logger.debug(f"Credential check: wrong password - {username}")
    return CredentialCheck(exists=True, valid=valid)


async def authenticate(username: str, password: str) -> str:
    """
    Return the username when the credentials are good.

    Raises:
        UserNotFound: No user with this username
        LoginFailed: Password does not match
    """
    check = await validate_credentials(username, password)
    if not check.exists:
        raise UserNotFound()
    if not check.valid:
        raise LoginFailed()
    return username


async def create_user(username: str, email: str, password: str) -> User:
    """
    Insert a new user with a hashed password.

    Duplicates are checked up front; a duplicate that slips in between the
    check and the insert is reported from the unique constraint instead.

    Raises:
        DuplicateUsername: Username is taken
        DuplicateEmail: Email is registered to another user
    """
    logger = get_current_logger()

    if await find_user_by_username(username):
        raise DuplicateUsername()
    if await find_user_by_email(email):
        raise DuplicateEmail()

    hashed = await asyncio.to_thread(hash_password, password)

    session = db_connection.get_session()
    async with session:
        try:
            user = User(
                username=username,
                email=email,
                hashed_password=hashed,
            )
            session.add(user)
            await session.commit()
            logger.info(f"Created user {username}")
            return user
        except IntegrityError as e:
            await session.rollback()
            logger.warning(f"Concurrent sign-up collided for {username}: {e}")
            if await find_user_by_username(username):
                raise DuplicateUsername() from e
            raise DuplicateEmail() from e
        except Exception as e:
            logger.error(f"Failed to create user {username}: {e}")
            await session.rollback()
            raise

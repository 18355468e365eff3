from typing import Optional

from storefront.data.db import user_ops
from storefront.data.models.db_entity.user import User
from storefront.utils.errors import InvalidCredentials, UserNotFound
from storefront.utils.validation import validate_new_user_fields
from storefront.api import api_logger as logger


async def check_login(username: Optional[str], password: Optional[str]) -> str:
    """
    Return the stored username when the credentials match.

    Raises:
        UserNotFound: No such user
        InvalidCredentials: Wrong password
    """
    check = await user_ops.validate_credentials(username, password)
    if not check.exists:
        logger.warning(f"Login failed: user not found - {username}")
        raise UserNotFound("User not found")
    if not check.valid:
        logger.warning(f"Login failed: invalid password - {username}")
        raise InvalidCredentials()

    logger.info(f"Login successful: {username}")
    return username


async def register_user(
    username: Optional[str],
    email: Optional[str],
    password: Optional[str],
    confirm_password: Optional[str],
) -> User:
    """
    Validate sign-up fields and create the user.

    Username and email are trimmed; passwords are taken as given.
    """
    username = username.strip() if username else username
    email = email.strip() if email else email
    validate_new_user_fields(username, email, password, confirm_password)
    return await user_ops.create_user(username, email, password)

from __future__ import annotations

import threading
from unittest.mock import patch

import pytest
from sqlalchemy import select, func

from storefront.data.db.connection import db_connection
from storefront.data.db.user_ops import (
    authenticate,
    create_user,
    find_user_by_username,
    validate_credentials,
)
from storefront.data.models.db_entity.user import User
from storefront.utils.errors import DuplicateEmail, DuplicateUsername, LoginFailed, UserNotFound
from storefront.utils.passwords import hash_password, verify_password
from storefront.tests.sample_data import ALICE


async def _count_users() -> int:
    async with db_connection.get_session() as session:
        return (await session.execute(select(func.count()).select_from(User))).scalar_one()


@pytest.mark.asyncio
async def test_validate_credentials_flags(seeded_db) -> None:
    check = await validate_credentials(ALICE["username"], ALICE["password"])
    assert (check.exists, check.valid) == (True, True)

    check = await validate_credentials(ALICE["username"], "Wr0ng!Pass")
    assert (check.exists, check.valid) == (True, False)

    check = await validate_credentials("mallory", ALICE["password"])
    assert (check.exists, check.valid) == (False, False)


@pytest.mark.asyncio
async def test_password_comparison_is_case_sensitive(seeded_db) -> None:
    check = await validate_credentials(ALICE["username"], ALICE["password"].lower())
    assert check.exists and not check.valid


@pytest.mark.asyncio
async def test_password_is_stored_hashed(seeded_db) -> None:
    user = await find_user_by_username(ALICE["username"])
    assert user is not None
    assert user.hashed_password != ALICE["password"]
    assert user.hashed_password.startswith("$pbkdf2-sha256$")


@pytest.mark.asyncio
async def test_authenticate_raises_per_failure(seeded_db) -> None:
    assert await authenticate(ALICE["username"], ALICE["password"]) == ALICE["username"]

    with pytest.raises(UserNotFound):
        await authenticate("mallory", "whatever")

    with pytest.raises(LoginFailed):
        await authenticate(ALICE["username"], "Wr0ng!Pass")


@pytest.mark.asyncio
async def test_duplicate_username_is_rejected_without_insert(seeded_db) -> None:
    before = await _count_users()

    with pytest.raises(DuplicateUsername):
        await create_user(ALICE["username"], "other@mail.com", "Str0ng!Pass")

    assert await _count_users() == before


@pytest.mark.asyncio
async def test_duplicate_email_is_rejected_without_insert(seeded_db) -> None:
    before = await _count_users()

    with pytest.raises(DuplicateEmail):
        await create_user("carol", ALICE["email"], "Str0ng!Pass")

    assert await _count_users() == before


@pytest.mark.asyncio
async def test_create_user_then_login(database) -> None:
    await create_user("carol", "carol@mail.com", "C4rol!Pass")

    check = await validate_credentials("carol", "C4rol!Pass")
    assert check.exists and check.valid


@pytest.mark.asyncio
async def test_hashing_runs_off_the_event_loop_thread(seeded_db) -> None:
    loop_thread = threading.get_ident()
    seen = []

    def recording_verify(plain, hashed):
        seen.append(("verify", threading.get_ident()))
        return verify_password(plain, hashed)

    def recording_hash(plain):
        seen.append(("hash", threading.get_ident()))
        return hash_password(plain)

    with patch("storefront.data.db.user_ops.verify_password", side_effect=recording_verify), \
            patch("storefront.data.db.user_ops.hash_password", side_effect=recording_hash):
        check = await validate_credentials(ALICE["username"], ALICE["password"])
        await create_user("carol", "carol@mail.com", "C4rol!Pass")

    assert check.valid
    assert [name for name, _ in seen] == ["verify", "hash"]
    assert all(thread != loop_thread for _, thread in seen)

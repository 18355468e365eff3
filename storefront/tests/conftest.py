"""Pytest plugin to execute asyncio marked tests, plus shared database fixtures."""

from __future__ import annotations

import asyncio
import inspect
import os
import tempfile

import pytest

# Keep test logs out of the working tree; must run before storefront is imported
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="storefront-logs-"))
os.environ.setdefault("SEED_CATALOG", "false")

from httpx import ASGITransport, AsyncClient  # noqa: E402

from storefront.data.db.connection import db_connection  # noqa: E402
from storefront.data.db.user_ops import create_user  # noqa: E402
from storefront.data.seed import seed_catalog  # noqa: E402
from storefront.utils.failure import FailureInjector, get_failure_injector  # noqa: E402
from storefront.tests.sample_data import ALICE, BOB, TEST_CATALOG  # noqa: E402


@pytest.hookimpl
def pytest_configure(config: pytest.Config) -> None:  # pragma: no cover - pytest hook
    config.addinivalue_line(
        "markers",
        "asyncio: mark test to run inside an event loop",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool:  # pragma: no cover - pytest hook
    if "asyncio" not in pyfuncitem.keywords:
        return False

    test_function = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_function):
        return False

    funcargs = {
        name: pyfuncitem.funcargs[name]
        for name in pyfuncitem._fixtureinfo.argnames
    }
    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(test_function(**funcargs))
    finally:
        loop.close()
    return True


@pytest.fixture
def database(tmp_path):
    """Empty schema in a throwaway SQLite file."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'storefront.db'}"
    asyncio.run(db_connection.reconfigure(url))
    asyncio.run(db_connection.create_all())
    yield db_connection
    asyncio.run(db_connection.close())


@pytest.fixture
def seeded_db(database):
    """Schema with the test catalog and two registered users."""

    async def _seed() -> None:
        await seed_catalog([dict(entry) for entry in TEST_CATALOG])
        for user in (ALICE, BOB):
            await create_user(user["username"], user["email"], user["password"])

    asyncio.run(_seed())
    return database


@pytest.fixture
def never_fail() -> FailureInjector:
    return FailureInjector(rate=0.0)


@pytest.fixture
def always_fail() -> FailureInjector:
    return FailureInjector(rate=1.0)


@pytest.fixture
def app():
    from storefront.api.app import create_app

    application = create_app()
    application.dependency_overrides[get_failure_injector] = lambda: FailureInjector(rate=0.0)
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def api_client(app):
    """Factory for an httpx client bound to the app in-process."""

    def _make() -> AsyncClient:
        return AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver")

    return _make

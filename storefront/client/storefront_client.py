from __future__ import annotations

from typing import Any, Optional
from urllib.parse import quote

import httpx

import storefront.config as config
from storefront.client.session import ShopSession
from storefront.utils.errors import ClientInputError
from storefront.utils.validation import validate_new_user_fields
from storefront.client import client_logger as logger


class StorefrontClientError(RuntimeError):
    """Non-2xx answer from the storefront API. ``message`` is the server's text."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class StorefrontClient:
    """
    Async client for the storefront API.

    Mirrors what the shop front-end does over the network: browse, search
    and filter the catalog, sign in, sign up, buy and read purchase history.

    Usage:
        async with StorefrontClient() as client:
            session = await client.login("alice", "S3cret!pw")
            receipt = await client.purchase(session, 7)
    """

    def __init__(
        self,
        base_url: str = None,
        *,
        timeout: float = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url or config.STOREFRONT_URL
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=timeout if timeout is not None else config.CLIENT_TIMEOUT,
            transport=transport,
        )

    async def __aenter__(self) -> "StorefrontClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, url: str, json: Optional[dict] = None) -> httpx.Response:
        logger.debug(f"[storefront] {method} {url}")
        try:
            response = await self._client.request(method, url, json=json)
        except httpx.RequestError as e:
            logger.error(f"[storefront] {method} {url} failed: {e}")
            raise

        if response.is_error:
            logger.warning(f"[storefront] {method} {url} -> {response.status_code}: {response.text}")
            raise StorefrontClientError(response.status_code, response.text)
        return response

    # ------------------------------------------------------------------ catalog

    async def list_products(self) -> list[dict[str, Any]]:
        response = await self._request("GET", "/getProducts")
        return response.json()

    async def product_detail(self, product_id: int) -> dict[str, Any]:
        response = await self._request("GET", f"/getProductDetails/{product_id}")
        return response.json()

    async def search(self, term: str) -> list[int]:
        """Ids of matching products; an empty list when nothing matches."""
        term = term.strip()
        if not term:
            return []
        try:
            response = await self._request("GET", f"/searchProducts/{quote(term, safe='')}")
        except StorefrontClientError as e:
            if e.status_code == 400:
                return []
            raise
        return [row["id"] for row in response.json()]

    async def filter_by_category(self, category: str) -> list[int]:
        response = await self._request("GET", f"/filterProducts/{quote(category, safe='')}")
        return [row["id"] for row in response.json()]

    async def categories(self) -> list[str]:
        response = await self._request("GET", "/getCategories")
        return response.json()

    # -------------------------------------------------------------------- users

    async def login(self, username: str, password: str) -> ShopSession:
        """Validate credentials and return the session to use for later calls."""
        response = await self._request(
            "POST", "/validateLogin", json={"username": username, "password": password}
        )
        return ShopSession(username=response.text, password=password)

    async def create_user(
        self,
        username: str,
        email: str,
        password: str,
        confirm_password: str,
    ) -> str:
        """
        Sign up. Fields are checked locally first so obvious mistakes never
        reach the server; the server repeats every check.

        Raises:
            ClientInputError: Local check failed
            StorefrontClientError: Server rejected the request
        """
        username = username.strip() if username else username
        email = email.strip() if email else email
        try:
            validate_new_user_fields(username, email, password, confirm_password)
        except ClientInputError as e:
            logger.debug(f"[storefront] sign-up rejected locally: {e.message}")
            raise

        response = await self._request(
            "POST",
            "/newUser",
            json={
                "username": username,
                "email": email,
                "password": password,
                "confirmPassword": confirm_password,
            },
        )
        return response.text

    # ------------------------------------------------------------- transactions

    async def purchase(self, session: ShopSession, product_id: int) -> int:
        """Buy one unit and return the transactionID."""
        response = await self._request(
            "POST",
            "/validateTransaction",
            json={**session.credentials(), "productID": product_id},
        )
        return response.json()["transactionID"]

    async def history(self, session: ShopSession) -> list[dict[str, Any]]:
        response = await self._request("POST", "/transactionHistory", json=session.credentials())
        return response.json()

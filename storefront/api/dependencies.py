"""
FastAPI dependencies that build request models from the raw body.

Endpoints accept JSON, urlencoded and multipart bodies alike. A body that
is empty, malformed or of the wrong shape reads as no fields at all, so the
endpoint answers with its own domain error instead of a validation error.
"""
import json
from typing import Any

from fastapi import Depends, Request
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException

from storefront.api.schemas import LoginRequest, NewUserRequest, PurchaseRequest
from storefront.utils.logger import get_current_logger

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_payload(request: Request) -> dict[str, Any]:
    """Read the body into a flat dict of field name to value."""
    logger = get_current_logger()
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(FORM_CONTENT_TYPES):
        try:
            form = await request.form()
        except (MultiPartException, HTTPException) as e:
            logger.debug(f"Unreadable form body on {request.url.path}: {e}")
            return {}
        # Uploaded files are not fields of any request model
        return {key: value for key, value in form.items() if isinstance(value, str)}

    raw = await request.body()
    if not raw:
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        logger.debug(f"Body on {request.url.path} is not JSON ({len(raw)} bytes)")
        return {}
    return payload if isinstance(payload, dict) else {}


async def login_request(payload: dict = Depends(read_payload)) -> LoginRequest:
    return LoginRequest.model_validate(payload)


async def new_user_request(payload: dict = Depends(read_payload)) -> NewUserRequest:
    return NewUserRequest.model_validate(payload)


async def purchase_request(payload: dict = Depends(read_payload)) -> PurchaseRequest:
    return PurchaseRequest.model_validate(payload)

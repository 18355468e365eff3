from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from storefront.api import api_logger as logger
from storefront.api.responses import error_response, server_error_response
from storefront.api.dependencies import login_request, new_user_request
from storefront.api.schemas import LoginRequest, NewUserRequest
from storefront.api.services import check_login, register_user
from storefront.utils.errors import ClientInputError, InvalidCredentials, UserNotFound

router = APIRouter(tags=["Users"])


@router.post("/validateLogin")
async def validate_login_endpoint(request: LoginRequest = Depends(login_request)):
    """Check credentials and echo the username back as text."""
    try:
        username = await check_login(request.username, request.password)
        return PlainTextResponse(content=username)
    except (UserNotFound, InvalidCredentials) as e:
        return error_response(e)
    except Exception:
        logger.exception("Login validation failed unexpectedly")
        return server_error_response()


@router.post("/newUser")
async def new_user_endpoint(request: NewUserRequest = Depends(new_user_request)):
    """Create an account. Client input errors come back verbatim with 400."""
    try:
        await register_user(
            request.username,
            request.email,
            request.password,
            request.confirm_password,
        )
        return PlainTextResponse(content="User created successfully.")
    except ClientInputError as e:
        logger.info(f"Rejected sign-up for {request.username!r}: {e.message}")
        return error_response(e)
    except Exception:
        logger.exception("User creation failed unexpectedly")
        return server_error_response()

"""Domain errors raised by the storefront services.

Every error carries the text shown to the caller and the HTTP status it maps
to by default. Routers may override the status where an endpoint reports the
same error differently (``/transactionHistory`` answers a failed login with 400).
"""


class StorefrontError(Exception):
    message = "Something went wrong, please try again."
    status_code = 500

    def __init__(self, message: str = None, status_code: int = None) -> None:
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ClientInputError(StorefrontError):
    """Invalid sign-up data. The message is returned to the caller verbatim."""
    status_code = 400


class MissingFields(ClientInputError):
    message = "Missing fields."


class PasswordMismatch(ClientInputError):
    message = "Passwords do not match."


class InvalidEmail(ClientInputError):
    message = "Invalid email."


class WeakPassword(ClientInputError):
    message = "Password is not strong enough."


class DuplicateUsername(ClientInputError):
    message = "Username already exists."


class DuplicateEmail(ClientInputError):
    message = "Email already exists."


class UserNotFound(StorefrontError):
    message = "User not found."
    status_code = 404


class LoginFailed(StorefrontError):
    message = "Login failed."
    status_code = 401


class InvalidCredentials(StorefrontError):
    message = "Invalid username or password"
    status_code = 400


class ProductNotFound(StorefrontError):
    message = "Product not found."
    status_code = 404


class OutOfStock(StorefrontError):
    message = "Product out of stock."
    status_code = 409


class TransactionFailed(StorefrontError):
    """Simulated purchase decline. Nothing was written."""
    message = "Transaction failed."
    status_code = 402


class ServerError(StorefrontError):
    """Fallback for unexpected failures; never exposes internal details."""


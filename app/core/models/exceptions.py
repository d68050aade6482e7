from fastapi import status


class UserLookupError(Exception):
    """Base exception for user lookup failures surfaced to the transport layer."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(UserLookupError):
    """Raised when the caller's own user record no longer exists."""
    status_code = status.HTTP_404_NOT_FOUND


class UnauthorizedError(UserLookupError):
    """Raised when the caller does not hold the admin role."""
    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidTargetError(UserLookupError):
    """Raised when the requested user id does not resolve to a user."""
    status_code = status.HTTP_404_NOT_FOUND


class EmailValidationError(UserLookupError):
    """Raised when a User is given an email outside the accepted format or length."""
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

"""Error taxonomy shared by services and routes; each maps to one HTTP status."""


class BreadOrderError(Exception):
    """Base error carrying a user-facing message and the HTTP status to send."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(BreadOrderError):
    """Malformed or missing fields, empty or duplicate names, bad quantity."""

    status_code = 400


class UnauthorizedError(BreadOrderError):
    """No session cookie, or the token is not in the session table."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class InvalidCredentialsError(BreadOrderError):
    """Unknown username or wrong password; both raise the same message."""

    status_code = 401

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


class ForbiddenError(BreadOrderError):
    status_code = 403

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message)


class NotFoundError(BreadOrderError):
    """Record index out of range, or unknown username."""

    status_code = 404


class ConflictError(BreadOrderError):
    status_code = 409

class AppError(Exception):
    """Base for errors that map to a specific HTTP status."""

    status_code = 500
    detail = "Internal server error"

    def __init__(self, detail: str | None = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class ValidationError(AppError):
    status_code = 400
    detail = "Invalid input"


class Unauthenticated(AppError):
    status_code = 401
    detail = "Not authenticated"


class InvalidCredentialError(AppError):
    status_code = 401
    detail = "Invalid credentials"


class Forbidden(AppError):
    status_code = 403
    detail = "Forbidden"


class NotFoundError(AppError):
    status_code = 404
    detail = "Not found"


class ConflictError(AppError):
    status_code = 409
    detail = "Conflict"

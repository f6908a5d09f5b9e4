# catalog/errors.py
from typing import Optional

# Typed failures raised anywhere in the request pipeline.
# They are only turned into responses by the handlers in responses.py.


class AppError(Exception):
    status_code: int = 500
    default_message: str = "Internal Server Error"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(AppError):
    status_code = 404
    default_message = "Resource not found"


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid data"


class UnauthorizedError(AppError):
    status_code = 401
    default_message = "Unauthorized: Missing or invalid API key"

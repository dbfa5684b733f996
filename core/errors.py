"""Domain errors.

Every error carries the HTTP status the API answers with and a message
meant for the client. They are raised where the problem is detected and
rendered once, by the handler registered in ``main.py``.
"""


class AppError(Exception):
    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequestError(AppError):
    status_code = 400
    default_message = "Bad Request"


class NoFieldsError(BadRequestError):
    default_message = "No data"


class InvalidFieldError(BadRequestError):
    default_message = "Field cannot be updated"


class InvalidFilterError(BadRequestError):
    default_message = "Invalid search filters"


class DuplicateKeyError(BadRequestError):
    default_message = "Duplicate record"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not Found"


class UnauthorizedError(AppError):
    status_code = 401
    default_message = "Unauthorized"

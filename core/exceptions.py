# core/exceptions.py
"""Errors raised by the lending services.

Each error carries a stable ``code`` and the HTTP status the API layer
renders it with.
"""


class LendingError(Exception):
    code = "LENDING_ERROR"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(LendingError):
    code = "NOT_FOUND"
    status_code = 404


class NotPermitted(LendingError):
    code = "NOT_PERMITTED"
    status_code = 403


class AlreadyBorrowed(LendingError):
    code = "ALREADY_BORROWED"
    status_code = 409


class InvalidInput(LendingError):
    code = "INVALID_INPUT"
    status_code = 400

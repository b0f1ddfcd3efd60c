"""Errors raised by the query layer."""


class RankerError(Exception):
    """Base class for every error the query layer raises on purpose."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(RankerError):
    """A single-record lookup matched nothing."""

    status_code = 404


class InvalidCriteriaError(RankerError):
    """Search criteria or pagination values are out of bounds."""

    status_code = 422

# predictionio/errors.py - error taxonomy for the PredictionIO clients
from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    FAILURE = "failure"


class PredictionIOError(Exception):
    """Base class for errors raised by the clients."""


class QueryError(PredictionIOError):
    """
    Raised by EngineClient.send_query on a non-2xx response.

    `message` is the response body text when it could be read, otherwise
    the repr of the raw response. The response itself is kept on `.response`.
    """

    kind = ErrorKind.FAILURE

    def __init__(self, message: str, response: Any = None):
        super().__init__(message)
        self.message = message
        self.response = response

    @property
    def status_code(self) -> Optional[int]:
        return getattr(self.response, "status_code", None)


class BadRequestError(QueryError):
    """The query is malformed (HTTP 400)."""

    kind = ErrorKind.BAD_REQUEST


class NotFoundError(QueryError):
    """The engine instance or resource does not exist (HTTP 404)."""

    kind = ErrorKind.NOT_FOUND


class ServerError(QueryError):
    """The engine instance failed (HTTP 500)."""

    kind = ErrorKind.SERVER_ERROR


_STATUS_ERRORS = {
    400: BadRequestError,
    404: NotFoundError,
    500: ServerError,
}


def error_for_status(status_code: int):
    return _STATUS_ERRORS.get(status_code, QueryError)

"""Mapping of coordinator errors to HTTP responses."""

from fastapi import HTTPException

from ..errors import CoordinatorError, InvalidRequestError, NotFoundError, UpstreamError

_STATUS_CODES: dict[type[CoordinatorError], int] = {
    InvalidRequestError: 400,
    NotFoundError: 404,
    UpstreamError: 502,
}


def http_error(error: CoordinatorError) -> HTTPException:
    """Build the HTTPException for a coordinator error."""
    for error_type, status_code in _STATUS_CODES.items():
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(status_code=500, detail=str(error))

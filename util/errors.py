# util/errors.py
from typing import Optional
from fastapi import HTTPException, status
from util.enums import ErrorMessage


class AppError(HTTPException):
    # Flow: raise AppError to short-circuit with a typed status & message.
    def __init__(
        self, message: str, http_status: int = status.HTTP_400_BAD_REQUEST
    ) -> None:
        super().__init__(status_code=http_status, detail=message)


class YamletError(Exception):
    """
    Base for every outcome the registry and the stores report.
    `kind` picks the default message and the status the HTTP layer maps it to.
    """

    kind: ErrorMessage = ErrorMessage.INTERNAL_ERROR

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.kind.value.message
        super().__init__(self.message)

    @property
    def http_status(self) -> int:
        return self.kind.value.http_status


class InvalidArgument(YamletError):
    kind = ErrorMessage.INVALID_ARGUMENT


class Unauthenticated(YamletError):
    kind = ErrorMessage.UNAUTHENTICATED


class InvalidToken(YamletError):
    kind = ErrorMessage.INVALID_TOKEN


class NamespaceMismatch(YamletError):
    kind = ErrorMessage.NAMESPACE_MISMATCH


class Forbidden(YamletError):
    kind = ErrorMessage.FORBIDDEN


class Conflict(YamletError):
    kind = ErrorMessage.CONFLICT


class NotFound(YamletError):
    kind = ErrorMessage.NOT_FOUND


class StorageIOError(YamletError):
    kind = ErrorMessage.STORAGE_IO


class UpstreamError(YamletError):
    kind = ErrorMessage.UPSTREAM_ERROR

    def __init__(self, message: Optional[str] = None, status_code: int = 0) -> None:
        super().__init__(message)
        self.status_code = status_code

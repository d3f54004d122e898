# util/enums.py
from enum import Enum
from typing import NamedTuple
from fastapi import status


class Color(str, Enum):
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    BLUE = "\033[34m"

    def __str__(self):
        return self.value


class Environment(str, Enum):
    DEV = "dev"
    PROD = "prod"


class Backend(str, Enum):
    MEMORY = "memory"
    FILE = "file"


class ErrorInfo(NamedTuple):
    message: str
    http_status: int


class ErrorMessage(Enum):
    INVALID_ARGUMENT = ErrorInfo("Invalid argument", status.HTTP_400_BAD_REQUEST)
    UNAUTHENTICATED = ErrorInfo(
        "Authorization token is required", status.HTTP_401_UNAUTHORIZED
    )
    INVALID_TOKEN = ErrorInfo("Invalid token", status.HTTP_401_UNAUTHORIZED)
    NAMESPACE_MISMATCH = ErrorInfo(
        "Token not authorized for namespace", status.HTTP_401_UNAUTHORIZED
    )
    FORBIDDEN = ErrorInfo("Admin token required", status.HTTP_401_UNAUTHORIZED)
    CONFLICT = ErrorInfo("Token already exists", status.HTTP_400_BAD_REQUEST)
    NOT_FOUND = ErrorInfo("Not found", status.HTTP_404_NOT_FOUND)
    STORAGE_IO = ErrorInfo("Storage failure", status.HTTP_500_INTERNAL_SERVER_ERROR)
    UPSTREAM_ERROR = ErrorInfo("Upstream request failed", status.HTTP_502_BAD_GATEWAY)
    PAYLOAD_TOO_LARGE = ErrorInfo(
        "Config exceeds maximum size", status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    )
    INTERNAL_ERROR = ErrorInfo(
        "Internal Error", status.HTTP_500_INTERNAL_SERVER_ERROR
    )

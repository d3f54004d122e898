# controller/controller_dependencies.py
from typing import List, Optional
from fastapi import Depends, Header, Request
from fastapi_limiter.depends import RateLimiter
from config.settings import settings
from repository.config_repository import ConfigRepository
from service.config_service import ConfigService
from service.token_auth_service import TokenAuthService
from util.enums import ErrorMessage
from util.errors import AppError


def rate_limit_dependencies() -> List:
    # RateLimiter needs FastAPILimiter.init(), which only runs with Redis.
    if not settings.REDIS_URL:
        return []
    return [
        Depends(
            RateLimiter(
                times=settings.RATE_LIMIT_TIMES, seconds=settings.RATE_LIMIT_SECONDS
            )
        )
    ]


def get_store(request: Request) -> ConfigRepository:
    return request.app.state.store


def get_token_auth(request: Request) -> TokenAuthService:
    return request.app.state.auth


def get_config_service(
    store: ConfigRepository = Depends(get_store),
    auth: TokenAuthService = Depends(get_token_auth),
) -> ConfigService:
    return ConfigService(store, auth)


def get_bearer_token(authorization: Optional[str] = Header(default=None)) -> str:
    # "Bearer <t>" and bare "<t>" both pass; the registry strips the prefix.
    return authorization or ""


async def read_config_body(request: Request) -> bytes:
    max_bytes = settings.MAX_CONFIG_MB * 1024 * 1024
    too_large = AppError(
        ErrorMessage.PAYLOAD_TOO_LARGE.value.message,
        ErrorMessage.PAYLOAD_TOO_LARGE.value.http_status,
    )

    # Fast pre-check via Content-Length if present
    cl = request.headers.get("content-length")
    if cl and cl.isdigit() and int(cl) > max_bytes:
        raise too_large

    # Hard cap while streaming (works even if no Content-Length)
    chunks = []
    size = 0
    async for chunk in request.stream():
        size += len(chunk)
        if size > max_bytes:
            raise too_large
        chunks.append(chunk)
    return b"".join(chunks)

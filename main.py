# main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi_limiter import FastAPILimiter
from starlette.middleware.cors import CORSMiddleware
import routes
from config.cache import close_redis, get_redis
from config.settings import settings
from model.api import HealthResponse
from repository.config_repository import ConfigRepository
from repository.factory import build_config_repository
from service.token_auth_service import TokenAuthService
from util.constants import InternalURIs
from util.enums import Color, Environment, ErrorMessage
from util.errors import YamletError
from util.logger import init_logger

logger = logging.getLogger(__name__)


async def _real_ip(request: Request) -> str:
    if settings.TRUST_PROXY:
        fwd = request.headers.get("x-forwarded-for")
        if fwd:
            return fwd.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


@asynccontextmanager
async def lifespan(fastApi: FastAPI):
    init_logger()
    print(f"{Color.GREEN}Initializing...{Color.RESET}")
    if settings.REDIS_URL:
        try:
            redis = await get_redis()
            await FastAPILimiter.init(redis, identifier=_real_ip)
        except Exception as e:
            print("Failed to connect to Redis:", e)
            raise
    print(f"{Color.BLUE}Server Started{Color.RESET} backend={fastApi.state.store.backend.value}")

    try:
        yield
    finally:
        if settings.REDIS_URL:
            try:
                await close_redis()
            except Exception as e:
                print("Error closing Redis:", e)

        print(f"{Color.RED}Server Shutdown{Color.RESET}")


def _error_body(error: str, message: str) -> dict:
    return {"ok": False, "error": error, "message": message}


def create_app(
    store: Optional[ConfigRepository] = None,
    auth: Optional[TokenAuthService] = None,
) -> FastAPI:
    """
    Build the app around explicitly owned collaborators.
    Missing ones are constructed from settings.
    """
    app = FastAPI(title="yamlet", lifespan=lifespan)
    app.state.store = store if store is not None else build_config_repository(settings)
    app.state.auth = auth if auth is not None else TokenAuthService.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.ALLOWED_ORIGIN],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["Authorization", "Content-Type", "Accept"],
    )

    @app.get(InternalURIs.HEALTH, response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(ok=True, backend=app.state.store.backend.value)

    @app.exception_handler(YamletError)
    async def yamlet_error_handler(request: Request, exc: YamletError):
        if exc.http_status >= 500:
            logger.error("request.failed path=%s err=%s", request.url.path, exc.message)
        else:
            logger.info(
                "request.rejected path=%s error=%s", request.url.path, exc.kind.name.lower()
            )
        return JSONResponse(
            status_code=exc.http_status,
            content=_error_body(exc.kind.name.lower(), exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body("invalid_argument", "malformed request"),
        )

    @app.exception_handler(429)
    async def ratelimit_handler(request: Request, exc):
        return JSONResponse(
            status_code=429,
            content=_error_body("rate_limited", "Too many requests. Try again later."),
            headers={"Retry-After": str(settings.RATE_LIMIT_SECONDS)},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("request.unhandled path=%s", request.url.path)
        info = ErrorMessage.INTERNAL_ERROR.value
        return JSONResponse(
            status_code=info.http_status,
            content=_error_body("internal_error", info.message),
        )

    routes.register_routes(app)
    return app


app: FastAPI = create_app()


def run() -> None:
    import uvicorn

    reload = settings.APP_ENV == Environment.DEV
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=reload)


if __name__ == "__main__":
    run()

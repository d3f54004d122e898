# config/settings.py
import os
import sys
from typing import Optional
from dotenv import load_dotenv
from pydantic import ValidationError, Field
from pydantic_settings import BaseSettings
from util.enums import Environment


if os.getenv("APP_ENV", Environment.DEV) == Environment.DEV:
    load_dotenv()


class Settings(BaseSettings):
    # App
    APP_ENV: str = Field(default=Environment.DEV.value, validation_alias="APP_ENV")
    HOST: str = Field(default="127.0.0.1", validation_alias="HOST")
    PORT: int = Field(default=8080, validation_alias="PORT")

    # Storage
    USE_FILES: bool = Field(default=False, validation_alias="USE_FILES")
    DATA_DIR: str = Field(default="/data", validation_alias="DATA_DIR")
    MAX_CONFIG_MB: int = Field(default=1, validation_alias="MAX_CONFIG_MB")

    # Token bootstrap (read once at startup)
    # Empty falls back to the development admin token, with a warning.
    ADMIN_TOKEN: str = Field(default="", validation_alias="YAMLET_ADMIN_TOKEN")
    TOKENS: str = Field(default="", validation_alias="YAMLET_TOKENS")
    DEV_TOKENS: bool = Field(default=True, validation_alias="YAMLET_DEV_TOKENS")

    # CORS & Limits
    ALLOWED_ORIGIN: str = Field(default="*", validation_alias="ALLOWED_ORIGIN")
    TRUST_PROXY: bool = Field(default=False, validation_alias="TRUST_PROXY")
    REDIS_URL: Optional[str] = Field(default=None, validation_alias="REDIS_URL")
    RATE_LIMIT_TIMES: int = Field(default=120, validation_alias="RATE_LIMIT_TIMES")
    RATE_LIMIT_SECONDS: int = Field(default=60, validation_alias="RATE_LIMIT_SECONDS")

    # Logging knobs
    LOGGER_NAME: str = "yamlet"
    LOG_LEVEL: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    LOG_TO_FILE: bool = Field(default=False, validation_alias="LOG_TO_FILE")
    LOG_DIR: str = Field(default="logs", validation_alias="LOG_DIR")
    LOG_FILE_NAME: str = Field(default="yamlet.log", validation_alias="LOG_FILE_NAME")
    LOG_MAX_BYTES: int = Field(
        default=50 * 1024 * 1024, validation_alias="LOG_MAX_BYTES"
    )
    LOG_BACKUP_COUNT: int = Field(default=5, validation_alias="LOG_BACKUP_COUNT")


try:
    settings = Settings()
except ValidationError as e:
    print("❌ Missing/invalid environment variables:", file=sys.stderr)
    for err in e.errors():
        loc = ".".join(str(x) for x in err.get("loc", []))
        msg = err.get("msg", "")
        print(f" - {loc}: {msg}", file=sys.stderr)
    sys.exit(1)
except Exception as e:
    print(f"❌ Settings initialization failed: {e}", file=sys.stderr)
    sys.exit(1)

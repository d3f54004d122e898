# service/token_auth_service.py
import logging
from typing import Mapping, Optional, Union
from config.settings import Settings
from util.constants import DEV_ADMIN_TOKEN, DEV_TOKENS
from util.errors import (
    Conflict,
    Forbidden,
    InvalidArgument,
    InvalidToken,
    NamespaceMismatch,
    NotFound,
    Unauthenticated,
)
from util.functions import parse_token_bindings, strip_bearer
from util.locks import ReadWriteLock
from util.types import TokenBindings

logger = logging.getLogger(__name__)


class TokenAuthService:
    """
    Token -> namespace registry plus the one admin token.

    - The admin token is fixed at construction and never lives in the table.
    - Lookups share a read lock; create/revoke take the write lock.
    - When no bindings are supplied, the development tokens are loaded unless
      `dev_fallback` is False. Never rely on them outside local setups.
    """

    def __init__(
        self,
        admin_token: Optional[str] = None,
        bindings: Union[str, Mapping[str, str], None] = None,
        *,
        dev_fallback: bool = True,
    ) -> None:
        self._lock = ReadWriteLock()
        if not admin_token:
            logger.warning("auth.admin_token.default set YAMLET_ADMIN_TOKEN")
            admin_token = DEV_ADMIN_TOKEN
        self._admin_token: str = admin_token

        if isinstance(bindings, str):
            tokens = parse_token_bindings(bindings)
        else:
            tokens = {t: ns for t, ns in (bindings or {}).items() if t and ns}
        tokens.pop(self._admin_token, None)

        if not tokens and dev_fallback:
            logger.warning("auth.tokens.dev_fallback count=%d", len(DEV_TOKENS))
            tokens = dict(DEV_TOKENS)
        self._tokens: TokenBindings = tokens
        logger.info("auth.init tokens=%d", len(self._tokens))

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenAuthService":
        return cls(
            admin_token=settings.ADMIN_TOKEN,
            bindings=settings.TOKENS,
            dev_fallback=settings.DEV_TOKENS,
        )

    # ---------------- Namespace tokens ----------------

    def validate(self, namespace: str, token: Optional[str]) -> None:
        bound = self.namespace_for(token)
        if bound != namespace:
            raise NamespaceMismatch(f"token not authorized for namespace {namespace}")

    def namespace_for(self, token: Optional[str]) -> str:
        if not token:
            raise Unauthenticated()
        token = strip_bearer(token)
        with self._lock.read():
            namespace = self._tokens.get(token)
        if namespace is None:
            raise InvalidToken()
        return namespace

    # ---------------- Admin ----------------

    def is_admin(self, token: Optional[str]) -> bool:
        if not token:
            return False
        return strip_bearer(token) == self._admin_token

    def require_admin(self, admin_token: Optional[str], action: str) -> None:
        if not self.is_admin(admin_token):
            logger.warning("auth.admin.denied action=%s", action)
            raise Forbidden(f"admin token required for {action}")

    def create_token(
        self, admin_token: Optional[str], new_token: str, namespace: str
    ) -> None:
        self.require_admin(admin_token, "token creation")
        if not new_token or not namespace:
            raise InvalidArgument("token and namespace cannot be empty")
        with self._lock.write():
            if new_token in self._tokens:
                raise Conflict("token already exists")
            if new_token == self._admin_token:
                raise Conflict("cannot create token that conflicts with admin token")
            self._tokens[new_token] = namespace
        logger.info("auth.token.created ns=%s", namespace)

    def revoke_token(self, admin_token: Optional[str], token: str) -> None:
        self.require_admin(admin_token, "token revocation")
        if not token:
            raise InvalidArgument("token to revoke cannot be empty")
        if token == self._admin_token:
            raise Forbidden("cannot revoke admin token")
        with self._lock.write():
            namespace = self._tokens.pop(token, None)
        if namespace is None:
            raise NotFound("token not found")
        logger.info("auth.token.revoked ns=%s", namespace)

    def list_all(self, admin_token: Optional[str]) -> TokenBindings:
        self.require_admin(admin_token, "listing tokens")
        with self._lock.read():
            return dict(self._tokens)

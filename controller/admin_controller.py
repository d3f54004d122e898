# controller/admin_controller.py
from fastapi import APIRouter, Depends, status
from controller.controller_dependencies import (
    get_bearer_token,
    get_config_service,
    get_token_auth,
    rate_limit_dependencies,
)
from model.token import (
    CreateTokenRequest,
    CreateTokenResponse,
    ListNamespacesResponse,
    ListTokensResponse,
    RevokeTokenResponse,
)
from service.config_service import ConfigService
from service.token_auth_service import TokenAuthService
from util.constants import InternalURIs

admin_router = APIRouter(dependencies=rate_limit_dependencies())


@admin_router.post(
    InternalURIs.TOKENS,
    response_model=CreateTokenResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_token(
    payload: CreateTokenRequest,
    admin_token: str = Depends(get_bearer_token),
    auth: TokenAuthService = Depends(get_token_auth),
) -> CreateTokenResponse:
    auth.create_token(admin_token, payload.token, payload.namespace)
    return CreateTokenResponse(token=payload.token, namespace=payload.namespace)


@admin_router.get(InternalURIs.TOKENS, response_model=ListTokensResponse)
def list_tokens(
    admin_token: str = Depends(get_bearer_token),
    auth: TokenAuthService = Depends(get_token_auth),
) -> ListTokensResponse:
    tokens = auth.list_all(admin_token)
    return ListTokensResponse(tokens=tokens, count=len(tokens))


@admin_router.delete(InternalURIs.TOKEN, response_model=RevokeTokenResponse)
def revoke_token(
    token: str,
    admin_token: str = Depends(get_bearer_token),
    auth: TokenAuthService = Depends(get_token_auth),
) -> RevokeTokenResponse:
    auth.revoke_token(admin_token, token)
    return RevokeTokenResponse(token=token)


@admin_router.get(InternalURIs.ADMIN_NAMESPACES, response_model=ListNamespacesResponse)
def list_namespaces(
    admin_token: str = Depends(get_bearer_token),
    service: ConfigService = Depends(get_config_service),
) -> ListNamespacesResponse:
    namespaces = service.list_namespaces(admin_token)
    return ListNamespacesResponse(namespaces=namespaces, count=len(namespaces))

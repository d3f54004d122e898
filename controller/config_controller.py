# controller/config_controller.py
from fastapi import APIRouter, Depends, Response, status
from starlette.concurrency import run_in_threadpool
from controller.controller_dependencies import (
    get_bearer_token,
    get_config_service,
    rate_limit_dependencies,
    read_config_body,
)
from model.api import DeleteConfigResponse, ListConfigsResponse, StoreConfigResponse
from service.config_service import ConfigService
from util.constants import InternalURIs, YAML_MEDIA_TYPE

config_router = APIRouter(dependencies=rate_limit_dependencies())


@config_router.post(
    InternalURIs.CONFIG,
    response_model=StoreConfigResponse,
    status_code=status.HTTP_201_CREATED,
)
async def store_config(
    namespace: str,
    name: str,
    body: bytes = Depends(read_config_body),
    token: str = Depends(get_bearer_token),
    service: ConfigService = Depends(get_config_service),
) -> StoreConfigResponse:
    # Store locks are blocking; keep them off the event loop.
    size = await run_in_threadpool(service.store_config, namespace, name, token, body)
    return StoreConfigResponse(namespace=namespace, name=name, size=size)


@config_router.get(InternalURIs.CONFIG)
def get_config(
    namespace: str,
    name: str,
    token: str = Depends(get_bearer_token),
    service: ConfigService = Depends(get_config_service),
) -> Response:
    content = service.get_config(namespace, name, token)
    return Response(content=content, media_type=YAML_MEDIA_TYPE)


@config_router.delete(InternalURIs.CONFIG, response_model=DeleteConfigResponse)
def delete_config(
    namespace: str,
    name: str,
    token: str = Depends(get_bearer_token),
    service: ConfigService = Depends(get_config_service),
) -> DeleteConfigResponse:
    service.delete_config(namespace, name, token)
    return DeleteConfigResponse(namespace=namespace, name=name)


@config_router.get(InternalURIs.CONFIGS, response_model=ListConfigsResponse)
def list_configs(
    namespace: str,
    token: str = Depends(get_bearer_token),
    service: ConfigService = Depends(get_config_service),
) -> ListConfigsResponse:
    names = service.list_configs(namespace, token)
    return ListConfigsResponse(namespace=namespace, configs=names, count=len(names))

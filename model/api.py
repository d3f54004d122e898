# model/api.py
from typing import List
from pydantic import BaseModel


class HealthResponse(BaseModel):
    ok: bool
    backend: str


class StoreConfigResponse(BaseModel):
    message: str = "Config stored successfully"
    namespace: str
    name: str
    size: int


class DeleteConfigResponse(BaseModel):
    message: str = "Config deleted successfully"
    namespace: str
    name: str


class ListConfigsResponse(BaseModel):
    namespace: str
    configs: List[str]
    count: int

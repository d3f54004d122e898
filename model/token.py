# model/token.py
from typing import Dict, List
from pydantic import BaseModel


class CreateTokenRequest(BaseModel):
    # Emptiness is checked by the registry so it reports InvalidArgument.
    token: str
    namespace: str


class CreateTokenResponse(BaseModel):
    message: str = "Token created successfully"
    token: str
    namespace: str


class RevokeTokenResponse(BaseModel):
    message: str = "Token revoked successfully"
    token: str


class ListTokensResponse(BaseModel):
    tokens: Dict[str, str]
    count: int


class ListNamespacesResponse(BaseModel):
    namespaces: List[str]
    count: int

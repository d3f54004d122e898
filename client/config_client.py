# client/config_client.py
import logging
from typing import List, Optional
import httpx
from util.constants import BEARER_PREFIX, InternalURIs
from util.errors import NotFound, UpstreamError

logger = logging.getLogger(__name__)


class ConfigClient:
    """
    Thin HTTP client for applications pulling their configuration.

    Usage:
      with ConfigClient("http://yamlet:8080", "dev-token") as c:
          raw = c.fetch("dev", "app.yaml")

    Pass `client` to reuse a prepared httpx.Client (its base_url wins).
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._owns_client = client is None
        self._http = client or httpx.Client(
            base_url=base_url, timeout=httpx.Timeout(timeout, connect=5.0)
        )
        self._headers = {"Authorization": f"{BEARER_PREFIX}{token}"}

    def __enter__(self) -> "ConfigClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    @staticmethod
    def _config_path(namespace: str, name: str) -> str:
        return InternalURIs.CONFIG.format(namespace=namespace, name=name)

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            res = self._http.request(method, path, headers=self._headers, **kwargs)
        except httpx.RequestError as e:
            logger.error("client.request_error method=%s path=%s err=%s", method, path, type(e).__name__)
            raise UpstreamError(f"request to {path} failed") from e

        if res.status_code == 404:
            raise NotFound(self._message(res))
        if res.status_code // 100 != 2:
            logger.warning("client.bad_status method=%s path=%s status=%d", method, path, res.status_code)
            raise UpstreamError(self._message(res), status_code=res.status_code)
        return res

    @staticmethod
    def _message(res: httpx.Response) -> str:
        try:
            return res.json().get("message") or res.text
        except ValueError:
            return res.text

    def fetch(self, namespace: str, name: str) -> bytes:
        return self._request("GET", self._config_path(namespace, name)).content

    def list(self, namespace: str) -> List[str]:
        path = InternalURIs.CONFIGS.format(namespace=namespace)
        return list(self._request("GET", path).json().get("configs", []))

    def push(self, namespace: str, name: str, content: bytes) -> int:
        res = self._request("POST", self._config_path(namespace, name), content=content)
        return int(res.json().get("size", len(content)))

    def remove(self, namespace: str, name: str) -> None:
        self._request("DELETE", self._config_path(namespace, name))

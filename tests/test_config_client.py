import httpx
import pytest
from client.config_client import ConfigClient
from util.errors import NotFound, UpstreamError


@pytest.fixture
def config_client(client):
    return ConfigClient("http://testserver", "dev-token", client=client)


def test_push_fetch_list_remove(config_client):
    assert config_client.push("dev", "app.yaml", b"key: value") == 10
    assert config_client.fetch("dev", "app.yaml") == b"key: value"
    assert config_client.list("dev") == ["app.yaml"]
    config_client.remove("dev", "app.yaml")
    assert config_client.list("dev") == []


def test_fetch_missing_raises_not_found(config_client):
    with pytest.raises(NotFound):
        config_client.fetch("dev", "missing.yaml")


def test_wrong_namespace_surfaces_status(config_client):
    with pytest.raises(UpstreamError) as err:
        config_client.fetch("test", "app.yaml")
    assert err.value.status_code == 401


def test_transport_failure_is_upstream_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    http = httpx.Client(base_url="http://yamlet", transport=httpx.MockTransport(handler))
    with ConfigClient("http://yamlet", "dev-token", client=http) as c:
        with pytest.raises(UpstreamError):
            c.fetch("dev", "app.yaml")


def test_sends_bearer_header():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["auth"] = request.headers.get("authorization")
        return httpx.Response(200, content=b"a: 1")

    http = httpx.Client(base_url="http://yamlet", transport=httpx.MockTransport(handler))
    c = ConfigClient("http://yamlet", "dev-token", client=http)
    assert c.fetch("dev", "app.yaml") == b"a: 1"
    assert seen["auth"] == "Bearer dev-token"

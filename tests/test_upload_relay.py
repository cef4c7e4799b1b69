"""
Tests for the image upload relay.

The external file host is replaced with ``httpx.MockTransport``.
"""

import httpx
import pytest

from test_fixtures import client
from main import app
from adapters.upload_adapter import UploadRelay, normalize_hosted_url
from api.dependencies import get_upload_relay
from app.exceptions import UpstreamServiceError

HOST = "https://envs.sh"


@pytest.fixture
def host_requests():
    """Install a relay whose file host answers with a token; collect what it receives."""
    received = []

    def handler(request: httpx.Request) -> httpx.Response:
        received.append(request)
        return httpx.Response(200, text=f"{HOST}/Xy7.jpg\n")

    relay = UploadRelay(HOST, transport=httpx.MockTransport(handler))
    app.dependency_overrides[get_upload_relay] = lambda: relay
    yield received
    app.dependency_overrides.pop(get_upload_relay, None)


@pytest.mark.parametrize(
    "body, expected",
    [
        ("https://envs.sh/abc.png\n", "https://envs.sh/abc.png"),
        ("abc.png\n", "https://envs.sh/abc.png"),
        ("https://envs.sh/https://envs.sh/abc.png", "https://envs.sh/abc.png"),
        ("  https://envs.sh/abc.png\r\n", "https://envs.sh/abc.png"),
    ],
)
def test_normalize_hosted_url(body, expected):
    assert normalize_hosted_url(HOST, body) == expected


def test_relay_posts_multipart_file():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["content_type"] = request.headers["content-type"]
        seen["body"] = request.read()
        return httpx.Response(200, text="meal.jpg\n")

    relay = UploadRelay(HOST + "/", transport=httpx.MockTransport(handler))

    url = relay.relay(b"\xff\xd8jpegdata", "meal.jpg", "image/jpeg")

    assert url == "https://envs.sh/meal.jpg"
    assert seen["method"] == "POST"
    assert seen["url"].rstrip("/") == HOST
    assert seen["content_type"].startswith("multipart/form-data")
    assert b'name="file"; filename="meal.jpg"' in seen["body"]
    assert b"jpegdata" in seen["body"]


def test_relay_non_200_is_upstream_error():
    relay = UploadRelay(
        HOST, transport=httpx.MockTransport(lambda r: httpx.Response(503, text="busy"))
    )

    with pytest.raises(UpstreamServiceError, match="Error uploading file to envs.sh"):
        relay.relay(b"data", "a.png", "image/png")


def test_relay_transport_error_is_upstream_error():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    relay = UploadRelay(HOST, transport=httpx.MockTransport(handler))

    with pytest.raises(UpstreamServiceError, match="Error processing file upload"):
        relay.relay(b"data", "a.png", "image/png")


@pytest.mark.parametrize("path", ["/api/scanfood", "/api/uploadImage"])
def test_upload_endpoints_return_url(host_requests, path):
    r = client.post(path, files={"file": ("plate.jpg", b"imagebytes", "image/jpeg")})

    assert r.status_code == 200
    assert r.json() == {"url": "https://envs.sh/Xy7.jpg"}
    assert len(host_requests) == 1


@pytest.mark.parametrize("path", ["/api/scanfood", "/api/uploadImage"])
def test_upload_without_file(host_requests, path):
    r = client.post(path, data={"note": "no file here"})

    assert r.status_code == 400
    assert r.json()["message"] == "No file uploaded."
    assert host_requests == []


def test_upload_rejected_by_host_is_500():
    relay = UploadRelay(
        HOST, transport=httpx.MockTransport(lambda r: httpx.Response(500, text="oops"))
    )
    app.dependency_overrides[get_upload_relay] = lambda: relay
    try:
        r = client.post(
            "/api/uploadImage", files={"file": ("plate.jpg", b"imagebytes", "image/jpeg")}
        )
    finally:
        app.dependency_overrides.pop(get_upload_relay, None)

    assert r.status_code == 500
    assert r.json()["message"] == "Error uploading file to envs.sh"


def test_upload_host_unreachable_is_500():
    def handler(request):
        raise httpx.ConnectTimeout("timed out", request=request)

    relay = UploadRelay(HOST, transport=httpx.MockTransport(handler))
    app.dependency_overrides[get_upload_relay] = lambda: relay
    try:
        r = client.post(
            "/api/scanfood", files={"file": ("plate.jpg", b"imagebytes", "image/jpeg")}
        )
    finally:
        app.dependency_overrides.pop(get_upload_relay, None)

    assert r.status_code == 500
    assert r.json()["message"] == "Error processing file upload"

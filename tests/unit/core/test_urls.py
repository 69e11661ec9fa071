import pytest

from apiref.core.urls import is_remote_url


@pytest.mark.parametrize(
    "value",
    ["https://api.example.com/openapi.json", "http://localhost:8000/openapi.json", "HTTPS://EXAMPLE.COM/x"],
)
def test_remote_urls(value: str) -> None:
    assert is_remote_url(value)


@pytest.mark.parametrize(
    "value",
    [
        "openapi.json",
        "/abs/openapi.json",
        "ftp://example.com/openapi.json",
        "https:///openapi.json",
        "http://[::1",
        "https://example.com:abc/x",
        "https://example.com:99999/openapi.json",
        "https://:8080/openapi.json",
    ],
)
def test_not_remote_urls(value: str) -> None:
    assert not is_remote_url(value)

import re
import urllib.parse

import pytest

from multipass import ConfigurationError, Multipass, UrlConstructionError, ValidationError
from multipass.urls import build_login_url, parse_store_url
from tests.receiver_helpers import receive

LOGIN_URL = re.compile(
    r"^https://your-store\.myshopify\.com/account/login/multipass/[A-Za-z0-9_-]+$"
)
ISO_MILLIS = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


def _token_from(url: str) -> str:
    path = urllib.parse.urlparse(url).path
    return urllib.parse.unquote(path.rsplit("/", 1)[-1])


def test_example_store_login_url(multipass, secret) -> None:
    url = multipass.generate_login_url({"email": "example@example.com"})

    assert LOGIN_URL.match(url)
    decoded = receive(_token_from(url), secret)
    assert decoded["email"] == "example@example.com"
    assert ISO_MILLIS.match(decoded["created_at"])
    assert set(decoded) == {"email", "created_at"}


def test_login_url_token_is_url_safe(multipass, customer) -> None:
    for _ in range(20):
        url = multipass.generate_login_url(customer)
        token = url.rsplit("/", 1)[-1]
        assert not set(token) & {"+", "/", "=", "%"}


def test_store_url_without_trailing_slash(secret) -> None:
    multipass = Multipass(secret, "https://your-store.myshopify.com")

    assert LOGIN_URL.match(multipass.generate_login_url({"email": "a@example.com"}))


def test_store_url_path_is_replaced(secret) -> None:
    multipass = Multipass(secret, "https://shop.example.com/en/collections/")

    url = multipass.generate_login_url({"email": "a@example.com"})

    assert url.startswith("https://shop.example.com/account/login/multipass/")


@pytest.mark.parametrize("data", [None, "example@example.com", 7])
def test_login_url_rejects_bad_customer_data(multipass, data) -> None:
    with pytest.raises(ValidationError):
        multipass.generate_login_url(data)


def test_build_login_url_percent_encodes_token() -> None:
    url = build_login_url("https://shop.example.com/", "a+b/c=")

    assert url == "https://shop.example.com/account/login/multipass/a%2Bb%2Fc%3D"


@pytest.mark.parametrize("token", ["", None, b"token"])
def test_build_login_url_rejects_bad_token(token) -> None:
    with pytest.raises(UrlConstructionError, match="Invalid token generated"):
        build_login_url("https://shop.example.com/", token)


def test_build_login_url_rejects_relative_base() -> None:
    with pytest.raises(UrlConstructionError, match="Failed to construct login URL"):
        build_login_url("not a url", "abc")


def test_parse_store_url_accepts_http_and_ports() -> None:
    assert parse_store_url("http://localhost:3000") == "http://localhost:3000"


@pytest.mark.parametrize("url", ["http://host:99999/", "http://[::1/", "/relative/path"])
def test_parse_store_url_rejects_malformed(url) -> None:
    with pytest.raises(ConfigurationError):
        parse_store_url(url)


def test_custom_scheme_store_url_resolves(secret) -> None:
    multipass = Multipass(secret, "myshop://store.example.com/")

    url = multipass.generate_login_url({"email": "a@example.com"})

    assert re.match(r"^myshop://store\.example\.com/account/login/multipass/[A-Za-z0-9_-]+$", url)
    assert receive(_token_from(url), secret)["email"] == "a@example.com"


def test_build_login_url_drops_base_query_and_fragment() -> None:
    url = build_login_url("https://shop.example.com/en?ref=nav#top", "abc")

    assert url == "https://shop.example.com/account/login/multipass/abc"

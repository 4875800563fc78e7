import pytest

from multipass import Multipass

SECRET = "multipass-secret"
STORE_URL = "https://your-store.myshopify.com/"


@pytest.fixture
def secret() -> str:
    return SECRET


@pytest.fixture
def store_url() -> str:
    return STORE_URL


@pytest.fixture
def multipass() -> Multipass:
    return Multipass(SECRET, STORE_URL)


@pytest.fixture
def customer() -> dict:
    return {
        "email": "example@example.com",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "tag_string": "vip,newsletter",
        "identifier": "cust-42",
        "remote_ip": "203.0.113.7",
        "return_to": "https://your-store.myshopify.com/cart",
        "addresses": [
            {
                "address1": "12 Analytical Row",
                "city": "London",
                "country": "United Kingdom",
                "first_name": "Ada",
                "last_name": "Lovelace",
                "phone": "+44 20 7946 0000",
                "province": "England",
                "zip": "SW1A 1AA",
                "province_code": "ENG",
                "country_code": "GB",
                "default": True,
            }
        ],
    }

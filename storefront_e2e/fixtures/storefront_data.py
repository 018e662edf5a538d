# storefront_e2e/fixtures/storefront_data.py

"""
Shared test data for the storefront suite.

Every test reads users, endpoints and catalogue names from here instead of
redefining them per file.
"""

import os
import re
import uuid
from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class UserCredentials:
    email: str
    password: str
    first_name: str = ""
    last_name: str = ""
    role: str = "customer"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


# --- Users ---
VALID_USER = UserCredentials(
    email="test@example.com",
    password="Ecomm@123",
    first_name="Test",
    last_name="User",
)

ADMIN_USER = UserCredentials(
    email="admin@example.com",
    password="admin123",
    first_name="Admin",
    last_name="User",
    role="admin",
)

# Deliberately wrong credentials for negative login tests
INVALID_USER = UserCredentials(email="nobody@example.com", password="wrong-password")


def default_test_user() -> UserCredentials:
    """VALID_USER, with TEST_USER_EMAIL / TEST_USER_PASSWORD overriding its credentials."""
    return replace(
        VALID_USER,
        email=os.getenv("TEST_USER_EMAIL", VALID_USER.email),
        password=os.getenv("TEST_USER_PASSWORD", VALID_USER.password),
    )


def new_user(first_name: str = "New", last_name: str = "User", password: str = "Test123!") -> UserCredentials:
    """A user that does not exist yet (unique email per call)."""
    return UserCredentials(
        email=f"test-{uuid.uuid4().hex[:12]}@example.com",
        password=password,
        first_name=first_name,
        last_name=last_name,
    )


# --- API endpoints ---
ENDPOINTS = {
    "auth": {
        "login": "/api/auth/login",
        "signup": "/api/auth/signup",
        "logout": "/api/auth/logout",
    },
    "products": {
        "list": "/api/products",
        "details": "/api/products/:id",
        "search": "/api/products/search",
    },
    "cart": {
        "get": "/api/cart",
        "add": "/api/cart/add",
        "update": "/api/cart/update",
        "remove": "/api/cart/remove",
    },
    "orders": {
        "list": "/api/orders",
        "create": "/api/orders",
        "details": "/api/orders/:id",
    },
}

_PARAM = re.compile(r":(\w+)")


def endpoint(group: str, name: str, **params) -> str:
    """Looks up an API path and fills its :param placeholders."""
    try:
        template = ENDPOINTS[group][name]
    except KeyError:
        raise KeyError(f"Unknown endpoint {group}.{name}")

    def _substitute(match):
        key = match.group(1)
        if key not in params:
            raise ValueError(f"Endpoint {group}.{name} needs parameter {key!r}")
        return str(params[key])

    return _PARAM.sub(_substitute, template)


# --- Catalogue (seeded products of the storefront) ---
@dataclass(frozen=True)
class Product:
    name: str
    category: str
    price: float


PRODUCTS = (
    Product(name="Laptop Computer", category="Electronics", price=999.99),
    Product(name="Wireless Headphones", category="Electronics", price=199.99),
    Product(name="Running Shoes", category="Sports", price=129.99),
)

CATEGORIES = tuple(sorted({product.category for product in PRODUCTS}))

# Search terms that match / never match the seeded catalogue
SEARCH_TERM = "Laptop"
NO_RESULTS_SEARCH_TERM = "zzz-no-such-product"


def find_product(name: str) -> Optional[Product]:
    for product in PRODUCTS:
        if product.name.lower() == name.lower():
            return product
    return None


# --- Checkout ---
SHIPPING_ADDRESS = {
    "street": "123 Main Street",
    "city": "San Francisco",
    "state": "CA",
    "zipCode": "94102",
    "country": "United States",
}

PAYMENT_METHOD = "credit-card"

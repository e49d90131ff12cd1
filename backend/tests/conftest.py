"""
Pytest fixtures and configuration for Storefront tests

This file provides shared fixtures that can be used across all test modules.

Author: TM3
Date: 2026-10-17
"""
import os

import pytest
from dotenv import load_dotenv

# Cheap bcrypt rounds for tests; must be set before storefront reads its settings
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")

# Load environment variables for tests
load_dotenv()

from storefront.domain.product import Product
from storefront.domain.user import User
from storefront.repositories.cart_repository import CartRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.repositories.user_repository import UserRepository

VARIANT_ID = "7d9e1f3a-5b2c-4d6e-8f0a-1b3c5d7e9f2a"
OWNER_ID = "3f2a7c1e-9b4d-4e8a-a6f1-2c5d8e9b0a1f"


@pytest.fixture
def user_props():
    """
    Provides valid raw props for User.create
    """
    return {
        "first_name": "John",
        "last_name": "Doe",
        "email": "john@doe.com",
        "password": "Password1!",
    }


@pytest.fixture
def user(user_props):
    """
    Provides a valid User entity

    Scope: function (fresh user per test, no refresh token)
    """
    return User.create(user_props).value


@pytest.fixture
def variant_id():
    """
    Provides the id of the "T-shirt M" variant of the product fixture
    """
    return VARIANT_ID


@pytest.fixture
def owner_id():
    """
    Provides a cart owner id
    """
    return OWNER_ID


@pytest.fixture
def product():
    """
    Provides a product with two priced variants
    """
    return Product.create(
        {
            "name": "T-shirt",
            "variants": [
                {"id": VARIANT_ID, "name": "T-shirt M", "price": 1999},
                {"name": "T-shirt XL", "description": "Extra large", "price": 2499},
            ],
        }
    ).value


@pytest.fixture
def user_repository():
    """
    Provides an empty in-memory UserRepository

    Scope: function (new repository per test)
    """
    return UserRepository()


@pytest.fixture
def product_repository():
    """
    Provides an empty in-memory ProductRepository

    Scope: function (new repository per test)
    """
    return ProductRepository()


@pytest.fixture
def cart_repository():
    """
    Provides an empty in-memory CartRepository

    Scope: function (new repository per test)
    """
    return CartRepository()


@pytest.fixture
def token_issuer():
    """
    Provides a deterministic token issuer counting issued tokens
    """
    issued = []

    def issue(user):
        issued.append(user.id)
        return f"token-{user.email}-{len(issued)}"

    return issue

"""
Service Layer - Use Cases

Services orchestrate domain models and repositories and return Results;
expected failures never raise.

Author: TM3
Date: 2026-10-16
"""
from storefront.services.user_service import UserService
from storefront.services.product_service import ProductService
from storefront.services.cart_service import CartService

__all__ = ['UserService', 'ProductService', 'CartService']

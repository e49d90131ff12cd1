"""
Repository Layer - Data Access

Repositories keep plain rows and hand back domain models rebuilt through
the domain factories.

Author: TM3
Date: 2026-10-16
"""
from storefront.repositories.user_repository import UserRepository, UserRepositoryExceptions
from storefront.repositories.product_repository import ProductRepository, ProductRepositoryExceptions
from storefront.repositories.cart_repository import CartRepository

__all__ = [
    'UserRepository',
    'UserRepositoryExceptions',
    'ProductRepository',
    'ProductRepositoryExceptions',
    'CartRepository',
]

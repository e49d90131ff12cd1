"""
Domain Layer - Business Entities

Value objects, entities and aggregate roots. Factories validate their input
and return a Result instead of raising.

Author: TM3
Date: 2026-10-14
"""
from storefront.domain.base import AggregateRoot, Entity, UniqueEntityId, UniqueEntityIdExceptions, ValueObject
from storefront.domain.duration import Duration
from storefront.domain.date_time import DateTime, DateTimeExceptions
from storefront.domain.user import User, UserRole, UserRoles
from storefront.domain.product import Price, PriceFormat, Product, ProductTitle, ProductVariant
from storefront.domain.cart import Cart, CartCreationDate, CartItem, CartUpdateDate

__all__ = [
    'AggregateRoot', 'Entity', 'UniqueEntityId', 'UniqueEntityIdExceptions', 'ValueObject',
    'Duration', 'DateTime', 'DateTimeExceptions',
    'User', 'UserRole', 'UserRoles',
    'Price', 'PriceFormat', 'Product', 'ProductTitle', 'ProductVariant',
    'Cart', 'CartCreationDate', 'CartItem', 'CartUpdateDate',
]

"""
Cart Repository - Data Access Layer for Carts

Stores carts with their items as plain rows and returns Cart domain models
rebuilt through `Cart.create`. Dates are kept as ISO-8601 strings with
microseconds.

Author: TM3
Date: 2026-10-16
"""
import logging
from typing import Dict, Union

from storefront.common.option import Option
from storefront.domain.base import UniqueEntityId
from storefront.domain.cart import Cart, CreateCartProps
from storefront.domain.date_time import DateTime

logger = logging.getLogger(__name__)


class CartRepository:
    """In-memory repository for Cart data access"""

    def __init__(self):
        self._rows: Dict[str, dict] = {}

    @staticmethod
    def _format_date(value: DateTime) -> str:
        return value.to_datetime().isoformat()

    @classmethod
    def _map_cart_to_row(cls, cart: Cart) -> dict:
        return {
            'id': str(cart.id),
            'owner_id': str(cart.owner_id),
            'created_at': cls._format_date(cart.created_at),
            'updated_at': cls._format_date(cart.updated_at),
            'items': [
                {
                    'id': str(item.id),
                    'quantity': item.quantity,
                    'product_variant': item.product_variant.to_create_props().model_dump(),
                }
                for item in cart.items
            ],
        }

    @staticmethod
    def _map_row_to_cart(row: dict) -> Cart:
        """Helper method to map a stored row to a Cart domain model."""
        cart_id = UniqueEntityId.create(row['id']).unwrap()
        props = CreateCartProps(
            owner_id=row['owner_id'],
            created_at=row['created_at'],
            updated_at=row['updated_at'],
            items=row['items'],
        )
        return Cart.create(props, cart_id).unwrap()

    def save(self, cart: Cart) -> Cart:
        """
        Insert or replace a cart

        Args:
            cart: Cart to store

        Returns:
            The stored cart
        """
        is_new = str(cart.id) not in self._rows
        self._rows[str(cart.id)] = self._map_cart_to_row(cart)
        if is_new:
            logger.info(f"Cart created: {cart.id} for owner {cart.owner_id}")
        else:
            logger.debug(f"Cart saved: {cart.id} ({len(cart.items)} items)")
        return cart

    def find_by_id(self, cart_id: Union[UniqueEntityId, str]) -> Option[Cart]:
        return Option.from_nullable(self._rows.get(str(cart_id))).map(self._map_row_to_cart)

    def find_by_owner(self, owner_id: Union[UniqueEntityId, str]) -> Option[Cart]:
        return Option.from_nullable(
            next((row for row in self._rows.values() if row['owner_id'] == str(owner_id)), None)
        ).map(self._map_row_to_cart)

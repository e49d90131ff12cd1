"""
Cart Service
Cart creation, adding product variants and reading cart content

Author: TM3
Date: 2026-10-16
"""
import logging
from enum import Enum
from typing import Union

from pydantic import BaseModel

from storefront.common.result import Err, Result
from storefront.domain.base import UniqueEntityId
from storefront.domain.cart import Cart, CartExceptions, CartItemExceptions, CreateCartProps
from storefront.domain.product import ProductVariant
from storefront.repositories.cart_repository import CartRepository
from storefront.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductVariantToCartRequest(BaseModel):
    cart_id: str
    product_variant_id: str
    quantity: int = 1


class AddProductVariantToCartExceptions(str, Enum):
    CART_NOT_FOUND = "AddProductVariantToCartCartNotFound"
    PRODUCT_VARIANT_NOT_FOUND = "AddProductVariantToCartProductVariantNotFound"


class GetCartContentExceptions(str, Enum):
    CART_NOT_FOUND = "GetCartContentCartNotFound"


class CartService:
    """
    Service for shopping carts

    Carts are loaded from the cart repository, changed through the Cart
    aggregate, and saved back.
    """

    def __init__(self, cart_repository: CartRepository, product_repository: ProductRepository):
        self.cart_repository = cart_repository
        self.product_repository = product_repository

    def create_cart(self, owner_id: Union[UniqueEntityId, str]) -> Result[Cart, CartExceptions]:
        """
        Create and store an empty cart for an owner

        Returns:
            Ok(Cart), or Err(NOT_VALID_UUID) for a malformed owner id
        """
        return Cart.create(CreateCartProps(owner_id=owner_id)).map(self.cart_repository.save)

    def add_product_variant_to_cart(
        self, request: AddProductVariantToCartRequest
    ) -> Result[Cart, Union[AddProductVariantToCartExceptions, CartItemExceptions]]:
        """
        Add a product variant to a cart

        Args:
            request: Cart id, product variant id and quantity (default 1)

        Returns:
            Ok(updated Cart), Err(CART_NOT_FOUND), Err(PRODUCT_VARIANT_NOT_FOUND)
            or the cart's own validation failure
        """
        found_cart = self.cart_repository.find_by_id(request.cart_id)
        if found_cart.is_none():
            logger.warning(f"Cart not found: {request.cart_id}")
            return Err(AddProductVariantToCartExceptions.CART_NOT_FOUND)

        found_variant = self.product_repository.find_variant_by_id(request.product_variant_id)
        if found_variant.is_none():
            logger.warning(f"Product variant not found: {request.product_variant_id}")
            return Err(AddProductVariantToCartExceptions.PRODUCT_VARIANT_NOT_FOUND)

        cart = found_cart.unwrap()
        variant: ProductVariant = found_variant.unwrap()

        result = cart.add_product_variant(variant, request.quantity)
        if result.is_failure:
            return result

        logger.info(f"Added {request.quantity} x {variant.name} to cart {cart.id}")
        return result.map(lambda _: self.cart_repository.save(cart))

    def get_cart_content(self, cart_id: Union[UniqueEntityId, str]) -> Result[Cart, GetCartContentExceptions]:
        return self.cart_repository.find_by_id(cart_id).ok_or(GetCartContentExceptions.CART_NOT_FOUND)

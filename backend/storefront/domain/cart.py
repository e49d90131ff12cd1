"""
Cart Domain Models

A cart belongs to one owner and holds cart items, each pairing a product
variant with a positive quantity. Creation and update dates are value objects
that refuse dates in the future.

Author: TM3
Date: 2026-10-14
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Set, Union

from pydantic import BaseModel, ConfigDict

from storefront.common.either import Either, Left, Right
from storefront.common.option import Nothing, Option, Some
from storefront.common.result import Err, Ok, Result
from storefront.domain.base import AggregateRoot, Entity, UniqueEntityId, UniqueEntityIdExceptions, ValueObject
from storefront.domain.date_time import DateTime, DateTimeExceptions
from storefront.domain.product import (
    CreateProductVariantProps,
    Price,
    PriceExceptions,
    ProductVariant,
    ProductVariantExceptions,
)

DateInput = Option[Either[DateTime, str]]


def to_option_either(value: Optional[Union[DateTime, str]]) -> DateInput:
    """
    Wrap an optional date input for the cart date value objects

    Returns:
        Some(Left(date_time)) for a DateTime, Some(Right(text)) for a string,
        Nothing() when no value was given
    """
    if isinstance(value, DateTime):
        return Some(Left(value))
    if isinstance(value, str):
        return Some(Right(value))
    return Nothing()


def _resolve_date(value: DateInput) -> Result[DateTime, DateTimeExceptions]:
    # Missing date means "now"; strings go through the ISO-8601 parser
    return value.match(
        lambda either: either.match(Ok, DateTime.parse),
        lambda: Ok(DateTime.now()),
    )


@dataclass(frozen=True)
class DateProps:
    value: DateTime


# ============================================================================
# Cart dates
# ============================================================================

class CartCreationDateExceptions(str, Enum):
    MUST_BE_IN_THE_PAST = "CartCreationDateMustBeInThePast"


class CartCreationDate(ValueObject[DateProps]):
    @classmethod
    def create(
        cls, value: DateInput
    ) -> Result["CartCreationDate", Union[CartCreationDateExceptions, DateTimeExceptions]]:
        return (
            _resolve_date(value)
            .and_then(cls._check_date_is_in_the_past)
            .map(lambda date_time: cls(DateProps(value=date_time)))
        )

    @property
    def value(self) -> DateTime:
        return self.props.value

    @staticmethod
    def _check_date_is_in_the_past(date_time: DateTime) -> Result[DateTime, CartCreationDateExceptions]:
        if not date_time.is_same_or_before(DateTime.now()):
            return Err(CartCreationDateExceptions.MUST_BE_IN_THE_PAST)
        return Ok(date_time)


class CartUpdateDateExceptions(str, Enum):
    MUST_BE_IN_THE_PAST = "CartUpdateDateMustBeInThePast"


class CartUpdateDate(ValueObject[DateProps]):
    @classmethod
    def create(
        cls, value: DateInput
    ) -> Result["CartUpdateDate", Union[CartUpdateDateExceptions, DateTimeExceptions]]:
        return (
            _resolve_date(value)
            .and_then(cls._check_date_is_in_the_past)
            .map(lambda date_time: cls(DateProps(value=date_time)))
        )

    @classmethod
    def now(cls) -> "CartUpdateDate":
        return cls(DateProps(value=DateTime.now()))

    @property
    def value(self) -> DateTime:
        return self.props.value

    @staticmethod
    def _check_date_is_in_the_past(date_time: DateTime) -> Result[DateTime, CartUpdateDateExceptions]:
        if not date_time.is_same_or_before(DateTime.now()):
            return Err(CartUpdateDateExceptions.MUST_BE_IN_THE_PAST)
        return Ok(date_time)


# ============================================================================
# Cart item
# ============================================================================

class CartItemExceptions(str, Enum):
    QUANTITY_MUST_BE_POSITIVE = "CartItemQuantityMustBePositive"


@dataclass
class CartItemProps:
    product_variant: ProductVariant
    quantity: int


class CreateCartItemProps(BaseModel):
    id: Optional[str] = None
    product_variant: CreateProductVariantProps
    quantity: int = 1


CartItemCreationExceptions = Union[
    CartItemExceptions, ProductVariantExceptions, PriceExceptions, UniqueEntityIdExceptions
]


class CartItem(Entity[CartItemProps]):
    """A product variant in a cart, with its quantity"""

    @classmethod
    def create(
        cls,
        props: Union[CreateCartItemProps, Dict[str, Any]],
        id: Optional[UniqueEntityId] = None,
    ) -> Result["CartItem", CartItemCreationExceptions]:
        if not isinstance(props, CreateCartItemProps):
            props = CreateCartItemProps(**props)

        combined = Result.combine(
            ProductVariant.create(props.product_variant),
            cls.validate_quantity(props.quantity),
            UniqueEntityId.create(id if id is not None else props.id),
        )

        return combined.map(
            lambda values: cls(CartItemProps(product_variant=values[0], quantity=values[1]), values[2])
        )

    @classmethod
    def of_variant(
        cls, product_variant: ProductVariant, quantity: int = 1
    ) -> Result["CartItem", CartItemExceptions]:
        """Build an item around an already validated variant"""
        return cls.validate_quantity(quantity).map(
            lambda valid: cls(CartItemProps(product_variant=product_variant, quantity=valid))
        )

    @staticmethod
    def validate_quantity(quantity: int) -> Result[int, CartItemExceptions]:
        if quantity <= 0:
            return Err(CartItemExceptions.QUANTITY_MUST_BE_POSITIVE)
        return Ok(quantity)

    @property
    def product_variant(self) -> ProductVariant:
        return self.props.product_variant

    @property
    def quantity(self) -> int:
        return self.props.quantity

    @property
    def subtotal(self) -> Price:
        return self.props.product_variant.price.multiply(self.props.quantity)

    def add_quantity(self, quantity: int) -> Result[None, CartItemExceptions]:
        return self.validate_quantity(quantity).map(self._increment)

    def _increment(self, quantity: int) -> None:
        self.props.quantity += quantity


# ============================================================================
# Cart
# ============================================================================

@dataclass
class CartProps:
    owner_id: UniqueEntityId
    created_at: CartCreationDate
    updated_at: CartUpdateDate
    items: Set[CartItem] = field(default_factory=set)


class CreateCartProps(BaseModel):
    """
    Raw input for Cart.create

    Fields:
        owner_id: Owner's UniqueEntityId or UUID string
        created_at: DateTime or ISO-8601 string, defaults to now
        updated_at: DateTime or ISO-8601 string, defaults to now
        items: Initial cart items
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    owner_id: Union[UniqueEntityId, str]
    created_at: Optional[Union[DateTime, str]] = None
    updated_at: Optional[Union[DateTime, str]] = None
    items: Optional[List[CreateCartItemProps]] = None


CartExceptions = Union[
    UniqueEntityIdExceptions,
    CartCreationDateExceptions,
    CartUpdateDateExceptions,
    DateTimeExceptions,
    CartItemExceptions,
    ProductVariantExceptions,
    PriceExceptions,
]


class Cart(AggregateRoot[CartProps]):
    """
    Cart aggregate

    Items are only added or changed through the cart, which keeps one item
    per product variant and stamps `updated_at` on every change.
    """

    @classmethod
    def create(
        cls,
        props: Union[CreateCartProps, Dict[str, Any]],
        id: Optional[UniqueEntityId] = None,
    ) -> Result["Cart", CartExceptions]:
        if not isinstance(props, CreateCartProps):
            props = CreateCartProps(**props)

        combined = Result.combine(
            UniqueEntityId.create(props.owner_id),
            CartCreationDate.create(to_option_either(props.created_at)),
            CartUpdateDate.create(to_option_either(props.updated_at)),
            *[CartItem.create(item) for item in props.items or []],
        )

        return combined.map(
            lambda values: cls(
                CartProps(
                    owner_id=values[0],
                    created_at=values[1],
                    updated_at=values[2],
                    items=cls._merge_items(values[3:]),
                ),
                id,
            )
        )

    @staticmethod
    def _merge_items(items: List[CartItem]) -> Set[CartItem]:
        """Fold items sharing a product variant into the first one, summing quantities"""
        by_variant: Dict[str, CartItem] = {}
        for item in items:
            key = str(item.product_variant.id)
            if key in by_variant:
                by_variant[key]._increment(item.quantity)
            else:
                by_variant[key] = item
        return set(by_variant.values())

    @property
    def owner_id(self) -> UniqueEntityId:
        return self.props.owner_id

    @property
    def created_at(self) -> DateTime:
        return self.props.created_at.value

    @property
    def updated_at(self) -> DateTime:
        return self.props.updated_at.value

    @property
    def items(self) -> List[CartItem]:
        return list(self.props.items)

    @property
    def total(self) -> Price:
        total = Price.free()
        for item in self.props.items:
            total = total.add(item.subtotal)
        return total

    def find_item(self, variant_id: Union[UniqueEntityId, str]) -> Option[CartItem]:
        wanted = str(variant_id)
        return Option.from_nullable(
            next((item for item in self.props.items if str(item.product_variant.id) == wanted), None)
        )

    def add_product_variant(
        self, product_variant: ProductVariant, quantity: int = 1
    ) -> Result[None, CartItemExceptions]:
        """
        Put a product variant in the cart

        Args:
            product_variant: Variant to add
            quantity: How many, must be positive

        Returns:
            Ok(None), or Err(QUANTITY_MUST_BE_POSITIVE) leaving the cart unchanged
        """
        result = self.find_item(product_variant.id).match(
            lambda item: item.add_quantity(quantity),
            lambda: CartItem.of_variant(product_variant, quantity).map(self.props.items.add),
        )

        if result.is_success:
            self.props.updated_at = CartUpdateDate.now()

        return result

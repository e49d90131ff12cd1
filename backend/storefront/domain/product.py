"""
Product Domain Models

A product carries a validated title and a set of variants; each variant
holds its own name, optional description and Price. Prices are stored as
integer cents and rendered with CLDR locale data.

Author: TM3
Date: 2026-10-14
"""
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional, Set, Union

from babel import Locale
from babel.numbers import format_currency
from pydantic import BaseModel

from storefront.common.option import Option
from storefront.common.result import Err, Ok, Result
from storefront.core.config import settings
from storefront.domain.base import AggregateRoot, Entity, UniqueEntityId, UniqueEntityIdExceptions, ValueObject


class PriceFormat(str, Enum):
    """
    How a price is rendered as a string

    SHORT drops the cents when there are none ($20 instead of $20.00),
    LONG always shows them.
    """
    SHORT = "SHORT"
    LONG = "LONG"


# ============================================================================
# Price
# ============================================================================

class PriceExceptions(str, Enum):
    MUST_BE_GREATER_THAN_ZERO = "PriceMustBeGreaterThanZero"


@dataclass(frozen=True)
class PriceProps:
    value: int


class Price(ValueObject[PriceProps]):
    """
    Monetary amount in cents.

    Zero is allowed (free products), negative amounts are not.
    """

    @classmethod
    def create(cls, cents: int) -> Result["Price", PriceExceptions]:
        if not cls._validate_amount(cents):
            return Err(PriceExceptions.MUST_BE_GREATER_THAN_ZERO)
        return Ok(cls(PriceProps(value=cents)))

    @classmethod
    def free(cls) -> "Price":
        return cls(PriceProps(value=0))

    @property
    def as_cents(self) -> int:
        return self.props.value

    @property
    def as_unit(self) -> float:
        """Amount in currency units (e.g. dollars), cents / 100"""
        return self.props.value / 100

    def add(self, other: "Price") -> "Price":
        return Price(PriceProps(value=self.as_cents + other.as_cents))

    def multiply(self, quantity: int) -> "Price":
        return Price(PriceProps(value=self.as_cents * quantity))

    def to_string(
        self,
        format: PriceFormat = PriceFormat.LONG,
        locale: Optional[str] = None,
        currency: Optional[str] = None,
    ) -> str:
        """
        Render the price for display

        Args:
            format: SHORT ("$20") or LONG ("$20.00")
            locale: BCP 47 tag such as "en-US" or "fr-FR". Defaults to settings
            currency: ISO 4217 code. Defaults to settings

        Returns:
            Localized currency string, e.g. "20,00 €" for fr-FR / EUR
        """
        babel_locale = Locale.parse(locale or settings.PRICE_DEFAULT_LOCALE, sep="-")
        currency = currency or settings.PRICE_DEFAULT_CURRENCY
        amount = Decimal(self.as_cents) / 100

        if format == PriceFormat.SHORT:
            # Same locale pattern, with optional fraction digits
            pattern = babel_locale.currency_formats["standard"].pattern.replace("0.00", "0.##")
            return format_currency(amount, currency, format=pattern, locale=babel_locale, currency_digits=False)

        return format_currency(amount, currency, locale=babel_locale)

    def __str__(self) -> str:
        return self.to_string()

    @staticmethod
    def _validate_amount(amount: int) -> bool:
        return amount >= 0


# ============================================================================
# Product title
# ============================================================================

class ProductTitleExceptions(str, Enum):
    INVALID_LENGTH = "ProductTitleInvalidLength"


@dataclass(frozen=True)
class ProductTitleProps:
    value: str


class ProductTitle(ValueObject[ProductTitleProps]):
    @classmethod
    def create(cls, title: str) -> Result["ProductTitle", ProductTitleExceptions]:
        if not _has_valid_length(title):
            return Err(ProductTitleExceptions.INVALID_LENGTH)
        return Ok(cls(ProductTitleProps(value=title)))


def _has_valid_length(value: str) -> bool:
    return settings.PRODUCT_TITLE_MIN_LENGTH <= len(value) <= settings.PRODUCT_TITLE_MAX_LENGTH


# ============================================================================
# Product variant
# ============================================================================

class ProductVariantExceptions(str, Enum):
    NAME_LENGTH = "ProductVariantNameLength"


@dataclass
class ProductVariantProps:
    name: str
    price: Price
    description: Optional[str] = None


class CreateProductVariantProps(BaseModel):
    """
    Raw input for ProductVariant.create

    Fields:
        id: Existing variant id (UUID), when rebuilding a stored variant
        name: Variant name, 3 to 20 characters
        description: Optional description
        price: Price in cents, 0 for a free variant
    """
    id: Optional[str] = None
    name: str
    description: Optional[str] = None
    price: int


class ProductVariant(Entity[ProductVariantProps]):
    """
    A specific version of a product.

    For example, a product can be a t-shirt and a variant the t-shirt in
    size M.
    """

    @classmethod
    def create(
        cls,
        props: Union[CreateProductVariantProps, Dict[str, Any]],
        id: Optional[UniqueEntityId] = None,
    ) -> Result["ProductVariant", Union[ProductVariantExceptions, PriceExceptions, UniqueEntityIdExceptions]]:
        if not isinstance(props, CreateProductVariantProps):
            props = CreateProductVariantProps(**props)

        combined = Result.combine(
            cls._validate_name(props.name),
            Price.create(props.price),
            UniqueEntityId.create(id if id is not None else props.id),
        )

        return combined.map(
            lambda values: cls(
                ProductVariantProps(name=values[0], price=values[1], description=props.description),
                values[2],
            )
        )

    @property
    def name(self) -> str:
        return self.props.name

    @property
    def price(self) -> Price:
        return self.props.price

    def to_create_props(self) -> CreateProductVariantProps:
        """Raw props that rebuild this exact variant"""
        return CreateProductVariantProps(
            id=str(self.id),
            name=self.props.name,
            description=self.props.description,
            price=self.props.price.as_cents,
        )

    @staticmethod
    def _validate_name(name: str) -> Result[str, ProductVariantExceptions]:
        if not _has_valid_length(name):
            return Err(ProductVariantExceptions.NAME_LENGTH)
        return Ok(name)


# ============================================================================
# Product
# ============================================================================

@dataclass
class ProductProps:
    title: ProductTitle
    variants: Set[ProductVariant] = field(default_factory=set)


class CreateProductProps(BaseModel):
    """
    Raw input for Product.create

    When no variants are given, a single free variant named after the
    product is created.
    """
    name: str
    description: Optional[str] = None
    variants: Optional[List[CreateProductVariantProps]] = None


ProductExceptions = Union[
    ProductTitleExceptions, ProductVariantExceptions, PriceExceptions, UniqueEntityIdExceptions
]


class Product(AggregateRoot[ProductProps]):
    """Product aggregate: the only way to add variants to a product"""

    @classmethod
    def create(
        cls,
        props: Union[CreateProductProps, Dict[str, Any]],
        id: Optional[UniqueEntityId] = None,
    ) -> Result["Product", ProductExceptions]:
        if not isinstance(props, CreateProductProps):
            props = CreateProductProps(**props)

        if props.variants is not None:
            variant_props = props.variants
        else:
            variant_props = [
                CreateProductVariantProps(name=props.name, description=props.description, price=0)
            ]

        combined = Result.combine(
            ProductTitle.create(props.name),
            *[ProductVariant.create(variant) for variant in variant_props],
        )

        return combined.map(
            lambda values: cls(ProductProps(title=values[0], variants=set(values[1:])), id)
        )

    @property
    def title(self) -> str:
        return self.props.title.props.value

    @property
    def variants(self) -> List[ProductVariant]:
        return list(self.props.variants)

    def find_variant(self, variant_id: Union[UniqueEntityId, str]) -> Option[ProductVariant]:
        wanted = str(variant_id)
        return Option.from_nullable(
            next((variant for variant in self.props.variants if str(variant.id) == wanted), None)
        )

    def add_variant(
        self, props: Union[CreateProductVariantProps, Dict[str, Any]]
    ) -> Result[ProductVariant, Union[ProductVariantExceptions, PriceExceptions, UniqueEntityIdExceptions]]:
        result = ProductVariant.create(props)
        if result.is_success:
            self.props.variants.add(result.value)
        return result

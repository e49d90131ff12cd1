"""
Product Repository - Data Access Layer for Products

Stores products and their variants as plain rows and returns Product domain
models rebuilt through `Product.create`.

Author: TM3
Date: 2026-10-16
"""
import logging
from enum import Enum
from typing import Dict, List, Union

from storefront.common.option import Nothing, Option
from storefront.common.result import Err, Ok, Result
from storefront.domain.base import UniqueEntityId
from storefront.domain.product import CreateProductProps, Product, ProductVariant

logger = logging.getLogger(__name__)


class ProductRepositoryExceptions(str, Enum):
    PRODUCT_ALREADY_EXISTS = "ProductAlreadyExists"


class ProductRepository:
    """
    In-memory repository for Product data access

    Returns Product domain models, not raw dictionaries.
    """

    def __init__(self):
        self._rows: Dict[str, dict] = {}

    @staticmethod
    def _map_product_to_row(product: Product) -> dict:
        return {
            'id': str(product.id),
            'title': product.title,
            'variants': [
                variant.to_create_props().model_dump() for variant in product.variants
            ],
        }

    @staticmethod
    def _map_row_to_product(row: dict) -> Product:
        """Helper method to map a stored row to a Product domain model."""
        product_id = UniqueEntityId.create(row['id']).unwrap()
        props = CreateProductProps(name=row['title'], variants=row['variants'])
        return Product.create(props, product_id).unwrap()

    def create(self, product: Product) -> Result[Product, ProductRepositoryExceptions]:
        if str(product.id) in self._rows:
            return Err(ProductRepositoryExceptions.PRODUCT_ALREADY_EXISTS)

        self._rows[str(product.id)] = self._map_product_to_row(product)
        logger.info(f"Product created: {product.title} ({len(product.variants)} variants)")
        return Ok(product)

    def find_by_id(self, product_id: Union[UniqueEntityId, str]) -> Option[Product]:
        """
        Find product by ID

        Args:
            product_id: Product UUID

        Returns:
            Some(Product), or Nothing() if not found
        """
        return Option.from_nullable(self._rows.get(str(product_id))).map(self._map_row_to_product)

    def find_all(self) -> List[Product]:
        return [self._map_row_to_product(row) for row in self._rows.values()]

    def find_variant_by_id(self, variant_id: Union[UniqueEntityId, str]) -> Option[ProductVariant]:
        """
        Find a product variant across every product

        Args:
            variant_id: Variant UUID

        Returns:
            Some(ProductVariant), or Nothing() if no product holds it
        """
        for row in self._rows.values():
            if any(variant['id'] == str(variant_id) for variant in row['variants']):
                return self._map_row_to_product(row).find_variant(variant_id)

        logger.debug(f"Product variant not found: {variant_id}")
        return Nothing()

"""
Product Service
Creates catalog products

Author: TM3
Date: 2026-10-16
"""
import logging
from typing import Optional, Union

from pydantic import BaseModel

from storefront.common.result import Result
from storefront.domain.product import (
    CreateProductProps,
    CreateProductVariantProps,
    Product,
    ProductExceptions,
)
from storefront.repositories.product_repository import ProductRepository, ProductRepositoryExceptions

logger = logging.getLogger(__name__)


class CreateProductRequest(BaseModel):
    name: str
    description: Optional[str] = None


class ProductService:
    """Service for the product catalog"""

    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    def create_product(
        self, request: CreateProductRequest
    ) -> Result[Product, Union[ProductExceptions, ProductRepositoryExceptions]]:
        """
        Create a product with a single free variant named after it

        Args:
            request: Product name and optional description

        Returns:
            Ok(Product) once stored, or the first validation failure
        """
        product_result = Product.create(
            CreateProductProps(
                name=request.name,
                description=request.description,
                variants=[
                    CreateProductVariantProps(
                        name=request.name,
                        description=request.description,
                        price=0,
                    )
                ],
            )
        )

        if product_result.is_failure:
            logger.info(f"Product '{request.name}' rejected: {product_result.error.value}")
            return product_result

        return product_result.and_then(self.product_repository.create)

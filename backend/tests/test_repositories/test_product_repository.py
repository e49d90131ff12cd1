"""
Unit tests for ProductRepository

These tests validate repository logic against the in-memory store.

Author: TM3
Date: 2026-10-17
"""
from storefront.common.option import Nothing
from storefront.domain.product import Product, ProductVariant
from storefront.repositories.product_repository import ProductRepositoryExceptions


class TestProductRepository:
    """Test ProductRepository methods"""

    def test_create_and_find_by_id(self, product_repository, product):
        """Test find_by_id returns an equal Product domain model"""
        # Act
        product_repository.create(product)
        found = product_repository.find_by_id(product.id)

        # Assert
        loaded = found.unwrap()
        assert isinstance(loaded, Product)
        assert loaded == product
        assert loaded.title == "T-shirt"
        assert set(loaded.variants) == set(product.variants)

    def test_variant_props_survive_round_trip(self, product_repository, product, variant_id):
        product_repository.create(product)

        loaded = product_repository.find_by_id(product.id).unwrap()

        assert loaded.find_variant(variant_id).unwrap().props == product.find_variant(variant_id).unwrap().props

    def test_create_twice_is_rejected(self, product_repository, product):
        product_repository.create(product)

        assert product_repository.create(product).error == ProductRepositoryExceptions.PRODUCT_ALREADY_EXISTS

    def test_find_by_id_missing(self, product_repository):
        assert product_repository.find_by_id("00000000-0000-0000-0000-000000000000") == Nothing()

    def test_find_all(self, product_repository, product):
        mug = Product.create({"name": "Mug"}).value
        product_repository.create(product)
        product_repository.create(mug)

        assert {p.title for p in product_repository.find_all()} == {"T-shirt", "Mug"}

    def test_find_variant_by_id(self, product_repository, product, variant_id):
        """Test a variant is found across stored products"""
        product_repository.create(product)

        variant = product_repository.find_variant_by_id(variant_id).unwrap()

        assert isinstance(variant, ProductVariant)
        assert variant.name == "T-shirt M"
        assert variant.price.as_cents == 1999

    def test_find_variant_by_id_missing(self, product_repository, product):
        product_repository.create(product)

        assert product_repository.find_variant_by_id("00000000-0000-0000-0000-000000000000").is_none()

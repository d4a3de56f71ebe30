"""Consolidated data layer tests.

Covers the Product entity (construction, equality, wire shape), the
ProductTable persistence model and the ProductRepository against an
in-memory SQLite database.
"""

from datetime import datetime

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from src.catalog.entities.service.product import (
    Product,
    ProductCreate,
    ProductRepository,
    ProductTable,
)


class TestProductEntity:
    """Test Product domain entity."""

    def test_product_creation(self):
        product = Product(id=1, name="laptop", price=999)

        assert product.id == 1
        assert product.name == "laptop"
        assert product.price == 999
        assert product.created_at is None

    def test_product_equality_ignores_timestamp(self):
        """Should compare products by their business attributes."""
        first = Product(id=1, name="laptop", price=999, created_at=datetime(2024, 1, 1))
        second = Product(id=1, name="laptop", price=999)
        other = Product(id=2, name="laptop", price=999)

        assert first == second
        assert first != other
        assert hash(first) == hash(second)

    def test_to_json_without_timestamp(self):
        """Products without a timestamp serialize without createdAt."""
        product = Product(id=3, name="mouse", price=25)

        assert product.to_json() == {"id": 3, "name": "mouse", "price": 25}

    def test_to_json_uses_created_at_alias(self):
        product = Product(
            id=1, name="laptop", price=999, created_at=datetime(2024, 5, 1, 12, 30)
        )

        data = product.to_json()

        assert "created_at" not in data
        assert data["createdAt"] == "2024-05-01T12:30:00"

    def test_product_create_fields_are_optional(self):
        """The create payload accepts missing fields without validation errors."""
        payload = ProductCreate()

        assert payload.name is None
        assert payload.price is None

    def test_product_create_coerces_numeric_strings(self):
        payload = ProductCreate.model_validate({"name": "desk", "price": "120"})

        assert payload.price == 120


class TestProductTable:
    """Test Product database table operations."""

    def test_product_table_creation(self, session: Session):
        row = ProductTable(name="Database", price=10)

        session.add(row)
        session.commit()
        session.refresh(row)

        assert row.id is not None
        saved = session.get(ProductTable, row.id)
        assert saved is not None
        assert saved.name == "Database"
        assert saved.created_at is not None

    def test_ids_autoincrement(self, session: Session):
        first = ProductTable(name="a", price=1)
        second = ProductTable(name="b", price=2)
        session.add_all([first, second])
        session.commit()

        ids = session.exec(select(ProductTable.id).order_by(ProductTable.id)).all()
        assert ids == [1, 2]

    def test_name_is_required(self, session: Session):
        session.add(ProductTable(name=None, price=5))

        with pytest.raises(IntegrityError):
            session.commit()

    def test_entity_from_table_model(self):
        row = ProductTable(id=7, name="Lamp", price=40, created_at=datetime(2024, 1, 1))

        product = Product.model_validate(row, from_attributes=True)

        assert product.id == 7
        assert product.name == "Lamp"
        assert product.created_at == datetime(2024, 1, 1)


class TestProductRepository:
    """Test Product repository operations."""

    @pytest.fixture
    def product_repo(self, session: Session) -> ProductRepository:
        return ProductRepository(session)

    def test_create_product(self, product_repo: ProductRepository):
        created = product_repo.create(name="laptop", price=999)

        assert created.id == 1
        assert created.name == "laptop"
        assert created.price == 999
        assert created.created_at is not None

    def test_get_product_by_id(self, product_repo: ProductRepository):
        created = product_repo.create(name="Retrieve", price=1)

        retrieved = product_repo.get(created.id)

        assert retrieved is not None
        assert retrieved == created

    def test_get_nonexistent_product(self, product_repo: ProductRepository):
        assert product_repo.get(999) is None

    def test_get_returns_domain_entity(self, product_repo: ProductRepository):
        created = product_repo.create(name="Entity", price=3)

        result = product_repo.get(created.id)

        assert isinstance(result, Product)
        assert not isinstance(result, ProductTable)

    def test_list_all_orders_by_id(self, product_repo: ProductRepository):
        product_repo.create(name="first", price=1)
        product_repo.create(name="second", price=2)
        product_repo.create(name="third", price=3)

        products = product_repo.list_all()

        assert [p.name for p in products] == ["first", "second", "third"]
        assert [p.id for p in products] == [1, 2, 3]

    def test_list_all_empty(self, product_repo: ProductRepository):
        assert product_repo.list_all() == []

    def test_create_flushes_without_committing(
        self, product_repo: ProductRepository, session: Session
    ):
        product_repo.create(name="pending", price=1)
        session.rollback()

        assert product_repo.list_all() == []

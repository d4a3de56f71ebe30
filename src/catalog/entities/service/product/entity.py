"""Entity: Product."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """Product entity representing a product in the catalog.

    ``name`` and ``price`` are required when a product is created through the
    database store, where the table enforces them. The in-memory store keeps
    whatever it was given, so both may be None there.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Identifier assigned by the store")
    name: str | None = Field(default=None, description="Product name")
    price: int | None = Field(default=None, description="Price in whole units")
    created_at: datetime | None = Field(
        default=None,
        serialization_alias="createdAt",
        description="Insertion time; only set by the database store",
    )

    def to_json(self) -> dict[str, Any]:
        """Dump to the wire shape, omitting ``createdAt`` when the store has none."""
        exclude = {"created_at"} if self.created_at is None else None
        return self.model_dump(mode="json", by_alias=True, exclude=exclude)

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.price == other.price
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.name,
            self.price,
        ))


class ProductCreate(BaseModel):
    """Request body for creating a product.

    Both fields are optional: the values are forwarded to the store as given
    and the store decides whether they can be persisted.
    """

    name: str | None = None
    price: int | None = None

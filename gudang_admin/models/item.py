"""Item (barang) schema for goods listing and detail."""

from pydantic import BaseModel, Field

Identifier = int | str


class Item(BaseModel):
    """Schema for an item record, rendered verbatim from the backend.

    Attributes:
        id: Backend identifier
        name: Item name (nama)
        category: Item category (kategori)
        brand: Brand (merk)
        total_stock: Total quantity in stock across warehouses
    """

    id: Identifier
    name: str | None = Field(default=None, alias="nama")
    category: str | None = Field(default=None, alias="kategori")
    brand: str | None = Field(default=None, alias="merk")
    total_stock: int | float | None = Field(default=None, alias="totalStock")

    model_config = {"populate_by_name": True}

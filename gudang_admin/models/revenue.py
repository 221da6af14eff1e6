"""Revenue (penerimaan) schema for the revenue table."""

from pydantic import BaseModel, Field

from gudang_admin.models.item import Identifier


class Revenue(BaseModel):
    """Schema for a revenue entry."""

    id: Identifier
    revenue_type: str | None = Field(default=None, alias="jenisPenerimaan")
    amount: int | float | str | None = Field(default=None, alias="jumlah")
    source: str | None = Field(default=None, alias="sumberPenerimaan")
    date: str | None = Field(default=None, alias="tanggal")

    model_config = {"populate_by_name": True}

"""Schemas and value objects for the admin frontend."""

from gudang_admin.models.item import Item
from gudang_admin.models.revenue import Revenue
from gudang_admin.models.warehouse import (
    Address,
    DraftField,
    Supervisor,
    Warehouse,
    WarehouseAddress,
    WarehouseDraft,
)

__all__ = [
    "Address",
    "DraftField",
    "Item",
    "Revenue",
    "Supervisor",
    "Warehouse",
    "WarehouseAddress",
    "WarehouseDraft",
]

"""Warehouse (gudang) records and the creation draft."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from gudang_admin.models.item import Identifier


class DraftField(str, Enum):
    """Fields of the warehouse-creation form.

    Each value is the dotted form/wire path of the field, so nested address
    fields read as ``alamatGudang.<name>``. Declaration order is the order the
    fields appear on the form.
    """

    NAME = "nama"
    DESCRIPTION = "deskripsi"
    CAPACITY = "kapasitas"
    SUPERVISOR = "kepalaGudangId"
    STREET = "alamatGudang.alamat"
    CITY = "alamatGudang.kota"
    PROVINCE = "alamatGudang.provinsi"
    POSTAL_CODE = "alamatGudang.kodePos"

    @property
    def html_id(self) -> str:
        """Element id used by the form template (last path segment)."""
        return self.value.rsplit(".", 1)[-1]

    def read(self, draft: "WarehouseDraft") -> str:
        """Return this field's current value from a draft."""
        return _READERS[self](draft)


@dataclass(frozen=True)
class Address:
    """Nested address value object of a warehouse draft."""

    street: str = ""
    city: str = ""
    province: str = ""
    postal_code: str = ""


@dataclass(frozen=True)
class WarehouseDraft:
    """In-progress, unsaved warehouse-creation form state.

    Values are kept exactly as entered; validation decides whether they are
    acceptable for submission.

    Attributes:
        name: Warehouse name (required)
        description: Free-text description (optional)
        capacity: Capacity as typed; must parse as a number
        supervisor_id: Selected supervisor id, empty when none is chosen
        address: Nested address; postal code must be all digits
    """

    name: str = ""
    description: str = ""
    capacity: str = ""
    supervisor_id: str = ""
    address: Address = field(default_factory=Address)

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "WarehouseDraft":
        """Build a draft from submitted form data keyed by dotted paths."""

        def value(f: DraftField) -> str:
            raw = form.get(f.value)
            return "" if raw is None else str(raw)

        return cls(
            name=value(DraftField.NAME),
            description=value(DraftField.DESCRIPTION),
            capacity=value(DraftField.CAPACITY),
            supervisor_id=value(DraftField.SUPERVISOR),
            address=Address(
                street=value(DraftField.STREET),
                city=value(DraftField.CITY),
                province=value(DraftField.PROVINCE),
                postal_code=value(DraftField.POSTAL_CODE),
            ),
        )

    def to_payload(self) -> dict[str, Any]:
        """Serialize the draft into the backend's JSON body shape."""
        return {
            "nama": self.name,
            "deskripsi": self.description,
            "kapasitas": self.capacity,
            "kepalaGudangId": self.supervisor_id,
            "alamatGudang": {
                "alamat": self.address.street,
                "kota": self.address.city,
                "provinsi": self.address.province,
                "kodePos": self.address.postal_code,
            },
        }


_READERS = {
    DraftField.NAME: lambda d: d.name,
    DraftField.DESCRIPTION: lambda d: d.description,
    DraftField.CAPACITY: lambda d: d.capacity,
    DraftField.SUPERVISOR: lambda d: d.supervisor_id,
    DraftField.STREET: lambda d: d.address.street,
    DraftField.CITY: lambda d: d.address.city,
    DraftField.PROVINCE: lambda d: d.address.province,
    DraftField.POSTAL_CODE: lambda d: d.address.postal_code,
}


class Supervisor(BaseModel):
    """Schema for a warehouse supervisor (kepala gudang) user."""

    id: Identifier
    name: str

    model_config = {"populate_by_name": True}


class WarehouseAddress(BaseModel):
    """Schema for a warehouse address as returned by the backend."""

    street: str | None = Field(default=None, alias="alamat")
    city: str | None = Field(default=None, alias="kota")
    province: str | None = Field(default=None, alias="provinsi")
    postal_code: str | None = Field(default=None, alias="kodePos")

    model_config = {"populate_by_name": True}


class Warehouse(BaseModel):
    """Schema for a warehouse row in the warehouse listing."""

    id: Identifier
    name: str | None = Field(default=None, alias="nama")
    description: str | None = Field(default=None, alias="deskripsi")
    capacity: int | float | str | None = Field(default=None, alias="kapasitas")
    supervisor: Supervisor | None = Field(default=None, alias="kepalaGudang")
    address: WarehouseAddress | None = Field(default=None, alias="alamatGudang")

    model_config = {"populate_by_name": True}

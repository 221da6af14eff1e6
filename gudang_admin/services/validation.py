"""Field-level validation of the warehouse-creation draft."""

import re
from dataclasses import dataclass, field

from gudang_admin.models.warehouse import DraftField, WarehouseDraft

POSTAL_CODE_PATTERN = re.compile(r"[0-9]+")

# Numeric string grammar of the browser form: surrounding whitespace, signed
# decimal or exponent form, signed Infinity, unsigned hex/octal/binary
# literals. A blank string counts as zero.
NUMBER_PATTERN = re.compile(
    r"""\s*
    (?:
        [+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)
        |0[xX][0-9a-fA-F]+
        |0[oO][0-7]+
        |0[bB][01]+
    )?
    \s*""",
    re.VERBOSE,
)

REQUIRED_MESSAGES: dict[DraftField, str] = {
    DraftField.NAME: "Nama gudang harus diisi",
    DraftField.STREET: "Alamat harus diisi",
    DraftField.CITY: "Kota harus diisi",
    DraftField.PROVINCE: "Provinsi harus diisi",
    DraftField.POSTAL_CODE: "Kode pos harus diisi",
}

CAPACITY_REQUIRED = "Kapasitas gudang harus diisi"
CAPACITY_NOT_NUMERIC = "Kapasitas harus berupa angka"
POSTAL_CODE_NOT_NUMERIC = "Kode pos harus berupa angka"


@dataclass
class ValidationResult:
    """Outcome of validating a draft.

    ``errors`` maps each violated field to its message. An empty mapping
    means the draft may be submitted.
    """

    errors: dict[DraftField, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        """Whether the draft passed every rule."""
        return not self.errors

    @property
    def first_field(self) -> DraftField | None:
        """The first errored field in form order, used to place focus."""
        for f in DraftField:
            if f in self.errors:
                return f
        return None

    def message_for(self, f: DraftField) -> str | None:
        """Message for a field, or None when it has no error."""
        return self.errors.get(f)

    def clear(self, f: DraftField) -> None:
        """Drop the error recorded for a field."""
        self.errors.pop(f, None)


def is_number(value: str) -> bool:
    """Check whether a string reads as a number in the form's numeric grammar.

    Underscore separators, non-ASCII digits and ``inf``/``nan`` spellings are
    not numbers.
    """
    return NUMBER_PATTERN.fullmatch(value) is not None


def validate_draft(draft: WarehouseDraft) -> ValidationResult:
    """Validate a warehouse draft against every rule in one pass.

    Rules are independent; every violation is collected so the form can show
    all messages at once. Supervisor selection is optional and never flagged.
    Capacity is only required to be non-empty as typed, so whitespace passes
    the required check.

    Args:
        draft: The draft to check.

    Returns:
        ValidationResult keyed by the violated fields.
    """
    result = ValidationResult()

    for f, message in REQUIRED_MESSAGES.items():
        if not f.read(draft).strip():
            result.errors[f] = message

    if not draft.capacity:
        result.errors[DraftField.CAPACITY] = CAPACITY_REQUIRED
    elif not is_number(draft.capacity):
        result.errors[DraftField.CAPACITY] = CAPACITY_NOT_NUMERIC

    # A non-empty postal code that is not all digits reports the format
    # message, even when it is blank after trimming.
    postal_code = draft.address.postal_code
    if postal_code and not POSTAL_CODE_PATTERN.fullmatch(postal_code):
        result.errors[DraftField.POSTAL_CODE] = POSTAL_CODE_NOT_NUMERIC

    return result

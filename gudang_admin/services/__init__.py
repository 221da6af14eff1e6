"""Business logic services for the admin frontend."""

from gudang_admin.services.backend import (
    BackendAPIError,
    BackendAuthError,
    BackendClient,
)
from gudang_admin.services.creation_flow import (
    ConfirmIntent,
    ConfirmOutcome,
    FormState,
    InvalidTransitionError,
    OutcomeKind,
    WarehouseCreationFlow,
)
from gudang_admin.services.listing import Listing, load_listing
from gudang_admin.services.validation import ValidationResult, validate_draft

__all__ = [
    "BackendAPIError",
    "BackendAuthError",
    "BackendClient",
    "ConfirmIntent",
    "ConfirmOutcome",
    "FormState",
    "InvalidTransitionError",
    "Listing",
    "OutcomeKind",
    "ValidationResult",
    "WarehouseCreationFlow",
    "load_listing",
    "validate_draft",
]

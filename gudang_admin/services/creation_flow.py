"""State machine for the warehouse-creation form.

The flow moves between three states:

- EDITING: the user fills in the draft (initial state)
- CONFIRMING: a confirmation step is shown, tagged with an explicit intent
  (create the warehouse, or discard the draft)
- SUBMITTING: the create call is in flight

Validation gates EDITING -> CONFIRMING for the create intent. A failed
submission returns to EDITING with the draft intact.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import ValidationError

from gudang_admin.config import settings
from gudang_admin.models.warehouse import DraftField, Supervisor, WarehouseDraft
from gudang_admin.services.backend import BackendAPIError, BackendClient
from gudang_admin.services.validation import ValidationResult, validate_draft

logger = logging.getLogger(__name__)

CREATED_MESSAGE = "Gudang berhasil ditambahkan!"
CREATE_FAILED_MESSAGE = "Gagal menambahkan gudang. Silakan coba lagi."
SUPERVISORS_FAILED_MESSAGE = "Gagal memuat daftar kepala gudang"
FIX_ERRORS_MESSAGE = "Mohon perbaiki kesalahan pada formulir"


class FormState(str, Enum):
    """States of the warehouse-creation flow."""

    EDITING = "editing"
    CONFIRMING = "confirming"
    SUBMITTING = "submitting"


class ConfirmIntent(str, Enum):
    """What the confirmation step is asking the user to acknowledge."""

    CREATE = "create"
    DISCARD = "discard"


class OutcomeKind(str, Enum):
    """Result of confirming the confirmation step."""

    CREATED = "created"
    DISCARDED = "discarded"
    FAILED = "failed"


class InvalidTransitionError(Exception):
    """Raised when an action is not allowed in the flow's current state."""

    def __init__(self, action: str, state: FormState) -> None:
        super().__init__(f"Cannot {action} while {state.value}")
        self.action = action
        self.state = state


@dataclass
class ConfirmOutcome:
    """What happened after the user confirmed.

    Attributes:
        kind: Created, discarded, or failed
        message: User-facing notification text
        warehouse: Backend response body on creation
    """

    kind: OutcomeKind
    message: str | None = None
    warehouse: dict[str, Any] | None = None


def failure_message(error: BackendAPIError) -> str:
    """Notification text for a failed create call."""
    if error.message:
        return f"Gagal menambahkan gudang: {error.message}"
    return CREATE_FAILED_MESSAGE


@dataclass
class WarehouseCreationFlow:
    """Per-visit state of the warehouse-creation form."""

    state: FormState = FormState.EDITING
    intent: ConfirmIntent | None = None
    draft: WarehouseDraft = field(default_factory=WarehouseDraft)
    validation: ValidationResult = field(default_factory=ValidationResult)
    supervisors: list[Supervisor] = field(default_factory=list)
    supervisors_failed: bool = False

    @property
    def submitting(self) -> bool:
        """Whether the create call is in flight (submit disabled)."""
        return self.state is FormState.SUBMITTING

    def _require(self, action: str, *allowed: FormState) -> None:
        if self.state not in allowed:
            raise InvalidTransitionError(action, self.state)

    def _transition(self, state: FormState, intent: ConfirmIntent | None = None) -> None:
        logger.debug("Warehouse flow %s -> %s (%s)", self.state.value, state.value, intent)
        self.state = state
        self.intent = intent

    async def load_supervisors(self, client: BackendClient) -> bool:
        """Fetch the supervisor reference list.

        A failure is logged and leaves the list empty; the field stays optional.

        Returns:
            True if the list was loaded.
        """
        try:
            raw = await client.list_users(settings.supervisor_role)
            self.supervisors = [Supervisor.model_validate(u) for u in raw]
        except (BackendAPIError, ValidationError) as e:
            logger.error("Error fetching kepala gudang list: %s", e)
            self.supervisors = []
            self.supervisors_failed = True
            return False
        self.supervisors_failed = False
        return True

    def edit(self, draft: WarehouseDraft) -> None:
        """Replace the draft, clearing errors of fields whose value changed."""
        for f in list(self.validation.errors):
            if f.read(draft) != f.read(self.draft):
                self.validation.clear(f)
        self.draft = draft

    def submit(self, draft: WarehouseDraft) -> ValidationResult:
        """Validate the draft and, if valid, ask for create confirmation.

        Raises:
            InvalidTransitionError: If not in EDITING.
        """
        self._require("submit", FormState.EDITING)
        self.draft = draft
        self.validation = validate_draft(draft)
        if self.validation.is_valid:
            self._transition(FormState.CONFIRMING, ConfirmIntent.CREATE)
        return self.validation

    def request_discard(self, draft: WarehouseDraft | None = None) -> None:
        """Ask the user to confirm discarding the draft.

        Raises:
            InvalidTransitionError: If not in EDITING.
        """
        self._require("cancel", FormState.EDITING)
        if draft is not None:
            self.edit(draft)
        self._transition(FormState.CONFIRMING, ConfirmIntent.DISCARD)

    def dismiss(self) -> None:
        """Close the confirmation step and go back to editing.

        Raises:
            InvalidTransitionError: If not in CONFIRMING.
        """
        self._require("dismiss", FormState.CONFIRMING)
        self._transition(FormState.EDITING)

    async def confirm(self, client: BackendClient) -> ConfirmOutcome:
        """Carry out the confirmed intent.

        Discard ends the flow. Create posts the draft; HTTP 201 ends the flow,
        any failure returns to EDITING with the draft preserved.

        Raises:
            InvalidTransitionError: If not in CONFIRMING.
        """
        self._require("confirm", FormState.CONFIRMING)

        if self.intent is ConfirmIntent.DISCARD:
            self._transition(FormState.EDITING)
            return ConfirmOutcome(kind=OutcomeKind.DISCARDED)

        self._transition(FormState.SUBMITTING, ConfirmIntent.CREATE)
        try:
            created = await client.create_warehouse(self.draft.to_payload())
        except BackendAPIError as e:
            logger.error("Error adding gudang: %s", e)
            self._transition(FormState.EDITING)
            return ConfirmOutcome(kind=OutcomeKind.FAILED, message=failure_message(e))

        logger.info("Warehouse %r created", self.draft.name)
        self._transition(FormState.EDITING)
        return ConfirmOutcome(
            kind=OutcomeKind.CREATED,
            message=CREATED_MESSAGE,
            warehouse=created,
        )

    def error_for(self, f: DraftField) -> str | None:
        """Validation message for a field (template helper)."""
        return self.validation.message_for(f)

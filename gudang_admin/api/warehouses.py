"""Warehouse (gudang) listing and the warehouse-creation form."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from gudang_admin.config import settings
from gudang_admin.models.warehouse import DraftField, Warehouse, WarehouseDraft
from gudang_admin.services.backend import BackendClient
from gudang_admin.services.creation_flow import (
    FIX_ERRORS_MESSAGE,
    SUPERVISORS_FAILED_MESSAGE,
    FormState,
    InvalidTransitionError,
    OutcomeKind,
    WarehouseCreationFlow,
)
from gudang_admin.services.listing import load_listing
from gudang_admin.session import (
    NotificationLevel,
    Session,
    require_session,
    require_session_with_notice,
)
from gudang_admin.templating import render_page

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/gudang", tags=["warehouses"])

LISTING_PATH = "/gudang"
BUSY_MESSAGE = "Sedang menyimpan data gudang..."

# Shown when a form action arrives in a state that does not accept it.
REFUSAL_MESSAGES = {
    FormState.SUBMITTING: BUSY_MESSAGE,
    FormState.CONFIRMING: "Selesaikan konfirmasi terlebih dahulu.",
    FormState.EDITING: "Tidak ada konfirmasi yang menunggu.",
}

FormSession = Annotated[Session, Depends(require_session_with_notice)]


def _flow(session: Session) -> WarehouseCreationFlow:
    """The session's current creation flow, starting one if needed."""
    if session.warehouse_flow is None:
        session.warehouse_flow = WarehouseCreationFlow()
    return session.warehouse_flow


def _end_flow(session: Session, flow: WarehouseCreationFlow) -> None:
    """Forget a finished flow unless a newer form has replaced it."""
    if session.warehouse_flow is flow:
        session.warehouse_flow = None


def _render_form(
    request: Request,
    session: Session,
    flow: WarehouseCreationFlow,
    status_code: int = 200,
    focus_field: DraftField | None = None,
) -> HTMLResponse:
    return render_page(
        request,
        "warehouse_form.html",
        session,
        status_code=status_code,
        flow=flow,
        F=DraftField,
        focus_field=focus_field,
    )


def _refuse(
    request: Request, session: Session, flow: WarehouseCreationFlow, e: InvalidTransitionError
) -> HTMLResponse:
    logger.warning("Rejected warehouse form action: %s", e)
    session.notify(NotificationLevel.ERROR, REFUSAL_MESSAGES[e.state])
    return _render_form(request, session, flow, status_code=409)


@router.get("", response_class=HTMLResponse)
async def list_warehouses(
    request: Request,
    session: Annotated[Session, Depends(require_session)],
) -> HTMLResponse:
    """Render every warehouse as a table, or the empty state."""
    async with BackendClient(token=session.token) as client:
        listing = await load_listing(client.list_warehouses, Warehouse)
    return render_page(request, "warehouse_list.html", session, listing=listing)


@router.get("/tambah", response_class=HTMLResponse)
async def new_warehouse_form(request: Request, session: FormSession) -> HTMLResponse:
    """Start a fresh creation flow and load the supervisor list."""
    flow = WarehouseCreationFlow()
    session.warehouse_flow = flow
    async with BackendClient(token=session.token) as client:
        if not await flow.load_supervisors(client):
            session.notify(NotificationLevel.ERROR, SUPERVISORS_FAILED_MESSAGE)
    return _render_form(request, session, flow)


@router.post("/tambah", response_class=HTMLResponse)
async def submit_warehouse_form(request: Request, session: FormSession) -> HTMLResponse:
    """Validate the draft; show the create confirmation when it passes."""
    flow = _flow(session)
    draft = WarehouseDraft.from_form(await request.form())
    try:
        result = flow.submit(draft)
    except InvalidTransitionError as e:
        return _refuse(request, session, flow, e)

    if not result.is_valid:
        session.notify(NotificationLevel.ERROR, FIX_ERRORS_MESSAGE)
        return _render_form(
            request, session, flow, status_code=422, focus_field=result.first_field
        )
    return _render_form(request, session, flow)


@router.post("/tambah/batal", response_class=HTMLResponse)
async def cancel_warehouse_form(request: Request, session: FormSession) -> HTMLResponse:
    """Ask the user to confirm discarding the draft."""
    flow = _flow(session)
    draft = WarehouseDraft.from_form(await request.form())
    try:
        flow.request_discard(draft)
    except InvalidTransitionError as e:
        return _refuse(request, session, flow, e)
    return _render_form(request, session, flow)


@router.post("/tambah/kembali", response_class=HTMLResponse)
async def dismiss_confirmation(request: Request, session: FormSession) -> HTMLResponse:
    """Close the confirmation step and keep editing."""
    flow = _flow(session)
    try:
        flow.dismiss()
    except InvalidTransitionError as e:
        return _refuse(request, session, flow, e)
    return _render_form(request, session, flow)


@router.post("/tambah/konfirmasi", response_class=HTMLResponse, response_model=None)
async def confirm_warehouse_form(request: Request, session: FormSession) -> Response:
    """Carry out the confirmed intent: create the warehouse or discard the draft."""
    flow = _flow(session)
    try:
        async with BackendClient(token=session.token) as client:
            outcome = await flow.confirm(client)
    except InvalidTransitionError as e:
        return _refuse(request, session, flow, e)

    if outcome.kind is OutcomeKind.DISCARDED:
        _end_flow(session, flow)
        return RedirectResponse(LISTING_PATH, status_code=303)

    if outcome.kind is OutcomeKind.CREATED:
        _end_flow(session, flow)
        session.notify(NotificationLevel.SUCCESS, outcome.message or "")
        return render_page(
            request,
            "warehouse_created.html",
            session,
            delay=settings.redirect_delay_seconds,
            redirect_url=LISTING_PATH,
        )

    session.notify(NotificationLevel.ERROR, outcome.message or "")
    return _render_form(request, session, flow)

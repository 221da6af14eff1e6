"""Goods (barang) listing and detail pages."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from pydantic import ValidationError

from gudang_admin.models.item import Item
from gudang_admin.services.backend import BackendAPIError, BackendClient
from gudang_admin.services.listing import load_listing
from gudang_admin.session import Session, require_session
from gudang_admin.templating import render_page

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/good-and-services", tags=["goods"])


@router.get("", response_class=HTMLResponse)
async def list_goods(
    request: Request,
    session: Annotated[Session, Depends(require_session)],
) -> HTMLResponse:
    """Render every item as a table, or the empty state.

    A failed fetch is logged and rendered like an empty collection unless
    ``show_fetch_errors`` is enabled.
    """
    async with BackendClient(token=session.token) as client:
        listing = await load_listing(client.list_items, Item)
    return render_page(request, "goods_list.html", session, listing=listing)


@router.get("/{item_id}", response_class=HTMLResponse)
async def goods_detail(
    item_id: str,
    request: Request,
    session: Annotated[Session, Depends(require_session)],
) -> HTMLResponse:
    """Render a single item, or a neutral not-found state."""
    item: Item | None = None
    try:
        async with BackendClient(token=session.token) as client:
            item = Item.model_validate(await client.get_item(item_id))
    except (BackendAPIError, ValidationError) as e:
        logger.error("Error fetching barang %s: %s", item_id, e)

    return render_page(
        request,
        "goods_detail.html",
        session,
        status_code=200 if item else 404,
        item=item,
    )

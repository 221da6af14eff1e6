"""Revenue (penerimaan) table hosting the filter/search toolbar."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from gudang_admin.models.revenue import Revenue
from gudang_admin.services.backend import BackendClient
from gudang_admin.services.listing import load_listing
from gudang_admin.services.toolbar import FilterCategory, RevenueToolbar, filter_revenue
from gudang_admin.session import NotificationLevel, Session, require_session
from gudang_admin.templating import render_page

router = APIRouter(prefix="/penerimaan", tags=["revenue"])

PAGE_PATH = "/penerimaan"
ADD_UNAVAILABLE_MESSAGE = "Penambahan penerimaan belum tersedia."


@dataclass
class RevenueTableState:
    """Filter state owned by the revenue page and driven by toolbar callbacks."""

    session: Session
    category: FilterCategory = FilterCategory.ALL
    search: str = ""

    def add(self) -> None:
        self.session.notify(NotificationLevel.INFO, ADD_UNAVAILABLE_MESSAGE)

    def refresh(self) -> None:
        self.category = FilterCategory.ALL
        self.search = ""

    def filter(self, category: FilterCategory) -> None:
        self.category = category

    def set_search(self, text: str) -> None:
        self.search = text


@router.get("", response_class=HTMLResponse)
async def revenue_table(
    request: Request,
    session: Annotated[Session, Depends(require_session)],
    kategori: str = "all",
    q: Annotated[str, Query(max_length=200)] = "",
    aksi: Literal["add", "refresh"] | None = None,
) -> HTMLResponse:
    """Render revenue entries filtered by the toolbar's category and search."""
    state = RevenueTableState(session=session)
    toolbar = RevenueToolbar(
        on_add=state.add,
        on_refresh=state.refresh,
        on_filter=state.filter,
        on_search=state.set_search,
        selected_category=state.category,
        search_term=state.search,
    )

    events: list[Callable[[], None]] = []
    category = FilterCategory.parse(kategori)
    if category is not toolbar.selected_category:
        events.append(lambda: toolbar.change_category(category))
    if q != toolbar.input_value:
        events.append(lambda: toolbar.input_search(q))
    if aksi == "add":
        events.append(toolbar.click_add)
    elif aksi == "refresh":
        events.append(toolbar.click_refresh)

    # Each event re-renders the toolbar with the page's new state.
    for event in events:
        event()
        toolbar.sync(state.search, state.category)

    async with BackendClient(token=session.token) as client:
        listing = await load_listing(client.list_revenue, Revenue)

    return render_page(
        request,
        "revenue_list.html",
        session,
        toolbar_html=toolbar.render(action_url=PAGE_PATH),
        records=filter_revenue(listing.items, state.category, state.search),
        fetch_failed=listing.fetch_failed,
    )

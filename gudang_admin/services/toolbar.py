"""Revenue table toolbar: add, refresh, category filter and search box."""

from collections.abc import Callable, Iterable
from enum import Enum

from gudang_admin.models.revenue import Revenue
from gudang_admin.templating import templates


class FilterCategory(str, Enum):
    """Filter keys offered by the toolbar dropdown."""

    ALL = "all"
    ID = "id"
    REVENUE_TYPE = "penerimaan"
    AMOUNT = "jumlah"
    SOURCE = "sumber"

    @property
    def label(self) -> str:
        """Dropdown label."""
        return _LABELS[self]

    @classmethod
    def parse(cls, value: str | None) -> "FilterCategory":
        """Parse a filter key, falling back to ALL for unknown values."""
        try:
            return cls(value or cls.ALL.value)
        except ValueError:
            return cls.ALL


_LABELS = {
    FilterCategory.ALL: "Filter: All Fields",
    FilterCategory.ID: "Filter: ID",
    FilterCategory.REVENUE_TYPE: "Filter: Jenis Penerimaan",
    FilterCategory.AMOUNT: "Filter: Jumlah",
    FilterCategory.SOURCE: "Filter: Sumber Penerimaan",
}

class RevenueToolbar:
    """Controlled toolbar component.

    The host owns ``selected_category`` and ``search_term``. The toolbar
    keeps a local echo of the search box that is re-synchronized whenever the
    host supplies a different search term, so external resets show up.
    Every user action is forwarded to the host immediately.
    """

    def __init__(
        self,
        on_add: Callable[[], None],
        on_refresh: Callable[[], None],
        on_filter: Callable[[FilterCategory], None],
        on_search: Callable[[str], None],
        selected_category: FilterCategory = FilterCategory.ALL,
        search_term: str = "",
    ) -> None:
        self.on_add = on_add
        self.on_refresh = on_refresh
        self.on_filter = on_filter
        self.on_search = on_search
        self.selected_category = selected_category
        self.search_term = search_term
        self.input_value = search_term

    def sync(
        self,
        search_term: str,
        selected_category: FilterCategory | None = None,
    ) -> None:
        """Receive new props from the host."""
        if selected_category is not None:
            self.selected_category = selected_category
        if search_term != self.search_term:
            self.search_term = search_term
            self.input_value = search_term

    @property
    def placeholder(self) -> str:
        """Search box placeholder for the active category."""
        return f"Search by {self.selected_category.value}"

    def click_add(self) -> None:
        self.on_add()

    def click_refresh(self) -> None:
        self.on_refresh()

    def change_category(self, category: FilterCategory) -> None:
        self.on_filter(category)

    def input_search(self, text: str) -> None:
        """A keystroke in the search box; forwarded without debouncing."""
        self.input_value = text
        self.on_search(text)

    def render(self, action_url: str = "") -> str:
        """Render the toolbar as an HTML fragment."""
        template = templates.get_template("_toolbar.html")
        return template.render(
            toolbar=self,
            categories=list(FilterCategory),
            action_url=action_url,
        )


def _field_values(record: Revenue, category: FilterCategory) -> Iterable[object]:
    if category is FilterCategory.ID:
        return (record.id,)
    if category is FilterCategory.REVENUE_TYPE:
        return (record.revenue_type,)
    if category is FilterCategory.AMOUNT:
        return (record.amount,)
    if category is FilterCategory.SOURCE:
        return (record.source,)
    return (record.id, record.revenue_type, record.amount, record.source)


def filter_revenue(
    records: list[Revenue], category: FilterCategory, search: str
) -> list[Revenue]:
    """Case-insensitive substring filter over the chosen field(s).

    An empty search keeps every record.
    """
    needle = search.strip().lower()
    if not needle:
        return list(records)
    return [
        r
        for r in records
        if any(v is not None and needle in str(v).lower() for v in _field_values(r, category))
    ]

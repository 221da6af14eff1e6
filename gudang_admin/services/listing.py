"""Loading read-only collections from the backend for listing pages."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from gudang_admin.services.backend import BackendAPIError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass
class Listing(Generic[ModelT]):
    """Rows of a listing page.

    ``fetch_failed`` distinguishes a failed fetch from an empty collection;
    the page decides whether to show the difference. ``skipped`` counts rows
    that could not be read and were left out.
    """

    items: list[ModelT] = field(default_factory=list)
    fetch_failed: bool = False
    skipped: int = 0

    @property
    def empty(self) -> bool:
        return not self.items


async def load_listing(
    fetch: Callable[[], Awaitable[list[dict[str, Any]]]],
    model: type[ModelT],
) -> Listing[ModelT]:
    """Fetch a collection and parse it into schema objects.

    A failed fetch is logged and produces an empty listing flagged as
    failed. There is no retry. Rows are parsed one at a time; a row that
    does not fit the schema is logged and skipped so the rest still render.

    Args:
        fetch: Coroutine function returning raw records.
        model: Schema each record is validated against.

    Returns:
        Listing with parsed items, or empty with ``fetch_failed`` set.
    """
    try:
        raw = await fetch()
    except BackendAPIError as e:
        logger.error("Error fetching %s data: %s", model.__name__, e)
        return Listing(fetch_failed=True)

    listing: Listing[ModelT] = Listing()
    for index, record in enumerate(raw):
        try:
            listing.items.append(model.model_validate(record))
        except ValidationError as e:
            logger.warning("Skipping %s row %d: %s", model.__name__, index, e)
            listing.skipped += 1
    return listing

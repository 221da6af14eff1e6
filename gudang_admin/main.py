"""FastAPI application entry point."""

import logging
from urllib.parse import urlencode

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse

from gudang_admin.api.auth import router as auth_router
from gudang_admin.api.goods import router as goods_router
from gudang_admin.api.revenue import router as revenue_router
from gudang_admin.api.warehouses import router as warehouses_router
from gudang_admin.config import settings
from gudang_admin.session import NotAuthenticatedError

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure root logging at the configured level."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


app = FastAPI(
    title="Gudang Admin",
    description="Administrative frontend for warehouse and inventory management",
    version="0.1.0",
    debug=settings.debug,
)

app.include_router(auth_router)
app.include_router(goods_router)
app.include_router(warehouses_router)
app.include_router(revenue_router)


@app.exception_handler(NotAuthenticatedError)
async def redirect_to_entry(request: Request, exc: NotAuthenticatedError) -> RedirectResponse:
    """Send requests without a live session to the entry screen."""
    logger.debug("No session for %s, redirecting to entry", request.url.path)
    target = "/"
    if exc.notice:
        target = f"/?{urlencode({'notice': exc.notice})}"
    return RedirectResponse(target, status_code=303)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    configure_logging()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()

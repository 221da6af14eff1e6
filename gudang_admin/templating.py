"""Jinja2 template environment shared by pages and components."""

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from gudang_admin.config import settings
from gudang_admin.session import Notification, Session

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_page(
    request: Request,
    name: str,
    session: Session | None = None,
    notifications: list[Notification] | None = None,
    status_code: int = 200,
    **context: Any,
) -> HTMLResponse:
    """Render a full page, draining the session's pending notifications."""
    pending = session.pop_notifications() if session is not None else []
    pending.extend(notifications or [])
    return templates.TemplateResponse(
        request,
        name,
        {
            "session": session,
            "notifications": pending,
            "show_fetch_errors": settings.show_fetch_errors,
            **context,
        },
        status_code=status_code,
    )

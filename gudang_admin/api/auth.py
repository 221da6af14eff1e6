"""Entry screen, login and logout."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from gudang_admin.config import settings
from gudang_admin.services.backend import BackendAPIError, BackendAuthError, BackendClient
from gudang_admin.session import (
    Session,
    SessionStore,
    get_session,
    get_session_store,
)
from gudang_admin.templating import render_page

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

HOME_PATH = "/good-and-services"
INVALID_CREDENTIALS_NOTICE = "Username atau password salah."
LOGIN_FAILED_NOTICE = "Login gagal. Silakan coba lagi."


@router.get("/", response_class=HTMLResponse, response_model=None)
async def entry(
    request: Request,
    session: Annotated[Session | None, Depends(get_session)],
    notice: Annotated[str | None, Query(max_length=200)] = None,
) -> Response:
    """Show the login screen, or go straight to goods when logged in."""
    if session is not None:
        return RedirectResponse(HOME_PATH, status_code=303)
    return render_page(request, "login.html", notice=notice)


@router.post("/login", response_class=HTMLResponse, response_model=None)
async def login(
    request: Request,
    store: Annotated[SessionStore, Depends(get_session_store)],
    username: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
) -> Response:
    """Exchange credentials for a backend token and start a session."""
    try:
        async with BackendClient() as client:
            token, role = await client.login(username, password)
    except BackendAuthError:
        return render_page(
            request,
            "login.html",
            status_code=401,
            notice=INVALID_CREDENTIALS_NOTICE,
            username=username,
        )
    except BackendAPIError as e:
        logger.error("Login failed: %s", e)
        return render_page(
            request,
            "login.html",
            status_code=502,
            notice=LOGIN_FAILED_NOTICE,
            username=username,
        )

    # A browser holds one session; logging in again replaces it.
    store.invalidate(request.cookies.get(settings.session_cookie_name))
    session = store.create(token, role)
    response = RedirectResponse(HOME_PATH, status_code=303)
    response.set_cookie(
        settings.session_cookie_name,
        session.session_id,
        max_age=int(store.ttl.total_seconds()),
        httponly=True,
        samesite="lax",
    )
    return response


@router.post("/logout")
async def logout(
    request: Request,
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> RedirectResponse:
    """Clear the session (token and role) and return to the entry screen."""
    store.invalidate(request.cookies.get(settings.session_cookie_name))
    response = RedirectResponse("/", status_code=303)
    response.delete_cookie(settings.session_cookie_name)
    return response

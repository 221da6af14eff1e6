"""Server-side user sessions.

A ``Session`` is created at login, held in an in-memory ``SessionStore`` and
referenced from the browser by an HTTP-only cookie. Routes receive it
through the ``get_session`` / ``require_session`` dependencies and never
touch the cookie themselves.
"""

import logging
import secrets
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import TYPE_CHECKING, Annotated

from fastapi import Depends, Request

from gudang_admin.config import settings

if TYPE_CHECKING:
    from gudang_admin.services.creation_flow import WarehouseCreationFlow

logger = logging.getLogger(__name__)

SESSION_EXPIRED_NOTICE = "Sesi telah berakhir. Silakan login kembali."


class NotAuthenticatedError(Exception):
    """Raised when a page requires a session and none is active."""

    def __init__(self, notice: str | None = None) -> None:
        super().__init__(notice or "Not authenticated")
        self.notice = notice


class NotificationLevel(str, Enum):
    """Severity of a transient notification."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """A transient message shown once on the next rendered page."""

    level: NotificationLevel
    message: str


@dataclass
class Session:
    """An authenticated user session.

    Attributes:
        session_id: Opaque id stored in the session cookie
        token: Backend Bearer token
        role: Role string returned at login
        created_at: When the session was created
        expires_at: When the session stops being accepted
        notifications: Pending notifications, drained on render
        warehouse_flow: Warehouse-creation flow of the current page visit
    """

    session_id: str
    token: str
    role: str
    created_at: datetime
    expires_at: datetime
    notifications: list[Notification] = field(default_factory=list)
    warehouse_flow: "WarehouseCreationFlow | None" = None

    @property
    def expired(self) -> bool:
        """Whether the session is past its expiry time."""
        return datetime.now(UTC) >= self.expires_at

    def notify(self, level: NotificationLevel, message: str) -> None:
        """Queue a notification for the next rendered page."""
        self.notifications.append(Notification(level=level, message=message))

    def pop_notifications(self) -> list[Notification]:
        """Return and clear pending notifications."""
        pending, self.notifications = self.notifications, []
        return pending


class SessionStore:
    """In-memory store of active sessions keyed by session id."""

    def __init__(self, ttl: timedelta | None = None) -> None:
        self.ttl = ttl if ttl is not None else timedelta(minutes=settings.session_ttl_minutes)
        self._sessions: dict[str, Session] = {}

    def create(self, token: str, role: str) -> Session:
        """Create and register a new session, purging expired ones first."""
        self.purge_expired()
        now = datetime.now(UTC)
        session = Session(
            session_id=secrets.token_urlsafe(32),
            token=token,
            role=role,
            created_at=now,
            expires_at=now + self.ttl,
        )
        self._sessions[session.session_id] = session
        logger.info("Session created for role %r", role)
        return session

    def get(self, session_id: str | None) -> Session | None:
        """Look up a live session, dropping it if it has expired."""
        if not session_id:
            return None
        session = self._sessions.get(session_id)
        if session is None:
            return None
        if session.expired:
            logger.info("Session expired, discarding")
            del self._sessions[session_id]
            return None
        return session

    def purge_expired(self) -> int:
        """Drop every expired session and return how many were removed."""
        expired = [sid for sid, session in self._sessions.items() if session.expired]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.info("Purged %d expired sessions", len(expired))
        return len(expired)

    def invalidate(self, session_id: str | None) -> None:
        """Remove a session (logout)."""
        if session_id and self._sessions.pop(session_id, None) is not None:
            logger.info("Session invalidated")

    def clear(self) -> None:
        """Remove every session."""
        self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)


session_store = SessionStore()


def get_session_store() -> SessionStore:
    """Dependency returning the process-wide session store."""
    return session_store


def get_session(
    request: Request,
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> Session | None:
    """Dependency resolving the caller's session, or None."""
    return store.get(request.cookies.get(settings.session_cookie_name))


def require_session(
    session: Annotated[Session | None, Depends(get_session)],
) -> Session:
    """Dependency for pages that need a logged-in user.

    Raises:
        NotAuthenticatedError: If there is no live session.
    """
    if session is None:
        raise NotAuthenticatedError()
    return session


def require_session_with_notice(
    session: Annotated[Session | None, Depends(get_session)],
) -> Session:
    """Like ``require_session`` but tells the user their session ended."""
    if session is None:
        raise NotAuthenticatedError(SESSION_EXPIRED_NOTICE)
    return session

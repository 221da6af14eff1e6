"""Tests for the session store and notifications."""

from datetime import UTC, datetime, timedelta

from gudang_admin.session import NotificationLevel, SessionStore


class TestSessionStore:
    """Tests for SessionStore."""

    def test_create_and_get(self) -> None:
        store = SessionStore(ttl=timedelta(minutes=5))
        session = store.create("tok", "admin")

        assert store.get(session.session_id) is session
        assert session.token == "tok"
        assert session.role == "admin"
        assert session.expires_at - session.created_at == timedelta(minutes=5)

    def test_unknown_or_missing_id(self) -> None:
        store = SessionStore()
        assert store.get(None) is None
        assert store.get("nope") is None

    def test_expired_session_dropped(self) -> None:
        """Test an expired session is not returned and is removed."""
        store = SessionStore()
        session = store.create("tok", "admin")
        session.expires_at = datetime.now(UTC) - timedelta(seconds=1)

        assert store.get(session.session_id) is None
        assert len(store) == 0

    def test_create_purges_expired_sessions(self) -> None:
        """Test sessions whose cookie never returns do not accumulate."""
        store = SessionStore(ttl=timedelta(seconds=-1))
        for _ in range(101):
            store.create("tok", "admin")

        assert len(store) == 1

    def test_purge_expired_keeps_live_sessions(self) -> None:
        store = SessionStore(ttl=timedelta(minutes=5))
        live = store.create("live", "admin")
        stale = store.create("stale", "admin")
        stale.expires_at = datetime.now(UTC) - timedelta(seconds=1)

        assert store.purge_expired() == 1
        assert len(store) == 1
        assert store.get(live.session_id) is live

    def test_invalidate(self) -> None:
        store = SessionStore()
        session = store.create("tok", "admin")
        store.invalidate(session.session_id)
        assert store.get(session.session_id) is None

    def test_session_ids_are_unique(self) -> None:
        store = SessionStore()
        assert store.create("a", "r").session_id != store.create("b", "r").session_id


def test_notifications_drained_once() -> None:
    session = SessionStore().create("tok", "admin")
    session.notify(NotificationLevel.SUCCESS, "Gudang berhasil ditambahkan!")

    pending = session.pop_notifications()

    assert [n.message for n in pending] == ["Gudang berhasil ditambahkan!"]
    assert pending[0].level is NotificationLevel.SUCCESS
    assert session.pop_notifications() == []

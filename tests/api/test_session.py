"""Tests for session management."""

from datetime import datetime, timedelta

from api.session import InMemorySessionStore, SessionSigner, get_session_store
from blackjack.game import Round


class TestSessionSigner:
    """Tests for SessionSigner class."""

    def test_sign_creates_token(self):
        signer = SessionSigner(secret_key="test-secret")
        token = signer.sign("test-session-123")
        assert token
        assert token != "test-session-123"

    def test_unsign_returns_original_id(self):
        signer = SessionSigner(secret_key="test-secret")
        token = signer.sign("test-session-456")
        assert signer.unsign(token, max_age=3600) == "test-session-456"

    def test_unsign_invalid_token_returns_none(self):
        signer = SessionSigner(secret_key="test-secret")
        assert signer.unsign("invalid-token-data", max_age=3600) is None

    def test_unsign_wrong_secret_returns_none(self):
        token = SessionSigner(secret_key="secret-1").sign("test-session")
        assert SessionSigner(secret_key="secret-2").unsign(token, max_age=3600) is None


class TestInMemorySessionStore:
    def _store(self) -> InMemorySessionStore:
        return InMemorySessionStore(signer=SessionSigner(secret_key="test-secret"), ttl=60)

    def test_create_and_get(self):
        store = self._store()
        round_ = Round(rng=3)
        token = store.create(round_)
        assert store.get(token) is round_
        assert len(store) == 1

    def test_forged_token_is_rejected(self):
        store = self._store()
        store.set("forged", Round(rng=3))
        assert store.get("forged") is None

    def test_expired_session_is_dropped(self):
        store = self._store()
        token = store.create(Round(rng=3))
        round_, _ = store._sessions[token]
        store._sessions[token] = (round_, datetime.now() - timedelta(seconds=1))

        assert store.get(token) is None
        assert len(store) == 0

    def test_cleanup_expired(self):
        store = self._store()
        live = store.create(Round(rng=1))
        stale = store.create(Round(rng=2))
        round_, _ = store._sessions[stale]
        store._sessions[stale] = (round_, datetime.now() - timedelta(seconds=1))

        assert store.cleanup_expired() == 1
        assert store.get(live) is not None

    def test_create_evicts_expired_rounds(self):
        store = self._store()
        for seed in range(5):
            token = store.create(Round(rng=seed))
            round_, _ = store._sessions[token]
            store._sessions[token] = (round_, datetime.now() - timedelta(seconds=1))

        fresh = store.create(Round(rng=99))

        assert len(store) == 1
        assert store.get(fresh) is not None

    def test_delete(self):
        store = self._store()
        token = store.create(Round(rng=3))
        store.delete(token)
        store.delete(token)
        assert store.get(token) is None


def test_global_store_is_shared():
    assert get_session_store() is get_session_store()

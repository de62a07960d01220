"""In-memory session management for HTTP-driven rounds."""

import logging
from datetime import datetime, timedelta
from uuid import uuid4

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from blackjack.game import Round
from config import config

logger = logging.getLogger(__name__)


class SessionSigner:
    """Sign and verify session IDs using itsdangerous."""

    def __init__(self, secret_key: str | None = None) -> None:
        """Initialize the signer with a secret key."""
        self._secret_key = secret_key or config.security.secret_key
        self._serializer = URLSafeTimedSerializer(self._secret_key)

    def sign(self, session_id: str) -> str:
        """Create a signed token from a session ID."""
        return self._serializer.dumps(session_id)

    def unsign(self, token: str, max_age: int | None = None) -> str | None:
        """
        Verify and extract session_id from a signed token.

        Args:
            token: The signed token to verify
            max_age: Maximum age in seconds (defaults to session_ttl)

        Returns:
            The session ID if valid, None otherwise
        """
        max_age = max_age or config.session_ttl
        try:
            return self._serializer.loads(token, max_age=max_age)
        except (BadSignature, SignatureExpired):
            return None


class InMemorySessionStore:
    """
    Live rounds keyed by signed session token.

    Rounds are held as objects between requests; nothing in the engine
    runs while a round waits here for the next action.
    """

    def __init__(self, signer: SessionSigner | None = None, ttl: int | None = None) -> None:
        self._signer = signer or SessionSigner()
        self._ttl = ttl or config.session_ttl
        self._sessions: dict[str, tuple[Round, datetime]] = {}

    def create(self, round_: Round) -> str:
        """Store a round under a new signed session token."""
        self.cleanup_expired()
        token = self._signer.sign(str(uuid4()))
        self.set(token, round_)
        logger.info("Created session with %s rules", round_.rules.name)
        return token

    def get(self, token: str) -> Round | None:
        """Return the round for ``token``, or None if unknown, forged or expired."""
        if self._signer.unsign(token, max_age=self._ttl) is None:
            return None
        if token not in self._sessions:
            return None

        round_, expiry = self._sessions[token]
        if expiry < datetime.now():
            self.delete(token)
            return None
        return round_

    def set(self, token: str, round_: Round) -> None:
        """Store or replace the round for ``token`` and refresh its expiry."""
        expiry = datetime.now() + timedelta(seconds=self._ttl)
        self._sessions[token] = (round_, expiry)

    def delete(self, token: str) -> None:
        """Delete session."""
        self._sessions.pop(token, None)

    def cleanup_expired(self) -> int:
        """Remove expired sessions."""
        now = datetime.now()
        expired = [
            token for token, (_, expiry) in self._sessions.items() if expiry < now
        ]
        for token in expired:
            del self._sessions[token]
        return len(expired)

    def __len__(self) -> int:
        return len(self._sessions)


# Global session store instance
_session_store: InMemorySessionStore | None = None


def get_session_store() -> InMemorySessionStore:
    """Get or create the session store."""
    global _session_store
    if _session_store is None:
        _session_store = InMemorySessionStore()
    return _session_store

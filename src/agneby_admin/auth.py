"""
auth.py — email/password sign-in against Supabase Auth and the session state.

Sessions live in an explicit object (SessionState) created once per app and
handed to routes through FastAPI dependencies. Anything interested in
sign-in / sign-out events subscribes to it and keeps the returned
unsubscribe callable for its own teardown.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable, Literal

import structlog
from supabase import Client

from agneby_shared.errors import AuthenticationFailed, ConfigurationError

log = structlog.get_logger(__name__)

AuthEvent = Literal["SIGNED_IN", "SIGNED_OUT"]
Listener = Callable[[AuthEvent, "AdminSession | None"], None]

# GoTrue error code -> message shown on the login form
SIGN_IN_ERRORS: dict[str, str] = {
    "user_not_found": "Aucun utilisateur trouvé avec cet email.",
    "invalid_credentials": "Email ou mot de passe incorrect.",
    "email_address_invalid": "Adresse email invalide.",
    "validation_failed": "Adresse email invalide.",
    "over_request_rate_limit": (
        "Trop de tentatives de connexion. Veuillez réessayer plus tard."
    ),
    "too_many_requests": (
        "Trop de tentatives de connexion. Veuillez réessayer plus tard."
    ),
}
GENERIC_SIGN_IN_ERROR = "Erreur de connexion. Veuillez vérifier vos identifiants."


@dataclass(frozen=True)
class AdminSession:
    user_id: str
    email: str | None
    access_token: str
    refresh_token: str | None = None
    expires_at: int | None = None

    def public_dict(self) -> dict[str, Any]:
        return {
            "user_id": self.user_id,
            "email": self.email,
            "access_token": self.access_token,
            "refresh_token": self.refresh_token,
            "expires_at": self.expires_at,
        }


def _error_code(exc: Exception) -> str | None:
    code = getattr(exc, "code", None)
    if code:
        return str(code)
    message = str(exc).lower()
    if "invalid login credentials" in message:
        return "invalid_credentials"
    if "rate limit" in message:
        return "over_request_rate_limit"
    return None


def sign_in_message(exc: Exception) -> str:
    """Translate a GoTrue failure into a user-readable message."""
    return SIGN_IN_ERRORS.get(_error_code(exc) or "", GENERIC_SIGN_IN_ERROR)


class SessionState:
    """Signed-in admin sessions, keyed by user id, plus their subscribers."""

    def __init__(self) -> None:
        self._sessions: dict[str, AdminSession] = {}
        self._latest: str | None = None
        self._listeners: list[Listener] = []
        self._lock = threading.Lock()

    @property
    def current(self) -> AdminSession | None:
        """Most recent session still signed in."""
        if self._latest is None:
            return None
        return self._sessions.get(self._latest)

    def session_for(self, user_id: str) -> AdminSession | None:
        return self._sessions.get(user_id)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _emit(self, event: AuthEvent, session: AdminSession | None) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(event, session)

    def signed_in(self, session: AdminSession) -> None:
        with self._lock:
            self._sessions[session.user_id] = session
            self._latest = session.user_id
        self._emit("SIGNED_IN", session)

    def signed_out(self, user_id: str) -> None:
        """Drop one admin's session; other admins stay signed in."""
        with self._lock:
            previous = self._sessions.pop(user_id, None)
            if self._latest == user_id:
                self._latest = None
        if previous is not None:
            self._emit("SIGNED_OUT", previous)


class AuthService:
    """Supabase Auth wrapper feeding a SessionState."""

    configured = True

    def __init__(self, client: Client, state: SessionState) -> None:
        self._client = client
        self.state = state

    def sign_in(self, email: str, password: str) -> AdminSession:
        try:
            response = self._client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except Exception as exc:
            code = _error_code(exc)
            log.warning("sign_in_failed", email=email, code=code, error=str(exc))
            raise AuthenticationFailed(sign_in_message(exc), code=code) from exc

        user, session = response.user, response.session
        if user is None or session is None:
            log.warning("sign_in_failed", email=email, code="no_session")
            raise AuthenticationFailed(GENERIC_SIGN_IN_ERROR)

        admin = AdminSession(
            user_id=str(user.id),
            email=user.email,
            access_token=session.access_token,
            refresh_token=session.refresh_token,
            expires_at=session.expires_at,
        )
        self.state.signed_in(admin)
        log.info("signed_in", user_id=admin.user_id)
        return admin

    def sign_out(self, access_token: str, user_id: str) -> None:
        """Revoke the caller's own access token and drop their session."""
        try:
            self._client.auth.admin.sign_out(access_token)
        except Exception as exc:
            log.error("sign_out_failed", user_id=user_id, error=str(exc))
            raise
        self.state.signed_out(user_id)
        log.info("signed_out", user_id=user_id)


class DisabledAuthService:
    """Demo-mode auth: sign-in and sign-out raise ConfigurationError."""

    configured = False

    def __init__(self, state: SessionState) -> None:
        self.state = state

    def sign_in(self, email: str, password: str) -> AdminSession:
        raise ConfigurationError()

    def sign_out(self, access_token: str, user_id: str) -> None:
        raise ConfigurationError()


def build_auth(client: Client | None, state: SessionState | None = None):
    state = state or SessionState()
    if client is None:
        return DisabledAuthService(state)
    return AuthService(client, state)

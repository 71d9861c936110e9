"""
errors.py — error taxonomy shared by the gateway, the views and the API.

Validation errors are pydantic's own ``ValidationError`` and never reach
the backend. Backend errors raised by the Supabase client (postgrest
``APIError``, storage and auth errors) propagate unchanged, except for
the cases below which the back office detects itself.
"""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """The backend connection was never established (missing credentials)."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "Supabase n'est pas configuré. Renseignez SUPABASE_URL et "
            "SUPABASE_ANON_KEY dans le fichier .env."
        )


class DocumentNotFound(LookupError):
    """An update or delete addressed an id the store does not hold."""

    def __init__(self, collection: str, document_id: str) -> None:
        super().__init__(f"{collection}/{document_id} not found")
        self.collection = collection
        self.document_id = document_id


class ConfirmationRequired(Exception):
    """A destructive list action was attempted without confirmation."""


class AuthenticationFailed(Exception):
    """Sign-in was rejected; ``message`` is safe to show to the user."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

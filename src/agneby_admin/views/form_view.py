"""
views/form_view.py — validate a new or edited record and persist it.

Submission flow:

    values --compact row fields--> schema validation
        invalid  -> errors populated, values kept, backend untouched
        valid    -> gateway create/update
            fails    -> one error notification, values kept
            succeeds -> success notification(s), redirect = list route
"""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import ValidationError

from agneby_shared.models.base import required_message

from agneby_admin.gateway import Gateway
from agneby_admin.services.push_service import PushNotifier
from agneby_admin.views.notifications import Notifier
from agneby_admin.views.registry import EntityView

log = structlog.get_logger(__name__)


class RowList:
    """Editable list of auxiliary string inputs (image URLs, requirements)."""

    def __init__(self, rows: list[str] | None = None) -> None:
        self.rows: list[str] = list(rows) if rows else [""]

    def add(self, value: str = "") -> None:
        self.rows.append(value)

    def remove(self, index: int) -> None:
        # The last remaining row is cleared rather than removed.
        if len(self.rows) <= 1:
            self.rows = [""]
            return
        del self.rows[index]

    def edit(self, index: int, value: str) -> None:
        self.rows[index] = value

    def compacted(self) -> list[Any]:
        # Only blank strings are dropped; anything else is left for validation.
        return [row for row in self.rows if not (isinstance(row, str) and not row.strip())]


def _message(err: dict[str, Any]) -> str:
    # Missing values and empty choices read like an empty required text field.
    blank = err["type"] == "literal_error" and err.get("input") == ""
    if err["type"] == "missing" or blank:
        return required_message(str(err["loc"][-1]) if err["loc"] else None)
    return err["msg"]


def field_errors(exc: ValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "__root__"
        errors.setdefault(loc, _message(err))
    return errors


class FormView:
    def __init__(
        self,
        entity: EntityView,
        gateway: Gateway,
        notifier: Notifier | None = None,
        push: PushNotifier | None = None,
    ) -> None:
        self.entity = entity
        self.collection = gateway.collection(entity.key)
        self.notifier = notifier or Notifier()
        self.push = push or PushNotifier()
        self.values: dict[str, Any] = {}
        self.errors: dict[str, str] = {}
        self.error: Exception | None = None
        self.redirect: str | None = None
        self._log = log.bind(collection=entity.key)

    def _prepare(self, values: dict[str, Any]) -> dict[str, Any]:
        self.values = dict(values)
        self.errors = {}
        self.error = None
        self.redirect = None
        payload = dict(values)
        for name in self.entity.row_fields:
            if isinstance(payload.get(name), list):
                payload[name] = RowList(payload[name]).compacted()
        return payload

    def submit(self, values: dict[str, Any]) -> str | None:
        """Create a record; returns its id, or None when the form stays open."""
        payload = self._prepare(values)
        try:
            record = self.entity.create_schema.model_validate(payload)
        except ValidationError as exc:
            self.errors = field_errors(exc)
            self._log.info("form_invalid", fields=sorted(self.errors))
            return None

        try:
            document_id = self.collection.create(record)
        except Exception as exc:
            self._log.error("form_submit_failed", error=str(exc))
            self.error = exc
            self.notifier.error(self.entity.messages.create_error)
            return None

        messages = self.entity.messages
        self.notifier.success(messages.created, messages.created_description)
        if self.entity.push_notification:
            self.notifier.info("Notification programmée", messages.scheduled_description)
            self.push.announce(
                self.entity.key,
                document_id,
                self.entity.display_name(record, document_id),
            )
        self.redirect = self.entity.list_route
        return document_id

    def submit_update(self, document_id: str, values: dict[str, Any]) -> bool:
        """Apply a partial edit; returns True on success."""
        payload = self._prepare(values)
        try:
            changes = self.entity.update_schema.model_validate(payload)
        except ValidationError as exc:
            self.errors = field_errors(exc)
            self._log.info("form_invalid", id=document_id, fields=sorted(self.errors))
            return False

        try:
            self.collection.update(document_id, changes)
        except Exception as exc:
            self._log.error("form_update_failed", id=document_id, error=str(exc))
            self.error = exc
            self.notifier.error(self.entity.messages.update_error)
            return False

        self.notifier.success(self.entity.messages.updated)
        self.redirect = self.entity.list_route
        return True

"""
views/list_view.py — fetch, filter and delete records of one entity.

State machine:

    loading --load() ok-----> ready            (items = fetched records)
    loading --load() fails--> ready + error    (items = [], error toast)

Once ready, filtered() is recomputed from the current items and filter
values on every call. Deletes require confirmation; the local list only
changes after the backend call succeeds.
"""

from __future__ import annotations

from typing import Any, Literal

import structlog

from agneby_shared.constants import ALL
from agneby_shared.errors import ConfirmationRequired, DocumentNotFound
from agneby_shared.models import Pharmacy

from agneby_admin.gateway import Gateway
from agneby_admin.views.notifications import Notifier
from agneby_admin.views.registry import EntityView

log = structlog.get_logger(__name__)

Status = Literal["loading", "ready"]


class ListView:
    def __init__(
        self,
        entity: EntityView,
        gateway: Gateway,
        notifier: Notifier | None = None,
    ) -> None:
        self.entity = entity
        self.gateway = gateway
        self.collection = gateway.collection(entity.key)
        self.notifier = notifier or Notifier()
        self.status: Status = "loading"
        self.error: Exception | None = None
        self.items: list[Any] = []
        self.search = ""
        self.filter_values: dict[str, str] = {p: ALL for p in entity.chain.params}
        self._log = log.bind(collection=entity.key)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self) -> "ListView":
        try:
            self.items = list(self.collection.list_all())
            self.error = None
        except Exception as exc:
            self._log.error("list_load_failed", error=str(exc))
            self.items = []
            self.error = exc
            self.notifier.error(self.entity.messages.load_error)
        finally:
            self.status = "ready"
        return self

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    def set_search(self, term: str | None) -> None:
        self.search = term or ""

    def set_filter(self, param: str, value: str | None) -> None:
        self.entity.chain.get(param)  # unknown params raise KeyError
        self.filter_values[param] = value or ALL

    def apply_params(self, params: dict[str, str | None]) -> None:
        """Set the search term and any known filter from request params."""
        self.set_search(params.get("q"))
        for param in self.entity.chain.params:
            if param in params:
                self.set_filter(param, params[param])

    def clear_filters(self) -> None:
        self.search = ""
        self.filter_values = {p: ALL for p in self.filter_values}

    def filtered(self) -> list[Any]:
        return self.entity.chain.apply(self.items, self.search, self.filter_values)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def _find(self, document_id: str) -> Any | None:
        return next((i for i in self.items if i.id == document_id), None)

    def delete(self, document_id: str, *, confirmed: bool = False) -> None:
        if not confirmed:
            raise ConfirmationRequired(
                f"Deleting {self.entity.key}/{document_id} requires confirmation"
            )
        name = self.entity.display_name(self._find(document_id), document_id)
        try:
            self.collection.delete(document_id)
        except Exception as exc:
            self._log.error("delete_failed", id=document_id, error=str(exc))
            self.notifier.error(self.entity.messages.delete_error)
            raise
        self.items = [i for i in self.items if i.id != document_id]
        self.notifier.success(self.entity.messages.deleted.format(name=name))

    def toggle_duty(self, document_id: str) -> Pharmacy:
        """Flip a pharmacy's on-duty flag and mirror it locally."""
        if self.entity.key != "pharmacies":
            raise TypeError(f"{self.entity.key} has no duty status")

        current = self._find(document_id) or self.collection.get(document_id)
        if current is None:
            self.notifier.error("Erreur lors de la mise à jour du statut")
            raise DocumentNotFound(self.collection.spec.table, document_id)

        new_status = not current.is_on_duty
        try:
            updated = self.gateway.toggle_pharmacy_duty(document_id, new_status)
        except Exception as exc:
            self._log.error("toggle_duty_failed", id=document_id, error=str(exc))
            self.notifier.error("Erreur lors de la mise à jour du statut")
            raise

        self.items = [updated if i.id == document_id else i for i in self.items]
        state = "activé" if new_status else "désactivé"
        self.notifier.success(f'Statut de "{current.name}" {state}')
        return updated

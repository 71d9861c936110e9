"""CRUD endpoints shared by every entity.

build_entity_router() mounts, under /v1/<slug>:

    GET    ""            list view (search + categorical filters)
    POST   ""            new-record form
    GET    "/{id}"       single record for the edit form
    PATCH  "/{id}"       edit form
    DELETE "/{id}"       delete, requires ?confirm=true
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Request
from fastapi.responses import JSONResponse

from agneby_admin.dependencies import (
    get_gateway,
    get_notifier,
    get_push,
    require_auth,
)
from agneby_admin.gateway import Gateway
from agneby_admin.responses import error_response, failure_response, wrap_response
from agneby_admin.services.push_service import PushNotifier
from agneby_admin.views.form_view import FormView
from agneby_admin.views.list_view import ListView
from agneby_admin.views.notifications import Notifier
from agneby_admin.views.registry import EntityView


def _dump(record: Any) -> dict[str, Any]:
    return record.model_dump(mode="json")


def _invalid_form(form: FormView, notifier: Notifier) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={
            **error_response(
                "VALIDATION_ERROR",
                "Le formulaire contient des erreurs",
                details={"errors": form.errors},
                notifications=notifier,
            ),
            "values": form.values,
        },
    )


def build_entity_router(entity: EntityView) -> APIRouter:
    router = APIRouter(
        prefix=f"/{entity.slug}",
        tags=[entity.slug],
        dependencies=[Depends(require_auth)],
    )

    @router.get("")
    async def list_records(
        request: Request,
        q: str | None = Query(None, description="Case-insensitive text search"),
        gateway: Gateway = Depends(get_gateway),
        notifier: Notifier = Depends(get_notifier),
    ):
        view = ListView(entity, gateway, notifier).load()
        params = {
            p: request.query_params.get(p)
            for p in entity.chain.params
            if p in request.query_params
        }
        view.apply_params({"q": q, **params})
        filtered = view.filtered()
        return wrap_response(
            [_dump(r) for r in filtered],
            total_count=len(view.items),
            filtered_count=len(filtered),
            notifications=notifier,
            links={"new": entity.new_route},
        )

    @router.post("", status_code=201)
    async def create_record(
        values: dict[str, Any] = Body(...),
        gateway: Gateway = Depends(get_gateway),
        notifier: Notifier = Depends(get_notifier),
        push: PushNotifier = Depends(get_push),
    ):
        form = FormView(entity, gateway, notifier, push)
        document_id = form.submit(values)
        if form.errors:
            return _invalid_form(form, notifier)
        if document_id is None:
            return failure_response(form.error, notifier)
        return wrap_response(
            {"id": document_id},
            redirect=form.redirect,
            notifications=notifier,
        )

    @router.get("/{document_id}")
    async def get_record(
        document_id: str,
        gateway: Gateway = Depends(get_gateway),
        notifier: Notifier = Depends(get_notifier),
    ):
        try:
            record = gateway.collection(entity.key).get(document_id)
        except Exception as exc:
            return failure_response(exc, notifier)
        if record is None:
            return JSONResponse(
                status_code=404,
                content=error_response("NOT_FOUND", f"{entity.key}/{document_id} not found"),
            )
        return wrap_response(_dump(record), links={"edit": entity.edit_route(document_id)})

    @router.patch("/{document_id}")
    async def update_record(
        document_id: str,
        values: dict[str, Any] = Body(...),
        gateway: Gateway = Depends(get_gateway),
        notifier: Notifier = Depends(get_notifier),
    ):
        form = FormView(entity, gateway, notifier)
        if not form.submit_update(document_id, values):
            if form.errors:
                return _invalid_form(form, notifier)
            return failure_response(form.error, notifier)
        return wrap_response(
            {"id": document_id}, redirect=form.redirect, notifications=notifier
        )

    @router.delete("/{document_id}")
    async def delete_record(
        document_id: str,
        confirm: bool = Query(False, description="Must be true to delete"),
        gateway: Gateway = Depends(get_gateway),
        notifier: Notifier = Depends(get_notifier),
    ):
        view = ListView(entity, gateway, notifier)
        try:
            view.delete(document_id, confirmed=confirm)
        except Exception as exc:
            return failure_response(exc, notifier)
        return wrap_response({"id": document_id, "deleted": True}, notifications=notifier)

    return router

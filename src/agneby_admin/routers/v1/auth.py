"""Sign-in / sign-out endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from agneby_admin.auth import AuthService, DisabledAuthService
from agneby_admin.dependencies import (
    AdminUser,
    get_auth,
    get_notifier,
    require_auth,
)
from agneby_admin.responses import failure_response, wrap_response
from agneby_admin.views.notifications import Notifier

router = APIRouter(prefix="/auth", tags=["auth"])


class LoginRequest(BaseModel):
    email: str
    password: str


@router.post("/login")
async def login(
    body: LoginRequest,
    auth: AuthService | DisabledAuthService = Depends(get_auth),
    notifier: Notifier = Depends(get_notifier),
):
    try:
        session = auth.sign_in(body.email, body.password)
    except Exception as exc:
        notifier.error("Erreur de connexion")
        return failure_response(exc, notifier)
    notifier.success("Connexion réussie !")
    return wrap_response(
        session.public_dict(), redirect="/dashboard", notifications=notifier
    )


@router.post("/logout")
async def logout(
    user: AdminUser = Depends(require_auth),
    auth: AuthService | DisabledAuthService = Depends(get_auth),
    notifier: Notifier = Depends(get_notifier),
):
    try:
        auth.sign_out(user.token, user.user_id)
    except Exception as exc:
        notifier.error("Erreur de déconnexion")
        return failure_response(exc, notifier)
    return wrap_response({"user_id": user.user_id}, redirect="/", notifications=notifier)


@router.get("/me")
async def me(user: AdminUser = Depends(require_auth)):
    return wrap_response({"user_id": user.user_id, "email": user.email})

"""Session credential endpoints and the request guard."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response

from car_doctor.api.models import IdentityClaim  # noqa: TC001
from car_doctor.domain.auth import Identity, RejectedToken
from car_doctor.domain.errors import UnauthenticatedError

if TYPE_CHECKING:
    from car_doctor.containers import AppContainer

SESSION_COOKIE_NAME = "token"

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


async def require_identity(request: Request) -> Identity:
    """Verify the session cookie and attach the identity to the request."""
    container: AppContainer = request.app.state.container
    verification = container.auth_guard.authorize(
        request.cookies.get(SESSION_COOKIE_NAME)
    )
    if isinstance(verification, RejectedToken):
        raise UnauthenticatedError(verification.reason)
    request.state.identity = verification.identity
    return verification.identity


async def booking_change_identity(request: Request) -> Identity | None:
    """Require a verified identity for booking changes when ownership is enforced."""
    container: AppContainer = request.app.state.container
    if not container.settings.enforce_booking_ownership:
        return None
    return await require_identity(request)


@router.post("/jwt")
async def issue_token(
    claim: IdentityClaim, request: Request, response: Response
) -> dict[str, bool]:
    """Sign the identity claim and store it in the session cookie."""
    container: AppContainer = request.app.state.container
    token = container.token_service.issue(claim.model_dump())
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        httponly=True,
        secure=container.settings.cookie_secure,
    )
    logger.info("Issued session credential", extra={"email": claim.email})
    return {"success": True}


@router.post("/logout")
async def logout(request: Request, response: Response) -> dict[str, bool]:
    """Clear the session cookie."""
    container: AppContainer = request.app.state.container
    logger.info("Logging out user", extra={"user": await _read_json(request)})
    response.delete_cookie(
        SESSION_COOKIE_NAME,
        httponly=True,
        secure=container.settings.cookie_secure,
    )
    return {"success": True}


async def _read_json(request: Request) -> object | None:
    body = await request.body()
    if not body:
        return None
    try:
        return json.loads(body)
    except ValueError:
        return None

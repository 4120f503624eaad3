"""
FastAPI integration for Warden.

Exposes the invite and delete operations as callable-style endpoints:
the request body is ``{"data": {...}}``, success is ``{"result": {...}}``
and failure is ``{"error": {"status": KIND, "message": ...}}``.

Example:
    ```python
    from fastapi import FastAPI
    from warden import Warden
    from warden.integrations.fastapi import create_router, supabase_caller_resolver

    warden = await Warden.create()
    app = FastAPI()
    app.include_router(
        create_router(warden.users, supabase_caller_resolver(warden.client)),
        prefix="/admin",
    )
    ```
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Optional

try:
    from fastapi import APIRouter, Depends, Request
    from fastapi.responses import JSONResponse
    from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
except ImportError:
    raise ImportError(
        "FastAPI is required for this integration. "
        "Install it with: pip install warden[fastapi]"
    )

from ..admin import Caller, UserAdmin
from ..errors import ErrorKind, WardenError, as_warden_error

logger = logging.getLogger(__name__)

CallerResolver = Callable[[str], Awaitable[Optional[Caller]]]

HTTP_STATUS = {
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.PERMISSION_DENIED: 403,
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.FAILED_PRECONDITION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}

# Security scheme
security = HTTPBearer(auto_error=False)


def supabase_caller_resolver(client) -> CallerResolver:
    """
    Resolve callers from Supabase access tokens.

    Args:
        client: WardenSupabaseClient

    Returns:
        Async callable mapping a JWT to a Caller, or None when the token is
        rejected
    """

    async def resolve(token: str) -> Optional[Caller]:
        try:
            response = await client.auth.get_user(token)
        except Exception:
            logger.debug("access token rejected", exc_info=True)
            return None

        if not response or not response.user:
            return None
        return Caller(uid=str(response.user.id), email=response.user.email)

    return resolve


def error_response(error: WardenError) -> JSONResponse:
    return JSONResponse(
        status_code=HTTP_STATUS[error.kind],
        content={"error": {"status": error.kind.value, "message": error.message}},
    )


async def _request_data(request: Request) -> Dict[str, Any]:
    """The ``data`` object of the body; anything else reads as empty."""
    try:
        payload = await request.json()
    except ValueError:
        return {}
    if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
        return payload["data"]
    return {}


def create_router(users: UserAdmin, resolve_caller: CallerResolver) -> APIRouter:
    """
    Build a router with ``POST /inviteUser`` and ``POST /deleteUser``.

    Args:
        users: UserAdmin carrying the operations
        resolve_caller: Maps a bearer token to the authenticated Caller

    Returns:
        APIRouter to include in an application
    """
    router = APIRouter(tags=["Users"])

    async def current_caller(
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    ) -> Optional[Caller]:
        # No token is not an error here; the operation reports unauthenticated.
        if not credentials:
            return None
        return await resolve_caller(credentials.credentials)

    @router.post("/inviteUser")
    async def invite_user(
        request: Request,
        caller: Optional[Caller] = Depends(current_caller),
    ):
        data = await _request_data(request)
        try:
            result = await users.invite(caller, data)
        except Exception as e:
            error = as_warden_error(e)
            if error.kind is ErrorKind.INTERNAL:
                logger.exception("inviteUser failed")
            return error_response(error)
        return {"result": result.model_dump(by_alias=True)}

    @router.post("/deleteUser")
    async def delete_user(
        request: Request,
        caller: Optional[Caller] = Depends(current_caller),
    ):
        data = await _request_data(request)
        try:
            result = await users.delete(caller, data)
        except Exception as e:
            error = as_warden_error(e)
            if error.kind is ErrorKind.INTERNAL:
                logger.exception("deleteUser failed")
            return error_response(error)
        return {"result": result.model_dump(by_alias=True)}

    return router

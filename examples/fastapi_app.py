"""
FastAPI application example with Warden integration.

Serves POST /admin/inviteUser and POST /admin/deleteUser. Callers send
their Supabase access token as a bearer token and the request fields under
"data":

    curl -X POST localhost:8000/admin/inviteUser \
        -H "Authorization: Bearer $ACCESS_TOKEN" \
        -d '{"data": {"email": "jane@example.com", "firstName": "Jane", "lastName": "Doe"}}'

Run with:
    uvicorn examples.fastapi_app:app --reload
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from warden import Warden
from warden.integrations.fastapi import create_router, supabase_caller_resolver


@asynccontextmanager
async def lifespan(app: FastAPI):
    warden = await Warden.create()
    app.include_router(
        create_router(warden.users, supabase_caller_resolver(warden.client)),
        prefix="/admin",
    )
    try:
        yield
    finally:
        await warden.close()


app = FastAPI(
    title="Warden Example API",
    description="Invite-only user administration",
    version="1.0.0",
    lifespan=lifespan,
)

"""Auth Routes — login and logout form posts.

Invariants:
    - POST /login is gated: an already logged-in user is sent to /dashboard
    - Failed login -> 401 {"message": "Invalid credentials." | "Something went wrong."}
    - Successful login -> 303 to the form's redirectTo (same-site paths only) or /dashboard
    - Unclassified failures during login propagate to the global handlers (500/503)
    - POST /logout is never gated, so a logged-in user can always leave
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.api.dependencies import enforce_access
from dashboard.core.domain_types import DASHBOARD_PATH
from dashboard.infrastructure.database import get_db
from dashboard.infrastructure.identity import CredentialsIdentityProvider, sign_out
from dashboard.services.authenticate import authenticate

logger = logging.getLogger(__name__)
router = APIRouter(tags=["auth"])


def _safe_redirect_target(value: object) -> str:
    """Only same-site absolute paths; anything else falls back to the dashboard.

    Browsers read "/\\host" as "//host" and drop tabs and newlines before
    resolving, so backslashes and control characters are refused outright.
    """
    if not isinstance(value, str) or not value.startswith("/"):
        return DASHBOARD_PATH
    if value[1:2] == "/" or "\\" in value or any(ord(c) < 0x20 for c in value):
        return DASHBOARD_PATH
    return value


@router.post("/login", dependencies=[Depends(enforce_access)])
async def login(request: Request, db: AsyncSession = Depends(get_db)):
    form = await request.form()
    identity = CredentialsIdentityProvider(db, request.session)
    message = await authenticate(None, form, identity)
    if message is not None:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED, content={"message": message},
        )
    return RedirectResponse(
        _safe_redirect_target(form.get("redirectTo")),
        status_code=status.HTTP_303_SEE_OTHER,
    )


@router.post("/logout")
async def logout(request: Request):
    sign_out(request.session)
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)

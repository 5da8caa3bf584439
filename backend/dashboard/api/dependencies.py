"""Route Dependencies — access gating and outcome rendering shared by routers.

Invariants:
    - enforce_access runs core.authorize on every gated request; it never looks at
      the database, only at the signed session cookie
    - LOGIN_REQUIRED -> 303 to /login?callbackUrl=<requested path>
    - REDIRECT_TO_DASHBOARD -> 303 to /dashboard
    - render_outcome maps Redirect -> 303 + Location, Failed -> 422 + FormState body
"""

from urllib.parse import urlencode

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse, RedirectResponse, Response

from dashboard.core.action_outcome import ActionOutcome, Redirect
from dashboard.core.authorize import AccessDecision, authorize
from dashboard.core.domain_types import DASHBOARD_PATH, LOGIN_PATH
from dashboard.infrastructure.identity import current_user


def enforce_access(request: Request) -> None:
    """FastAPI dependency: redirect requests the access predicate rejects."""
    path = request.url.path
    decision = authorize(current_user(request.session) is not None, path)
    if decision == AccessDecision.LOGIN_REQUIRED:
        raise HTTPException(
            status.HTTP_303_SEE_OTHER,
            headers={"Location": f"{LOGIN_PATH}?{urlencode({'callbackUrl': path})}"},
        )
    if decision == AccessDecision.REDIRECT_TO_DASHBOARD:
        raise HTTPException(
            status.HTTP_303_SEE_OTHER, headers={"Location": DASHBOARD_PATH},
        )


def render_outcome(outcome: ActionOutcome) -> Response:
    if isinstance(outcome, Redirect):
        return RedirectResponse(outcome.path, status_code=status.HTTP_303_SEE_OTHER)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=outcome.state.to_dict(),
    )

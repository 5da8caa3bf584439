"""Access Predicate — decides whether a request may reach a page.

Invariants:
    - Paths under /dashboard require a logged-in user
    - A logged-in user visiting any other gated page is sent to /dashboard
    - Anonymous users may reach non-dashboard pages
    - PURE: no IO, no session access — caller passes the login flag

Design Decisions:
    - Returns a decision enum instead of a response object: the HTTP layer
      (api/dependencies.py) owns redirects and query strings
"""

from enum import Enum

from dashboard.core.domain_types import DASHBOARD_PATH


class AccessDecision(str, Enum):
    ALLOW = "allow"
    LOGIN_REQUIRED = "login_required"
    REDIRECT_TO_DASHBOARD = "redirect_to_dashboard"


def is_dashboard_path(pathname: str) -> bool:
    return pathname == DASHBOARD_PATH or pathname.startswith(DASHBOARD_PATH + "/")


def authorize(is_logged_in: bool, pathname: str) -> AccessDecision:
    """Decide access for `pathname` given the session's login state."""
    if is_dashboard_path(pathname):
        if is_logged_in:
            return AccessDecision.ALLOW
        return AccessDecision.LOGIN_REQUIRED
    if is_logged_in:
        return AccessDecision.REDIRECT_TO_DASHBOARD
    return AccessDecision.ALLOW

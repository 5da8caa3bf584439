"""Authenticate — the login form action.

Invariants:
    - Success returns None; the caller performs its own navigation
    - Classified identity failures (AuthError) become one of two form messages
    - Anything else (network, database, bugs) propagates unchanged: an outage must
      not be reported to the user as "Invalid credentials."
"""

import logging
from collections.abc import Mapping
from typing import Any

from dashboard.core.classify_credentials import credential_failure_message
from dashboard.core.errors import AuthError
from dashboard.core.repository_protocols import IdentityProvider
from dashboard.infrastructure.identity import CREDENTIALS_PROVIDER

logger = logging.getLogger(__name__)


async def authenticate(
    prev_state: str | None,
    form_data: Mapping[str, Any],
    identity: IdentityProvider,
) -> str | None:
    try:
        await identity.sign_in(CREDENTIALS_PROVIDER, form_data)
    except AuthError as error:
        logger.info(
            f"Sign-in failed: {error.type.value}",
            extra={"error_code": error.code, "action": "sign_in"},
        )
        return credential_failure_message(error)
    return None

"""Credentials Identity Provider — verifies email/password against the users table.

Invariants:
    - Only the "credentials" provider exists; others raise AuthError(InvalidProvider)
    - Malformed form, unknown email and wrong password all raise CredentialsSignin
      (callers cannot tell which one happened)
    - Database failures are NOT auth failures: they propagate unclassified
    - On success the signed session cookie holds {"id", "email", "name"} under "user"
    - Passwords are stored as bcrypt hashes and checked with bcrypt.checkpw

Design Decisions:
    - The provider writes the session itself, like a hosted identity layer would:
      sign_in returns nothing and the caller decides where to navigate
    - bcrypt embeds its cost factor in the hash, so the cost can be raised without
      invalidating existing users
    - An unreadable stored hash or an over-long password is a failed check, not
      an error: the caller reports it as CredentialsSignin
"""

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

import bcrypt
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.core.errors import AuthError, AuthErrorType, CredentialsSignin
from dashboard.models.user import User
from dashboard.schemas.auth import Credentials

logger = logging.getLogger(__name__)

CREDENTIALS_PROVIDER = "credentials"
SESSION_USER_KEY = "user"

_DEFAULT_ROUNDS = 12


def hash_password(password: str, rounds: int = _DEFAULT_ROUNDS) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode("ascii")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode(), hashed.encode())
    except ValueError:
        return False


def current_user(session: Mapping[str, Any]) -> dict | None:
    return session.get(SESSION_USER_KEY)


def sign_out(session: MutableMapping[str, Any]) -> None:
    session.pop(SESSION_USER_KEY, None)


class CredentialsIdentityProvider:
    """Identity layer for the login form, bound to one request's session."""

    def __init__(self, db: AsyncSession, session: MutableMapping[str, Any]):
        self.db = db
        self.session = session

    async def sign_in(self, provider: str, form_data: Mapping[str, Any]) -> None:
        if provider != CREDENTIALS_PROVIDER:
            raise AuthError(
                AuthErrorType.INVALID_PROVIDER, f"Unsupported provider '{provider}'",
            )
        try:
            credentials = Credentials.model_validate({
                "email": form_data.get("email"),
                "password": form_data.get("password"),
            })
        except ValidationError:
            raise CredentialsSignin() from None

        user = await self._get_user(credentials.email)
        if user is None or not verify_password(credentials.password, user.password):
            logger.info("Credentials rejected", extra={"action": "sign_in"})
            raise CredentialsSignin()

        self.session[SESSION_USER_KEY] = {
            "id": str(user.id), "email": user.email, "name": user.name,
        }

    async def _get_user(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

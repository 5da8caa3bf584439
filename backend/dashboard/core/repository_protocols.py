"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - The view cache and identity layer are reached only through these Protocols
    - Implementations provided by shell via dependency injection (FastAPI Depends)

Design Decisions:
    - Protocol over ABC: structural subtyping, tests pass plain fakes
    - revalidate is sync: the process-local cache does no IO; sign_in is async
      because the credentials provider reads the users table
"""

from collections.abc import Mapping
from typing import Any, Protocol


class ViewRevalidator(Protocol):
    """Marks a rendered view stale so its next read recomputes it."""
    def revalidate(self, path: str) -> None: ...


class IdentityProvider(Protocol):
    """Signs a user in or raises AuthError (classified) / anything else (unclassified)."""
    async def sign_in(self, provider: str, form_data: Mapping[str, Any]) -> None: ...

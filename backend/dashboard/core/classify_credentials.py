"""Credential Failure Classification — maps identity-layer failures to form messages.

Invariants:
    - CredentialsSignin -> "Invalid credentials."
    - Any other AuthError -> "Something went wrong."
    - Only AuthError is accepted: unrelated failures never reach this function,
      the caller lets them propagate
"""

from dashboard.core.errors import AuthError, AuthErrorType

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials."
GENERIC_AUTH_FAILURE_MESSAGE = "Something went wrong."


def credential_failure_message(error: AuthError) -> str:
    if error.type == AuthErrorType.CREDENTIALS_SIGNIN:
        return INVALID_CREDENTIALS_MESSAGE
    return GENERIC_AUTH_FAILURE_MESSAGE

"""Credential Failure Classification — AuthError type -> form message."""

from dashboard.core.classify_credentials import credential_failure_message
from dashboard.core.errors import AuthError, AuthErrorType, CredentialsSignin


def test_credentials_signin_is_invalid_credentials():
    assert credential_failure_message(CredentialsSignin()) == "Invalid credentials."


def test_other_auth_errors_are_generic():
    for error_type in (AuthErrorType.INVALID_PROVIDER, AuthErrorType.ACCESS_DENIED):
        error = AuthError(error_type)
        assert credential_failure_message(error) == "Something went wrong."

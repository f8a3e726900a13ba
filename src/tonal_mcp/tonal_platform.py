"""
Tonal account login for the auth tools.

tonal_login() never raises: every outcome is a LoginResult whose to_dict()
is safe to hand back to the model (tokens are kept out of it).
"""

from dataclasses import dataclass, field
from typing import Optional

from tonal_mcp.sdk.client import TonalClient, TonalAuthError
from tonal_mcp.sdk import auth as sdk_auth

_PUBLIC_ON_SUCCESS = ("display_name", "user_id", "email")
_PUBLIC_ON_FAILURE = ("error", "error_code", "details")


@dataclass
class LoginResult:
    success: bool
    tokens: Optional[str] = None
    display_name: Optional[str] = None
    user_id: Optional[str] = None
    email: Optional[str] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    details: dict = field(default_factory=dict)

    @classmethod
    def failed(cls, code: str, error: str, **details) -> "LoginResult":
        return cls(success=False, error=error, error_code=code, details=details)

    def to_dict(self) -> dict:
        keys = _PUBLIC_ON_SUCCESS if self.success else _PUBLIC_ON_FAILURE
        result = {"success": self.success}
        result.update({k: getattr(self, k) for k in keys if getattr(self, k)})
        return result


def tonal_login(username: str, password: str) -> LoginResult:
    """
    Log in to Tonal with email and password.

    Returns:
        LoginResult carrying exported session tokens on success
    """
    client = TonalClient(username=username, password=password)
    try:
        user = sdk_auth.login(client)
    except TonalAuthError as e:
        return LoginResult.failed(
            "INVALID_CREDENTIALS",
            "Invalid email or password",
            message="Tonal rejected the login credentials",
            context=str(e),
            solution="Check the email and password you use in the Tonal app.",
        )
    except ValueError as e:
        return LoginResult.failed("LOGIN_ERROR", f"Login failed: {e}")
    except Exception as e:
        return LoginResult.failed(
            "UNEXPECTED_ERROR",
            f"Unexpected error: {e}",
            message="Could not reach Tonal to log in",
            context=str(e),
            solution="Check your internet connection and try again later.",
        )

    return LoginResult(
        success=True,
        tokens=client.export_token(),
        display_name=f"{user.first_name} {user.last_name}".strip(),
        user_id=user.user_id,
        email=user.email,
    )

"""
Tonal HTTP Client.

Handles HTTP transport, bearer-token authentication, token refresh and
error mapping. All domain-specific endpoint calls live in the sibling
modules (auth, movements, metrics, workouts).

This uses a non-public API from Tonal that could change without notice.
"""

import json
import logging
import os
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import requests

from tonal_mcp.errors import TonalMCPError

logger = logging.getLogger(__name__)

API_URL = os.environ.get("TONAL_API_URL", "https://api.tonal.com")
AUTH_URL = os.environ.get("TONAL_AUTH_URL", "https://tonal.auth0.com/oauth/token")
CLIENT_ID = os.environ.get("TONAL_CLIENT_ID", "ERCyexW-xoVG_Yy3RDe-eV4xsOnRHP6L")

REQUEST_TIMEOUT = 30
# Refresh a little before the id token actually expires
EXPIRY_MARGIN_SECONDS = 60


class TonalAuthError(TonalMCPError):
    """Authentication with Tonal failed (bad credentials, expired tokens)."""

    def __init__(self, message: str):
        super().__init__(message, code="AUTHENTICATION_ERROR", status_code=401)


class TonalAPIError(TonalMCPError):
    """A Tonal API call returned a non-success HTTP status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message, code="API_ERROR", status_code=status_code or 500)


@dataclass
class UserInfo:
    """Tonal user information."""
    user_id: str
    first_name: str
    last_name: str
    email: str
    level: Optional[str] = None
    location: Optional[str] = None


class TonalClient:
    """
    Tonal HTTP transport.

    Handles authentication, headers, token refresh and request/response parsing.
    Domain-specific endpoint calls are in sibling modules (sdk.auth, sdk.workouts, etc.).
    """

    def __init__(self, username: str = None, password: str = None):
        self._username = username
        self._password = password
        self._id_token: Optional[str] = None
        self._refresh_token: Optional[str] = None
        self._expires_at: float = 0.0
        self._user_info: Optional[UserInfo] = None
        # Called with export_token() after every successful refresh
        self.on_tokens_refreshed: Optional[Callable[[str], None]] = None

        self._api_url = API_URL
        self._session = requests.Session()

    @property
    def id_token(self) -> Optional[str]:
        return self._id_token

    @property
    def user_info(self) -> Optional[UserInfo]:
        return self._user_info

    @user_info.setter
    def user_info(self, value: UserInfo):
        self._user_info = value

    @property
    def user_id(self) -> str:
        if not self._user_info:
            raise RuntimeError("User info not loaded. Call login() first.")
        return self._user_info.user_id

    @property
    def is_logged_in(self) -> bool:
        return self._id_token is not None

    def make_request(
        self,
        method: str,
        endpoint: str,
        params: Dict = None,
        json_data: Any = None,
        require_auth: bool = True,
    ) -> Any:
        """
        Make an authenticated API request.

        Args:
            method: HTTP method (GET/POST/PUT/DELETE)
            endpoint: API endpoint path (e.g. "v6/movements")
            params: Query parameters
            json_data: JSON body data
            require_auth: Whether authentication is required

        Returns:
            Decoded JSON response, or None for empty bodies

        Raises:
            RuntimeError: If not logged in but auth required
            TonalAuthError: If the token was rejected and could not be refreshed
            TonalAPIError: If the API returns a non-success status
        """
        if require_auth and not self.is_logged_in:
            raise RuntimeError("Not logged in. Call login() first.")

        if require_auth and self._refresh_token and time.time() >= self._expires_at:
            self.refresh_tokens()

        response = self._send(method, endpoint, params, json_data)

        if response.status_code == 401 and require_auth and self._refresh_token:
            logger.info("Tonal token rejected, refreshing and retrying %s", endpoint)
            self.refresh_tokens()
            response = self._send(method, endpoint, params, json_data)

        if response.status_code == 401:
            raise TonalAuthError("Tonal rejected the access token (401 unauthorized)")
        if not response.ok:
            raise TonalAPIError(
                f"Tonal API error on {method.upper()} {endpoint}: "
                f"{response.status_code} {response.text[:200]}",
                status_code=response.status_code,
            )

        if not response.content:
            return None
        return response.json()

    def _send(self, method: str, endpoint: str, params: Dict, json_data: Any) -> requests.Response:
        headers = {"Content-Type": "application/json"}
        if self._id_token:
            headers["Authorization"] = f"Bearer {self._id_token}"

        url = f"{self._api_url}/{endpoint}"
        return self._session.request(
            method.upper(),
            url,
            headers=headers,
            params=params,
            json=json_data,
            timeout=REQUEST_TIMEOUT,
        )

    def token_request(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        POST to the Auth0 token endpoint and store the returned tokens.

        Raises:
            TonalAuthError: If the token endpoint rejects the grant
        """
        response = self._session.post(
            AUTH_URL,
            json={"client_id": CLIENT_ID, **payload},
            timeout=REQUEST_TIMEOUT,
        )
        if not response.ok:
            try:
                detail = response.json().get("error_description", response.text)
            except ValueError:
                detail = response.text
            raise TonalAuthError(f"Tonal login failed: {detail}")

        data = response.json()
        self._id_token = data["id_token"]
        # Refresh grants may omit the refresh token; keep the old one then
        self._refresh_token = data.get("refresh_token", self._refresh_token)
        self._expires_at = time.time() + data.get("expires_in", 86400) - EXPIRY_MARGIN_SECONDS
        return data

    def refresh_tokens(self) -> None:
        """Exchange the refresh token for a fresh id token."""
        if not self._refresh_token:
            raise TonalAuthError("No refresh token available. Log in again.")
        self.token_request({
            "grant_type": "refresh_token",
            "refresh_token": self._refresh_token,
        })
        if self.on_tokens_refreshed:
            self.on_tokens_refreshed(self.export_token())

    # ── Token serialization ──────────────────────────────────────────────

    def export_token(self) -> str:
        """Export tokens and user info as JSON string."""
        if not self.is_logged_in:
            raise RuntimeError("Not logged in. Call login() first.")

        return json.dumps({
            "id_token": self._id_token,
            "refresh_token": self._refresh_token,
            "expires_at": self._expires_at,
            "user_info": {
                "user_id": self._user_info.user_id,
                "first_name": self._user_info.first_name,
                "last_name": self._user_info.last_name,
                "email": self._user_info.email,
                "level": self._user_info.level,
                "location": self._user_info.location,
            } if self._user_info else None,
        })

    def load_token(self, token_data: str) -> None:
        """Load a previously exported token."""
        data = json.loads(token_data)
        self._id_token = data["id_token"]
        self._refresh_token = data.get("refresh_token")
        self._expires_at = data.get("expires_at", 0.0)

        if data.get("user_info"):
            ui = data["user_info"]
            self._user_info = UserInfo(
                user_id=ui["user_id"],
                first_name=ui.get("first_name", ""),
                last_name=ui.get("last_name", ""),
                email=ui.get("email", ""),
                level=ui.get("level"),
                location=ui.get("location"),
            )

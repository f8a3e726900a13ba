"""
Tonal authentication SDK functions.
"""

from typing import Any, Dict

from tonal_mcp.sdk.client import TonalClient, UserInfo

PASSWORD_REALM_GRANT = "http://auth0.com/oauth/grant-type/password-realm"
REALM = "Username-Password-Authentication"


def login(client: TonalClient, username: str = None, password: str = None) -> UserInfo:
    """
    Authenticate with Tonal and load the user profile.

    POST oauth/token (Auth0 password-realm grant), then GET v6/users/userinfo

    Args:
        client: TonalClient instance
        username: Tonal account email (uses client's stored username if not provided)
        password: Tonal account password (uses client's stored password if not provided)

    Returns:
        UserInfo with user details

    Raises:
        ValueError: If credentials are missing
        TonalAuthError: If credentials are rejected
    """
    username = username or client._username
    password = password or client._password

    if not username or not password:
        raise ValueError("Missing credentials")

    client._username = username
    client._password = password

    client.token_request({
        "grant_type": PASSWORD_REALM_GRANT,
        "realm": REALM,
        "username": username,
        "password": password,
        "scope": "openid offline_access",
    })

    return get_user_info(client)


def get_user_info(client: TonalClient) -> UserInfo:
    """
    Get current account information.

    GET v6/users/userinfo

    Returns:
        UserInfo with user details
    """
    data = get_user_info_full(client)

    user_info = UserInfo(
        user_id=data["id"],
        first_name=data.get("firstName", ""),
        last_name=data.get("lastName", ""),
        email=data.get("email", ""),
        level=data.get("level"),
        location=data.get("location"),
    )
    client.user_info = user_info

    return user_info


def get_user_info_full(client: TonalClient) -> Dict[str, Any]:
    """
    Get the raw user profile payload.

    GET v6/users/userinfo
    """
    return client.make_request("GET", "v6/users/userinfo")

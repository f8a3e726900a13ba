"""
Authentication tools for Tonal MCP server.

Provides login and session management.
"""

import logging

from fastmcp import Context

logger = logging.getLogger(__name__)

from tonal_mcp.tonal_platform import tonal_login
from tonal_mcp.client_factory import set_session_tokens, clear_session_tokens

CATEGORY = "auth"


async def tonal_login_tool(username: str, password: str, ctx: Context) -> dict:
    """
    Login to Tonal.

    Validates credentials with Tonal and stores session tokens
    for subsequent API calls.

    Args:
        username: Your Tonal account email address
        password: Your Tonal account password

    Returns:
        Login result with user info or error message
    """
    result = tonal_login(username, password)
    if result.success:
        set_session_tokens(ctx, result.tokens)
        logger.info("Tonal login succeeded for user %s", result.user_id)
    else:
        logger.warning("Tonal login failed: %s", result.error_code)
    return result.to_dict()


async def set_tonal_session(tonal_tokens: str, ctx: Context) -> dict:
    """
    Restore a Tonal session from stored tokens.

    Use this to restore a previous login without re-entering credentials.

    Args:
        tonal_tokens: Previously saved session tokens from login

    Returns:
        Session restoration result
    """
    try:
        set_session_tokens(ctx, tonal_tokens)
        return {"success": True, "message": "Session restored"}
    except Exception as e:
        logger.error(f"Error restoring Tonal session: {e}")
        return {"success": False, "error": str(e)}


async def tonal_logout(ctx: Context) -> dict:
    """
    Logout from the current Tonal session.

    Clears all session data. User will need to login again.

    Returns:
        Logout confirmation
    """
    clear_session_tokens(ctx)
    return {"success": True, "message": "Logged out"}


TOOLS = (tonal_login_tool, set_tonal_session, tonal_logout)

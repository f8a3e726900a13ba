"""
Per-session TonalClient construction for tools.

Each MCP connection carries its own Tonal tokens. They live in two places:
- the FastMCP Context state (fast, but not kept across HTTP requests)
- a JSON file per session under $TONAL_SESSION_DIR, keyed by ctx.session_id

A session with no tokens falls back to TONAL_USERNAME / TONAL_PASSWORD, which
is how single-user stdio setups authenticate; the resulting tokens are
cached in the session like a regular login.
"""

import json
import logging
import os
from pathlib import Path

from fastmcp import Context

from tonal_mcp.sdk.client import TonalClient
from tonal_mcp.sdk import auth as sdk_auth

logger = logging.getLogger(__name__)

TONAL_TOKENS_KEY = "tonal_tokens"
SESSION_STORE_DIR = Path(os.environ.get("TONAL_SESSION_DIR", "/data/tonal_sessions"))


def get_client(ctx: Context) -> TonalClient:
    """
    Authenticated TonalClient for the calling session.

    Raises:
        ValueError: If the session has no tokens and no env credentials are set
    """
    tokens = _session_tokens(ctx)
    if tokens:
        client = TonalClient()
        client.load_token(tokens)
    else:
        client = create_client_from_env()
        set_session_tokens(ctx, client.export_token())

    # Refreshed tokens replace the stored ones, including a rotated refresh token
    client.on_tokens_refreshed = lambda refreshed: set_session_tokens(ctx, refreshed)
    return client


def create_client_from_env() -> TonalClient:
    username = os.environ.get("TONAL_USERNAME")
    password = os.environ.get("TONAL_PASSWORD")
    if not username or not password:
        raise ValueError(
            "No Tonal session. Call tonal_login_tool() first, or set the "
            "TONAL_USERNAME and TONAL_PASSWORD environment variables."
        )

    logger.info("Logging in to Tonal with environment credentials")
    client = TonalClient(username=username, password=password)
    sdk_auth.login(client)
    return client


def set_session_tokens(ctx: Context, tokens: str) -> None:
    """Remember tokens for this session, in Context state and on disk."""
    ctx.set_state(TONAL_TOKENS_KEY, tokens)

    session_id = _session_id(ctx)
    if session_id is None:
        return
    data = _read_session(session_id)
    data[TONAL_TOKENS_KEY] = tokens
    _write_session(session_id, data)


def clear_session_tokens(ctx: Context) -> None:
    """Forget this session's tokens everywhere."""
    ctx.set_state(TONAL_TOKENS_KEY, None)

    session_id = _session_id(ctx)
    if session_id is None:
        return
    path = _session_path(session_id)
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("Failed to remove session file %s: %s", path, e)


def _session_tokens(ctx: Context) -> str | None:
    tokens = ctx.get_state(TONAL_TOKENS_KEY)
    if tokens:
        return tokens

    session_id = _session_id(ctx)
    if session_id is None:
        return None

    tokens = _read_session(session_id).get(TONAL_TOKENS_KEY)
    if tokens:
        # Warm the in-memory state for the rest of this request
        ctx.set_state(TONAL_TOKENS_KEY, tokens)
    return tokens


def _session_id(ctx: Context) -> str | None:
    try:
        return ctx.session_id
    except RuntimeError:
        # Outside a request: Context state only
        return None


def _session_path(session_id: str) -> Path:
    # Only [A-Za-z0-9_-] so a session id cannot escape the store directory
    safe = "".join(c for c in session_id if c.isalnum() or c in "-_")
    return SESSION_STORE_DIR / f"{safe}.json"


def _read_session(session_id: str) -> dict:
    path = _session_path(session_id)
    try:
        return json.loads(path.read_text())
    except FileNotFoundError:
        return {}
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable session file %s: %s", path, e)
        return {}


def _write_session(session_id: str, data: dict) -> None:
    path = _session_path(session_id)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data))
    except OSError as e:
        # The session still works for this request, it just won't persist
        logger.warning("Failed to save session file %s: %s", path, e)

"""
Tonal Low-Level SDK.

Thin wrapper over the Tonal HTTP API.
Each function maps 1:1 to a Tonal endpoint.
"""

from tonal_mcp.sdk.client import (
    TonalClient,
    TonalAPIError,
    TonalAuthError,
    UserInfo,
)

__all__ = [
    "TonalClient",
    "TonalAPIError",
    "TonalAuthError",
    "UserInfo",
]

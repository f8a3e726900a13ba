"""
Tonal movement catalog SDK functions.
"""

from typing import Any, Dict, List

from tonal_mcp.sdk.client import TonalClient


def get_movements(client: TonalClient) -> List[Dict[str, Any]]:
    """
    Get the full movement catalog.

    GET v6/movements

    Returns:
        List of {id, name, countReps, muscleGroups, ...}
    """
    return client.make_request("GET", "v6/movements") or []

"""
Tonal custom workout SDK functions.

Custom workouts are stored as a flat, ordered list of set records.
"""

from typing import Any, Dict, List

from tonal_mcp.sdk.client import TonalClient

# createdSource value used by the Tonal workout builder
WORKOUT_BUILDER_SOURCE = "WorkoutBuilder"


def get_user_workouts(
    client: TonalClient, offset: int = 0, limit: int = 100,
) -> List[Dict[str, Any]]:
    """
    List the user's custom workouts.

    GET v6/user-workouts

    Returns:
        List of {id, title, description, createdAt, duration, targetArea, sets[]}
    """
    return client.make_request(
        "GET",
        "v6/user-workouts",
        params={"offset": str(offset), "limit": str(limit)},
    ) or []


def get_workout(client: TonalClient, workout_id: str) -> Dict[str, Any]:
    """
    Get a single workout with its persisted sets.

    GET v6/workouts/{id}

    Returns:
        {id, title, description, duration, sets[], coachId, assetId, level, ...}
    """
    return client.make_request("GET", f"v6/workouts/{workout_id}")


def create_workout(client: TonalClient, payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Create a custom workout.

    POST v6/user-workouts

    Args:
        payload: {title, description, sets[], createdSource}

    Returns:
        The persisted workout, including the platform's copy of the sets
    """
    return client.make_request("POST", "v6/user-workouts", json_data=payload)


def update_workout(
    client: TonalClient, workout_id: str, payload: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Replace a custom workout's title, description and sets.

    PUT v6/user-workouts/{id}

    Returns:
        The persisted workout
    """
    return client.make_request(
        "PUT", f"v6/user-workouts/{workout_id}", json_data=payload,
    )


def delete_workout(client: TonalClient, workout_id: str) -> None:
    """
    Delete a custom workout.

    DELETE v6/user-workouts/{id}
    """
    client.make_request("DELETE", f"v6/user-workouts/{workout_id}")

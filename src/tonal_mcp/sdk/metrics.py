"""
Tonal read-only metrics SDK functions.

Readiness, lifetime statistics, streaks, daily metrics and activity history.
"""

from typing import Any, Dict, List

from tonal_mcp.sdk.client import TonalClient


def get_muscle_readiness(client: TonalClient) -> Dict[str, float]:
    """
    Get current readiness percentage per muscle.

    GET v6/users/{userId}/muscle-readiness/current

    Returns:
        {Chest: 85, Shoulders: 72, ...}
    """
    return client.make_request(
        "GET", f"v6/users/{client.user_id}/muscle-readiness/current",
    )


def get_user_statistics(client: TonalClient) -> Dict[str, Any]:
    """
    Get lifetime statistics.

    GET v6/users/{userId}/stats

    Returns:
        {workouts: {total, totalDuration}, volume: {total, avgVolumePerWorkout},
         movements: {total}}
    """
    return client.make_request("GET", f"v6/users/{client.user_id}/stats")


def get_current_streak(client: TonalClient) -> Dict[str, Any]:
    """
    Get the current and best workout streak.

    GET v6/users/{userId}/streaks/current

    Returns:
        {currentStreak, maxStreak}
    """
    return client.make_request("GET", f"v6/users/{client.user_id}/streaks/current")


def get_daily_metrics(client: TonalClient, days: int = 30) -> List[Dict[str, Any]]:
    """
    Get one metrics entry per day for the trailing window.

    GET v6/users/{userId}/daily-metrics

    Returns:
        List of {date, totalWorkouts, totalVolume, totalDuration}
    """
    return client.make_request(
        "GET",
        f"v6/users/{client.user_id}/daily-metrics",
        params={"days": str(days)},
    ) or []


def get_activity_summaries(client: TonalClient) -> List[Dict[str, Any]]:
    """
    Get completed workout summaries, most recent first.

    GET v6/users/{userId}/activity-summaries

    Returns:
        List of {id, name, timestamp, duration, totalVolume, totalReps,
                 targetArea, isGuidedWorkout, isInProgram}
    """
    return client.make_request(
        "GET", f"v6/users/{client.user_id}/activity-summaries",
    ) or []

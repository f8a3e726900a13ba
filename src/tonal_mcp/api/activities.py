"""
Workout history: what have you done?
"""

from tonal_mcp.sdk.client import TonalClient
from tonal_mcp.sdk import metrics as sdk_metrics
from tonal_mcp.utils import time_ago, to_minutes, MAX_WORKOUT_LIMIT


def get_recent_workouts(client: TonalClient, limit: int = 10) -> dict:
    """Most recent completed workouts with summary totals."""
    limit = min(limit, MAX_WORKOUT_LIMIT)
    activities = sdk_metrics.get_activity_summaries(client)[:limit]

    total_volume = sum(a.get("totalVolume", 0) or 0 for a in activities)
    total_seconds = sum(a.get("duration", 0) or 0 for a in activities)

    return {
        "count": len(activities),
        "total_volume_lbs": total_volume,
        "total_minutes": to_minutes(total_seconds),
        "avg_minutes": to_minutes(total_seconds / len(activities)) if activities else 0,
        "workouts": [
            {
                "name": a.get("name"),
                "when": time_ago(a.get("timestamp")),
                "minutes": to_minutes(a.get("duration", 0)),
                "volume_lbs": a.get("totalVolume", 0),
                "reps": a.get("totalReps", 0),
                "target_area": a.get("targetArea"),
                "type": "Guided" if a.get("isGuidedWorkout") else "Free Lift",
                "in_program": bool(a.get("isInProgram")),
            }
            for a in activities
        ],
    }

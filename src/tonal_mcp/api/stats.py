"""
Athlete statistics: how are you doing over time?

Lifetime totals, streaks and the recent consistency trend.
"""

from tonal_mcp.sdk.client import TonalClient
from tonal_mcp.sdk import auth as sdk_auth
from tonal_mcp.sdk import metrics as sdk_metrics
from tonal_mcp.utils import time_ago, to_minutes

PROGRESS_DAYS = 30
RECENT_ACTIVITY_COUNT = 5

# Workout-day frequency (% of days) → consistency tier
_FREQUENCY_TIERS = (
    (80, "exceptional"),
    (60, "great"),
    (40, "good"),
    (20, "building"),
)


def get_user_stats(client: TonalClient) -> dict:
    """Profile, lifetime totals and current streak."""
    user = sdk_auth.get_user_info_full(client)
    stats = sdk_metrics.get_user_statistics(client) or {}
    streak = sdk_metrics.get_current_streak(client) or {}

    workouts = stats.get("workouts", {})
    volume = stats.get("volume", {})
    current = streak.get("currentStreak", 0) or 0
    best = streak.get("maxStreak", 0) or 0

    return {
        "profile": {
            "name": f"{user.get('firstName', '')} {user.get('lastName', '')}".strip(),
            "level": user.get("level"),
            "location": user.get("location"),
        },
        "lifetime": {
            "total_workouts": workouts.get("total", 0),
            "total_volume_lbs": volume.get("total", 0),
            "total_hours": round((workouts.get("totalDuration", 0) or 0) / 3600),
            "avg_volume_per_workout_lbs": volume.get("avgVolumePerWorkout", 0),
            "unique_movements": stats.get("movements", {}).get("total", 0),
        },
        "streak": {
            "current": current,
            "best": best,
            "progress_to_best_pct": round(current / best * 100) if current and best else None,
            "momentum": _streak_momentum(current, best),
        },
    }


def get_recent_progress(client: TonalClient, days: int = PROGRESS_DAYS) -> dict:
    """Workout frequency, volume and recent sessions over the trailing window."""
    daily = sdk_metrics.get_daily_metrics(client, days)
    activities = sdk_metrics.get_activity_summaries(client)[:RECENT_ACTIVITY_COUNT]

    active = [d for d in daily if (d.get("totalWorkouts") or 0) > 0]
    frequency = len(active) / len(daily) * 100 if daily else 0.0
    avg_duration = (
        sum(d.get("totalDuration", 0) or 0 for d in active) / len(active)
        if active else 0
    )

    return {
        "days": days,
        "active_days": len(active),
        "frequency_pct": round(frequency, 1),
        "total_volume_lbs": sum(d.get("totalVolume", 0) or 0 for d in active),
        "avg_workout_minutes": to_minutes(avg_duration),
        "consistency": consistency_tier(frequency),
        "recent_activities": [
            {
                "name": a.get("name"),
                "when": time_ago(a.get("timestamp")),
                "volume_lbs": a.get("totalVolume", 0),
                "minutes": to_minutes(a.get("duration", 0)),
            }
            for a in activities
        ],
    }


def consistency_tier(frequency_pct: float) -> str:
    for threshold, tier in _FREQUENCY_TIERS:
        if frequency_pct >= threshold:
            return tier
    return "starting"


def _streak_momentum(current: int, best: int) -> str:
    if current == 0:
        return "none"
    if current >= best:
        return "personal_best"
    if current >= 5:
        return "strong"
    return "building"

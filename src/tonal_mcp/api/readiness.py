"""
Muscle readiness. How recovered are you?
"""

from tonal_mcp.sdk.client import TonalClient
from tonal_mcp.sdk import metrics as sdk_metrics

READY_THRESHOLD = 80
RECOVERY_THRESHOLD = 60

REGIONS = {
    "upper_body": ("Chest", "Shoulders", "Back", "Triceps", "Biceps"),
    "core": ("Abs", "Obliques"),
    "lower_body": ("Quads", "Glutes", "Hamstrings", "Calves"),
}


def readiness_status(percentage: float) -> str:
    if percentage >= READY_THRESHOLD:
        return "ready"
    if percentage >= RECOVERY_THRESHOLD:
        return "moderate"
    return "recovering"


def get_muscle_readiness(client: TonalClient) -> dict:
    """Per-muscle readiness with regional and overall averages.

    Muscles missing from the response are skipped rather than counted as 0.
    """
    readiness = sdk_metrics.get_muscle_readiness(client) or {}

    regions = {}
    for region, muscles in REGIONS.items():
        values = {m: readiness[m] for m in muscles if readiness.get(m) is not None}
        regions[region] = {
            "average": _average(values.values()),
            "muscles": {
                m: {"percent": v, "status": readiness_status(v)}
                for m, v in values.items()
            },
        }

    needs_recovery = {
        muscle: pct for muscle, pct in readiness.items()
        if pct is not None and pct < RECOVERY_THRESHOLD
    }

    return {
        "overall": _average(v for v in readiness.values() if v is not None),
        "regions": regions,
        "needs_recovery": needs_recovery,
    }


def _average(values) -> int:
    values = list(values)
    if not values:
        return 0
    return round(sum(values) / len(values))

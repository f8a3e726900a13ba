"""
Fitness tools for Tonal MCP server.

Muscle readiness, lifetime statistics and recent progress.
"""

from fastmcp import Context

from tonal_mcp.api import readiness as api_readiness
from tonal_mcp.api import stats as api_stats
from tonal_mcp.client_factory import get_client
from tonal_mcp.errors import handle_tool_error
from tonal_mcp.utils import format_number

CATEGORY = "fitness"

_STATUS_ICONS = {"ready": "🟢", "moderate": "🟡", "recovering": "🔴"}

_REGION_TITLES = {
    "upper_body": "Upper Body",
    "core": "Core",
    "lower_body": "Lower Body",
}

_MOMENTUM = {
    "none": "Start a new streak with your next workout!",
    "personal_best": "🏆 You're on your best streak ever!",
    "strong": "🔥 Strong momentum, keep it going!",
    "building": "💪 Building momentum!",
}

_CONSISTENCY = {
    "exceptional": "🔥 Exceptional consistency!",
    "great": "💪 Great consistency!",
    "good": "👍 Good consistency",
    "building": "📈 Building consistency",
    "starting": "🌱 Getting started, every workout counts",
}


async def get_muscle_readiness(ctx: Context) -> str:
    """
    Get current muscle readiness from Tonal.

    Shows recovery percentage per muscle group, grouped into upper body,
    core and lower body, plus muscles that still need recovery.
    Use before planning a workout to pick what to train.

    Returns:
        Markdown readiness report
    """
    try:
        client = get_client(ctx)
        data = api_readiness.get_muscle_readiness(client)

        lines = ["# 💪 Muscle Readiness", "", f"**Overall readiness:** {data['overall']}%", ""]
        for region, summary in data["regions"].items():
            lines.append(f"## {_REGION_TITLES[region]} ({summary['average']}%)")
            for muscle, info in summary["muscles"].items():
                lines.append(f"- {_STATUS_ICONS[info['status']]} {muscle}: {info['percent']}%")
            lines.append("")

        if data["needs_recovery"]:
            lines.append("## ⚠️ Needs Recovery")
            for muscle, pct in sorted(data["needs_recovery"].items(), key=lambda kv: kv[1]):
                lines.append(f"- {muscle}: {pct}%")
        else:
            lines.append("✅ All muscle groups are recovered enough to train.")

        return "\n".join(lines)
    except Exception as e:
        return handle_tool_error(e, "get_muscle_readiness")


async def get_user_stats(ctx: Context) -> str:
    """
    Get the user's Tonal profile, lifetime statistics and current streak.

    Returns:
        Markdown stats report
    """
    try:
        client = get_client(ctx)
        data = api_stats.get_user_stats(client)
        profile, lifetime, streak = data["profile"], data["lifetime"], data["streak"]

        lines = [f"# 📊 {profile['name'] or 'Tonal'} Stats", ""]
        if profile.get("level"):
            lines.append(f"**Level:** {profile['level']}")
        if profile.get("location"):
            lines.append(f"**Location:** {profile['location']}")

        lines += [
            "",
            "## Lifetime",
            f"- Workouts: {format_number(lifetime['total_workouts'])}",
            f"- Volume: {format_number(lifetime['total_volume_lbs'])} lbs",
            f"- Training time: {format_number(lifetime['total_hours'])} hours",
            f"- Avg volume per workout: {format_number(lifetime['avg_volume_per_workout_lbs'])} lbs",
            f"- Unique movements: {lifetime['unique_movements']}",
            "",
            "## Streak",
            f"- Current: {streak['current']} days",
            f"- Best: {streak['best']} days",
        ]
        if streak["progress_to_best_pct"] is not None:
            lines.append(f"- Progress to best: {streak['progress_to_best_pct']}%")
        lines += ["", _MOMENTUM[streak["momentum"]]]

        return "\n".join(lines)
    except Exception as e:
        return handle_tool_error(e, "get_user_stats")


async def get_recent_progress(ctx: Context) -> str:
    """
    Get the last 30 days of Tonal training progress.

    Workout frequency, total volume, average workout length, a consistency
    rating and the most recent sessions.

    Returns:
        Markdown progress report
    """
    try:
        client = get_client(ctx)
        data = api_stats.get_recent_progress(client)

        lines = [
            f"# 📈 Progress (last {data['days']} days)",
            "",
            f"- Active days: {data['active_days']} ({data['frequency_pct']}%)",
            f"- Total volume: {format_number(data['total_volume_lbs'])} lbs",
            f"- Avg workout: {data['avg_workout_minutes']} min",
            "",
            _CONSISTENCY[data["consistency"]],
        ]

        if data["recent_activities"]:
            lines += ["", "## Recent Workouts"]
            for a in data["recent_activities"]:
                lines.append(
                    f"- **{a['name']}** ({a['when']}): "
                    f"{format_number(a['volume_lbs'])} lbs, {a['minutes']} min"
                )

        return "\n".join(lines)
    except Exception as e:
        return handle_tool_error(e, "get_recent_progress")


TOOLS = (get_muscle_readiness, get_user_stats, get_recent_progress)

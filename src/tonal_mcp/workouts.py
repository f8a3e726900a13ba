"""
Workout history tools for Tonal MCP server.
"""

from fastmcp import Context

from tonal_mcp.api import activities as api_activities
from tonal_mcp.client_factory import get_client
from tonal_mcp.errors import handle_tool_error
from tonal_mcp.utils import format_number, plural, validate_optional_limit

CATEGORY = "workouts"


async def get_recent_workouts(ctx: Context, limit: int = None) -> str:
    """
    Get recently completed Tonal workouts.

    Args:
        limit: Number of workouts to return (default: 10, max: 100)

    Returns:
        Markdown list of workouts with totals
    """
    try:
        limit = validate_optional_limit(limit)
        client = get_client(ctx)
        data = api_activities.get_recent_workouts(client, limit)

        if not data["count"]:
            return "No recent workouts found."

        lines = [
            f"# 🏋️ Recent Workouts ({plural(data['count'], 'workout')})",
            "",
            f"**Total volume:** {format_number(data['total_volume_lbs'])} lbs",
            f"**Total time:** {data['total_minutes']} min (avg {data['avg_minutes']} min)",
            "",
        ]
        for i, w in enumerate(data["workouts"], 1):
            lines.append(f"## {i}. {w['name']}")
            lines.append(f"- When: {w['when']}")
            lines.append(f"- Duration: {w['minutes']} min")
            lines.append(f"- Volume: {format_number(w['volume_lbs'])} lbs, {w['reps']} reps")
            if w["target_area"]:
                lines.append(f"- Target: {w['target_area']}")
            kind = w["type"] + (" (program)" if w["in_program"] else "")
            lines.append(f"- Type: {kind}")
            lines.append("")

        return "\n".join(lines).rstrip()
    except Exception as e:
        return handle_tool_error(e, "get_recent_workouts")


TOOLS = (get_recent_workouts,)

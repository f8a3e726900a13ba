"""
Workout editing tools for Tonal MCP server.

Round trip: get_workout_for_editing returns a workout as the same
high-level exercise list update_workout accepts.
"""

import json

from fastmcp import Context

from tonal_mcp.api import custom_workouts as api_custom_workouts
from tonal_mcp.client_factory import get_client
from tonal_mcp.custom_workouts import (
    format_exercises,
    format_lookup_failure,
    format_saved_workout,
)
from tonal_mcp.errors import handle_tool_error
from tonal_mcp.utils import require_text

CATEGORY = "workout_editing"


async def get_workout_for_editing(ctx: Context, workout_name: str) -> str:
    """
    Get a custom workout as an editable exercise list.

    Only the first set of each exercise is read back, so per-set variations
    made in the Tonal app are flattened.

    Args:
        workout_name: Title of the workout (case-insensitive, must be unique)

    Returns:
        Markdown summary plus the exercises as JSON for update_workout
    """
    try:
        workout_name = require_text(workout_name, "workout_name")
        client = get_client(ctx)
        data = api_custom_workouts.get_workout_for_editing(client, workout_name)
        if not data["success"]:
            return format_lookup_failure(data)

        lines = [f"# ✏️ Editing: {data['title']}", "", f"**ID:** {data['workout_id']}"]
        if data["description"]:
            lines.append(f"**Description:** {data['description']}")
        lines.append("")
        lines += format_exercises(data["exercises"])
        lines += [
            "",
            "Modify the exercises below and pass them to update_workout:",
            "",
            "```json",
            json.dumps(data["exercises"], indent=2),
            "```",
        ]
        return "\n".join(lines)
    except Exception as e:
        return handle_tool_error(e, "get_workout_for_editing")


async def update_workout(
    ctx: Context,
    workout_name: str,
    exercises: list[dict],
    title: str = None,
    description: str = None,
) -> str:
    """
    Replace the exercises of an existing custom workout.

    Args:
        workout_name: Current title of the workout (case-insensitive, must be unique)
        exercises: Full new exercise list (same format as create_custom_workout)
        title: Optional new title
        description: Optional new description

    Returns:
        Markdown summary of the workout as Tonal stored it
    """
    try:
        workout_name = require_text(workout_name, "workout_name")
        client = get_client(ctx)
        result = api_custom_workouts.update_workout(
            client, workout_name, exercises, title=title, description=description,
        )
        if not result["success"]:
            return format_lookup_failure(result)
        return format_saved_workout("Updated", result)
    except Exception as e:
        return handle_tool_error(e, "update_workout")


TOOLS = (get_workout_for_editing, update_workout)

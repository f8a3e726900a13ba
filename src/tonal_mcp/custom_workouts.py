"""
Custom workout tools for Tonal MCP server.

List, inspect, create and delete the user's own workouts. Exercises are
authored at a high level (movement name, sets, reps or duration, weight,
block) and translated to Tonal's set list server-side.
"""

import json

from fastmcp import Context

from tonal_mcp.api import custom_workouts as api_custom_workouts
from tonal_mcp.client_factory import get_client
from tonal_mcp.errors import handle_tool_error
from tonal_mcp.utils import plural, require_text

CATEGORY = "custom_workouts"


def format_lookup_failure(result: dict) -> str:
    """Render a {success: False} workout lookup as markdown."""
    lines = [f"❌ {result['error']}"]
    for match in result.get("matches", []):
        lines.append(f"- {match['title']} (id: {match['id']})")
    if result.get("hint"):
        lines += ["", result["hint"]]
    return "\n".join(lines)


def format_exercises(exercises: list[dict]) -> list[str]:
    """Markdown lines for high-level exercises, one section per block."""
    lines = []
    current_block = None
    for ex in exercises:
        if ex.get("block") != current_block:
            current_block = ex.get("block")
            if lines:
                lines.append("")
            lines.append(f"### Block {current_block}")
        if ex.get("duration"):
            work = f"{ex['sets']} x {ex['duration']}s"
        else:
            work = f"{ex['sets']} x {ex.get('reps', 0)} reps"
        weight = f" @ {ex['weight']}%" if ex.get("weight") else ""
        lines.append(f"- **{ex['movement_name']}**: {work}{weight}")
    return lines


def format_saved_workout(heading: str, result: dict) -> str:
    """Markdown for a workout as persisted, with its editable exercise JSON."""
    lines = [
        f"# ✅ {heading}: {result['title']}",
        "",
        f"**ID:** {result['workout_id']}",
    ]
    if result.get("description"):
        lines.append(f"**Description:** {result['description']}")
    if result.get("duration_minutes"):
        lines.append(f"**Estimated duration:** {result['duration_minutes']} min")
    lines += ["", f"## Exercises ({plural(len(result['exercises']), 'exercise')})"]
    lines += format_exercises(result["exercises"])
    lines += [
        "",
        "```json",
        json.dumps(result["exercises"], indent=2),
        "```",
    ]
    return "\n".join(lines)


async def list_custom_workouts(ctx: Context) -> str:
    """
    List the user's custom Tonal workouts, newest first.

    Returns:
        Markdown list with title, creation date, duration and set count
    """
    try:
        client = get_client(ctx)
        data = api_custom_workouts.list_custom_workouts(client)

        if not data["count"]:
            return "No custom workouts found. Use create_custom_workout to build one."

        lines = [f"# 📋 Custom Workouts ({data['count']})", ""]
        for w in data["workouts"]:
            lines.append(f"## {w['title']}")
            lines.append(f"- Created: {w['created']}")
            lines.append(f"- Duration: {w['duration_minutes']} min")
            lines.append(f"- Target: {w['target_area']}")
            lines.append(f"- Sets: {w['total_sets']}")
            if w["description"]:
                lines.append(f"- {w['description']}")
            lines.append("")

        return "\n".join(lines).rstrip()
    except Exception as e:
        return handle_tool_error(e, "list_custom_workouts")


async def get_custom_workout_details(ctx: Context, workout_name: str) -> str:
    """
    Get every set of a custom workout.

    Args:
        workout_name: Title of the workout (case-insensitive)

    Returns:
        Markdown breakdown of sets by block
    """
    try:
        workout_name = require_text(workout_name, "workout_name")
        client = get_client(ctx)
        data = api_custom_workouts.get_custom_workout_details(client, workout_name)
        if not data["success"]:
            return format_lookup_failure(data)

        lines = [
            f"# {data['title']}",
            "",
            f"**ID:** {data['workout_id']}",
            f"**Created:** {data['created']}",
            f"**Duration:** {data['duration_minutes']} min",
            f"**Target:** {data['target_area']}",
        ]
        if data["description"]:
            lines.append(f"**Description:** {data['description']}")
        if data["equipment"]:
            lines.append(f"**Equipment:** {', '.join(data['equipment'])}")

        current_block = None
        for s in data["sets"]:
            if s["block"] != current_block:
                current_block = s["block"]
                lines += ["", f"## Block {current_block}"]
            if "duration_seconds" in s:
                work = f"{s['duration_seconds']}s"
            else:
                work = f"{s.get('reps', 0)} reps"
            detail = f"- {s['movement']}, set {s['round']}/{s['of']}: {work}"
            if "weight_pct" in s:
                detail += f" @ {s['weight_pct']}%"
            if s.get("flags"):
                detail += f" [{', '.join(s['flags'])}]"
            lines.append(detail)

        return "\n".join(lines)
    except Exception as e:
        return handle_tool_error(e, "get_custom_workout_details")


async def delete_custom_workout(ctx: Context, workout_name: str) -> str:
    """
    Delete a custom workout. This cannot be undone.

    Args:
        workout_name: Title of the workout (case-insensitive, must be unique)

    Returns:
        Markdown confirmation
    """
    try:
        workout_name = require_text(workout_name, "workout_name")
        client = get_client(ctx)
        data = api_custom_workouts.delete_custom_workout(client, workout_name)
        if not data["success"]:
            return format_lookup_failure(data)
        return f"🗑️ Deleted custom workout **{data['title']}** (id: {data['workout_id']})"
    except Exception as e:
        return handle_tool_error(e, "delete_custom_workout")


async def create_custom_workout(
    ctx: Context,
    title: str,
    exercises: list[dict],
    description: str = "",
) -> str:
    """
    Create a custom Tonal workout from high-level exercises.

    Exercises in the same block are performed as a circuit: round 1 of each,
    then round 2 of each, and so on. Exercises without a block get their own.

    Args:
        title: Workout title
        exercises: List of exercises. Each is a dict with:
            - movement_name: Exact movement name (see search_movements)
            - sets: Number of sets (>= 1)
            - reps: Reps per set (reps-based movements)
            - duration: Seconds per set (duration-based movements)
            - weight: Optional weight as % of the user's strength (0-100)
            - block: Optional block label; equal labels share a block
            - is_warmup: Accepted but ignored; sets are always sent as regular sets
            Example: [
                {"movement_name": "Bench Press", "sets": 3, "reps": 10, "block": 1},
                {"movement_name": "Bent Over Row", "sets": 3, "reps": 10, "block": 1},
                {"movement_name": "Plank", "sets": 2, "duration": 45}
            ]
        description: Optional description

    Returns:
        Markdown summary of the saved workout as Tonal stored it
    """
    try:
        title = require_text(title, "title")
        client = get_client(ctx)
        result = api_custom_workouts.create_custom_workout(client, title, exercises, description)
        return format_saved_workout("Created", result)
    except Exception as e:
        return handle_tool_error(e, "create_custom_workout")


TOOLS = (
    list_custom_workouts,
    get_custom_workout_details,
    delete_custom_workout,
    create_custom_workout,
)

"""
Movement catalog tools for Tonal MCP server.

Browse the catalog by muscle group and look up exact movement names
for custom workouts.
"""

from fastmcp import Context

from tonal_mcp.api import movements as api_movements
from tonal_mcp.client_factory import get_client
from tonal_mcp.errors import handle_tool_error
from tonal_mcp.utils import require_text, validate_string_array

CATEGORY = "movements"


async def get_movements(ctx: Context, muscle_groups: list[str] = None) -> str:
    """
    Browse Tonal movements grouped by primary muscle group.

    Args:
        muscle_groups: Optional muscle groups to filter by (e.g. ["Chest", "Triceps"]).
            Matching is case-insensitive and partial.

    Returns:
        Markdown catalog, at most 10 movements per group
    """
    try:
        muscle_groups = validate_string_array(muscle_groups, "muscle_groups")
        client = get_client(ctx)
        data = api_movements.get_movements(client, muscle_groups)

        if not data["matched"]:
            return f"No movements found for: {', '.join(muscle_groups)}"

        title = "# 🏋️ Tonal Movements"
        if muscle_groups:
            title += f" ({', '.join(muscle_groups)})"
        lines = [title, "", f"Showing {data['matched']} of {data['total']} movements.", ""]

        for group in data["groups"]:
            lines.append(f"## {group['muscle_group']} ({group['count']})")
            for m in group["movements"]:
                also = f" (also: {', '.join(m['also_works'])})" if m["also_works"] else ""
                lines.append(f"- {m['name']}{also}")
            if group["more"]:
                lines.append(f"- ...and {group['more']} more")
            lines.append("")

        return "\n".join(lines).rstrip()
    except Exception as e:
        return handle_tool_error(e, "get_movements")


async def search_movements(ctx: Context, query: str) -> str:
    """
    Search Tonal movements by name.

    Use this to find the exact movement names create_custom_workout and
    update_workout accept, and whether each needs reps or a duration.

    Args:
        query: Part of the movement name (e.g. "bench", "squat")

    Returns:
        Markdown list of matching movements
    """
    try:
        query = require_text(query, "query")
        client = get_client(ctx)
        data = api_movements.search_movements(client, query)

        if not data["count"]:
            return f'No movements found matching "{query}".'

        lines = [f'# 🔍 Movements matching "{query}" ({data["count"]})', ""]
        for m in data["movements"]:
            groups = ", ".join(m["muscle_groups"]) or "n/a"
            unit = "duration (seconds)" if m["type"] == "duration" else "reps"
            lines.append(f"- **{m['name']}**: {groups} · {unit}")
        if data["more"]:
            lines.append(f"- ...and {data['more']} more, refine your search")

        return "\n".join(lines)
    except Exception as e:
        return handle_tool_error(e, "search_movements")


TOOLS = (get_movements, search_movements)

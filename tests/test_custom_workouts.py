"""Tests for Tonal MCP custom workout and workout editing tools."""
import json
import pytest
from unittest.mock import patch

from tonal_mcp import custom_workouts, workout_editing
from tonal_mcp.errors import MovementNotFound
from tests.conftest import create_test_app, get_tool_result_text


@pytest.fixture
def app_with_custom_workouts():
    return create_test_app(custom_workouts)


@pytest.fixture
def app_with_editing():
    return create_test_app(workout_editing)


def _saved(**overrides):
    saved = {
        "success": True, "workout_id": "w-9", "title": "Push Day",
        "description": "chest focus", "duration_minutes": 25,
        "exercises": [
            {"movement_name": "Bench Press", "sets": 3, "reps": 10, "weight": 60, "block": 1},
            {"movement_name": "Row", "sets": 3, "reps": 12, "block": 1},
            {"movement_name": "Plank", "sets": 2, "duration": 45, "block": 2},
        ],
    }
    saved.update(overrides)
    return saved


_NOT_FOUND = {
    "success": False, "error_code": "NOT_FOUND",
    "error": 'No custom workout found with name "Ghost".',
    "hint": "Use list_custom_workouts to see available workouts.",
}


@patch("tonal_mcp.api.custom_workouts.list_custom_workouts")
@pytest.mark.asyncio
async def test_list_custom_workouts(mock_api, app_with_custom_workouts):
    mock_api.return_value = {
        "count": 1,
        "workouts": [{"id": "w-1", "title": "Leg Day", "created": "2026-02-01",
                      "duration_minutes": 40, "target_area": "Lower", "total_sets": 12,
                      "description": ""}],
    }

    text = get_tool_result_text(await app_with_custom_workouts.call_tool("list_custom_workouts", {}))

    assert "Custom Workouts (1)" in text
    assert "## Leg Day" in text
    assert "- Sets: 12" in text


@patch("tonal_mcp.api.custom_workouts.list_custom_workouts")
@pytest.mark.asyncio
async def test_list_custom_workouts_empty(mock_api, app_with_custom_workouts):
    mock_api.return_value = {"count": 0, "workouts": []}

    text = get_tool_result_text(await app_with_custom_workouts.call_tool("list_custom_workouts", {}))

    assert "No custom workouts found" in text


@patch("tonal_mcp.api.custom_workouts.get_custom_workout_details")
@pytest.mark.asyncio
async def test_get_custom_workout_details(mock_api, app_with_custom_workouts, mock_sdk_client):
    mock_api.return_value = {
        "success": True, "workout_id": "w-1", "title": "Push Day", "created": "2026-01-05",
        "duration_minutes": 30, "target_area": "Upper", "description": "", "equipment": ["Smart Bar"],
        "sets": [
            {"block": 1, "movement": "Bench Press", "round": 1, "of": 2, "reps": 10, "weight_pct": 60},
            {"block": 2, "movement": "Plank", "round": 1, "of": 1, "duration_seconds": 45,
             "flags": ["Burnout"]},
        ],
    }

    text = get_tool_result_text(await app_with_custom_workouts.call_tool(
        "get_custom_workout_details", {"workout_name": "Push Day"}
    ))

    mock_api.assert_called_once_with(mock_sdk_client, "Push Day")
    assert "**Equipment:** Smart Bar" in text
    assert "## Block 1" in text
    assert "- Bench Press, set 1/2: 10 reps @ 60%" in text
    assert "- Plank, set 1/1: 45s [Burnout]" in text


@patch("tonal_mcp.api.custom_workouts.get_custom_workout_details")
@pytest.mark.asyncio
async def test_get_custom_workout_details_not_found(mock_api, app_with_custom_workouts):
    mock_api.return_value = _NOT_FOUND

    text = get_tool_result_text(await app_with_custom_workouts.call_tool(
        "get_custom_workout_details", {"workout_name": "Ghost"}
    ))

    assert text.startswith("❌ No custom workout found")
    assert "list_custom_workouts" in text


@patch("tonal_mcp.api.custom_workouts.delete_custom_workout")
@pytest.mark.asyncio
async def test_delete_custom_workout(mock_api, app_with_custom_workouts):
    mock_api.return_value = {"success": True, "workout_id": "w-2", "title": "Leg Day"}

    text = get_tool_result_text(await app_with_custom_workouts.call_tool(
        "delete_custom_workout", {"workout_name": "Leg Day"}
    ))

    assert "Deleted custom workout **Leg Day** (id: w-2)" in text


@patch("tonal_mcp.api.custom_workouts.delete_custom_workout")
@pytest.mark.asyncio
async def test_delete_custom_workout_ambiguous(mock_api, app_with_custom_workouts):
    mock_api.return_value = {
        "success": False, "error_code": "AMBIGUOUS_NAME",
        "error": 'Found 2 workouts with the name "Leg Day".',
        "matches": [{"id": "w-2", "title": "Leg Day"}, {"id": "w-3", "title": "leg day"}],
        "hint": "Make workout names unique before using them here.",
    }

    text = get_tool_result_text(await app_with_custom_workouts.call_tool(
        "delete_custom_workout", {"workout_name": "Leg Day"}
    ))

    assert "- leg day (id: w-3)" in text


@pytest.mark.asyncio
async def test_create_custom_workout_describes_warmup_flag(app_with_custom_workouts):
    tools = {tool.name: tool for tool in await app_with_custom_workouts.list_tools()}
    assert "is_warmup: Accepted but ignored" in tools["create_custom_workout"].description


@patch("tonal_mcp.api.custom_workouts.create_custom_workout")
@pytest.mark.asyncio
async def test_create_custom_workout(mock_api, app_with_custom_workouts, mock_sdk_client):
    mock_api.return_value = _saved()
    exercises = [
        {"movement_name": "Bench Press", "sets": 3, "reps": 10, "weight": 60, "block": 1},
        {"movement_name": "Row", "sets": 3, "reps": 12, "block": 1},
        {"movement_name": "Plank", "sets": 2, "duration": 45},
    ]

    text = get_tool_result_text(await app_with_custom_workouts.call_tool(
        "create_custom_workout",
        {"title": "Push Day", "exercises": exercises, "description": "chest focus"},
    ))

    args = mock_api.call_args[0]
    assert args[0] is mock_sdk_client
    assert args[1] == "Push Day"
    assert args[2] == exercises
    assert args[3] == "chest focus"
    assert "# ✅ Created: Push Day" in text
    assert "### Block 1" in text
    assert "- **Bench Press**: 3 x 10 reps @ 60%" in text
    assert "- **Plank**: 2 x 45s" in text
    json_block = text.split("```json\n")[1].split("\n```")[0]
    assert json.loads(json_block) == _saved()["exercises"]


@patch("tonal_mcp.api.custom_workouts.create_custom_workout")
@pytest.mark.asyncio
async def test_create_custom_workout_unknown_movement(mock_api, app_with_custom_workouts):
    mock_api.side_effect = MovementNotFound("Cable Fly")

    text = get_tool_result_text(await app_with_custom_workouts.call_tool(
        "create_custom_workout",
        {"title": "Bad", "exercises": [{"movement_name": "Cable Fly", "sets": 3, "reps": 10}]},
    ))

    assert "Error in create_custom_workout" in text
    assert "MOVEMENT_NOT_FOUND" in text
    assert "Cable Fly" in text


@patch("tonal_mcp.api.custom_workouts.get_workout_for_editing")
@pytest.mark.asyncio
async def test_get_workout_for_editing(mock_api, app_with_editing, mock_sdk_client):
    mock_api.return_value = _saved()

    text = get_tool_result_text(await app_with_editing.call_tool(
        "get_workout_for_editing", {"workout_name": "push day"}
    ))

    mock_api.assert_called_once_with(mock_sdk_client, "push day")
    assert "# ✏️ Editing: Push Day" in text
    assert "update_workout" in text
    json_block = text.split("```json\n")[1].split("\n```")[0]
    assert json.loads(json_block)[2]["duration"] == 45


@patch("tonal_mcp.api.custom_workouts.update_workout")
@pytest.mark.asyncio
async def test_update_workout(mock_api, app_with_editing, mock_sdk_client):
    mock_api.return_value = _saved(title="Push Day v2")
    exercises = [{"movement_name": "Row", "sets": 3, "reps": 12}]

    text = get_tool_result_text(await app_with_editing.call_tool(
        "update_workout",
        {"workout_name": "Push Day", "exercises": exercises, "title": "Push Day v2"},
    ))

    mock_api.assert_called_once_with(
        mock_sdk_client, "Push Day", exercises, title="Push Day v2", description=None,
    )
    assert "# ✅ Updated: Push Day v2" in text


@patch("tonal_mcp.api.custom_workouts.update_workout")
@pytest.mark.asyncio
async def test_update_workout_not_found(mock_api, app_with_editing):
    mock_api.return_value = _NOT_FOUND

    text = get_tool_result_text(await app_with_editing.call_tool(
        "update_workout",
        {"workout_name": "Ghost", "exercises": [{"movement_name": "Row", "sets": 1, "reps": 5}]},
    ))

    assert text.startswith("❌")

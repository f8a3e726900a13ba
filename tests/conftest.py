"""
Shared pytest fixtures for Tonal MCP testing.
"""
import json
import pytest
from unittest.mock import Mock, patch

# Monkey-patch: production uses fastmcp.FastMCP, tests use mcp.server.fastmcp.
# Patch fastmcp.Context to match mcp.server.fastmcp.Context so tools work
# with the test FastMCP.
import fastmcp
from mcp.server.fastmcp import server as mcp_server
fastmcp.Context = mcp_server.Context

from mcp.server.fastmcp import FastMCP

from tonal_mcp.api.model import Movement
from tonal_mcp.registry import build_registry, register_tools
from tonal_mcp.sdk.client import UserInfo


def get_tool_result_text(result):
    """Extract text from tool result.

    FastMCP call_tool returns a tuple (list_of_TextContent, metadata_dict).
    This helper extracts the text from the first TextContent item.
    """
    if isinstance(result, tuple) and len(result) > 0:
        result = result[0]
    if isinstance(result, list) and len(result) > 0:
        if hasattr(result[0], 'text'):
            return result[0].text
    return str(result)


def create_test_app(module):
    """Helper to create a FastMCP app with a single tool module registered."""
    app = FastMCP(f"Test Tonal {module.__name__}")
    return register_tools(app, build_registry(module))


TOKENS = json.dumps({
    "id_token": "test_id_token",
    "refresh_token": "test_refresh_token",
    "expires_at": 4102444800.0,
    "user_info": {
        "user_id": "user-123",
        "first_name": "Test",
        "last_name": "Lifter",
        "email": "test@test.com",
        "level": "Intermediate",
        "location": "Denver, CO",
    },
})


@pytest.fixture
def mock_sdk_client():
    """Create a mock SDK client with common methods stubbed."""
    client = Mock()
    client.export_token = Mock(return_value=TOKENS)
    client.load_token = Mock()

    # api/ functions call SDK functions which call client.make_request().
    # For tool tests we mock at the api/ level instead.
    client.make_request = Mock()

    client.user_info = UserInfo(
        user_id="user-123",
        first_name="Test",
        last_name="Lifter",
        email="test@test.com",
    )
    client.user_id = "user-123"
    client.is_logged_in = True
    return client


@pytest.fixture(autouse=True)
def mock_get_client(mock_sdk_client):
    """Auto-mock client_factory.get_client in all tool modules.

    Yields the mock function (not the client) so tests can set side_effect
    for error scenarios like "not logged in".
    """
    get_client_fn = Mock(return_value=mock_sdk_client)

    modules_to_patch = [
        "tonal_mcp.fitness",
        "tonal_mcp.workouts",
        "tonal_mcp.movements",
        "tonal_mcp.custom_workouts",
        "tonal_mcp.workout_editing",
    ]

    patchers = []
    for module in modules_to_patch:
        p = patch(f"{module}.get_client", get_client_fn)
        p.start()
        patchers.append(p)

    yield get_client_fn

    for p in patchers:
        p.stop()


@pytest.fixture
def tonal_tokens():
    """Sample Tonal tokens for session restoration."""
    return TOKENS


@pytest.fixture
def catalog():
    """A small movement catalog: reps-based lifts plus duration-based holds."""
    return [
        Movement("mv-bench", "Bench Press", True, ("Chest", "Triceps", "Shoulders")),
        Movement("mv-row", "Row", True, ("Back", "Biceps")),
        Movement("mv-squat", "Goblet Squat", True, ("Quads", "Glutes")),
        Movement("mv-plank", "Plank", False, ("Abs",)),
        Movement("mv-wallsit", "Wall Sit", False, ("Quads",)),
    ]


@pytest.fixture
def catalog_payload(catalog):
    """The same catalog as the platform returns it."""
    return [
        {
            "id": m.id,
            "name": m.name,
            "countReps": m.count_reps,
            "muscleGroups": list(m.muscle_groups),
        }
        for m in catalog
    ]

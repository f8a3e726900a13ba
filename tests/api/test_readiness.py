"""Tests for api/readiness.py."""

from unittest.mock import Mock, patch

from tonal_mcp.api.readiness import get_muscle_readiness, readiness_status


def test_readiness_status_thresholds():
    assert readiness_status(80) == "ready"
    assert readiness_status(79.9) == "moderate"
    assert readiness_status(60) == "moderate"
    assert readiness_status(59) == "recovering"


@patch("tonal_mcp.api.readiness.sdk_metrics")
def test_get_muscle_readiness(mock_metrics):
    mock_metrics.get_muscle_readiness.return_value = {
        "Chest": 90, "Shoulders": 70, "Back": 50,
        "Abs": 100, "Obliques": None,
        "Quads": 40, "Glutes": 60,
    }

    result = get_muscle_readiness(Mock())

    assert result["overall"] == 68  # 410 / 6
    upper = result["regions"]["upper_body"]
    assert upper["average"] == 70
    assert upper["muscles"]["Chest"] == {"percent": 90, "status": "ready"}
    assert "Triceps" not in upper["muscles"]
    assert result["regions"]["core"]["muscles"] == {"Abs": {"percent": 100, "status": "ready"}}
    assert result["regions"]["lower_body"]["average"] == 50
    assert result["needs_recovery"] == {"Back": 50, "Quads": 40}


@patch("tonal_mcp.api.readiness.sdk_metrics")
def test_get_muscle_readiness_empty(mock_metrics):
    mock_metrics.get_muscle_readiness.return_value = None

    result = get_muscle_readiness(Mock())

    assert result["overall"] == 0
    assert result["regions"]["core"] == {"average": 0, "muscles": {}}
    assert result["needs_recovery"] == {}

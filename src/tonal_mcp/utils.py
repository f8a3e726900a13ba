"""
Shared utility functions for Tonal MCP server.

Argument validation, time and number formatting used across domain modules.
"""

from datetime import datetime, timezone

from tonal_mcp.errors import TonalMCPError

DEFAULT_WORKOUT_LIMIT = 10
MAX_WORKOUT_LIMIT = 100


def validate_string_array(value, field_name: str) -> list[str]:
    """Require a list of strings. None is treated as an empty list."""
    if value is None:
        return []
    if not isinstance(value, list):
        raise TonalMCPError(f"{field_name} must be an array", "VALIDATION_ERROR", 400)
    if not all(isinstance(item, str) for item in value):
        raise TonalMCPError(f"All items in {field_name} must be strings", "VALIDATION_ERROR", 400)
    return value


def validate_optional_limit(limit) -> int:
    """Default the limit when absent and cap it at MAX_WORKOUT_LIMIT."""
    if limit is None:
        return DEFAULT_WORKOUT_LIMIT
    try:
        num = int(limit)
    except (TypeError, ValueError):
        num = 0
    if num <= 0:
        raise TonalMCPError("Limit must be a positive number", "VALIDATION_ERROR", 400)
    return min(num, MAX_WORKOUT_LIMIT)


def require_text(value, field_name: str) -> str:
    """Require a non-blank string and return it stripped."""
    if not isinstance(value, str) or not value.strip():
        raise TonalMCPError(f"{field_name} is required", "VALIDATION_ERROR", 400)
    return value.strip()


def parse_timestamp(value) -> datetime:
    """Parse a Tonal ISO-8601 timestamp (with or without a trailing Z).

    Returns:
        Timezone-aware datetime, or None if missing or unparseable
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def time_ago(timestamp, now: datetime = None) -> str:
    """Format a timestamp as "Today", "Yesterday" or "N days ago"."""
    parsed = parse_timestamp(timestamp)
    if parsed is None:
        return "Unknown"
    now = now or datetime.now(timezone.utc)
    days = (now - parsed).days
    if days <= 0:
        return "Today"
    if days == 1:
        return "Yesterday"
    return f"{days} days ago"


def format_date(timestamp) -> str:
    """Format a timestamp as YYYY-MM-DD."""
    parsed = parse_timestamp(timestamp)
    return parsed.date().isoformat() if parsed else "Unknown"


def format_number(value) -> str:
    """Format a number with thousands separators, e.g. 12,345."""
    if not value:
        return "0"
    return f"{round(value):,}"


def to_minutes(seconds) -> int:
    """Round a duration in seconds to whole minutes."""
    if not seconds or seconds <= 0:
        return 0
    return round(seconds / 60)


def plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"

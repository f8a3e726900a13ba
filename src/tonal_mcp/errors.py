"""
Error types for the Tonal MCP server.

Conversion errors are raised by the exercise/set encoder when the model
authors an invalid workout. Every error reaching a tool is rendered by
handle_tool_error() as a markdown block the model can read.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class TonalMCPError(Exception):
    """Error surfaced to the tool caller with a category code."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR", status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class ConversionError(TonalMCPError, ValueError):
    """An exercise could not be converted to workout sets.

    Aborts the whole conversion; no partial set list is produced.
    """

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, exercise_name: Optional[str] = None):
        super().__init__(message, code=type(self).code, status_code=400)
        self.exercise_name = exercise_name


class MovementNotFound(ConversionError):
    code = "MOVEMENT_NOT_FOUND"

    def __init__(self, movement_name: str):
        super().__init__(
            f'Movement "{movement_name}" not found. '
            "Use search_movements to find valid movement names.",
            exercise_name=movement_name,
        )


class InvalidSetCount(ConversionError):
    code = "INVALID_SET_COUNT"

    def __init__(self, movement_name: str):
        super().__init__(
            f'Exercise "{movement_name}" must have at least 1 set',
            exercise_name=movement_name,
        )


class MissingDuration(ConversionError):
    code = "MISSING_DURATION"

    def __init__(self, movement_name: str):
        super().__init__(
            f'Exercise "{movement_name}" is duration-based and requires '
            "a duration in seconds (e.g. duration: 30)",
            exercise_name=movement_name,
        )


class MissingReps(ConversionError):
    code = "MISSING_REPS"

    def __init__(self, movement_name: str):
        super().__init__(
            f'Exercise "{movement_name}" is reps-based and requires reps (e.g. reps: 10)',
            exercise_name=movement_name,
        )


class InvalidWeight(ConversionError):
    code = "INVALID_WEIGHT"

    def __init__(self, movement_name: str):
        super().__init__(
            f'Exercise "{movement_name}" weight must be a percentage between 0 and 100',
            exercise_name=movement_name,
        )


def handle_tool_error(error: Exception, tool_name: str) -> str:
    """
    Render an exception raised inside a tool as a markdown error report.

    Args:
        error: The exception caught by the tool
        tool_name: Name of the tool that failed

    Returns:
        Markdown text with the error category code and message
    """
    logger.error("Error in tool %s: %s", tool_name, error)

    message = str(error)
    code = "UNKNOWN_ERROR"

    if isinstance(error, TonalMCPError):
        message = error.message
        code = error.code
    else:
        lowered = message.lower()
        if "tonal_username" in lowered or "tonal_password" in lowered:
            code = "AUTHENTICATION_ERROR"
            message = (
                "Authentication failed. Please check your Tonal credentials "
                "are properly configured."
            )
        elif "network" in lowered or "connection" in lowered:
            code = "NETWORK_ERROR"
            message = (
                "Network error connecting to Tonal API. "
                "Please check your internet connection."
            )
        elif "unauthorized" in lowered or "401" in lowered:
            code = "AUTHORIZATION_ERROR"
            message = "Authorization failed. Your Tonal session may have expired."

    return f"❌ **Error in {tool_name}** ({code})\n\n{message}"

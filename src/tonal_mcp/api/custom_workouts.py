"""
Custom workout operations: list, inspect, author, edit and delete.

Composes conversion.py for translation + SDK for API calls.
Authoring flow: load catalog → exercises_to_sets → persist → sets_to_exercises
on the platform's copy, so the caller sees what was actually stored.
"""

import logging

from tonal_mcp.api.conversion import exercises_to_sets, sets_to_exercises
from tonal_mcp.api.model import SetRecord
from tonal_mcp.api.movements import load_catalog
from tonal_mcp.errors import TonalMCPError
from tonal_mcp.sdk.client import TonalClient
from tonal_mcp.sdk import workouts as sdk_workouts
from tonal_mcp.utils import format_date, to_minutes

logger = logging.getLogger(__name__)

WORKOUT_PAGE_SIZE = 100


def list_custom_workouts(client: TonalClient) -> dict:
    """The user's custom workouts, most recently created first."""
    workouts = sdk_workouts.get_user_workouts(client, 0, WORKOUT_PAGE_SIZE)
    workouts = sorted(workouts, key=lambda w: w.get("createdAt") or "", reverse=True)

    return {
        "count": len(workouts),
        "workouts": [
            {
                "id": w.get("id"),
                "title": w.get("title"),
                "created": format_date(w.get("createdAt")),
                "duration_minutes": to_minutes(w.get("duration", 0)),
                "target_area": w.get("targetArea") or "Not specified",
                "total_sets": len(w.get("sets") or []),
                "description": w.get("description") or "",
            }
            for w in workouts
        ],
    }


def get_custom_workout_details(client: TonalClient, workout_name: str) -> dict:
    """Full workout with every set resolved to a movement name."""
    found = _find_by_title(client, workout_name)
    if not found["success"]:
        return found

    workout = sdk_workouts.get_workout(client, found["workout"]["id"])
    names = {m.id: m.name for m in load_catalog(client)}

    sets = []
    for raw in workout.get("sets") or []:
        record = SetRecord.from_payload(raw)
        entry = {
            "block": record.block_number,
            "movement": names.get(record.movement_id, f"Unknown ({record.movement_id})"),
            "round": record.round,
            "of": record.repetition_total,
        }
        if record.prescribed_reps:
            entry["reps"] = record.prescribed_reps
        if record.prescribed_duration:
            entry["duration_seconds"] = record.prescribed_duration
        if record.weight_percentage:
            entry["weight_pct"] = record.weight_percentage
        flags = [
            label for label, on in (
                ("Warm-up", record.warm_up),
                ("Drop set", record.drop_set),
                ("Burnout", record.burnout),
            ) if on
        ]
        if flags:
            entry["flags"] = flags
        sets.append(entry)

    return {
        "success": True,
        "workout_id": workout.get("id"),
        "title": workout.get("title"),
        "created": format_date(workout.get("createdAt")),
        "duration_minutes": to_minutes(workout.get("duration", 0)),
        "target_area": workout.get("targetArea") or "Not specified",
        "description": workout.get("description") or "",
        "equipment": workout.get("accessories") or [],
        "sets": sets,
    }


def delete_custom_workout(client: TonalClient, workout_name: str) -> dict:
    """Delete the single custom workout with this title."""
    found = _find_by_title(client, workout_name)
    if not found["success"]:
        return found

    workout = found["workout"]
    try:
        sdk_workouts.delete_workout(client, workout["id"])
    except Exception as e:
        raise TonalMCPError(f"Failed to delete workout: {e}", "DELETE_ERROR") from e

    logger.info("Deleted custom workout %s", workout["id"])
    return {"success": True, "workout_id": workout["id"], "title": workout.get("title")}


def get_workout_for_editing(client: TonalClient, workout_name: str) -> dict:
    """Workout as editable high-level exercises (the update_workout input shape)."""
    found = _find_by_title(client, workout_name)
    if not found["success"]:
        return found

    workout = sdk_workouts.get_workout(client, found["workout"]["id"])
    catalog = load_catalog(client)
    exercises = sets_to_exercises(_ingest_sets(workout), catalog)

    return {
        "success": True,
        "workout_id": workout.get("id"),
        "title": workout.get("title"),
        "description": workout.get("description") or "",
        "duration_minutes": to_minutes(workout.get("duration", 0)),
        "exercises": [e.to_dict() for e in exercises],
    }


def create_custom_workout(
    client: TonalClient,
    title: str,
    exercises: list,
    description: str = "",
) -> dict:
    """Author a new custom workout from high-level exercises.

    Raises:
        TonalMCPError: If no exercises are given
        ConversionError: If an exercise is invalid (nothing is created)
    """
    _require_exercises(exercises)
    catalog = load_catalog(client)
    sets = exercises_to_sets(exercises, catalog)

    created = sdk_workouts.create_workout(client, {
        "title": title,
        "description": description or "",
        "sets": [s.to_payload() for s in sets],
        "createdSource": sdk_workouts.WORKOUT_BUILDER_SOURCE,
    })
    logger.info("Created custom workout %s with %d sets", created.get("id"), len(sets))

    return _saved_result(created, catalog)


def update_workout(
    client: TonalClient,
    workout_name: str,
    exercises: list,
    title: str = None,
    description: str = None,
) -> dict:
    """Replace a workout's exercises, keeping its platform metadata.

    Returns the freshly persisted structure rather than echoing the input.

    Raises:
        TonalMCPError: If no exercises are given
        ConversionError: If an exercise is invalid (nothing is changed)
    """
    _require_exercises(exercises)
    found = _find_by_title(client, workout_name)
    if not found["success"]:
        return found

    current = sdk_workouts.get_workout(client, found["workout"]["id"])
    catalog = load_catalog(client)
    sets = exercises_to_sets(exercises, catalog)

    updated = sdk_workouts.update_workout(client, current["id"], {
        "id": current["id"],
        "title": title or current.get("title"),
        "description": description if description is not None else (current.get("description") or ""),
        "sets": [s.to_payload() for s in sets],
        "coachId": current.get("coachId"),
        "assetId": current.get("assetId"),
        "level": current.get("level"),
        "createdSource": sdk_workouts.WORKOUT_BUILDER_SOURCE,
    })
    logger.info("Updated custom workout %s with %d sets", current["id"], len(sets))

    return _saved_result(updated, catalog)


# ── Internal helpers ────────────────────────────────────────────────────


def _find_by_title(client: TonalClient, workout_name: str) -> dict:
    """Locate a custom workout by case-insensitive title.

    Returns {success: True, workout} or {success: False, error, ...}.
    """
    workouts = sdk_workouts.get_user_workouts(client, 0, WORKOUT_PAGE_SIZE)
    wanted = workout_name.lower()
    matches = [w for w in workouts if (w.get("title") or "").lower() == wanted]

    if not matches:
        return {
            "success": False,
            "error_code": "NOT_FOUND",
            "error": f'No custom workout found with name "{workout_name}".',
            "hint": "Use list_custom_workouts to see available workouts.",
        }
    if len(matches) > 1:
        return {
            "success": False,
            "error_code": "AMBIGUOUS_NAME",
            "error": f'Found {len(matches)} workouts with the name "{workout_name}".',
            "matches": [{"id": w.get("id"), "title": w.get("title")} for w in matches],
            "hint": "Make workout names unique before using them here.",
        }
    return {"success": True, "workout": matches[0]}


def _ingest_sets(workout: dict) -> list[SetRecord]:
    return [SetRecord.from_payload(s) for s in workout.get("sets") or []]


def _require_exercises(exercises: list) -> None:
    if not exercises:
        raise TonalMCPError("At least one exercise is required", "VALIDATION_ERROR", 400)


def _saved_result(workout: dict, catalog: list) -> dict:
    exercises = sets_to_exercises(_ingest_sets(workout), catalog)
    return {
        "success": True,
        "workout_id": workout.get("id"),
        "title": workout.get("title"),
        "description": workout.get("description") or "",
        "duration_minutes": to_minutes(workout.get("duration", 0)),
        "exercises": [e.to_dict() for e in exercises],
    }

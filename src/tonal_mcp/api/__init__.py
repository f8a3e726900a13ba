"""
High-Level API — Domain Model for Tonal strength coaching.

Every function returns a clean dict the LLM can reason about.
Composes with the SDK internally.

Modules:
    conversion      — Exercises ⇄ sets (the platform's flat set list)
    movements       — What can you do?     (catalog, search)
    readiness       — How recovered are you?
    stats           — How are you doing?   (lifetime stats, streak, trend)
    activities      — What have you done?  (recent workouts)
    custom_workouts — Build a workout      (create, edit, inspect, delete)
"""

# Model
from tonal_mcp.api.model import ExerciseSpec, Movement, SetRecord

# Exercise translation
from tonal_mcp.api.conversion import (
    resolve_movement,
    exercises_to_sets,
    sets_to_exercises,
)

# Movements
from tonal_mcp.api.movements import load_catalog, get_movements, search_movements

# Readiness
from tonal_mcp.api.readiness import get_muscle_readiness

# Stats
from tonal_mcp.api.stats import get_user_stats, get_recent_progress

# Activities
from tonal_mcp.api.activities import get_recent_workouts

# Custom workouts
from tonal_mcp.api.custom_workouts import (
    list_custom_workouts,
    get_custom_workout_details,
    delete_custom_workout,
    get_workout_for_editing,
    create_custom_workout,
    update_workout,
)

__all__ = [
    # Model
    "ExerciseSpec", "Movement", "SetRecord",
    # Conversion
    "resolve_movement", "exercises_to_sets", "sets_to_exercises",
    # Movements
    "load_catalog", "get_movements", "search_movements",
    # Readiness
    "get_muscle_readiness",
    # Stats
    "get_user_stats", "get_recent_progress",
    # Activities
    "get_recent_workouts",
    # Custom workouts
    "list_custom_workouts", "get_custom_workout_details", "delete_custom_workout",
    "get_workout_for_editing", "create_custom_workout", "update_workout",
]

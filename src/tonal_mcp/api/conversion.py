"""
Exercise translation between the domain model and Tonal's set list.

The hard part: Tonal stores a custom workout as a flat, ordered list of
sets. Exercises sharing a block alternate round-robin, and the platform
relies on blockNumber / setGroup / round / blockStart being consistent to
accept and render the workout. exercises_to_sets() builds that list from
human-friendly exercises; sets_to_exercises() groups it back.

Both functions are pure: no I/O, no shared state, inputs are not mutated.
"""

import logging
from typing import Iterable

from tonal_mcp.api.model import ExerciseSpec, Movement, SetRecord
from tonal_mcp.errors import (
    InvalidSetCount,
    InvalidWeight,
    MissingDuration,
    MissingReps,
    MovementNotFound,
)

logger = logging.getLogger(__name__)


# ── Public API ──────────────────────────────────────────────────────────


def resolve_movement(name: str, catalog: Iterable) -> Movement:
    """Find a movement by case-insensitive exact name.

    Raises:
        MovementNotFound: If no catalog entry matches.
    """
    return _lookup(name, _name_index(catalog))


def exercises_to_sets(exercises: list, catalog: list) -> list[SetRecord]:
    """Convert domain exercises to Tonal sets.

    Args:
        exercises: List of ExerciseSpec objects or dicts, in authoring order
        catalog: Movement catalog (Movement objects or platform dicts)

    Returns:
        Sets in submission order: block, then round, then slot.

    Raises:
        ConversionError: On the first invalid exercise. Nothing is returned
        for the exercises that were valid.
    """
    by_name = _name_index(catalog)

    # First pass: validate and assign block numbers
    block_numbers = {}  # caller's block value → assigned block number
    next_block = 1
    blocks = {}  # block number → [(spec, movement)] in declaration order

    for raw in exercises:
        spec = _ensure_spec(raw)
        movement = _lookup(spec.movement_name, by_name)
        _validate(spec, movement)

        if spec.is_warmup:
            logger.warning(
                "Ignoring is_warmup for '%s': warm-up sets are always sent as regular sets",
                spec.movement_name,
            )

        if spec.block is None:
            block_number = next_block
            next_block += 1
        elif spec.block in block_numbers:
            block_number = block_numbers[spec.block]
        else:
            block_number = next_block
            block_numbers[spec.block] = block_number
            next_block += 1

        blocks.setdefault(block_number, []).append((spec, movement))

    # Second pass: emit sets round-robin, block by block
    sets = []
    for block_number in sorted(blocks):
        members = blocks[block_number]
        max_rounds = max(spec.sets for spec, _ in members)
        block_started = False

        for round_ in range(1, max_rounds + 1):
            for slot, (spec, movement) in enumerate(members, start=1):
                # Shorter exercises drop out of later rounds
                if round_ > spec.sets:
                    continue
                sets.append(_build_set(
                    spec, movement,
                    block_number=block_number,
                    set_group=slot,
                    round_=round_,
                    block_start=not block_started,
                ))
                block_started = True

    return sets


def sets_to_exercises(sets: list, catalog: list) -> list[ExerciseSpec]:
    """Convert Tonal sets back to domain exercises.

    One exercise per distinct (block_number, set_group), ordered by block
    then slot. The first set of each group is used as the template, so
    per-round variation (different reps or weight in later rounds) is lost:
    only the first round's values come back.

    Unknown movement ids are kept as the exercise name; this never raises.
    """
    if not sets:
        return []

    names = {}
    for m in catalog:
        movement = _ensure_movement(m)
        names.setdefault(movement.id, movement.name)

    groups = {}  # (block_number, set_group) → [SetRecord], insertion ordered
    for raw in sets:
        record = _ensure_record(raw)
        groups.setdefault((record.block_number, record.set_group), []).append(record)

    exercises = []
    for key in sorted(groups):
        first = groups[key][0]
        exercise = ExerciseSpec(
            movement_name=names.get(first.movement_id) or first.movement_id,
            sets=first.repetition_total,
            weight=first.weight_percentage or None,
            block=first.block_number,
        )
        if first.prescribed_reps is not None and first.prescribed_reps > 0:
            exercise.reps = first.prescribed_reps
        if first.prescribed_duration is not None and first.prescribed_duration > 0:
            exercise.duration = first.prescribed_duration
        exercises.append(exercise)

    return exercises


# ── Internal helpers ────────────────────────────────────────────────────


def _name_index(catalog: Iterable) -> dict[str, Movement]:
    """Lowercased name → movement. The first catalog entry wins on duplicates."""
    index = {}
    for m in catalog:
        movement = _ensure_movement(m)
        index.setdefault(movement.name.lower(), movement)
    return index


def _lookup(name: str, index: dict[str, Movement]) -> Movement:
    movement = index.get((name or "").lower())
    if movement is None:
        raise MovementNotFound(name)
    return movement


def _ensure_movement(m) -> Movement:
    if isinstance(m, Movement):
        return m
    if isinstance(m, dict):
        return Movement.from_payload(m)
    raise TypeError(f"Expected Movement or dict, got {type(m)}")


def _ensure_spec(e) -> ExerciseSpec:
    if isinstance(e, ExerciseSpec):
        return e
    if isinstance(e, dict):
        return ExerciseSpec.from_dict(e)
    raise TypeError(f"Expected ExerciseSpec or dict, got {type(e)}")


def _ensure_record(s) -> SetRecord:
    if isinstance(s, SetRecord):
        return s
    if isinstance(s, dict):
        return SetRecord.from_payload(s)
    raise TypeError(f"Expected SetRecord or dict, got {type(s)}")


def _validate(spec: ExerciseSpec, movement: Movement) -> None:
    """Check set count, then the target the movement's capability requires."""
    name = spec.movement_name
    if not spec.sets or spec.sets < 1:
        raise InvalidSetCount(name)

    # The other target, if supplied, is ignored
    if movement.is_duration_based:
        if not spec.duration or spec.duration < 1:
            raise MissingDuration(name)
    elif not spec.reps or spec.reps < 1:
        raise MissingReps(name)

    if spec.weight is not None and not 0 <= spec.weight <= 100:
        raise InvalidWeight(name)


def _build_set(
    spec: ExerciseSpec,
    movement: Movement,
    block_number: int,
    set_group: int,
    round_: int,
    block_start: bool,
) -> SetRecord:
    record = SetRecord(
        movement_id=movement.id,
        block_number=block_number,
        set_group=set_group,
        round=round_,
        repetition_total=spec.sets,
        block_start=block_start,
        weight_percentage=spec.weight or 0,
        # Always false: warmUp=true breaks rendering of single-set blocks
        warm_up=False,
    )
    if movement.is_duration_based:
        record.prescribed_duration = spec.duration
    else:
        record.prescribed_reps = spec.reps
    return record

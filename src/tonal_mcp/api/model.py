"""
Domain types for the Tonal coaching API.

Movement is read from the platform catalog. ExerciseSpec is the structure
the LLM builds; SetRecord is the flat record the platform stores. Workouts
themselves stay as plain dicts.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Movement:
    """A catalog entry. The core only ever reads these."""
    id: str
    name: str
    count_reps: bool = True
    muscle_groups: tuple = ()

    @property
    def is_duration_based(self) -> bool:
        return not self.count_reps

    @classmethod
    def from_payload(cls, d: dict) -> "Movement":
        """Create a Movement from a platform catalog entry."""
        return cls(
            id=d["id"],
            name=d.get("name", ""),
            count_reps=bool(d.get("countReps", True)),
            muscle_groups=tuple(d.get("muscleGroups") or ()),
        )


@dataclass
class ExerciseSpec:
    """One exercise of a custom workout, as the LLM describes it.

    Exactly one of reps/duration ends up encoded, chosen by the movement's
    capability. is_warmup is accepted but never encoded: the platform
    renders single-set warm-up blocks incorrectly, so sets always go out
    with warmUp=false.
    """
    movement_name: str
    sets: Optional[int] = None
    reps: Optional[int] = None
    duration: Optional[int] = None
    weight: Optional[float] = None
    is_warmup: bool = False
    block: Optional[int] = None

    @classmethod
    def from_dict(cls, d: dict) -> "ExerciseSpec":
        """Create an ExerciseSpec from a plain dict (as the LLM would provide)."""
        return cls(
            movement_name=d.get("movement_name", ""),
            sets=d.get("sets"),
            reps=d.get("reps"),
            duration=d.get("duration"),
            weight=d.get("weight"),
            is_warmup=bool(d.get("is_warmup", False)),
            block=d.get("block"),
        )

    def to_dict(self) -> dict:
        """Plain dict with absent optional fields omitted."""
        result = {"movement_name": self.movement_name, "sets": self.sets}
        if self.reps is not None:
            result["reps"] = self.reps
        if self.duration is not None:
            result["duration"] = self.duration
        if self.weight is not None:
            result["weight"] = self.weight
        if self.block is not None:
            result["block"] = self.block
        return result


@dataclass
class SetRecord:
    """One scheduled set in the platform's flat set list.

    (block_number, set_group) identifies the exercise the set belongs to.
    Exactly one of prescribed_reps / prescribed_duration is set.
    """
    movement_id: str
    block_number: int
    set_group: int
    round: int
    repetition_total: int
    block_start: bool = False
    weight_percentage: float = 0
    prescribed_reps: Optional[int] = None
    prescribed_duration: Optional[int] = None
    # Constant flags the platform expects on every set
    burnout: bool = False
    spotter: bool = False
    eccentric: bool = False
    chains: bool = False
    flex: bool = False
    drop_set: bool = False
    warm_up: bool = False
    description: str = ""

    @property
    def repetition(self) -> int:
        return self.round

    def to_payload(self) -> dict:
        """Platform (camelCase) representation, ready for submission."""
        payload = {
            "blockStart": self.block_start,
            "movementId": self.movement_id,
            "repetition": self.round,
            "repetitionTotal": self.repetition_total,
            "blockNumber": self.block_number,
            "burnout": self.burnout,
            "spotter": self.spotter,
            "eccentric": self.eccentric,
            "chains": self.chains,
            "flex": self.flex,
            "warmUp": self.warm_up,
            "weightPercentage": self.weight_percentage,
            "setGroup": self.set_group,
            "round": self.round,
            "description": self.description,
            "dropSet": self.drop_set,
        }
        if self.prescribed_duration is not None:
            payload["prescribedDuration"] = self.prescribed_duration
        else:
            payload["prescribedReps"] = self.prescribed_reps
        return payload

    @classmethod
    def from_payload(cls, d: dict) -> "SetRecord":
        """Read a set as returned by the platform.

        Different platform code paths name the duration field either
        prescribedDuration or durationBasedRepGoal. The first one above 0
        wins, so a 0 in prescribedDuration falls through.
        """
        duration = _first_duration(d, "prescribedDuration", "durationBasedRepGoal")
        round_ = d.get("round")
        if round_ is None:
            round_ = d.get("repetition", 1)
        return cls(
            movement_id=d.get("movementId", ""),
            block_number=d.get("blockNumber", 0),
            set_group=d.get("setGroup", 0),
            round=round_,
            repetition_total=d.get("repetitionTotal", 0),
            block_start=bool(d.get("blockStart", False)),
            weight_percentage=d.get("weightPercentage") or 0,
            prescribed_reps=d.get("prescribedReps"),
            prescribed_duration=duration,
            burnout=bool(d.get("burnout", False)),
            spotter=bool(d.get("spotter", False)),
            eccentric=bool(d.get("eccentric", False)),
            chains=bool(d.get("chains", False)),
            flex=bool(d.get("flex", False)),
            drop_set=bool(d.get("dropSet", False)),
            warm_up=bool(d.get("warmUp", False)),
            description=d.get("description") or "",
        )


def _first_duration(d: dict, *keys: str) -> Any:
    values = [d.get(key) for key in keys]
    for value in values:
        if value is not None and value > 0:
            return value
    # Neither is above 0: keep the first non-null value
    return next((v for v in values if v is not None), None)

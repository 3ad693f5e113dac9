from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

MAX_SCORE = 100


@dataclass(frozen=True, slots=True)
class MatchWeights:
    """Additive points per satisfied match criterion."""

    gpa: int
    grade_level: int
    major: int
    financial_need: int
    demographic: int
    activity: int
    low_competition: int
    medium_competition: int
    local: int

    def __post_init__(self) -> None:
        for field_info in fields(self):
            value = getattr(self, field_info.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Match weight '{field_info.name}' must be an integer.")
            if value < 0 or value > MAX_SCORE:
                raise ValueError(f"Match weight '{field_info.name}' must be between 0 and {MAX_SCORE}.")

    @classmethod
    def baseline(cls) -> MatchWeights:
        return cls(
            gpa=25,
            grade_level=15,
            major=20,
            financial_need=15,
            demographic=10,
            activity=10,
            low_competition=10,
            medium_competition=5,
            local=8,
        )

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any] | None) -> MatchWeights:
        values = dict(payload or {})
        baseline = cls.baseline()
        known = {field_info.name for field_info in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown match weight(s): {', '.join(unknown)}.")
        resolved: dict[str, int] = {}
        for name in known:
            raw = values.get(name, getattr(baseline, name))
            if isinstance(raw, float) and raw.is_integer():
                raw = int(raw)
            resolved[name] = raw
        return cls(**resolved)

    def to_dict(self) -> dict[str, int]:
        return {field_info.name: getattr(self, field_info.name) for field_info in fields(self)}


def load_weights(path: Path) -> MatchWeights:
    if not path.exists():
        raise FileNotFoundError(f"Weights file not found: {path}")
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"Weights file {path.name} must hold a JSON object.")
    # Accept either a bare mapping or {"match_weights": {...}}.
    return MatchWeights.from_mapping(payload.get("match_weights", payload))

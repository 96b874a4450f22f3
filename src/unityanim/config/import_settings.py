"""Per-import options supplied by the host pipeline."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .settings import DEFAULT_RETIME_FACTOR, UNIT_SCALE


def _positive_float(value: Any, name: str) -> float:
    """Convert ``value`` to a finite, strictly positive float."""

    number = float(value)
    if not math.isfinite(number) or number <= 0.0:
        raise ValueError(f"{name} must be a positive number, got {value!r}")
    return number


@dataclass
class ImportSettings:
    """
    Options for a single clip import.

    The skeleton is an opaque host reference. It is required for an import
    to proceed but the resampling itself never reads it; the host uses it
    for default-pose context when persisting the clip.
    """

    skeleton: Any = None
    retime_factor: float = DEFAULT_RETIME_FACTOR
    clip_name: Optional[str] = None
    source_path: Optional[str] = None
    unit_scale: float = UNIT_SCALE

    def __post_init__(self):
        self.retime_factor = _positive_float(self.retime_factor, "retime_factor")
        self.unit_scale = _positive_float(self.unit_scale, "unit_scale")
        if self.source_path is not None:
            self.source_path = str(self.source_path)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ImportSettings":
        """Create import settings from JSON-compatible data."""

        retime = data.get("retime_factor", data.get("import_time_rate", DEFAULT_RETIME_FACTOR))
        return cls(
            skeleton=data.get("skeleton"),
            retime_factor=retime,
            clip_name=data.get("clip_name", data.get("name")),
            source_path=data.get("source_path"),
            unit_scale=data.get("unit_scale", UNIT_SCALE),
        )

    @property
    def has_skeleton(self) -> bool:
        return self.skeleton is not None

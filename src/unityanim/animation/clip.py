"""
Clip

Uniformly sampled per-bone tracks ready for a skeletal-animation runtime.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pyrr import Quaternion, Vector3

from ..config.settings import DEFAULT_RATE_SCALE, DEFAULT_RETIME_FACTOR


@dataclass
class Track:
    """Resampled rotation, position and scale keys of one bone."""

    bone_name: str
    rotation_keys: List[Quaternion] = field(default_factory=list)
    position_keys: List[Vector3] = field(default_factory=list)
    scale_keys: List[Vector3] = field(default_factory=list)

    @property
    def num_rotation_keys(self) -> int:
        return len(self.rotation_keys)

    @property
    def num_position_keys(self) -> int:
        return len(self.position_keys)

    @property
    def num_scale_keys(self) -> int:
        return len(self.scale_keys)

    @property
    def max_key_count(self) -> int:
        return max(self.num_rotation_keys, self.num_position_keys, self.num_scale_keys)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bone": self.bone_name,
            "rotation": [[float(c) for c in q] for q in self.rotation_keys],
            "position": [[float(c) for c in v] for v in self.position_keys],
            "scale": [[float(c) for c in v] for v in self.scale_keys],
        }

    def __repr__(self):
        return (
            f"Track(bone='{self.bone_name}', rot={self.num_rotation_keys}, "
            f"pos={self.num_position_keys}, scale={self.num_scale_keys})"
        )


@dataclass
class Clip:
    """
    Final multi-bone animation.

    ``duration`` is already retimed. ``sample_rate`` is the rate the source
    was captured at, ``resample_rate`` the rate it plays back at; the target
    asset format stores both.
    """

    sample_interval: float
    duration: float
    frame_count: int
    tracks: List[Track] = field(default_factory=list)
    retime_factor: float = DEFAULT_RETIME_FACTOR
    rate_scale: float = DEFAULT_RATE_SCALE
    name: Optional[str] = None
    source_path: Optional[str] = None

    @property
    def sample_rate(self) -> float:
        return 1.0 / self.sample_interval

    @property
    def resample_rate(self) -> float:
        return self.sample_rate * self.retime_factor

    @property
    def track_names(self) -> List[str]:
        return [track.bone_name for track in self.tracks]

    def get_track(self, bone_name: str) -> Optional[Track]:
        """Find a track by bone name."""
        for track in self.tracks:
            if track.bone_name == bone_name:
                return track
        return None

    def to_dict(self) -> Dict[str, Any]:
        """JSON-compatible payload for the asset persistence layer."""
        return {
            "name": self.name,
            "source_path": self.source_path,
            "sample_interval": self.sample_interval,
            "sample_rate": self.sample_rate,
            "resample_rate": self.resample_rate,
            "duration": self.duration,
            "frame_count": self.frame_count,
            "rate_scale": self.rate_scale,
            "retime_factor": self.retime_factor,
            "tracks": [track.to_dict() for track in self.tracks],
        }

    def __repr__(self):
        return (
            f"Clip(name='{self.name}', duration={self.duration:.3f}s, "
            f"frames={self.frame_count}, tracks={len(self.tracks)})"
        )

"""
Coordinate Conversion

Maps samples from the source convention (right-handed, meters) into the
runtime convention (left-handed, centimeters).
"""

from typing import Sequence

import numpy as np
from pyrr import Quaternion, Vector3

from ..config.settings import UNIT_SCALE
from .animation import normalize_rotation


class CoordinateConverter:
    """
    Per-sample handedness and unit conversion.

    Conversion is applied exactly once, when a sample is read from the
    document. Applying it to an already converted value flips the axes back
    and scales positions a second time.
    """

    def __init__(self, unit_scale: float = UNIT_SCALE):
        """
        Initialize converter.

        Args:
            unit_scale: Factor between source and target length units
        """
        self.unit_scale = float(unit_scale)

    def rotation(self, value: Sequence[float]) -> Quaternion:
        """(x, y, z, w) -> (-x, -y, z, w), renormalized."""
        x, y, z, w = (float(v) for v in value)
        return normalize_rotation([-x, -y, z, w])

    def position(self, value: Sequence[float]) -> Vector3:
        """(x, y, z) -> (-x, -y, z) * unit_scale."""
        x, y, z = (float(v) for v in value)
        k = self.unit_scale
        return Vector3(np.array([-x * k, -y * k, z * k], dtype=np.float64))

    def scale(self, value: Sequence[float]) -> Vector3:
        """Scale is the same in both conventions."""
        return Vector3(np.array([float(v) for v in value], dtype=np.float64))

    def __repr__(self):
        return f"CoordinateConverter(unit_scale={self.unit_scale})"

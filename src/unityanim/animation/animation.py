"""
Animation

Keyframe curves and their evaluation.
"""

from bisect import bisect_right
from enum import Enum
from typing import List, Optional, Union

import numpy as np
from pyrr import Quaternion, Vector3, quaternion


class ChannelFamily(Enum):
    """Animated bone properties, in the order they are resampled."""
    ROTATION = "rotation"
    POSITION = "position"
    SCALE = "scale"

    @property
    def value_size(self) -> int:
        return 4 if self is ChannelFamily.ROTATION else 3


CurveValue = Union[Quaternion, Vector3]


def identity_value(family: ChannelFamily) -> CurveValue:
    """Rest value of a channel: identity rotation, zero position, unit scale."""
    if family is ChannelFamily.ROTATION:
        return Quaternion()
    if family is ChannelFamily.SCALE:
        return Vector3([1.0, 1.0, 1.0])
    return Vector3([0.0, 0.0, 0.0])


def wrap_value(family: ChannelFamily, data) -> CurveValue:
    """Wrap raw components in the pyrr type of the family."""
    if family is ChannelFamily.ROTATION:
        return Quaternion(np.array(data, dtype=np.float64))
    return Vector3(np.array(data, dtype=np.float64))


def normalize_rotation(data) -> Quaternion:
    """Return a unit-length copy of the quaternion components."""
    q = np.array(data, dtype=np.float64)
    length = np.linalg.norm(q)
    if length <= 0.0:
        return Quaternion()
    return Quaternion(quaternion.normalize(q))


class Keyframe:
    """
    Single keyframe in a curve.

    Stores time and value for a specific property.
    """

    def __init__(self, time: float, value: CurveValue):
        """
        Initialize keyframe.

        Args:
            time: Time in seconds
            value: Value at this time (Vector3 for position/scale, Quaternion for rotation)
        """
        self.time = float(time)
        self.value = value

    def __repr__(self):
        return f"Keyframe(t={self.time:.3f}, v={self.value})"


class KeyframeCurve:
    """
    Ordered keyframes of one bone property.

    Tangents are not stored: each is derived from the neighboring keys when
    the curve is evaluated, so adding a key never leaves stale slopes behind.

    Rotation curves are interpolated component-wise and renormalized, not
    slerped. Consecutive keys more than half a turn apart can therefore
    travel the long way around.
    """

    def __init__(self, family: ChannelFamily, bone_name: str = ""):
        """
        Initialize curve.

        Args:
            family: Property this curve animates
            bone_name: Bone the curve belongs to (for debugging)
        """
        self.family = family
        self.bone_name = bone_name
        self.keyframes: List[Keyframe] = []
        self._times: List[float] = []
        self._frozen = False

    def add_keyframe(self, time: float, value) -> int:
        """
        Insert a keyframe, keeping keys sorted by time.

        Keys sharing a timestamp keep their insertion order.

        Returns:
            Index of the new keyframe
        """
        if self._frozen:
            raise RuntimeError(f"Curve '{self.bone_name}' ({self.family.value}) is frozen")

        time = float(time)
        index = bisect_right(self._times, time)
        self._times.insert(index, time)
        self.keyframes.insert(index, Keyframe(time, wrap_value(self.family, value)))
        return index

    def freeze(self):
        """Reject further keyframes."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def times(self) -> List[float]:
        return list(self._times)

    @property
    def end_time(self) -> Optional[float]:
        return self._times[-1] if self._times else None

    def min_positive_delta(self) -> Optional[float]:
        """Smallest strictly positive gap between consecutive keys, if any."""
        best = None
        for t0, t1 in zip(self._times, self._times[1:]):
            delta = t1 - t0
            if delta > 0.0 and (best is None or delta < best):
                best = delta
        return best

    def tangent(self, index: int) -> np.ndarray:
        """
        Auto-tangent (slope per second) at a keyframe.

        Interior keys use the secant through both neighbors, endpoints use
        the single adjacent segment. A span of zero length gives a flat tangent.
        """
        count = len(self.keyframes)
        if count < 2:
            return np.zeros(self.family.value_size)

        prev_index = max(index - 1, 0)
        next_index = min(index + 1, count - 1)
        prev_key = self.keyframes[prev_index]
        next_key = self.keyframes[next_index]

        span = next_key.time - prev_key.time
        if span <= 0.0:
            return np.zeros(self.family.value_size)

        delta = np.asarray(next_key.value, dtype=np.float64) - np.asarray(prev_key.value, dtype=np.float64)
        return delta / span

    def eval(self, time: float, fallback: CurveValue) -> CurveValue:
        """
        Evaluate the curve at a given time.

        Args:
            time: Time in seconds
            fallback: Returned unchanged when the curve has no keys

        Returns:
            Interpolated value at this time
        """
        if not self.keyframes:
            return fallback

        if len(self.keyframes) == 1:
            return self._finish(self.keyframes[0].value)

        # Clamp time to curve range
        if time <= self.keyframes[0].time:
            return self._finish(self.keyframes[0].value)
        if time >= self.keyframes[-1].time:
            return self._finish(self.keyframes[-1].value)

        index = bisect_right(self._times, time) - 1
        return self._finish(self._interpolate_hermite(index, time))

    def _interpolate_hermite(self, index: int, time: float):
        """Cubic Hermite interpolation between keyframe ``index`` and the next one."""
        k0 = self.keyframes[index]
        k1 = self.keyframes[index + 1]

        dt = k1.time - k0.time
        if dt <= 0.0:
            return k0.value

        s = (time - k0.time) / dt
        s2 = s * s
        s3 = s2 * s

        h00 = 2.0 * s3 - 3.0 * s2 + 1.0
        h10 = s3 - 2.0 * s2 + s
        h01 = -2.0 * s3 + 3.0 * s2
        h11 = s3 - s2

        p0 = np.asarray(k0.value, dtype=np.float64)
        p1 = np.asarray(k1.value, dtype=np.float64)
        m0 = self.tangent(index) * dt
        m1 = self.tangent(index + 1) * dt

        return h00 * p0 + h10 * m0 + h01 * p1 + h11 * m1

    def _finish(self, value) -> CurveValue:
        if self.family is ChannelFamily.ROTATION:
            return normalize_rotation(value)
        return Vector3(np.array(value, dtype=np.float64))

    def __len__(self):
        return len(self.keyframes)

    def __repr__(self):
        return f"KeyframeCurve(bone='{self.bone_name}', family={self.family.value}, keyframes={len(self.keyframes)})"

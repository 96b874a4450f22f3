"""
Resampler

Derives a common time base for all curves and resamples them into tracks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from pyrr import Quaternion

from ..config.import_settings import ImportSettings
from ..config.settings import KINDA_SMALL_NUMBER, SAMPLE_TIME_TOLERANCE
from ..errors import DegenerateDurationError
from .animation import ChannelFamily, KeyframeCurve, identity_value
from .clip import Clip, Track
from .curve_set import BoneCurveSet

logger = logging.getLogger(__name__)


@dataclass
class SampleTiming:
    """Uniform time base shared by every track of a clip."""

    sample_interval: float
    duration: float
    degenerate_spacing: bool = False

    @property
    def sample_count(self) -> int:
        """
        Samples per resampled channel: ``floor(duration / interval) + 1``.

        The last sample is kept when rounding lands it just past the duration.
        The tolerance is capped at a small fraction of the interval, so it
        never adds a whole extra sample when the interval is below epsilon.
        """
        tolerance = min(KINDA_SMALL_NUMBER, self.sample_interval * SAMPLE_TIME_TOLERANCE)
        return int((self.duration + tolerance) // self.sample_interval) + 1

    def sample_times(self) -> List[float]:
        return [i * self.sample_interval for i in range(self.sample_count)]


class SampleRateResolver:
    """
    Finds the resample interval and duration of a curve set.

    The interval is the smallest positive gap between consecutive keys of
    any one curve; gaps between keys of different curves are not considered.
    The duration is the latest key time of any curve.
    """

    def __init__(self, epsilon: float = KINDA_SMALL_NUMBER):
        self.epsilon = epsilon

    def resolve(self, curve_set: BoneCurveSet) -> SampleTiming:
        """
        Scan every curve of every family.

        Raises:
            DegenerateDurationError: If the latest key time is within epsilon of zero
        """
        min_delta: Optional[float] = None
        max_time = 0.0

        for curve in curve_set.all_curves():
            delta = curve.min_positive_delta()
            if delta is not None and (min_delta is None or delta < min_delta):
                min_delta = delta
            if curve.end_time is not None:
                max_time = max(max_time, curve.end_time)

        if max_time <= self.epsilon:
            logger.error("Error importing, animation time couldn't be deduced (max key time %.6f)", max_time)
            raise DegenerateDurationError(max_time)

        if min_delta is None:
            logger.warning(
                "No curve has two keys at distinct times; sampling only the start and end (%.4fs)",
                max_time,
            )
            return SampleTiming(sample_interval=max_time, duration=max_time, degenerate_spacing=True)

        logger.debug("Resolved sample interval %.6fs, duration %.6fs", min_delta, max_time)
        return SampleTiming(sample_interval=min_delta, duration=max_time)


@dataclass
class TrackSet:
    """Tracks in first-seen bone order plus the longest channel length."""

    tracks: Dict[str, Track] = field(default_factory=dict)
    frame_count: int = 0

    def ordered(self) -> List[Track]:
        return list(self.tracks.values())


class TrackBuilder:
    """
    Resamples every curve of a set at a uniform interval.

    Families are processed in order: rotation, position, scale. A bone that
    only carries position or scale still gets one identity rotation key.
    Missing position or scale channels are left empty.
    """

    def build(self, curve_set: BoneCurveSet, timing: SampleTiming) -> TrackSet:
        """
        Build tracks for all bones.

        Args:
            curve_set: Parsed curves
            timing: Resolved time base

        Returns:
            TrackSet with tracks keyed by bone name
        """
        track_set = TrackSet()
        times = timing.sample_times()

        for family in ChannelFamily:
            for bone_name, curve in curve_set.curves(family):
                track = track_set.tracks.get(bone_name)
                if track is None:
                    track = Track(bone_name)
                    track_set.tracks[bone_name] = track

                if family is not ChannelFamily.ROTATION and not track.rotation_keys:
                    track.rotation_keys.append(Quaternion())

                keys = self._resample(curve, times)
                self._keys_for(track, family).extend(keys)
                track_set.frame_count = max(track_set.frame_count, len(keys))

        logger.debug("Built %d tracks, %d frames", len(track_set.tracks), track_set.frame_count)
        return track_set

    @staticmethod
    def _resample(curve: KeyframeCurve, times: List[float]) -> list:
        """Evaluate ``curve`` at every time, carrying the previous sample forward as fallback."""
        last = identity_value(curve.family)
        keys = []
        for time in times:
            value = curve.eval(time, last)
            keys.append(value)
            last = value
        return keys

    @staticmethod
    def _keys_for(track: Track, family: ChannelFamily) -> list:
        if family is ChannelFamily.ROTATION:
            return track.rotation_keys
        if family is ChannelFamily.POSITION:
            return track.position_keys
        return track.scale_keys


class ClipAssembler:
    """Combines the time base, retime factor and tracks into a Clip."""

    def assemble(self, timing: SampleTiming, track_set: TrackSet, settings: ImportSettings) -> Clip:
        clip = Clip(
            sample_interval=timing.sample_interval,
            duration=timing.duration * settings.retime_factor,
            frame_count=track_set.frame_count,
            tracks=track_set.ordered(),
            retime_factor=settings.retime_factor,
            name=settings.clip_name,
            source_path=settings.source_path,
        )
        logger.info(
            "Assembled clip %s: %.3fs, %d frames at %.2f fps (resampled %.2f fps), %d tracks",
            clip.name or "<unnamed>",
            clip.duration,
            clip.frame_count,
            clip.sample_rate,
            clip.resample_rate,
            len(clip.tracks),
        )
        return clip

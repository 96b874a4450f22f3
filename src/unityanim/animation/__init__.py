"""
Animation System

Keyframe curves, coordinate conversion and uniform resampling into clips.
"""

from .animation import ChannelFamily, Keyframe, KeyframeCurve, identity_value
from .curve_set import BoneCurves, BoneCurveSet
from .coordinates import CoordinateConverter
from .clip import Clip, Track
from .resampler import ClipAssembler, SampleRateResolver, SampleTiming, TrackBuilder, TrackSet

__all__ = [
    'ChannelFamily',
    'Keyframe',
    'KeyframeCurve',
    'identity_value',
    'BoneCurves',
    'BoneCurveSet',
    'CoordinateConverter',
    'Clip',
    'Track',
    'ClipAssembler',
    'SampleRateResolver',
    'SampleTiming',
    'TrackBuilder',
    'TrackSet',
]

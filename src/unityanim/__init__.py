"""
UnityAnim - .anim curve importer

Decodes per-bone rotation, position and scale curves sampled at arbitrary
times and resamples them into a single uniformly sampled clip.
"""

import logging

# Configuration
from .config.settings import *
from .config.import_settings import ImportSettings

# Errors
from .errors import UnityAnimError, DegenerateDurationError, MissingSkeletonError, DocumentSchemaError

# Animation
from .animation import (
    ChannelFamily,
    Keyframe,
    KeyframeCurve,
    BoneCurveSet,
    CoordinateConverter,
    Clip,
    Track,
    SampleRateResolver,
    TrackBuilder,
    ClipAssembler,
)

# Loaders
from .loaders import AnimDocument, CurveDocumentParser, resolve_bone_name

# Pipeline
from .importer import AnimClipImporter, ImportResult, import_clip
from .log import configure_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    # Config (exported via *)
    "ImportSettings",
    # Errors
    "UnityAnimError",
    "DegenerateDurationError",
    "MissingSkeletonError",
    "DocumentSchemaError",
    # Animation
    "ChannelFamily",
    "Keyframe",
    "KeyframeCurve",
    "BoneCurveSet",
    "CoordinateConverter",
    "Clip",
    "Track",
    "SampleRateResolver",
    "TrackBuilder",
    "ClipAssembler",
    # Loaders
    "AnimDocument",
    "CurveDocumentParser",
    "resolve_bone_name",
    # Pipeline
    "AnimClipImporter",
    "ImportResult",
    "import_clip",
    "configure_logging",
]

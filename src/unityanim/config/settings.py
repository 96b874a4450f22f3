"""
Import Configuration Settings

All configuration constants for the animation importer.
Modify these values to change conversion and resampling behavior.
"""

# ============================================================================
# Coordinate Conventions
# ============================================================================

# Source positions are authored in meters, the target runtime works in centimeters
UNIT_SCALE = 100.0

# Bone paths look like "Root/Spine/actor:Hand_L"
PATH_SEPARATOR = "/"
ACTOR_MARKER = "actor:"

# ============================================================================
# Resampling Settings
# ============================================================================

# Tolerance for the duration check and the upper bound of the resampling loop
KINDA_SMALL_NUMBER = 1e-4

# Upper bound on the resampling tolerance, as a fraction of the sample interval
SAMPLE_TIME_TOLERANCE = 1e-3

# Multiplier applied to duration and resample rate (1.0 = authored speed)
DEFAULT_RETIME_FACTOR = 1.0

# Playback rate written onto every clip
DEFAULT_RATE_SCALE = 1.0

# ============================================================================
# Document Layout
# ============================================================================

ANIMATION_CLIP_KEY = "AnimationClip"
ROTATION_CURVES_KEY = "m_RotationCurves"
POSITION_CURVES_KEY = "m_PositionCurves"
SCALE_CURVES_KEY = "m_ScaleCurves"

# Per-entry keys
CURVE_PATH_KEY = "path"
CURVE_KEY = "curve"
CURVE_POINTS_KEY = "m_Curve"
POINT_TIME_KEY = "time"
POINT_VALUE_KEY = "value"

# ============================================================================
# Debug Settings
# ============================================================================

LOG_LEVEL = "WARNING"  # "DEBUG", "INFO", "WARNING", "ERROR"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

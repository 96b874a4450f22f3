"""
Curve Document Parser

Builds per-bone keyframe curves from an .anim document tree.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from ..animation.animation import ChannelFamily
from ..animation.coordinates import CoordinateConverter
from ..animation.curve_set import BoneCurveSet
from ..config.settings import ACTOR_MARKER, PATH_SEPARATOR
from .anim_document import AnimDocument, CurveFamilyData, Diagnostic, DiagnosticKind, Severity

logger = logging.getLogger(__name__)


def resolve_bone_name(path: str) -> str:
    """
    Derive a bone name from a hierarchical actor path.

    Keeps the last path component and drops everything up to and including
    an ``actor:`` marker. ``"Root/Spine/actor:Hand_L"`` becomes ``"Hand_L"``.
    """
    name = path.rsplit(PATH_SEPARATOR, 1)[-1]
    marker = name.find(ACTOR_MARKER)
    if marker != -1:
        name = name[marker + len(ACTOR_MARKER):]
    return name


@dataclass
class CurveParseResult:
    """Result returned from :class:`CurveDocumentParser`."""

    curve_set: BoneCurveSet
    diagnostics: List[Diagnostic] = field(default_factory=list)


class CurveDocumentParser:
    """
    Reads the rotation, position and scale families of a document.

    Every sample is converted into the runtime convention as it is read.
    """

    def __init__(self, converter: Optional[CoordinateConverter] = None):
        """
        Initialize parser.

        Args:
            converter: Sample converter (defaults to the standard unit scale)
        """
        self.converter = converter if converter is not None else CoordinateConverter()

    def parse(self, document: Union[AnimDocument, Any]) -> CurveParseResult:
        """
        Build curves for every bone of every family.

        Args:
            document: Validated AnimDocument, or the raw tree to validate

        Returns:
            CurveParseResult with a frozen BoneCurveSet
        """
        if not isinstance(document, AnimDocument):
            document = AnimDocument.from_dict(document)

        curve_set = BoneCurveSet()
        diagnostics = list(document.diagnostics)
        self._load_family(document.family(ChannelFamily.ROTATION), curve_set, self.converter.rotation, diagnostics)
        self._load_family(document.family(ChannelFamily.POSITION), curve_set, self.converter.position, diagnostics)
        self._load_family(document.family(ChannelFamily.SCALE), curve_set, self.converter.scale, diagnostics)
        curve_set.freeze()

        for diagnostic in diagnostics:
            logger.log(_log_level(diagnostic), "%s", diagnostic)

        logger.info(
            "Loaded %d rotation, %d position, %d scale curves for %d bones",
            curve_set.curve_count(ChannelFamily.ROTATION),
            curve_set.curve_count(ChannelFamily.POSITION),
            curve_set.curve_count(ChannelFamily.SCALE),
            len(curve_set),
        )
        return CurveParseResult(curve_set=curve_set, diagnostics=diagnostics)

    @staticmethod
    def _load_family(data: CurveFamilyData, curve_set: BoneCurveSet, convert, diagnostics: List[Diagnostic]):
        """Append each entry's converted points to its bone's curve."""
        for entry in data.entries:
            bone_name = resolve_bone_name(entry.path)
            if not bone_name:
                diagnostics.append(Diagnostic(
                    DiagnosticKind.MALFORMED_ENTRY,
                    Severity.WARNING,
                    f"Path '{entry.path}' does not name a bone",
                    data.family,
                    entry.path,
                ))
                continue
            curve = curve_set.get_or_create(data.family, bone_name)
            for point in entry.points:
                curve.add_keyframe(point.time, convert(point.value))
            logger.debug("  %s curve '%s': %d keys", data.family.value, bone_name, len(curve))


_LOG_LEVELS = {
    Severity.INFO: logging.DEBUG,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


def _log_level(diagnostic: Diagnostic) -> int:
    return _LOG_LEVELS[diagnostic.severity]

"""Validated view of a parsed .anim document tree."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..animation.animation import ChannelFamily
from ..config.settings import (
    ANIMATION_CLIP_KEY,
    CURVE_KEY,
    CURVE_PATH_KEY,
    CURVE_POINTS_KEY,
    POINT_TIME_KEY,
    POINT_VALUE_KEY,
    POSITION_CURVES_KEY,
    ROTATION_CURVES_KEY,
    SCALE_CURVES_KEY,
)
from ..errors import DocumentSchemaError

FAMILY_KEYS = {
    ChannelFamily.ROTATION: ROTATION_CURVES_KEY,
    ChannelFamily.POSITION: POSITION_CURVES_KEY,
    ChannelFamily.SCALE: SCALE_CURVES_KEY,
}

COMPONENT_NAMES = {
    ChannelFamily.ROTATION: ("x", "y", "z", "w"),
    ChannelFamily.POSITION: ("x", "y", "z"),
    ChannelFamily.SCALE: ("x", "y", "z"),
}


class Severity(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class DiagnosticKind(Enum):
    MISSING_CLIP = "missing_clip"
    MISSING_FAMILY = "missing_family"
    MALFORMED_FAMILY = "malformed_family"
    MALFORMED_ENTRY = "malformed_entry"
    EMPTY_ENTRY = "empty_entry"
    DEGENERATE_SAMPLE_SPACING = "degenerate_sample_spacing"
    DEGENERATE_DURATION = "degenerate_duration"
    MISSING_SKELETON = "missing_skeleton"


@dataclass
class Diagnostic:
    """Something noteworthy found while importing. Only ERROR aborts an import."""

    kind: DiagnosticKind
    severity: Severity
    message: str
    family: Optional[ChannelFamily] = None
    path: Optional[str] = None

    def __str__(self):
        where = ""
        if self.family is not None:
            where = f" [{self.family.value}"
            if self.path is not None:
                where += f" '{self.path}'"
            where += "]"
        return f"{self.severity.value}: {self.kind.value}{where}: {self.message}"


@dataclass
class CurvePoint:
    time: float
    value: Tuple[float, ...]


@dataclass
class CurveEntry:
    """One ``{path, curve: {m_Curve: [...]}}`` entry of a curve family."""

    path: str
    points: List[CurvePoint] = field(default_factory=list)


@dataclass
class CurveFamilyData:
    family: ChannelFamily
    present: bool = False
    entries: List[CurveEntry] = field(default_factory=list)


@dataclass
class AnimDocument:
    """
    The three curve families of an AnimationClip.

    A family that is missing from the document is kept with ``present=False``
    and no entries; a family that is there but malformed is also empty, and
    the difference is reported through diagnostics.
    """

    families: Dict[ChannelFamily, CurveFamilyData]
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def family(self, family: ChannelFamily) -> CurveFamilyData:
        return self.families[family]

    @property
    def entry_count(self) -> int:
        return sum(len(data.entries) for data in self.families.values())

    @classmethod
    def from_dict(cls, root: Any, strict: bool = False) -> "AnimDocument":
        """
        Validate a generic document tree.

        Args:
            root: Mapping produced by the external document parser
            strict: Raise DocumentSchemaError on the first malformed node
                instead of recording a diagnostic and skipping it

        Returns:
            AnimDocument with per-family entries and diagnostics
        """
        validator = _Validator(strict)
        families = validator.read_families(root)
        return cls(families=families, diagnostics=validator.diagnostics)


class _Validator:

    def __init__(self, strict: bool):
        self.strict = strict
        self.diagnostics: List[Diagnostic] = []

    def report(self, kind, severity, message, family=None, path=None):
        if self.strict and severity is not Severity.INFO:
            raise DocumentSchemaError(message)
        self.diagnostics.append(Diagnostic(kind, severity, message, family, path))

    def read_families(self, root: Any) -> Dict[ChannelFamily, CurveFamilyData]:
        families = {family: CurveFamilyData(family) for family in ChannelFamily}

        clip = root.get(ANIMATION_CLIP_KEY) if isinstance(root, dict) else None
        if not isinstance(clip, dict):
            self.report(
                DiagnosticKind.MISSING_CLIP,
                Severity.WARNING,
                f"Document has no '{ANIMATION_CLIP_KEY}' mapping",
            )
            return families

        for family, key in FAMILY_KEYS.items():
            self._read_family(clip.get(key), families[family], key)

        return families

    def _read_family(self, node: Any, data: CurveFamilyData, key: str):
        family = data.family
        if node is None:
            self.report(DiagnosticKind.MISSING_FAMILY, Severity.INFO, f"'{key}' not present", family)
            return
        if not isinstance(node, list):
            self.report(
                DiagnosticKind.MALFORMED_FAMILY,
                Severity.WARNING,
                f"'{key}' should be a list, got {type(node).__name__}",
                family,
            )
            return

        data.present = True
        for index, entry_node in enumerate(node):
            entry = self._read_entry(entry_node, family, index)
            if entry is not None:
                data.entries.append(entry)

    def _read_entry(self, node: Any, family: ChannelFamily, index: int) -> Optional[CurveEntry]:
        if not isinstance(node, dict):
            self.report(DiagnosticKind.MALFORMED_ENTRY, Severity.WARNING, f"Entry {index} is not a mapping", family)
            return None

        path = node.get(CURVE_PATH_KEY)
        if path is None or not isinstance(path, (str, int, float)) or str(path).strip() == "":
            self.report(DiagnosticKind.MALFORMED_ENTRY, Severity.WARNING, f"Entry {index} has no '{CURVE_PATH_KEY}'", family)
            return None
        path = str(path)

        curve = node.get(CURVE_KEY)
        point_nodes = curve.get(CURVE_POINTS_KEY) if isinstance(curve, dict) else None
        if point_nodes is None:
            point_nodes = []
        if not isinstance(point_nodes, list):
            self.report(
                DiagnosticKind.MALFORMED_ENTRY,
                Severity.WARNING,
                f"'{CURVE_KEY}.{CURVE_POINTS_KEY}' should be a list",
                family,
                path,
            )
            return None

        points = []
        for point_index, point_node in enumerate(point_nodes):
            try:
                points.append(self._read_point(point_node, family))
            except (TypeError, ValueError, KeyError) as exc:
                self.report(
                    DiagnosticKind.MALFORMED_ENTRY,
                    Severity.WARNING,
                    f"Point {point_index} is invalid ({exc}); entry skipped",
                    family,
                    path,
                )
                return None

        if not points:
            self.report(DiagnosticKind.EMPTY_ENTRY, Severity.INFO, "Entry has no keyframes", family, path)
            return None

        return CurveEntry(path, points)

    @staticmethod
    def _read_point(node: Any, family: ChannelFamily) -> CurvePoint:
        if not isinstance(node, dict):
            raise TypeError("not a mapping")

        time = _finite(node[POINT_TIME_KEY], POINT_TIME_KEY)
        value_node = node[POINT_VALUE_KEY]
        if not isinstance(value_node, dict):
            raise TypeError(f"'{POINT_VALUE_KEY}' is not a mapping")

        value = tuple(_finite(value_node[name], name) for name in COMPONENT_NAMES[family])
        return CurvePoint(time, value)


def _finite(leaf: Any, name: str) -> float:
    """Coerce a float or numeric string leaf."""
    if isinstance(leaf, bool) or leaf is None:
        raise TypeError(f"'{name}' is not a number")
    number = float(leaf)
    if not math.isfinite(number):
        raise ValueError(f"'{name}' is not finite")
    return number

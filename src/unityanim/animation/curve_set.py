"""
Bone Curve Set

Per-family curve maps produced by the document parser.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from .animation import ChannelFamily, KeyframeCurve


@dataclass
class BoneCurves:
    """The curves authored for one bone. Absent families are None."""

    bone_name: str
    rotation: Optional[KeyframeCurve] = None
    position: Optional[KeyframeCurve] = None
    scale: Optional[KeyframeCurve] = None

    def get(self, family: ChannelFamily) -> Optional[KeyframeCurve]:
        return getattr(self, family.value)


class BoneCurveSet:
    """
    Curves keyed by family, then bone name.

    Each family keeps its bones in first-seen order. The set is frozen by
    the parser once the document has been read.
    """

    def __init__(self):
        self._curves: Dict[ChannelFamily, Dict[str, KeyframeCurve]] = {
            family: {} for family in ChannelFamily
        }
        self._frozen = False

    def get_or_create(self, family: ChannelFamily, bone_name: str) -> KeyframeCurve:
        """Return the bone's curve for ``family``, creating it on first use."""
        if self._frozen:
            raise RuntimeError("BoneCurveSet is frozen")

        family_curves = self._curves[family]
        curve = family_curves.get(bone_name)
        if curve is None:
            curve = KeyframeCurve(family, bone_name)
            family_curves[bone_name] = curve
        return curve

    def freeze(self):
        """Reject new curves and new keyframes on the existing ones."""
        self._frozen = True
        for curve in self.all_curves():
            curve.freeze()

    @property
    def frozen(self) -> bool:
        return self._frozen

    def curves(self, family: ChannelFamily) -> Iterator[Tuple[str, KeyframeCurve]]:
        """Iterate ``(bone_name, curve)`` pairs of one family in first-seen order."""
        return iter(list(self._curves[family].items()))

    def all_curves(self) -> Iterator[KeyframeCurve]:
        for family in ChannelFamily:
            yield from self._curves[family].values()

    def get(self, bone_name: str) -> Optional[BoneCurves]:
        """Collect the curve triple of a bone, or None if no family mentions it."""
        found = {family: self._curves[family].get(bone_name) for family in ChannelFamily}
        if all(curve is None for curve in found.values()):
            return None
        return BoneCurves(
            bone_name,
            rotation=found[ChannelFamily.ROTATION],
            position=found[ChannelFamily.POSITION],
            scale=found[ChannelFamily.SCALE],
        )

    def bone_names(self) -> List[str]:
        """All bone names, rotation family first, then position, then scale."""
        names: Dict[str, None] = {}
        for family in ChannelFamily:
            for bone_name in self._curves[family]:
                names.setdefault(bone_name, None)
        return list(names)

    def curve_count(self, family: Optional[ChannelFamily] = None) -> int:
        if family is not None:
            return len(self._curves[family])
        return sum(len(curves) for curves in self._curves.values())

    def is_empty(self) -> bool:
        return self.curve_count() == 0

    def __contains__(self, bone_name: str) -> bool:
        return any(bone_name in curves for curves in self._curves.values())

    def __len__(self):
        return len(self.bone_names())

    def __repr__(self):
        counts = ", ".join(f"{family.value}={len(self._curves[family])}" for family in ChannelFamily)
        return f"BoneCurveSet({counts})"

"""Loader utilities for .anim document trees."""

from .anim_document import (
    AnimDocument, CurveEntry, CurveFamilyData, CurvePoint,
    Diagnostic, DiagnosticKind, Severity,
)
from .curve_parser import CurveDocumentParser, CurveParseResult, resolve_bone_name

__all__ = [
    'AnimDocument',
    'CurveEntry',
    'CurveFamilyData',
    'CurvePoint',
    'Diagnostic',
    'DiagnosticKind',
    'Severity',
    'CurveDocumentParser',
    'CurveParseResult',
    'resolve_bone_name',
]

"""
Clip Importer

Runs the full decode-and-resample pipeline on one document.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from .animation.clip import Clip
from .animation.coordinates import CoordinateConverter
from .animation.resampler import ClipAssembler, SampleRateResolver, TrackBuilder
from .config.import_settings import ImportSettings
from .errors import DegenerateDurationError, MissingSkeletonError, UnityAnimError
from .loaders.anim_document import AnimDocument, Diagnostic, DiagnosticKind, Severity
from .loaders.curve_parser import CurveDocumentParser

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    """Either a clip or the reason there is none, plus everything reported on the way."""

    clip: Optional[Clip] = None
    error: Optional[UnityAnimError] = None
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @classmethod
    def success(cls, clip: Clip, diagnostics: List[Diagnostic]) -> "ImportResult":
        return cls(clip=clip, diagnostics=diagnostics)

    @classmethod
    def failure(cls, error: UnityAnimError, diagnostics: List[Diagnostic]) -> "ImportResult":
        return cls(error=error, diagnostics=diagnostics)

    @property
    def ok(self) -> bool:
        return self.clip is not None

    def unwrap(self) -> Clip:
        """Return the clip, or raise the error that prevented it."""
        if self.clip is None:
            raise self.error if self.error is not None else UnityAnimError("Import produced no clip")
        return self.clip

    def diagnostics_of(self, kind: DiagnosticKind) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.kind is kind]


class AnimClipImporter:
    """
    Converts an .anim document tree into a uniformly sampled Clip.

    Each call owns its document, curves and result; an importer can be
    reused for any number of documents.
    """

    def __init__(self, settings: Optional[ImportSettings] = None):
        """
        Initialize importer.

        Args:
            settings: Import options (skeleton, retime factor, naming)
        """
        self.settings = settings if settings is not None else ImportSettings()
        self.parser = CurveDocumentParser(CoordinateConverter(self.settings.unit_scale))
        self.resolver = SampleRateResolver()
        self.builder = TrackBuilder()
        self.assembler = ClipAssembler()

    def import_document(self, document: Union[AnimDocument, Any]) -> ImportResult:
        """
        Decode and resample one document.

        Args:
            document: Validated AnimDocument, or the raw tree produced by the document parser

        Returns:
            ImportResult holding the clip on success
        """
        diagnostics: List[Diagnostic] = []

        if not self.settings.has_skeleton:
            error = MissingSkeletonError()
            diagnostics.append(Diagnostic(DiagnosticKind.MISSING_SKELETON, Severity.ERROR, str(error)))
            logger.error("%s", error)
            return ImportResult.failure(error, diagnostics)

        parsed = self.parser.parse(document)
        diagnostics.extend(parsed.diagnostics)

        try:
            timing = self.resolver.resolve(parsed.curve_set)
        except DegenerateDurationError as exc:
            diagnostics.append(Diagnostic(DiagnosticKind.DEGENERATE_DURATION, Severity.ERROR, str(exc)))
            return ImportResult.failure(exc, diagnostics)

        if timing.degenerate_spacing:
            diagnostics.append(Diagnostic(
                DiagnosticKind.DEGENERATE_SAMPLE_SPACING,
                Severity.WARNING,
                f"No positive key spacing found, sampling at the clip duration ({timing.duration:.4f}s)",
            ))

        track_set = self.builder.build(parsed.curve_set, timing)
        clip = self.assembler.assemble(timing, track_set, self.settings)
        return ImportResult.success(clip, diagnostics)


def import_clip(document: Union[AnimDocument, Any], settings: ImportSettings) -> ImportResult:
    """Import one document with the given settings."""
    return AnimClipImporter(settings).import_document(document)

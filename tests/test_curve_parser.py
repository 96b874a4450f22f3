"""Tests for CurveDocumentParser"""

import numpy as np
import pytest

from unityanim.animation import ChannelFamily, CoordinateConverter, SampleRateResolver
from unityanim.loaders import AnimDocument, CurveDocumentParser, DiagnosticKind


def test_builds_one_curve_per_bone_and_family(make_document):
    """Curves are keyed by resolved bone name"""
    doc = make_document(
        rotation={"Root/actor:Hip": [(0.0, (0, 0, 0, 1)), (0.1, (0, 0, 0, 1))]},
        position={"Root/actor:Hip": [(0.0, (1, 2, 3))], "Root/Hip/actor:Spine": [(0.0, (0, 0, 0))]},
    )
    result = CurveDocumentParser().parse(doc)
    curves = result.curve_set

    assert curves.bone_names() == ["Hip", "Spine"]
    hip = curves.get("Hip")
    assert len(hip.rotation) == 2
    assert len(hip.position) == 1
    assert hip.scale is None
    assert curves.get("Spine").rotation is None
    assert curves.get("Nobody") is None


def test_samples_are_converted(make_document):
    """Rotation and position samples are in the runtime convention"""
    doc = make_document(
        rotation={"Hip": [(0.0, (1, 0, 0, 0))]},
        position={"Hip": [(0.0, (1, 2, 3))]},
        scale={"Hip": [(0.0, (2, 2, 2))]},
    )
    hip = CurveDocumentParser().parse(doc).curve_set.get("Hip")

    assert np.allclose(np.asarray(hip.rotation.keyframes[0].value), [-1.0, 0.0, 0.0, 0.0])
    assert np.allclose(np.asarray(hip.position.keyframes[0].value), [-100.0, -200.0, 300.0])
    assert np.allclose(np.asarray(hip.scale.keyframes[0].value), [2.0, 2.0, 2.0])


def test_custom_converter(make_document):
    """Parser uses the converter it was given"""
    doc = make_document(position={"Hip": [(0.0, (1, 2, 3))]})
    parser = CurveDocumentParser(CoordinateConverter(unit_scale=10.0))
    hip = parser.parse(doc).curve_set.get("Hip")

    assert np.allclose(np.asarray(hip.position.keyframes[0].value), [-10.0, -20.0, 30.0])


def test_entries_for_same_bone_merge(make_entry):
    """Two entries resolving to one bone share a curve"""
    doc = {"AnimationClip": {"m_PositionCurves": [
        make_entry("A/actor:Hip", [(0.2, (0, 0, 0))]),
        make_entry("B/actor:Hip", [(0.0, (0, 0, 0)), (0.1, (0, 0, 0))]),
    ]}}
    curve = CurveDocumentParser().parse(doc).curve_set.get("Hip").position

    assert curve.times == [0.0, 0.1, 0.2]


def test_missing_families_give_smaller_set(make_document):
    """No families, no curves, no error"""
    result = CurveDocumentParser().parse(make_document())

    assert result.curve_set.is_empty()
    assert [d.kind for d in result.diagnostics] == [DiagnosticKind.MISSING_FAMILY] * 3


def test_accepts_validated_document(make_document):
    """An AnimDocument is used as-is"""
    doc = AnimDocument.from_dict(make_document(scale={"Hip": [(0.0, (1, 1, 1))]}))
    result = CurveDocumentParser().parse(doc)

    assert result.curve_set.curve_count(ChannelFamily.SCALE) == 1


def test_curve_set_frozen_after_parse(make_document):
    """Parsed curve sets reject new curves and new keys"""
    result = CurveDocumentParser().parse(make_document(scale={"Hip": [(0.0, (1, 1, 1)), (0.1, (1, 1, 1))]}))

    assert result.curve_set.frozen
    with pytest.raises(RuntimeError):
        result.curve_set.get_or_create(ChannelFamily.ROTATION, "Hip")

    _, curve = next(result.curve_set.curves(ChannelFamily.SCALE))
    assert curve.frozen
    with pytest.raises(RuntimeError):
        curve.add_keyframe(5.0, (2.0, 2.0, 2.0))
    assert curve.times == [0.0, 0.1]
    assert SampleRateResolver().resolve(result.curve_set).duration == pytest.approx(0.1)


def test_trailing_separator_path_is_skipped(make_document):
    """A path ending in the separator names no bone and is reported"""
    keys = [(0.0, (0, 0, 0, 1)), (0.1, (0, 0, 0, 1))]
    result = CurveDocumentParser().parse(make_document(rotation={"Root/Hip/": keys, "Root/Spine": keys}))

    assert result.curve_set.bone_names() == ["Spine"]
    assert "" not in result.curve_set
    malformed = [d for d in result.diagnostics if d.kind is DiagnosticKind.MALFORMED_ENTRY]
    assert len(malformed) == 1
    assert malformed[0].path == "Root/Hip/"
    assert malformed[0].family is ChannelFamily.ROTATION

"""Tests for document validation"""

import pytest

from unityanim.animation import ChannelFamily
from unityanim.errors import DocumentSchemaError
from unityanim.loaders import AnimDocument, DiagnosticKind, Severity


def _kinds(document):
    return [d.kind for d in document.diagnostics]


def test_well_formed_document(make_document):
    """All three families are read with their points"""
    doc = AnimDocument.from_dict(make_document(
        rotation={"Hip": [(0.0, (0, 0, 0, 1)), (0.1, (0, 0, 0, 1))]},
        position={"Hip": [(0.0, (1, 2, 3))]},
        scale={"Hip": [(0.0, (1, 1, 1))]},
    ))

    rotation = doc.family(ChannelFamily.ROTATION)
    assert rotation.present
    assert len(rotation.entries) == 1
    assert rotation.entries[0].path == "Hip"
    assert [p.time for p in rotation.entries[0].points] == [0.0, 0.1]
    assert rotation.entries[0].points[0].value == (0.0, 0.0, 0.0, 1.0)
    assert doc.family(ChannelFamily.POSITION).entries[0].points[0].value == (1.0, 2.0, 3.0)
    assert doc.entry_count == 3
    assert doc.diagnostics == []


def test_missing_family_is_informational(make_document):
    """An absent family is reported but not as a problem"""
    doc = AnimDocument.from_dict(make_document(rotation={"Hip": [(0.0, (0, 0, 0, 1))]}))

    assert not doc.family(ChannelFamily.POSITION).present
    assert not doc.family(ChannelFamily.SCALE).present
    missing = [d for d in doc.diagnostics if d.kind is DiagnosticKind.MISSING_FAMILY]
    assert len(missing) == 2
    assert all(d.severity is Severity.INFO for d in missing)


def test_missing_clip():
    """A root without AnimationClip yields empty families"""
    doc = AnimDocument.from_dict({"SomethingElse": {}})

    assert _kinds(doc) == [DiagnosticKind.MISSING_CLIP]
    assert doc.entry_count == 0


def test_malformed_family_differs_from_missing():
    """A family that is not a list is flagged as malformed"""
    doc = AnimDocument.from_dict({"AnimationClip": {"m_RotationCurves": {"path": "Hip"}}})

    rotation = doc.family(ChannelFamily.ROTATION)
    assert not rotation.present
    assert DiagnosticKind.MALFORMED_FAMILY in _kinds(doc)


def test_string_leaves_are_coerced(make_entry):
    """Numeric strings from the generic tree are accepted"""
    entry = make_entry("Root/actor:Hip", [("0.5", ("1", "2", "3"))])
    doc = AnimDocument.from_dict({"AnimationClip": {"m_PositionCurves": [entry]}})

    point = doc.family(ChannelFamily.POSITION).entries[0].points[0]
    assert point.time == pytest.approx(0.5)
    assert point.value == (1.0, 2.0, 3.0)


def test_entry_with_bad_point_is_skipped(make_entry):
    """A rotation point without w drops the whole entry"""
    good = make_entry("Hip", [(0.0, (0, 0, 0, 1))])
    bad = make_entry("Spine", [(0.0, (0, 0, 0, 1)), (0.1, (0, 0, 0))])
    doc = AnimDocument.from_dict({"AnimationClip": {"m_RotationCurves": [good, bad]}})

    entries = doc.family(ChannelFamily.ROTATION).entries
    assert [e.path for e in entries] == ["Hip"]
    malformed = [d for d in doc.diagnostics if d.kind is DiagnosticKind.MALFORMED_ENTRY]
    assert len(malformed) == 1
    assert malformed[0].path == "Spine"
    assert malformed[0].severity is Severity.WARNING


def test_non_numeric_time_is_malformed(make_entry):
    """Garbage time values are rejected"""
    entry = make_entry("Hip", [("soon", (0, 0, 0))])
    doc = AnimDocument.from_dict({"AnimationClip": {"m_ScaleCurves": [entry]}})

    assert doc.family(ChannelFamily.SCALE).entries == []
    assert DiagnosticKind.MALFORMED_ENTRY in _kinds(doc)


def test_entry_without_path_is_malformed():
    """Entries need a path"""
    doc = AnimDocument.from_dict({"AnimationClip": {"m_ScaleCurves": [{"curve": {"m_Curve": []}}]}})

    assert DiagnosticKind.MALFORMED_ENTRY in _kinds(doc)


def test_empty_entry_yields_no_curve():
    """An entry with no points is dropped quietly"""
    entry = {"path": "Hip", "curve": {"m_Curve": []}}
    doc = AnimDocument.from_dict({"AnimationClip": {"m_RotationCurves": [entry]}})

    rotation = doc.family(ChannelFamily.ROTATION)
    assert rotation.present
    assert rotation.entries == []
    empty = [d for d in doc.diagnostics if d.kind is DiagnosticKind.EMPTY_ENTRY]
    assert len(empty) == 1
    assert empty[0].severity is Severity.INFO


def test_strict_mode_raises(make_entry):
    """Strict validation stops at the first malformed entry"""
    bad = make_entry("Hip", [(0.0, (0, 0))])

    with pytest.raises(DocumentSchemaError):
        AnimDocument.from_dict({"AnimationClip": {"m_PositionCurves": [bad]}}, strict=True)


def test_strict_mode_tolerates_missing_families(make_document):
    """Absent families are not errors even in strict mode"""
    doc = AnimDocument.from_dict(make_document(scale={"Hip": [(0.0, (1, 1, 1))]}), strict=True)

    assert len(doc.family(ChannelFamily.SCALE).entries) == 1

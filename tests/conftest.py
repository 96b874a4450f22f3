"""Shared document builders for importer tests"""

import pytest


def _point(time, value):
    names = ("x", "y", "z", "w")
    return {"time": time, "value": dict(zip(names, value))}


def _entry(path, keys):
    return {"path": path, "curve": {"m_Curve": [_point(t, v) for t, v in keys]}}


def _document(rotation=None, position=None, scale=None):
    clip = {}
    if rotation is not None:
        clip["m_RotationCurves"] = [_entry(path, keys) for path, keys in rotation.items()]
    if position is not None:
        clip["m_PositionCurves"] = [_entry(path, keys) for path, keys in position.items()]
    if scale is not None:
        clip["m_ScaleCurves"] = [_entry(path, keys) for path, keys in scale.items()]
    return {"AnimationClip": clip}


@pytest.fixture
def make_entry():
    """Build one ``{path, curve: {m_Curve}}`` entry from (time, components) pairs."""
    return _entry


@pytest.fixture
def make_document():
    """Build a document tree from {path: [(time, components), ...]} per family."""
    return _document

"""Tests for CoordinateConverter"""

import numpy as np
import pytest
from pyrr import Quaternion, Vector3

from unityanim.animation import CoordinateConverter


def test_rotation_flips_x_and_y():
    """(1, 0, 0, 0) becomes (-1, 0, 0, 0)"""
    converter = CoordinateConverter()
    q = converter.rotation((1.0, 0.0, 0.0, 0.0))

    assert isinstance(q, Quaternion)
    assert np.allclose(np.asarray(q), [-1.0, 0.0, 0.0, 0.0])


def test_rotation_is_renormalized():
    """Non-unit input comes out unit length"""
    converter = CoordinateConverter()
    q = converter.rotation((0.0, 0.0, 2.0, 2.0))

    assert np.linalg.norm(q) == pytest.approx(1.0)
    assert np.allclose(np.asarray(q), [0.0, 0.0, np.sqrt(0.5), np.sqrt(0.5)])


def test_position_flips_and_scales():
    """(1, 2, 3) meters becomes (-100, -200, 300) centimeters"""
    converter = CoordinateConverter()
    p = converter.position((1.0, 2.0, 3.0))

    assert isinstance(p, Vector3)
    assert np.allclose(np.asarray(p), [-100.0, -200.0, 300.0])


def test_custom_unit_scale():
    """Unit scale factor is configurable"""
    converter = CoordinateConverter(unit_scale=1.0)
    assert np.allclose(np.asarray(converter.position((1.0, 2.0, 3.0))), [-1.0, -2.0, 3.0])


def test_scale_unchanged():
    """Scale samples pass through"""
    converter = CoordinateConverter()
    assert np.allclose(np.asarray(converter.scale((1.0, 2.0, 0.5))), [1.0, 2.0, 0.5])


def test_conversion_is_not_idempotent():
    """Converting twice flips back and scales twice"""
    converter = CoordinateConverter()
    once = converter.position((1.0, 2.0, 3.0))
    twice = converter.position(once)
    assert np.allclose(np.asarray(twice), [10000.0, 20000.0, 30000.0])

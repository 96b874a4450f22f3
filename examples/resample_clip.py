#!/usr/bin/env python3
"""
Resample Clip Example

Builds a small two-bone document in code (the shape an .anim parser
produces), imports it and prints the resulting clip.
"""

import sys
sys.path.insert(0, '../src')

from unityanim import ImportSettings, configure_logging, import_clip


def _point(time, **value):
    return {"time": time, "value": value}


DOCUMENT = {
    "AnimationClip": {
        "m_RotationCurves": [
            {
                "path": "Armature/actor:Hip",
                "curve": {"m_Curve": [
                    _point(0.0, x=0.0, y=0.0, z=0.0, w=1.0),
                    _point(0.5, x=0.0, y=0.0, z=0.3826834, w=0.9238795),
                    _point(1.0, x=0.0, y=0.0, z=0.0, w=1.0),
                ]},
            },
        ],
        "m_PositionCurves": [
            {
                "path": "Armature/actor:Root",
                "curve": {"m_Curve": [
                    _point(0.0, x=0.0, y=0.0, z=0.0),
                    _point(0.25, x=0.0, y=0.0, z=0.5),
                    _point(1.0, x=0.0, y=0.0, z=2.0),
                ]},
            },
        ],
    }
}


if __name__ == '__main__':
    configure_logging("INFO")

    settings = ImportSettings(skeleton="Armature", retime_factor=1.0, clip_name="Sway")
    result = import_clip(DOCUMENT, settings)

    for diagnostic in result.diagnostics:
        print(f"  {diagnostic}")

    if not result.ok:
        print(f"Import failed: {result.error}")
        sys.exit(1)

    clip = result.clip
    print(clip)
    print(f"  Sample rate: {clip.sample_rate:.2f} fps, resample rate: {clip.resample_rate:.2f} fps")
    for track in clip.tracks:
        print(f"  {track}")
        for i, rotation in enumerate(track.rotation_keys):
            print(f"    rot[{i}] = {[round(float(c), 4) for c in rotation]}")
        for i, position in enumerate(track.position_keys):
            print(f"    pos[{i}] = {[round(float(c), 2) for c in position]}")

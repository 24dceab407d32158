"""
Project settings (constants + small helpers).
Units: normalized simulation units (G = 1), seconds for wall-clock pacing.
"""
from __future__ import annotations

import math
import operator
from typing import Optional

import numpy as np

# Run
VALIDATE_ON_IMPORT = False

# Gravity (stylized demo: normalized constant, not the physical G)
G = 1.0
DT = 0.016
EPSILON = 1e-6  # guards both the r^2 denominator and direction normalization

# Initial layout (helix)
HELIX_RADIUS = 8.0
HELIX_HEIGHT = 16.0
HELIX_TURNS = 5

# Lifecycle
REINIT_KEEP = "keep"
REINIT_REPLACE = "replace"
REINIT_POLICIES = (REINIT_KEEP, REINIT_REPLACE)
REINIT_POLICY = REINIT_KEEP

# Export
LAYOUT_XYZ = "xyz"
LAYOUT_XY = "xy"
LAYOUTS = {LAYOUT_XYZ: 3, LAYOUT_XY: 2}
EXPORT_LAYOUT = LAYOUT_XY
EXPORT_SCALE = 0.01

# Driver
DEFAULT_BODY_COUNT = 200
FRAME_INTERVAL_SEC = 0.016  # ~60 Hz
HEADLESS_FRAMES = 120


def components_for(layout: Optional[str]) -> int:
    key = EXPORT_LAYOUT if layout is None else layout
    try:
        return LAYOUTS[key]
    except KeyError:
        raise ValueError(f"Unknown export layout: {key!r}") from None


def validate_body_count(n) -> int:
    # bool is an int subclass; reject it along with floats and strings
    if isinstance(n, (bool, np.bool_)):
        raise ValueError(f"Body count must be an integer, got {n!r}")
    try:
        n = operator.index(n)
    except TypeError:
        raise ValueError(f"Body count must be an integer, got {n!r}") from None
    if n <= 0:
        raise ValueError(f"Body count must be > 0, got {n}")
    return n


def require_positive(name: str, value) -> float:
    value = float(value)
    if not math.isfinite(value) or value <= 0.0:
        raise ValueError(f"{name} must be finite and > 0, got {value}")
    return value


def validate_settings() -> None:
    if G <= 0:
        raise ValueError("G must be > 0")
    if DT <= 0:
        raise ValueError("DT must be > 0")
    if EPSILON <= 0:
        raise ValueError("EPSILON must be > 0")
    if HELIX_RADIUS <= 0:
        raise ValueError("HELIX_RADIUS must be > 0")
    if HELIX_HEIGHT < 0:
        raise ValueError("HELIX_HEIGHT must be >= 0")
    if REINIT_POLICY not in REINIT_POLICIES:
        raise ValueError(f"REINIT_POLICY must be one of {REINIT_POLICIES}")
    if EXPORT_LAYOUT not in LAYOUTS:
        raise ValueError(f"EXPORT_LAYOUT must be one of {tuple(LAYOUTS)}")
    if DEFAULT_BODY_COUNT <= 0:
        raise ValueError("DEFAULT_BODY_COUNT must be > 0")
    if FRAME_INTERVAL_SEC < 0:
        raise ValueError("FRAME_INTERVAL_SEC must be >= 0")


if VALIDATE_ON_IMPORT:
    validate_settings()

# nbody/simulation/export.py
"""
Read-only snapshots of body positions as flat float32 buffers for a renderer.

xyz layout: [x0, y0, z0, x1, y1, z1, ...]  (3n values)
xy layout : [x0, y0, x1, y1, ...]          (2n values, z dropped)

Output order is body storage order. The engine is never mutated and no body
reference leaves this module, only copied numbers.
"""
from typing import Optional

import numpy as np

from nbody.config import settings

BUFFER_DTYPE = np.float32


def empty_buffer() -> np.ndarray:
    return np.empty(0, dtype=BUFFER_DTYPE)


def _buffer(out: Optional[np.ndarray], size: int) -> np.ndarray:
    # reuse the caller's buffer when it already has the right shape and dtype
    if out is not None and out.shape == (size,) and out.dtype == BUFFER_DTYPE:
        return out
    return np.empty(size, dtype=BUFFER_DTYPE)


def _fill(engine, components: int, out, scale: float) -> np.ndarray:
    if engine is None:
        return empty_buffer()
    pos = engine.positions()[:, :components]
    buf = _buffer(out, pos.size)
    buf[:] = (pos * float(scale)).ravel()
    return buf


def fill_xyz(engine, out: Optional[np.ndarray] = None, scale: float = 1.0) -> np.ndarray:
    return _fill(engine, 3, out, scale)


def fill_xy(engine, out: Optional[np.ndarray] = None, scale: float = 1.0) -> np.ndarray:
    return _fill(engine, 2, out, scale)


def extract_positions(state, scale: float = 1.0, layout: Optional[str] = None,
                      out: Optional[np.ndarray] = None) -> np.ndarray:
    """Snapshot the state's current engine; empty buffer when nothing is initialized."""
    components = settings.components_for(layout)
    return _fill(state.engine, components, out, scale)

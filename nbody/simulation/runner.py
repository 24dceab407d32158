# nbody/simulation/runner.py
import logging
import time
from typing import Callable, Optional

import numpy as np

from nbody.config import settings
from nbody.simulation.state import SimulationState

logger = logging.getLogger(__name__)


def run_loop(
    state: SimulationState,
    render: Optional[Callable[[np.ndarray], None]] = None,
    body_count: Optional[int] = settings.DEFAULT_BODY_COUNT,
    frames: Optional[int] = None,
    interval: float = settings.FRAME_INTERVAL_SEC,
    scale: float = settings.EXPORT_SCALE,
    layout: Optional[str] = None,
    stop=None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Cooperative driver: step -> extract -> render -> sleep, repeated.

    body_count : passed to state.initialize() (subject to its policy); None
                 runs the engine the state already holds, initializing
                 DEFAULT_BODY_COUNT bodies only when it holds none
    stop       : object with is_set() (e.g. threading.Event), checked once per
                 iteration before stepping; a step in progress always completes
    frames     : optional upper bound on iterations (None = until stopped)

    Returns the number of completed iterations.
    """
    components = settings.components_for(layout)
    if body_count is not None:
        state.initialize(body_count)
    elif not state.is_initialized:
        state.initialize(settings.DEFAULT_BODY_COUNT)
    buf = np.empty(state.body_count * components, dtype=np.float32)

    logger.info("Started")
    done = 0
    while frames is None or done < frames:
        if stop is not None and stop.is_set():
            break
        state.step()
        buf = state.extract(layout=layout, scale=scale, out=buf)
        if render is not None:
            render(buf)
        done += 1
        if interval > 0:
            sleep(interval)
    logger.info("Stopped after %d frames", done)
    return done

# nbody/main.py
import logging

import numpy as np

from nbody.config import settings
from nbody.physics.utils import center_of_mass, total_energy, total_momentum
from nbody.simulation.runner import run_loop
from nbody.simulation.state import SimulationState

# --- Setup logger ------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-7s  %(message)s",
    datefmt="%H:%M:%S"
)
log = logging.getLogger("main")


def log_diagnostics(label, engine):
    bodies = engine.bodies
    log.info(
        "%s: step=%d t=%.3f E=%.6f |p|=%.3e com=%s",
        label,
        engine.steps,
        engine.time,
        total_energy(bodies, engine.g, engine.eps),
        float(np.linalg.norm(total_momentum(bodies))),
        center_of_mass(bodies).round(6),
    )


def main(body_count=settings.DEFAULT_BODY_COUNT, frames=settings.HEADLESS_FRAMES,
         policy=settings.REINIT_POLICY):
    settings.validate_settings()
    state = SimulationState(policy=policy)
    state.initialize(body_count)
    log_diagnostics("Initial", state.engine)

    try:
        # headless: no renderer attached and no frame pacing
        run_loop(state, body_count=None, frames=frames, interval=0.0)
        log_diagnostics("Final", state.engine)
    finally:
        state.reset()


if __name__ == "__main__":
    main()

"""
Microbenchmark: time per frame vs number of charges.
Run:
  python benchmarks/bench_frame.py
"""
import numpy as np
from field_explorer.driver import AnimationDriver, FrameSnapshot, frame_times
from field_explorer.profiler import FrameProfiler
from field_explorer.renderer import NullSurface
from field_explorer.types import Charge, SimulationMode


def run(n: int, frames: int = 60):
    prof = FrameProfiler()
    driver = AnimationDriver(NullSurface(), size=(960.0, 640.0), profiler=prof)

    rng = np.random.default_rng(12345)  # determinism
    charges = tuple(
        Charge(
            f"c{i}",
            float(rng.uniform(60.0, 900.0)),
            float(rng.uniform(60.0, 580.0)),
            polarity=1 if i % 2 == 0 else -1,
        )
        for i in range(n)
    )
    snap = FrameSnapshot(mode=SimulationMode.COMBINED, charges=charges, particle_enabled=True)

    # warmup
    driver.run(frame_times(5), snap)
    prof.stats.clear()

    driver.run(frame_times(frames, start_ms=100.0), snap)
    return prof.stats.summary()


if __name__ == "__main__":
    for n in [1, 2, 5, 10, 20]:
        summary = run(n)
        render = summary["render"]
        print(f"N={n:3d}  render={render['mean_ms']:8.3f} ms  max={render['max_ms']:8.3f} ms  "
              f"over budget={render['over_budget']:3d}  particle={summary['particle']['mean_ms']:.3f} ms")

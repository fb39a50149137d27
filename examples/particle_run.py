# examples/particle_run.py
from field_explorer import AnimationDriver, Charge, FrameSnapshot, NullSurface, SimulationMode
from field_explorer.driver import frame_times
from field_explorer.logging_config import setup_logging

setup_logging()

snap = FrameSnapshot(
    mode=SimulationMode.ELECTRIC,
    charges=(Charge("a", 300.0, 320.0, magnitude=5e-6), Charge("b", 660.0, 320.0, polarity=-1, magnitude=5e-6)),
    particle_enabled=True,
    show_vectors=False,
)

driver = AnimationDriver(NullSurface())
driver.run(frame_times(600), snap)

s = driver.particle_state
print("frames:", driver.frames)
print("particle pos:", (round(s.x, 2), round(s.y, 2)), "speed:", s.speed, "trail:", len(s.trail))

# examples/debug_frame.py
from field_explorer import Charge, DebugSurface, render_frame
from field_explorer.logging_config import setup_logging

setup_logging()

charges = [
    Charge("a", 300.0, 320.0, polarity=+1),
    Charge("b", 660.0, 320.0, polarity=-1, magnitude=2e-6),
]

surface = DebugSurface()
render_frame(surface, (960, 640), 0.0, "electric", charges, selection="a", density=6, show_vectors=False)
surface.flush()

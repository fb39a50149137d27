# examples/render_png.py
# Requires the plot extra: pip install -e ".[plot]"
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from field_explorer import Charge, render_frame
from field_explorer.renderer.mpl import MatplotlibSurface

charges = [
    Charge("a", 320.0, 320.0, polarity=+1),
    Charge("b", 640.0, 320.0, polarity=-1),
]

fig, axes = plt.subplots(1, 2, figsize=(19.2, 6.4))
for ax, mode in zip(axes, ("combined", "em-wave")):
    surface = MatplotlibSurface(ax)
    render_frame(surface, (960, 640), 1200.0, mode, charges, density=16)
    ax.set_title(mode)

fig.tight_layout()
fig.savefig("field_explorer.png", dpi=100)
print("wrote field_explorer.png")

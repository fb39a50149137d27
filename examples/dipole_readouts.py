# examples/dipole_readouts.py
from field_explorer import field, format_field_strength, format_net_charge, format_potential, make_dipole, potential, probe
import numpy as np

charges = list(make_dipole(480.0, 320.0, spacing=200.0, rng=np.random.default_rng(1)))

for x, y in [(480.0, 320.0), (480.0, 200.0), (300.0, 320.0), (700.0, 500.0)]:
    f = field(charges, x, y)
    p = probe(charges, x, y)
    print(f"({x:.0f}, {y:.0f})  |E|={format_field_strength(f.magnitude):>14}  "
          f"dir={p.direction_deg:7.1f} deg  V={format_potential(potential(charges, x, y))}")

print("net charge:", format_net_charge(charges))

# MIT License (see LICENSE)
"""
Electrostatic field model.

Coulomb superposition over a set of point charges:

    E(p) = Σ k·q_i·(p - c_i) / |p - c_i|³
    V(p) = Σ k·q_i / |p - c_i|

with k = K_COULOMB and q_i = polarity·magnitude.

Singularity policy: a charge closer than EXCLUSION_RADIUS to the query
point contributes nothing to either sum. This is a hard cut-off, not a
softening term, so a point inside a charge body only sees the other
charges.

All functions are pure and total; an empty charge set gives zero. Nothing
is cached, each query is O(N) in the number of charges.
"""
from __future__ import annotations
import math
from typing import Iterable, Protocol, Sequence

import numpy as np

from ..constants import EXCLUSION_RADIUS, K_COULOMB
from ..types import Charge, FieldSample, ProbeSample


class FieldFunction(Protocol):
    """
    Anything that evaluates the field at a point.

    Consumers (tracer, sampler, integrator) take one of these so a host can
    substitute a memoised implementation keyed on the charge snapshot.
    """

    def __call__(self, charges: Sequence[Charge], x: float, y: float) -> FieldSample:
        ...


def field(charges: Iterable[Charge], x: float, y: float) -> FieldSample:
    """
    Electric field at (x, y).

    Args:
        charges: Charge snapshot.
        x, y: Query point in scene units.

    Returns:
        FieldSample with components (Ex, Ey) and magnitude, in N/C.
    """
    ex = 0.0
    ey = 0.0
    for c in charges:
        dx = x - c.x
        dy = y - c.y
        r = math.sqrt(dx * dx + dy * dy)
        if r < EXCLUSION_RADIUS:
            continue
        e = K_COULOMB * c.magnitude * c.polarity / (r * r)
        ex += e * dx / r
        ey += e * dy / r
    return FieldSample(ex, ey, math.sqrt(ex * ex + ey * ey))


def potential(charges: Iterable[Charge], x: float, y: float) -> float:
    """Scalar potential at (x, y) in volts, same exclusion rule as field()."""
    v = 0.0
    for c in charges:
        dx = x - c.x
        dy = y - c.y
        r = math.sqrt(dx * dx + dy * dy)
        if r < EXCLUSION_RADIUS:
            continue
        v += K_COULOMB * c.magnitude * c.polarity / r
    return v


def field_grid(
    charges: Sequence[Charge],
    xs: np.ndarray,
    ys: np.ndarray,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Vectorised field evaluation over arrays of query points.

    Applies the same exclusion rule as field(), so each element equals
    field(charges, xs[i], ys[i]) up to summation order.

    Args:
        charges: Charge snapshot.
        xs, ys: Arrays of identical shape holding the query coordinates.

    Returns:
        (ex, ey, magnitude) arrays with the shape of xs.
    """
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    ex = np.zeros_like(xs)
    ey = np.zeros_like(ys)
    for c in charges:
        dx = xs - c.x
        dy = ys - c.y
        r = np.sqrt(dx * dx + dy * dy)
        mask = r >= EXCLUSION_RADIUS
        # r is at least EXCLUSION_RADIUS wherever mask holds
        safe_r = np.where(mask, r, 1.0)
        e = np.where(mask, K_COULOMB * c.magnitude * c.polarity / (safe_r * safe_r), 0.0)
        ex += e * dx / safe_r
        ey += e * dy / safe_r
    return ex, ey, np.sqrt(ex * ex + ey * ey)


def net_charge_micro_coulombs(charges: Iterable[Charge]) -> float:
    """Net signed charge of the set, in µC."""
    return sum(c.polarity * c.magnitude for c in charges) * 1e6


def probe(
    charges: Sequence[Charge],
    x: float,
    y: float,
    screen_offset: tuple[float, float] = (20.0, 20.0),
) -> ProbeSample:
    """
    Build the hover readout for a pointer at (x, y).

    The readout anchor sits ``screen_offset`` away from the pointer so the
    panel does not cover the probed point.
    """
    f = field(charges, x, y)
    return ProbeSample(
        x=x,
        y=y,
        field_magnitude=f.magnitude,
        direction_deg=f.direction_deg,
        screen_x=x + screen_offset[0],
        screen_y=y + screen_offset[1],
    )

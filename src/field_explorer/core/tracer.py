# MIT License (see LICENSE)
"""
Field line tracing.

Approximates electrostatic streamlines with fixed-step polylines. Each line
starts on a ring around a seed charge and is advanced by a constant
distance along the normalised field until one of these holds:

    1. |E| below NEAR_ZERO_FIELD (null region)
    2. the next point leaves the canvas
    3. the next point lands inside a charge body
    4. LINE_MAX_STEPS steps have been taken

Seeding depends on the shape of the whole charge set, decided once per
call:
    - any positive charge present: seed every positive charge on a ring of
      LINE_SEED_RADIUS and trace along +E;
    - otherwise: seed every charge on a ring of LINE_SEED_RADIUS_INWARD and
      trace along -E, so all-negative sets still show converging lines.

Lines are recomputed from scratch each frame. For a fixed charge snapshot
and density the result is deterministic.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

import numpy as np

from ..constants import (
    LINE_MAX_STEPS,
    LINE_SEED_RADIUS,
    LINE_SEED_RADIUS_INWARD,
    LINE_STEP,
    NEAR_ZERO_FIELD,
)
from ..types import Charge
from .field import FieldFunction, field
from .geometry import contains_point

logger = logging.getLogger(__name__)


class Termination(Enum):
    """Why a traced line stopped."""
    NULL_FIELD = "null_field"
    OUT_OF_BOUNDS = "out_of_bounds"
    HIT_CHARGE = "hit_charge"
    MAX_STEPS = "max_steps"


@dataclass(frozen=True)
class FieldLine:
    """
    One traced streamline.

    Attributes:
        points: Vertices [N, 2], seed point first.
        direction: +1 (along E) or -1 (against E).
        steps: Integration steps attempted.
        termination: Reason the trace ended.
    """
    points: np.ndarray
    direction: int
    steps: int
    termination: Termination

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class SeedPlan:
    """Seed charges, ring radius and trace direction for one frame."""
    seeds: tuple[Charge, ...]
    radius: float
    direction: int


def plan_seeds(charges: Sequence[Charge]) -> SeedPlan:
    """
    Classify the charge set and choose how to seed lines.

    The decision is global: a single positive charge anywhere switches the
    whole set to outward seeding from positives only.
    """
    positives = tuple(c for c in charges if c.polarity > 0)
    if positives:
        return SeedPlan(seeds=positives, radius=LINE_SEED_RADIUS, direction=1)
    return SeedPlan(seeds=tuple(charges), radius=LINE_SEED_RADIUS_INWARD, direction=-1)


def seed_points(charge: Charge, density: int, radius: float) -> np.ndarray:
    """Return `density` points evenly spaced in angle on a ring around charge."""
    angles = np.arange(density, dtype=np.float64) * (2.0 * math.pi / density)
    return np.column_stack((charge.x + np.cos(angles) * radius, charge.y + np.sin(angles) * radius))


def trace_line(
    charges: Sequence[Charge],
    start: tuple[float, float],
    direction: int,
    width: float,
    height: float,
    step: float = LINE_STEP,
    max_steps: int = LINE_MAX_STEPS,
    field_fn: FieldFunction = field,
) -> FieldLine:
    """
    Integrate a single streamline from `start`.

    Args:
        charges: Charge snapshot.
        start: Seed point (always the first vertex).
        direction: +1 to follow E, -1 to follow -E.
        width, height: Canvas bounds; the trace stops outside [0, w]x[0, h].
        step: Fixed step length.
        max_steps: Hard ceiling on integration steps.
        field_fn: Field evaluator.

    Returns:
        The traced FieldLine.
    """
    x, y = float(start[0]), float(start[1])
    pts = [(x, y)]
    reason = Termination.MAX_STEPS
    steps = 0
    for steps in range(1, max_steps + 1):
        f = field_fn(charges, x, y)
        if f.magnitude < NEAR_ZERO_FIELD:
            reason = Termination.NULL_FIELD
            break
        x += f.ex / f.magnitude * step * direction
        y += f.ey / f.magnitude * step * direction
        if x < 0 or x > width or y < 0 or y > height:
            reason = Termination.OUT_OF_BOUNDS
            break
        if any(contains_point(c, x, y) for c in charges):
            reason = Termination.HIT_CHARGE
            break
        pts.append((x, y))
    return FieldLine(
        points=np.array(pts, dtype=np.float64),
        direction=direction,
        steps=steps,
        termination=reason,
    )


def trace_field_lines(
    charges: Sequence[Charge],
    width: float,
    height: float,
    density: int,
    field_fn: FieldFunction = field,
) -> list[FieldLine]:
    """
    Trace the full field line pattern for a charge snapshot.

    Args:
        charges: Charge snapshot.
        width, height: Canvas size.
        density: Lines per seed charge (> 0).
        field_fn: Field evaluator.

    Returns:
        Polylines in seed order (charge order, then angle).

    Raises:
        ValueError: If density is not positive.
    """
    if density <= 0:
        raise ValueError(f"density must be positive, got {density}")
    if not charges:
        return []

    plan = plan_seeds(charges)
    lines = []
    for charge in plan.seeds:
        for start in seed_points(charge, density, plan.radius):
            lines.append(trace_line(
                charges, (start[0], start[1]), plan.direction, width, height,
                field_fn=field_fn,
            ))

    logger.debug(
        "traced %d lines from %d seeds (direction %+d)",
        len(lines), len(plan.seeds), plan.direction,
    )
    return lines

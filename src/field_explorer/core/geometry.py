# MIT License (see LICENSE)
"""
Point-in-shape predicates.

Used by the field line tracer (a line stops when it reaches a charge
body) and by the host's pointer hit testing.
"""
from __future__ import annotations
from typing import Sequence

from ..constants import MAGNET_PICK_RADIUS
from ..types import Charge, MagnetState


def contains_point(charge: Charge, x: float, y: float) -> bool:
    """True iff (x, y) lies on the closed disk of the charge's radius."""
    dx = x - charge.x
    dy = y - charge.y
    return dx * dx + dy * dy <= charge.radius * charge.radius


def charge_at(
    charges: Sequence[Charge],
    x: float,
    y: float,
    topmost: bool = False,
) -> Charge | None:
    """
    Find a charge containing the point.

    Args:
        charges: Charge snapshot in draw order.
        x, y: Query point.
        topmost: Search from the end of the list (last drawn first), which is
            what deletion uses; selection uses the first hit.

    Returns:
        The matching charge, or None.
    """
    seq = reversed(charges) if topmost else charges
    for c in seq:
        if contains_point(c, x, y):
            return c
    return None


def magnet_contains(magnet: MagnetState, x: float, y: float, radius: float = MAGNET_PICK_RADIUS) -> bool:
    """Pickup test for dragging the magnet: a disk around its center."""
    dx = x - magnet.x
    dy = y - magnet.y
    return dx * dx + dy * dy <= radius * radius

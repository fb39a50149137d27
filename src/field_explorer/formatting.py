# MIT License (see LICENSE)
"""Readout formatting for field strength, potential and net charge."""
from __future__ import annotations
from typing import Iterable

from .core.field import net_charge_micro_coulombs
from .types import Charge

# Potentials from half a megavolt upward are shown in MV.
POTENTIAL_MEGA_THRESHOLD = 5e5
POTENTIAL_KILO_THRESHOLD = 1e3


def format_field_strength(value: float) -> str:
    if value > 1e6:
        return f"{value / 1e6:.2f} MN/C"
    return f"{value:.2f} N/C"


def format_potential(value: float) -> str:
    if abs(value) >= POTENTIAL_MEGA_THRESHOLD:
        return f"{value / 1e6:.2f} MV"
    if abs(value) >= POTENTIAL_KILO_THRESHOLD:
        return f"{value / 1e3:.2f} kV"
    return f"{value:.2f} V"


def format_net_charge(charges: Iterable[Charge]) -> str:
    return f"{net_charge_micro_coulombs(charges):.2f} uC"

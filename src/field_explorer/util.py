# MIT License (see LICENSE)
"""
Utility functions for numeric conversion and environment switches.
"""
from __future__ import annotations
import os

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Lets callers pass tuples or lists for points and polylines.
    """
    return np.array(x, dtype=np.float64)


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value into [lo, hi]."""
    return max(lo, min(hi, value))


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean switch ("1"/"0") from the environment."""
    return os.environ.get(name, "1" if default else "0") == "1"

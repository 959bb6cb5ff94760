"""Numba-accelerated mathematical helpers.

- `kinematics`: angular distances and invariant masses
"""

from .kinematics import *

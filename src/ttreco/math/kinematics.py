"""Numba JIT compiled implementation of basic collider kinematics.

All functions operate on scalar components so that they can be called from
regular Python code and from other jitted functions alike.
"""

import numba as nb
import numpy as np

__all__ = ["delta_phi", "delta_r", "inv_mass", "mass2", "pt_eta_phi"]


@nb.njit(cache=True)
def delta_phi(phi1: nb.float64, phi2: nb.float64) -> nb.float64:
    """Azimuthal angle difference, folded into [-pi, pi].

    Parameters
    ----------
    phi1 : float
        Azimuthal angle of the first direction
    phi2 : float
        Azimuthal angle of the second direction

    Returns
    -------
    float
        Signed azimuthal difference `phi1 - phi2`
    """
    dphi = phi1 - phi2
    if not np.isfinite(dphi):
        return np.nan

    while dphi > np.pi:
        dphi -= 2 * np.pi
    while dphi <= -np.pi:
        dphi += 2 * np.pi

    return dphi


@nb.njit(cache=True)
def delta_r(
    eta1: nb.float64, phi1: nb.float64, eta2: nb.float64, phi2: nb.float64
) -> nb.float64:
    """Angular distance between two directions in the (eta, phi) plane.

    Parameters
    ----------
    eta1, phi1 : float
        Pseudorapidity and azimuth of the first direction
    eta2, phi2 : float
        Pseudorapidity and azimuth of the second direction

    Returns
    -------
    float
        Euclidean distance in pseudorapidity-azimuth space
    """
    deta = eta1 - eta2
    dphi = delta_phi(phi1, phi2)

    return np.sqrt(deta * deta + dphi * dphi)


@nb.njit(cache=True)
def mass2(
    px: nb.float64, py: nb.float64, pz: nb.float64, e: nb.float64
) -> nb.float64:
    """Squared invariant mass of a four-vector."""
    return e * e - px * px - py * py - pz * pz


@nb.njit(cache=True)
def inv_mass(
    px: nb.float64, py: nb.float64, pz: nb.float64, e: nb.float64
) -> nb.float64:
    """Signed invariant mass of a four-vector.

    Time-like vectors get their usual mass. Space-like vectors, which appear
    when summing mismeasured objects, get minus the square root of the
    magnitude of their squared mass so that the value stays continuous.

    Parameters
    ----------
    px, py, pz : float
        Momentum components
    e : float
        Energy

    Returns
    -------
    float
        Signed invariant mass
    """
    m2 = mass2(px, py, pz, e)
    if m2 >= 0.0:
        return np.sqrt(m2)

    return -np.sqrt(-m2)


@nb.njit(cache=True)
def pt_eta_phi(px: nb.float64, py: nb.float64, pz: nb.float64):
    """Converts cartesian momentum components to (pt, eta, phi).

    A vector along the beam axis gets an infinite pseudorapidity with the sign
    of `pz`, and a null vector gets `eta = 0`.
    """
    pt = np.sqrt(px * px + py * py)
    phi = np.arctan2(py, px) if pt > 0.0 else 0.0
    if pt > 0.0:
        eta = np.arcsinh(pz / pt)
    elif pz > 0.0:
        eta = np.inf
    elif pz < 0.0:
        eta = -np.inf
    else:
        eta = 0.0

    return pt, eta, phi

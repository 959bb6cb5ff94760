"""Module with a data class object which represents a four-momentum."""

from dataclasses import dataclass

import numpy as np

from ttreco.math import kinematics

from .base import DataBase

__all__ = ["LorentzVector"]


@dataclass(eq=False)
class LorentzVector(DataBase):
    """Four-momentum expressed in collider coordinates.

    Attributes
    ----------
    pt : float
        Transverse momentum in GeV
    eta : float
        Pseudorapidity
    phi : float
        Azimuthal angle in radians
    energy : float
        Energy in GeV
    """

    pt: float = 0.0
    eta: float = 0.0
    phi: float = 0.0
    energy: float = 0.0

    @classmethod
    def from_cartesian(cls, px, py, pz, energy):
        """Builds a four-vector from its cartesian components.

        Parameters
        ----------
        px, py, pz : float
            Momentum components in GeV
        energy : float
            Energy in GeV

        Returns
        -------
        LorentzVector
            Four-vector in (pt, eta, phi, E) coordinates
        """
        pt, eta, phi = kinematics.pt_eta_phi(float(px), float(py), float(pz))

        return cls(pt=pt, eta=eta, phi=phi, energy=float(energy))

    @classmethod
    def from_pt_eta_phi_m(cls, pt, eta, phi, mass):
        """Builds a four-vector from its transverse momentum, direction and mass."""
        pz = pt * np.sinh(eta)
        energy = np.sqrt(pt * pt + pz * pz + mass * mass)

        return cls(pt=float(pt), eta=float(eta), phi=float(phi), energy=float(energy))

    @property
    def px(self):
        """Momentum component along x."""
        return self.pt * np.cos(self.phi)

    @property
    def py(self):
        """Momentum component along y."""
        return self.pt * np.sin(self.phi)

    @property
    def pz(self):
        """Momentum component along the beam axis."""
        if np.isinf(self.eta) and self.pt == 0.0:
            return np.copysign(self.energy, self.eta)

        return self.pt * np.sinh(self.eta)

    @property
    def p(self):
        """Momentum magnitude."""
        return np.sqrt(self.px**2 + self.py**2 + self.pz**2)

    @property
    def cartesian(self):
        """Four-vector as a (px, py, pz, E) array."""
        return np.array([self.px, self.py, self.pz, self.energy])

    @property
    def mass2(self):
        """Squared invariant mass."""
        return kinematics.mass2(*self.cartesian)

    @property
    def mass(self):
        """Signed invariant mass (negative for space-like vectors)."""
        return kinematics.inv_mass(*self.cartesian)

    @property
    def is_finite(self):
        """Whether all components of the four-vector are finite."""
        return bool(np.all(np.isfinite([self.pt, self.eta, self.phi, self.energy])))

    def delta_r(self, other):
        """Angular distance to another four-vector in the (eta, phi) plane.

        Parameters
        ----------
        other : LorentzVector
            Other four-vector

        Returns
        -------
        float
            Distance in pseudorapidity-azimuth space
        """
        return kinematics.delta_r(self.eta, self.phi, other.eta, other.phi)

    def __add__(self, other):
        """Sums two four-vectors component by component."""
        if not isinstance(other, LorentzVector):
            return NotImplemented

        return LorentzVector.from_cartesian(*(self.cartesian + other.cartesian))

    def __radd__(self, other):
        """Allows the use of the builtin `sum`, which starts from 0."""
        if isinstance(other, (int, float)) and other == 0:
            return self

        return NotImplemented

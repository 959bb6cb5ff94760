"""Module with data class objects which represent reconstructed physics objects."""

from dataclasses import dataclass, field
from typing import List

import numpy as np

from .base import DataBase
from .lorentz import LorentzVector

__all__ = ["Particle", "Jet", "TopJet"]


@dataclass(eq=False)
class Particle(DataBase):
    """Reconstructed charged lepton (or any charged particle).

    Attributes
    ----------
    v4 : LorentzVector
        Four-momentum of the particle
    charge : int
        Electric charge in units of the elementary charge
    pdg_id : int
        PDG code of the particle hypothesis (0 if unknown)
    """

    v4: LorentzVector = field(default_factory=LorentzVector)
    charge: int = 0
    pdg_id: int = 0


@dataclass(eq=False)
class Jet(DataBase):
    """Reconstructed jet.

    Attributes
    ----------
    v4 : LorentzVector
        Four-momentum of the jet
    btag : float
        b-tagging discriminator value (NaN if not evaluated)
    """

    v4: LorentzVector = field(default_factory=LorentzVector)
    btag: float = np.nan


@dataclass(eq=False)
class TopJet(Jet):
    """Large-radius jet, candidate for a hadronically decaying top quark.

    Attributes
    ----------
    softdrop_mass : float
        Groomed (soft-drop) jet mass in GeV
    subjets : List[Jet]
        Subjets found by the grooming algorithm
    """

    softdrop_mass: float = np.nan
    subjets: List[Jet] = field(default_factory=list)

    @property
    def subjet_sum_v4(self):
        """Sum of the subjet four-momenta (zero vector if there are none)."""
        return sum((subjet.v4 for subjet in self.subjets), LorentzVector())

    @property
    def subjet_mass(self):
        """Invariant mass of the summed subjets, NaN if there are no subjets."""
        if not self.subjets:
            return np.nan

        return self.subjet_sum_v4.mass

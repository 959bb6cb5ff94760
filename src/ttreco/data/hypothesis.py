"""Module with the reconstruction hypothesis data structures.

A :class:`ReconstructionHypothesis` is one candidate decomposition of a
semi-leptonic top quark pair event into a leptonic leg (lepton, neutrino and
one jet) and a hadronic leg (jets, or a single top-tagged jet). Discriminator
modules attach named scalar scores to each hypothesis.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ttreco.utils.globals import INVALID_DISC

from .base import DataBase
from .lorentz import LorentzVector
from .objects import Jet, Particle, TopJet

__all__ = ["ReconstructionHypothesis", "HypothesisCollection"]


@dataclass(eq=False)
class ReconstructionHypothesis(DataBase):
    """Candidate reconstruction of a top quark pair event.

    The jets and lepton are references to objects owned by the event; the
    hypothesis never copies nor modifies them.

    Attributes
    ----------
    lepton : Particle
        Reconstructed charged lepton
    neutrino_v4 : LorentzVector
        Reconstructed neutrino four-momentum
    toplep_v4 : LorentzVector
        Four-momentum of the leptonic top candidate
    tophad_v4 : LorentzVector
        Four-momentum of the hadronic top candidate
    toplep_jets : List[Jet]
        Jets assigned to the leptonic leg
    tophad_jets : List[Jet]
        Jets assigned to the hadronic leg
    tophad_topjet : TopJet, optional
        Top-tagged jet used as the hadronic leg, if any
    discriminators : Dict[str, float]
        Discriminator label to score mapping
    """

    lepton: Particle = field(default_factory=Particle)
    neutrino_v4: LorentzVector = field(default_factory=LorentzVector)
    toplep_v4: LorentzVector = field(default_factory=LorentzVector)
    tophad_v4: LorentzVector = field(default_factory=LorentzVector)
    toplep_jets: List[Jet] = field(default_factory=list)
    tophad_jets: List[Jet] = field(default_factory=list)
    tophad_topjet: Optional[TopJet] = None
    discriminators: Dict[str, float] = field(default_factory=dict)

    def discriminator(self, label):
        """Score stored under a discriminator label.

        Parameters
        ----------
        label : str
            Discriminator label

        Returns
        -------
        float
            Stored score, or +inf if the label was never written
        """
        return self.discriminators.get(label, INVALID_DISC)

    def has_discriminator(self, label):
        """Whether a score was ever written under a discriminator label."""
        return label in self.discriminators

    def set_discriminator(self, label, value):
        """Stores a score under a discriminator label, overriding any previous one.

        Parameters
        ----------
        label : str
            Discriminator label
        value : float
            Score to store
        """
        self.discriminators[label] = float(value)

    @property
    def top_v4(self):
        """Four-momentum of the top quark candidate.

        The lepton charge tags the leptonic leg: a positive lepton comes from
        a top quark, a negative one from an anti-top quark.
        """
        return self.toplep_v4 if self.lepton.charge > 0 else self.tophad_v4

    @property
    def antitop_v4(self):
        """Four-momentum of the anti-top quark candidate."""
        return self.tophad_v4 if self.lepton.charge > 0 else self.toplep_v4


class HypothesisCollection(list):
    """Ordered list of reconstruction hypotheses of one event.

    The order is preserved as provided by the hypothesis producer. It matters
    for the best-hypothesis selection, where the first hypothesis wins ties.
    """

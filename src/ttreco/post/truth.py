"""Discriminators which compare reconstruction hypotheses to generator truth.

Both modules require a :class:`TTbarGen` record in the event. They only make
sense on simulated events.
"""

import numpy as np

from ttreco.errors import InvalidParameterError
from ttreco.utils.globals import (
    CORRECT_MATCH_LABEL,
    INVALID_DISC,
    MATCH_DR_MAX,
    TOPDRMC_LABEL,
    TTBARGEN_NAME,
)
from ttreco.utils.logger import logger

from .base import DiscriminatorBase

__all__ = ["TopDRMCDiscriminator", "CorrectMatchDiscriminator"]


def match_dr(parton, jets, dr_max=MATCH_DR_MAX):
    """Distance between a parton and its closest jet.

    Parameters
    ----------
    parton : LorentzVector
        Generated parton
    jets : List[Jet]
        Candidate jets
    dr_max : float, default 0.3
        Maximum distance for the closest jet to count as a match

    Returns
    -------
    float
        Distance to the closest jet, or +inf if there is no jet within `dr_max`
    """
    dists = [parton.delta_r(jet.v4) for jet in jets]
    if not dists:
        return np.inf

    dr = min(dists)
    if not dr < dr_max:
        return np.inf

    return dr


class TopDRMCDiscriminator(DiscriminatorBase):
    """Top quark angular distance quality flag for Monte-Carlo.

    Writes the sum of the angular distances between the generated and
    reconstructed top quarks and between the generated and reconstructed
    anti-top quarks. Events without an identified generated top quark pair
    get +inf on every hypothesis.
    """

    # Name of the module (as specified in the configuration)
    name = "top_dr_mc"

    # Alternative allowed names of the module
    aliases = ("best_possible",)

    def __init__(
        self,
        ctx,
        rechyps_name,
        ttbargen_name=TTBARGEN_NAME,
        discriminator_label=TOPDRMC_LABEL,
    ):
        """Store the truth record name and declare the output field.

        Parameters
        ----------
        ctx : Context
            Job-level field registry
        rechyps_name : str
            Name of the hypothesis collection in the event
        ttbargen_name : str, default 'ttbargen'
            Name of the generator-level record in the event
        discriminator_label : str, default 'TopDRMC'
            Label of the discriminator
        """
        super().__init__(ctx, rechyps_name)

        self.ttbargen_name = ttbargen_name
        self.label = discriminator_label
        self.update_keys({ttbargen_name: True})
        self.declare(self.label)

    def process(self, event):
        """Fill the top quark distance of each hypothesis in one event.

        Parameters
        ----------
        event : dict
            Dictionary of data products

        Returns
        -------
        bool
            Always `True`, this module does not filter events
        """
        hyps = self.get_hypotheses(event)
        ttbargen = self.get_truth(event, self.ttbargen_name)
        if not ttbargen.is_valid:
            logger.debug("No generated top quark pair, %s set to +inf.", self.label)
            self.set_all(hyps, self.label, INVALID_DISC)
            return True

        for hyp in hyps:
            dr_sum = ttbargen.top.delta_r(hyp.top_v4) + ttbargen.antitop.delta_r(
                hyp.antitop_v4
            )
            self.set_discriminator(hyp, self.label, dr_sum)

        return True


class CorrectMatchDiscriminator(DiscriminatorBase):
    """Match reconstruction hypotheses to Monte-Carlo truth, jet by jet.

    Writes the sum of the angular distances between the four matrix-element
    final state partons and their matched jets, plus the angular distance
    between the true and reconstructed neutrinos. The value is +inf if one of
    the partons could not be matched to a jet within `dr_max` (no such
    requirement applies to the neutrino). The reconstructed lepton is ignored.

    The hadronic b quark and both W boson decay quarks are matched to the
    jets of the hadronic leg, the leptonic b quark to the jet of the leptonic
    leg. Two partons may be matched to the same jet.

    Only electron+jets and muon+jets events (at generator level) are scored,
    other events get +inf on every hypothesis.
    """

    # Name of the module (as specified in the configuration)
    name = "correct_match"

    # Alternative allowed names of the module
    aliases = ("correct_match_discriminator",)

    def __init__(
        self,
        ctx,
        rechyps_name,
        ttbargen_name=TTBARGEN_NAME,
        discriminator_label=CORRECT_MATCH_LABEL,
        dr_max=MATCH_DR_MAX,
    ):
        """Store the truth record name and declare the output field.

        Parameters
        ----------
        ctx : Context
            Job-level field registry
        rechyps_name : str
            Name of the hypothesis collection in the event
        ttbargen_name : str, default 'ttbargen'
            Name of the generator-level record in the event
        discriminator_label : str, default 'CorrectMatch'
            Label of the discriminator
        dr_max : float, default 0.3
            Maximum parton-jet distance for a jet to count as matched
        """
        super().__init__(ctx, rechyps_name)

        self.ttbargen_name = ttbargen_name
        self.label = discriminator_label
        self.dr_max = dr_max
        self.update_keys({ttbargen_name: True})
        logger.info("%s `%s` with dr_max %g", type(self).__name__, self.label, dr_max)
        self.declare(self.label)

    @property
    def dr_max(self):
        """Maximum parton-jet distance for a jet to count as matched."""
        return self._dr_max

    @dr_max.setter
    def dr_max(self, dr_max):
        if not np.isfinite(dr_max) or dr_max <= 0.0:
            raise InvalidParameterError(
                "The matching distance `dr_max` must be strictly positive "
                f"and finite, got {dr_max}."
            )

        self._dr_max = float(dr_max)

    def score(self, hyp, ttbargen):
        """Correct-match score of a single hypothesis.

        Parameters
        ----------
        hyp : ReconstructionHypothesis
            Hypothesis to score
        ttbargen : TTbarGen
            Generated top quark pair decay

        Returns
        -------
        float
            Summed angular distances, +inf if a parton is not matched
        """
        # Exactly one jet on the leptonic leg, at most three on the hadronic one
        if len(hyp.toplep_jets) != 1 or len(hyp.tophad_jets) > 3:
            return INVALID_DISC

        # Partons ordered as (b_had, b_lep, q1, q2)
        legs = (hyp.tophad_jets, hyp.toplep_jets, hyp.tophad_jets, hyp.tophad_jets)
        correct_dr = sum(
            match_dr(parton, jets, self.dr_max)
            for parton, jets in zip(ttbargen.me_partons, legs)
        )
        if not np.isfinite(correct_dr):
            return INVALID_DISC

        return correct_dr + ttbargen.neutrino.delta_r(hyp.neutrino_v4)

    def process(self, event):
        """Fill the correct-match discriminator of each hypothesis in one event.

        Parameters
        ----------
        event : dict
            Dictionary of data products

        Returns
        -------
        bool
            Always `True`, this module does not filter events
        """
        hyps = self.get_hypotheses(event)
        ttbargen = self.get_truth(event, self.ttbargen_name)
        if not ttbargen.is_semileptonic:
            logger.debug(
                "Decay channel %s is not e/mu+jets, %s set to +inf.",
                ttbargen.decay_channel.name,
                self.label,
            )
            self.set_all(hyps, self.label, INVALID_DISC)
            return True

        for hyp in hyps:
            self.set_discriminator(hyp, self.label, self.score(hyp, ttbargen))

        return True

"""Chi-square reconstruction discriminators.

The chi-square value is calculated from the leptonic and hadronic
reconstructed top quark masses, compared to Gaussian templates. This is the
reconstruction-level method of the 8 TeV semi-leptonic high-mass CMS
top quark pair analyses; the default template parameters are the 8 TeV ones.
"""

from abc import abstractmethod

import numpy as np

from ttreco.errors import InvalidParameterError
from ttreco.utils.globals import (
    CHI2_LABEL,
    MTHAD_MEAN,
    MTHAD_MEAN_TTAG,
    MTHAD_SIGMA,
    MTHAD_SIGMA_TTAG,
    MTLEP_MEAN,
    MTLEP_MEAN_TTAG,
    MTLEP_SIGMA,
    MTLEP_SIGMA_TTAG,
    THAD_SUFFIX,
    TLEP_SUFFIX,
)
from ttreco.utils.logger import logger

from .base import DiscriminatorBase

__all__ = ["Chi2Discriminator", "Chi2DiscriminatorTTAG"]


def chi2_term(mass, mean, sigma):
    """Chi-square of a mass with respect to a Gaussian template.

    Parameters
    ----------
    mass : float
        Reconstructed mass
    mean : float
        Template mean
    sigma : float
        Template width

    Returns
    -------
    float
        `((mass - mean)/sigma)^2`, or +inf if the mass is not finite
    """
    if not np.isfinite(mass):
        return np.inf

    return ((mass - mean) / sigma) ** 2


class Chi2DiscriminatorBase(DiscriminatorBase):
    """Shared implementation of the chi-square discriminators.

    Fills the total chi-square under `discriminator_label` and the per-leg
    terms under `<discriminator_label>_tlep` and `<discriminator_label>_thad`.
    Subclasses define how the hadronic top mass is estimated.
    """

    # Default template parameters, overridden by subclasses
    _defaults = (MTLEP_MEAN, MTLEP_SIGMA, MTHAD_MEAN, MTHAD_SIGMA)

    def __init__(
        self,
        ctx,
        rechyps_name,
        discriminator_label=CHI2_LABEL,
        mtlep_mean=None,
        mtlep_sigma=None,
        mthad_mean=None,
        mthad_sigma=None,
    ):
        """Initialize the chi-square templates and declare the output fields.

        Parameters
        ----------
        ctx : Context
            Job-level field registry
        rechyps_name : str
            Name of the hypothesis collection in the event
        discriminator_label : str, default 'Chi2'
            Label of the total chi-square, prefix of the per-leg terms
        mtlep_mean : float, optional
            Mean of the leptonic top mass template in GeV
        mtlep_sigma : float, optional
            Width of the leptonic top mass template in GeV
        mthad_mean : float, optional
            Mean of the hadronic top mass template in GeV
        mthad_sigma : float, optional
            Width of the hadronic top mass template in GeV
        """
        # Initialize the parent class
        super().__init__(ctx, rechyps_name)

        # Store the templates, through the validating setters
        defaults = self._defaults
        self.mtlep_mean = defaults[0] if mtlep_mean is None else mtlep_mean
        self.mtlep_sigma = defaults[1] if mtlep_sigma is None else mtlep_sigma
        self.mthad_mean = defaults[2] if mthad_mean is None else mthad_mean
        self.mthad_sigma = defaults[3] if mthad_sigma is None else mthad_sigma

        # Declare the output fields
        self.label = discriminator_label
        self.label_tlep = discriminator_label + TLEP_SUFFIX
        self.label_thad = discriminator_label + THAD_SUFFIX
        self.declare(self.label, self.label_tlep, self.label_thad)

        logger.info(
            "%s `%s` on `%s`: tlep (%g, %g), thad (%g, %g)",
            type(self).__name__,
            self.label,
            rechyps_name,
            self.mtlep_mean,
            self.mtlep_sigma,
            self.mthad_mean,
            self.mthad_sigma,
        )

    @staticmethod
    def _check_mean(name, mean):
        """Check that a template mean is finite."""
        if not np.isfinite(mean):
            raise InvalidParameterError(
                f"The `{name}` template mean must be finite, got {mean}."
            )

        return float(mean)

    @staticmethod
    def _check_sigma(name, sigma):
        """Check that a template width is strictly positive."""
        if not np.isfinite(sigma) or sigma <= 0.0:
            raise InvalidParameterError(
                f"The `{name}` template width must be strictly positive "
                f"and finite, got {sigma}."
            )

        return float(sigma)

    @property
    def mtlep_mean(self):
        """Mean of the leptonic top mass template."""
        return self._mtlep_mean

    @mtlep_mean.setter
    def mtlep_mean(self, mean):
        self._mtlep_mean = self._check_mean("mtlep_mean", mean)

    @property
    def mtlep_sigma(self):
        """Width of the leptonic top mass template."""
        return self._mtlep_sigma

    @mtlep_sigma.setter
    def mtlep_sigma(self, sigma):
        self._mtlep_sigma = self._check_sigma("mtlep_sigma", sigma)

    @property
    def mthad_mean(self):
        """Mean of the hadronic top mass template."""
        return self._mthad_mean

    @mthad_mean.setter
    def mthad_mean(self, mean):
        self._mthad_mean = self._check_mean("mthad_mean", mean)

    @property
    def mthad_sigma(self):
        """Width of the hadronic top mass template."""
        return self._mthad_sigma

    @mthad_sigma.setter
    def mthad_sigma(self, sigma):
        self._mthad_sigma = self._check_sigma("mthad_sigma", sigma)

    def leptonic_mass(self, hyp):
        """Reconstructed leptonic top mass of a hypothesis."""
        return hyp.toplep_v4.mass

    @abstractmethod
    def hadronic_mass(self, hyp):
        """Reconstructed hadronic top mass of a hypothesis."""
        raise NotImplementedError("Must define the `hadronic_mass` function.")

    def process(self, event):
        """Fill the chi-square discriminators of each hypothesis in one event.

        Parameters
        ----------
        event : dict
            Dictionary of data products

        Returns
        -------
        bool
            Always `True`, this module does not filter events
        """
        for hyp in self.get_hypotheses(event):
            chi2_tlep = chi2_term(
                self.leptonic_mass(hyp), self.mtlep_mean, self.mtlep_sigma
            )
            chi2_thad = chi2_term(
                self.hadronic_mass(hyp), self.mthad_mean, self.mthad_sigma
            )

            self.set_discriminator(hyp, self.label, chi2_tlep + chi2_thad)
            self.set_discriminator(hyp, self.label_tlep, chi2_tlep)
            self.set_discriminator(hyp, self.label_thad, chi2_thad)

        return True


class Chi2Discriminator(Chi2DiscriminatorBase):
    """Chi-square discriminator for resolved topologies.

    The hadronic top mass is the invariant mass of the hadronic top candidate,
    i.e. of the sum of the jets assigned to the hadronic leg.
    """

    # Name of the module (as specified in the configuration)
    name = "chi2"

    # Alternative allowed names of the module
    aliases = ("chi2_discriminator",)

    def hadronic_mass(self, hyp):
        """Invariant mass of the hadronic top candidate."""
        return hyp.tophad_v4.mass


class Chi2DiscriminatorTTAG(Chi2DiscriminatorBase):
    """Chi-square discriminator for events with a top-tagged jet.

    The hadronic top corresponds to one large-radius jet passing top tagging.
    Its mass is estimated from the summed subjets (if `use_subjet_mass` is set
    and the jet has subjets) or from the groomed jet mass. A hypothesis
    without a top-tagged jet gets an infinite hadronic term.
    """

    # Name of the module (as specified in the configuration)
    name = "chi2_ttag"

    # Alternative allowed names of the module
    aliases = ("chi2_discriminator_ttag",)

    # Default template parameters
    _defaults = (MTLEP_MEAN_TTAG, MTLEP_SIGMA_TTAG, MTHAD_MEAN_TTAG, MTHAD_SIGMA_TTAG)

    def __init__(
        self,
        ctx,
        rechyps_name,
        discriminator_label=CHI2_LABEL,
        use_subjet_mass=True,
        **kwargs,
    ):
        """Initialize the chi-square templates and the hadronic mass source.

        Parameters
        ----------
        ctx : Context
            Job-level field registry
        rechyps_name : str
            Name of the hypothesis collection in the event
        discriminator_label : str, default 'Chi2'
            Label of the total chi-square, prefix of the per-leg terms
        use_subjet_mass : bool, default True
            If `True`, use the invariant mass of the summed subjets when the
            top-tagged jet has any, rather than its groomed mass
        **kwargs : dict, optional
            Template parameters, see :class:`Chi2DiscriminatorBase`
        """
        super().__init__(ctx, rechyps_name, discriminator_label, **kwargs)
        self.use_subjet_mass = use_subjet_mass

    @property
    def use_subjet_mass(self):
        """Whether the summed subjet mass takes precedence over the groomed mass."""
        return self._use_subjet_mass

    @use_subjet_mass.setter
    def use_subjet_mass(self, use_subjet_mass):
        self._use_subjet_mass = bool(use_subjet_mass)

    def hadronic_mass(self, hyp):
        """Mass of the top-tagged jet of the hypothesis."""
        topjet = hyp.tophad_topjet
        if topjet is None:
            logger.debug("Hypothesis without a top-tagged jet.")
            return np.nan

        if self.use_subjet_mass and topjet.subjets:
            return topjet.subjet_mass

        return topjet.softdrop_mass

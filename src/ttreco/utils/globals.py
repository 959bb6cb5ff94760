"""Physics constants and default parameters shared across the package."""

import numpy as np

# Default discriminator labels
CHI2_LABEL = "Chi2"
TOPDRMC_LABEL = "TopDRMC"
CORRECT_MATCH_LABEL = "CorrectMatch"

# Suffixes of the per-leg chi-square terms
TLEP_SUFFIX = "_tlep"
THAD_SUFFIX = "_thad"

# Default name of the generator-level ttbar record in the event
TTBARGEN_NAME = "ttbargen"

# Reconstructed top mass templates (GeV), resolved topologies
MTLEP_MEAN = 174.0
MTLEP_SIGMA = 18.0
MTHAD_MEAN = 181.0
MTHAD_SIGMA = 15.0

# Reconstructed top mass templates (GeV), boosted top-tagged topologies
MTLEP_MEAN_TTAG = 175.0
MTLEP_SIGMA_TTAG = 19.0
MTHAD_MEAN_TTAG = 173.0
MTHAD_SIGMA_TTAG = 15.0

# Maximum parton-jet angular distance for a jet to count as matched
MATCH_DR_MAX = 0.3

# Value of a discriminator which is invalid or was never computed
INVALID_DISC = np.inf

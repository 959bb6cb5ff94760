"""Top-level module of the ttreco source code.

Scores top quark pair reconstruction hypotheses and matches them to
generator-level truth.
"""

from .data import (
    HypothesisCollection,
    Jet,
    LorentzVector,
    Particle,
    ReconstructionHypothesis,
    TopJet,
    TTbarGen,
    get_collection,
    get_record,
)
from .errors import (
    FatalError,
    InvalidParameterError,
    MissingProductError,
    ProductTypeError,
    UndeclaredFieldError,
)
from .post import (
    Chi2Discriminator,
    Chi2DiscriminatorTTAG,
    Context,
    CorrectMatchDiscriminator,
    DiscriminatorManager,
    TopDRMCDiscriminator,
    get_best_hypothesis,
)
from .utils.enums import DecayChannel
from .version import __version__

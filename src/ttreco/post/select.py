"""Best reconstruction hypothesis selection."""

import numpy as np

__all__ = ["get_best_hypothesis"]


def get_best_hypothesis(hyps, label):
    """Get the best hypothesis, i.e. the one with the smallest discriminator.

    Hypotheses on which `label` was never written count as +inf. The first
    hypothesis wins ties. NaN scores never compare smaller than the current
    best and are therefore never selected.

    Parameters
    ----------
    hyps : List[ReconstructionHypothesis]
        Ordered hypotheses of one event
    label : str
        Discriminator label, e.g. "Chi2"

    Returns
    -------
    ReconstructionHypothesis
        Best hypothesis, or `None` if there is none or if its score is infinite
    """
    best, best_disc = None, np.inf
    for hyp in hyps:
        disc = hyp.discriminator(label)
        if disc < best_disc:
            best, best_disc = hyp, disc

    return best

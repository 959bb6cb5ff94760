"""Sets up fixtures general to the entire test suite of this package.

This file is read during the collection phase of pytest when running anything
inside this directory.
"""

import pytest

from ttreco.data import (
    Jet,
    LorentzVector,
    Particle,
    ReconstructionHypothesis,
    TTbarGen,
)
from ttreco.post import Context
from ttreco.utils.enums import DecayChannel

# Name of the hypothesis collection used throughout the tests
RECHYPS = "TTbarReconstruction"


def make_v4(pt=50.0, eta=0.0, phi=0.0, mass=0.0):
    """Builds a four-vector from (pt, eta, phi, m)."""
    return LorentzVector.from_pt_eta_phi_m(pt, eta, phi, mass)


@pytest.fixture(name="v4")
def fixture_v4():
    """Four-vector builder."""
    return make_v4


@pytest.fixture(name="rechyps")
def fixture_rechyps():
    """Name of the hypothesis collection in the test events."""
    return RECHYPS


@pytest.fixture(name="ctx")
def fixture_ctx():
    """Fresh job-level field registry."""
    return Context()


@pytest.fixture(name="ttbargen")
def fixture_ttbargen():
    """Generated muon+jets top quark pair decay, positive muon."""
    return TTbarGen(
        top=make_v4(200.0, 0.5, 0.3, 172.5),
        antitop=make_v4(180.0, -0.4, 2.9, 172.5),
        b_had=make_v4(60.0, -0.2, 2.5),
        b_lep=make_v4(70.0, 0.6, 0.1),
        q1=make_v4(50.0, -1.0, 3.0),
        q2=make_v4(40.0, 0.1, -2.8),
        charged_lepton=make_v4(45.0, 0.9, 0.8),
        neutrino=make_v4(55.0, 0.2, -0.5),
        decay_channel=DecayChannel.E_MUHAD,
    )


@pytest.fixture(name="matched_hyp")
def fixture_matched_hyp(ttbargen):
    """Hypothesis built from jets aligned with the generated partons.

    The jets sit exactly on the partons and the reconstructed neutrino is
    0.1 away in pseudorapidity from the true one.
    """
    nu = ttbargen.neutrino
    return ReconstructionHypothesis(
        lepton=Particle(v4=make_v4(45.0, 0.9, 0.8), charge=1, pdg_id=-13),
        neutrino_v4=LorentzVector(nu.pt, nu.eta + 0.1, nu.phi, nu.energy),
        toplep_v4=ttbargen.top,
        tophad_v4=ttbargen.antitop,
        toplep_jets=[Jet(v4=ttbargen.b_lep)],
        tophad_jets=[Jet(v4=ttbargen.b_had), Jet(v4=ttbargen.q1), Jet(v4=ttbargen.q2)],
    )

"""Module with a data class object which represents generator-level ttbar truth."""

from dataclasses import dataclass, field

from ttreco.utils.enums import DecayChannel, enum_factory

from .base import DataBase
from .lorentz import LorentzVector

__all__ = ["TTbarGen"]


@dataclass(eq=False)
class TTbarGen(DataBase):
    """Matrix-element level information about a top quark pair decay.

    Only the partons relevant for semi-leptonic and fully hadronic decays are
    stored. For a semi-leptonic decay, `q1` and `q2` are the quarks from the
    hadronically decaying W boson and `b_had`/`b_lep` the b quarks of the
    hadronic and leptonic legs. The record is never modified once built.

    Attributes
    ----------
    top : LorentzVector
        Generated top quark
    antitop : LorentzVector
        Generated anti-top quark
    b_had : LorentzVector
        b quark from the hadronically decaying top
    b_lep : LorentzVector
        b quark from the leptonically decaying top
    q1 : LorentzVector
        First quark from the hadronically decaying W boson
    q2 : LorentzVector
        Second quark from the hadronically decaying W boson
    charged_lepton : LorentzVector
        Charged lepton from the leptonically decaying W boson
    neutrino : LorentzVector
        Neutrino from the leptonically decaying W boson
    decay_channel : DecayChannel
        Decay channel classification
    """

    top: LorentzVector = field(default_factory=LorentzVector)
    antitop: LorentzVector = field(default_factory=LorentzVector)
    b_had: LorentzVector = field(default_factory=LorentzVector)
    b_lep: LorentzVector = field(default_factory=LorentzVector)
    q1: LorentzVector = field(default_factory=LorentzVector)
    q2: LorentzVector = field(default_factory=LorentzVector)
    charged_lepton: LorentzVector = field(default_factory=LorentzVector)
    neutrino: LorentzVector = field(default_factory=LorentzVector)
    decay_channel: DecayChannel = DecayChannel.E_NOTFOUND

    def __post_init__(self):
        """Casts the decay channel (member, value or name) to its enumerated type."""
        self.decay_channel = enum_factory("decay_channel", self.decay_channel)

    @property
    def is_valid(self):
        """Whether the event contains an identified top quark pair."""
        return self.decay_channel != DecayChannel.E_NOTFOUND

    @property
    def is_semileptonic(self):
        """Whether the pair decays to electron+jets or muon+jets."""
        return self.decay_channel in (DecayChannel.E_EHAD, DecayChannel.E_MUHAD)

    @property
    def me_partons(self):
        """Four matrix-element final state partons (b_had, b_lep, q1, q2)."""
        return (self.b_had, self.b_lep, self.q1, self.q2)

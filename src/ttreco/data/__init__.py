"""Data structures used to score top quark pair reconstruction hypotheses.

- `lorentz`: four-momentum in collider coordinates
- `objects`: reconstructed leptons, jets and top-tagged jets
- `hypothesis`: reconstruction hypotheses and their per-event collection
- `ttbargen`: generator-level top quark pair record
- `event`: named accessors into the event record
"""

from .event import *
from .hypothesis import *
from .lorentz import *
from .objects import *
from .ttbargen import *

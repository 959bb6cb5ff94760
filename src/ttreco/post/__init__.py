"""Discriminator modules which score top quark pair reconstruction hypotheses.

**Modules** (smaller values are better, +inf means invalid):
- `chi2`: chi-square of the reconstructed top masses (resolved)
- `chi2_ttag`: same, with the hadronic top from a top-tagged jet
- `top_dr_mc`: distance between reconstructed and generated top quarks
- `correct_match`: jet-by-jet match to the generated partons

**Example Configuration:**
```yaml
post:
  chi2:
    rechyps_name: TTbarReconstruction
  correct_match:
    rechyps_name: TTbarReconstruction
    ttbargen_name: ttbargen
```

Downstream code picks the best hypothesis of each event with
:func:`get_best_hypothesis`.
"""

from .base import Context, DiscriminatorBase
from .chi2 import Chi2Discriminator, Chi2DiscriminatorTTAG
from .manager import DiscriminatorManager
from .select import get_best_hypothesis
from .truth import CorrectMatchDiscriminator, TopDRMCDiscriminator

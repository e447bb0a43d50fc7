"""Model classes.

- [`Config`][gocpp.models.Config] is the immutable record holding the options of one \
    invocation
- [`PhaseOutcome`][gocpp.models.PhaseOutcome] is what running an external process \
    produces
- [`Standard`][gocpp.models.Standard] and [`ArtifactName`][gocpp.models.ArtifactName] \
    disambiguate plain strings
"""

from .config import Config, check_standard
from .outcome import PhaseOutcome
from .scalars import STANDARDS, UNKNOWN_VERSION, ArtifactName, Standard

__all__ = [
    "STANDARDS",
    "UNKNOWN_VERSION",
    "ArtifactName",
    "Config",
    "PhaseOutcome",
    "Standard",
    "check_standard",
]

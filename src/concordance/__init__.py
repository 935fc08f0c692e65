"""CONCORDANCE

Correspondences for test assertions: pairwise predicates deciding whether an
actual value produced by code under test corresponds to an expected value,
each with a short description for failure messages. Used to express custom
notions of equality such as approximate numeric equality or "parses to".
"""

__all__ = [
    "Correspondence",
    "__version__",
    "from_predicate",
    "parses_to",
    "tolerance",
    "transforming",
]
__version__ = "0.1.0"

# pylint: disable=wrong-import-position
from concordance.adapters import from_predicate, parses_to, tolerance, transforming
from concordance.interfaces import Correspondence

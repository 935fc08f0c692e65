"""Ready-made correspondences for CONCORDANCE.

Provide concrete `Correspondence` variants and the factory functions that
build them: numeric tolerance, string-to-integer parsing, and variants made
from plain callables.

Dependency rule: may import `concordance.interfaces`; the interfaces must not
import this package.
"""

from .functional import from_predicate, transforming
from .numeric import tolerance
from .parsing import parses_to

__all__ = ["from_predicate", "parses_to", "tolerance", "transforming"]

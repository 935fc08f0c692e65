"""Interfaces (application boundary) for CONCORDANCE.

Defines framework-free contracts shared by the ready-made correspondences in
`concordance.adapters` and by third-party code that implements its own:
the `Correspondence` ABC and its error taxonomy.

Dependency rule: this package is independent; do not import from any other
`concordance.*` modules.
"""

from .correspondence import Correspondence
from .errors import (
    CorrespondenceError,
    InvalidDescriptionError,
    InvalidToleranceError,
    MissingValueError,
    NotANumberError,
    SealedMethodError,
    UnsupportedOperationError,
)

__all__ = [
    "Correspondence",
    "CorrespondenceError",
    "InvalidDescriptionError",
    "InvalidToleranceError",
    "MissingValueError",
    "NotANumberError",
    "SealedMethodError",
    "UnsupportedOperationError",
]

"""Approximate numeric equality.

Differences are computed exactly with `fractions.Fraction`, so integers too
large for a float and values such as ``Decimal("0.1")`` are compared without
rounding. Only real numbers are accepted: ``int``, ``float``, ``Fraction``,
``Decimal`` and other `numbers.Real` types. ``bool`` and strings are not.
"""

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from numbers import Rational, Real

from concordance.interfaces.correspondence import Correspondence
from concordance.interfaces.errors import (
    InvalidToleranceError,
    MissingValueError,
    NotANumberError,
)

logger = logging.getLogger(__name__)


def _is_number(value: object) -> bool:
    return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)


def _exact(value: Real | Decimal) -> Fraction | None:
    """Return ``value`` as an exact Fraction, or None if it is NaN or infinite."""
    if isinstance(value, Rational):
        return Fraction(value)
    if isinstance(value, Decimal):
        return Fraction(value) if value.is_finite() else None
    as_float = float(value)
    return Fraction(as_float) if math.isfinite(as_float) else None


@dataclass(frozen=True, eq=False)
class ToleranceCorrespondence(Correspondence[Real, Real]):
    """Numbers correspond when they differ by at most ``tolerance``.

    NaN and infinite values never correspond to anything, including
    themselves. ``None`` on either side is rejected with `MissingValueError`
    and anything that is not a real number with `NotANumberError`, rather
    than answered with ``False``, since either usually means the test itself
    is broken.
    """

    tolerance: float

    def __post_init__(self) -> None:
        if not _is_number(self.tolerance):
            raise InvalidToleranceError(self.tolerance, "must be a real number")
        exact = _exact(self.tolerance)
        if exact is None:
            # NaN is the only value unequal to itself
            nan = self.tolerance != self.tolerance  # pylint: disable=comparison-with-itself
            raise InvalidToleranceError(
                self.tolerance, "cannot be NaN" if nan else "cannot be infinite"
            )
        if exact < 0:
            raise InvalidToleranceError(self.tolerance, "cannot be negative")

    def _check(self, role: str, value: object) -> None:
        if value is None:
            raise MissingValueError(role, self.describe())
        if not _is_number(value):
            raise NotANumberError(role, value, self.describe())

    def compare(self, actual: Real | None, expected: Real | None) -> bool:
        self._check("actual", actual)
        self._check("expected", expected)
        exact_actual = _exact(actual)
        exact_expected = _exact(expected)
        if exact_actual is None or exact_expected is None:
            return False
        return abs(exact_actual - exact_expected) <= _exact(self.tolerance)

    def describe(self) -> str:
        return f"is within {self.tolerance} of"


def tolerance(tolerance: float) -> Correspondence[Real, Real]:  # pylint: disable=redefined-outer-name
    """Build a correspondence for numbers equal within ``tolerance``.

    Args:
        tolerance: Largest allowed absolute difference. Must be a finite,
            non-negative real number.

    Returns:
        A correspondence described as ``"is within <tolerance> of"``.

    Raises:
        InvalidToleranceError: If ``tolerance`` is not a number, or is
            negative, NaN or infinite.
    """
    correspondence = ToleranceCorrespondence(tolerance)
    logger.debug("Built tolerance correspondence: %r", correspondence)
    return correspondence

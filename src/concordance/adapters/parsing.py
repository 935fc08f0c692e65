"""Correspondence between strings and the integers they parse to.

Only an optional sign followed by ASCII digits is accepted. Python's ``int()``
is more lenient (surrounding whitespace, underscores, non-ASCII digits) and
refuses strings longer than ``sys.get_int_max_str_digits()``, so the text is
matched against `INTEGER_PATTERN` and its digits are converted in chunks
below that limit.
"""

import logging
import re
from dataclasses import dataclass

from concordance.interfaces.correspondence import Correspondence

logger = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r"(?P<sign>[+-]?)(?P<digits>[0-9]+)")
CHUNK_DIGITS = 1000


def _digits_to_int(digits: str) -> int:
    value = 0
    for start in range(0, len(digits), CHUNK_DIGITS):
        chunk = digits[start : start + CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


@dataclass(frozen=True, eq=False)
class ParsesToCorrespondence(Correspondence[str, int]):
    """An actual string corresponds to an expected int if it parses to it.

    Unparsable input is not an error: ``compare`` returns ``False`` for it,
    as it does for ``None`` or wrongly-typed values on either side. ``bool``
    is not accepted as an expected integer. Strings of any length are
    handled; those with more digits than ``expected`` can have are rejected
    without converting them.
    """

    def compare(self, actual: str | None, expected: int | None) -> bool:
        if not isinstance(actual, str):
            return False
        if not isinstance(expected, int) or isinstance(expected, bool):
            return False
        if (match := INTEGER_PATTERN.fullmatch(actual)) is None:
            return False
        digits = match["digits"].lstrip("0")
        # n decimal digits need more than 3 * (n - 1) bits
        if len(digits) > expected.bit_length() // 3 + 1:
            return False
        value = _digits_to_int(digits) if digits else 0
        return (-value if match["sign"] == "-" else value) == expected

    def describe(self) -> str:
        return "parses to"


def parses_to() -> Correspondence[str, int]:
    """Build a correspondence checking that actual strings parse to expected ints."""
    correspondence = ParsesToCorrespondence()
    logger.debug("Built parsing correspondence: %r", correspondence)
    return correspondence

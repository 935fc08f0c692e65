"""Fixtures for Correspondence contract tests.

Provided fixtures
-----------------
- **variant**: Parametrized over every shipped correspondence. Each value is a
  `VariantCase` bundling a factory for fresh instances, a Hypothesis strategy
  producing ``(actual, expected)`` pairs the variant accepts, and a few fixed
  sample pairs for non-Hypothesis tests.

To cover a new variant, add its key to ``params`` and a branch below.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import pytest
from hypothesis import strategies as st

from concordance import from_predicate, parses_to, tolerance, transforming
from concordance.interfaces.correspondence import Correspondence


@dataclass(frozen=True)
class VariantCase:
    """A correspondence variant together with inputs it accepts."""

    factory: Callable[[], Correspondence[Any, Any]]
    pairs: st.SearchStrategy[tuple[Any, Any]]
    samples: tuple[tuple[Any, Any], ...]


def _same_text_ignoring_case(actual: str | None, expected: str | None) -> bool:
    if actual is None or expected is None:
        return actual is expected
    return actual.casefold() == expected.casefold()


@pytest.fixture(
    scope="module",
    params=["tolerance", "parses_to", "predicate", "transforming", "transforming_both"],
)
def variant(request: pytest.FixtureRequest) -> VariantCase:
    """Return the `VariantCase` for the requested correspondence.

    Module-scoped so Hypothesis tests can use it without tripping the
    function-scoped fixture health check; cases are immutable.
    """
    match request.param:
        case "tolerance":
            return VariantCase(
                factory=lambda: tolerance(0.01),
                pairs=st.tuples(st.floats(), st.floats()),
                samples=((1.00, 1.005), (1.00, 1.02), (float("nan"), 1.0)),
            )
        case "parses_to":
            return VariantCase(
                factory=parses_to,
                pairs=st.tuples(
                    st.one_of(st.none(), st.text(), st.integers().map(str)),
                    st.one_of(st.none(), st.integers(), st.booleans()),
                ),
                samples=(("123", 123), ("abc", 123), (None, None)),
            )
        case "predicate":
            return VariantCase(
                factory=lambda: from_predicate(
                    _same_text_ignoring_case, "equals ignoring case"
                ),
                pairs=st.tuples(
                    st.one_of(st.none(), st.text()), st.one_of(st.none(), st.text())
                ),
                samples=(("Hello", "hello"), ("Hello", "world"), (None, "x")),
            )
        case "transforming":
            return VariantCase(
                factory=lambda: transforming(len, "has a length of"),
                pairs=st.tuples(st.text(), st.integers(min_value=0, max_value=20)),
                samples=(("abc", 3), ("abc", 4), ("", 0)),
            )
        case "transforming_both":
            return VariantCase(
                factory=lambda: transforming(abs, "has the same magnitude as", abs),
                pairs=st.tuples(st.integers(), st.integers()),
                samples=((-3, 3), (2, -5), (0, 0)),
            )
        case _:
            raise ValueError(f"unknown correspondence variant: {request.param}")

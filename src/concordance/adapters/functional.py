"""Correspondences built from plain callables.

`from_predicate` wraps a two-argument predicate; `transforming` compares the
result of applying a function to the actual value (and optionally another to
the expected value) using ordinary ``==``.

Both variants hand ``None`` to the user-supplied callables unchanged, and any
exception those callables raise propagates to the caller untouched.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from concordance.interfaces.correspondence import Correspondence
from concordance.interfaces.errors import InvalidDescriptionError

A = TypeVar("A")
E = TypeVar("E")

logger = logging.getLogger(__name__)


def _check_description(description: object) -> None:
    if not isinstance(description, str) or not description:
        raise InvalidDescriptionError(description)


@dataclass(frozen=True, eq=False)
class PredicateCorrespondence(Correspondence[A, E]):
    """Correspondence whose `compare` delegates to a binary predicate."""

    predicate: Callable[[A | None, E | None], Any]
    description: str

    def __post_init__(self) -> None:
        _check_description(self.description)

    def compare(self, actual: A | None, expected: E | None) -> bool:
        return bool(self.predicate(actual, expected))

    def describe(self) -> str:
        return self.description


@dataclass(frozen=True, eq=False)
class TransformingCorrespondence(Correspondence[A, E]):
    """Correspondence that compares transformed values with ``==``.

    The actual value is passed through ``actual_transform``. If
    ``expected_transform`` is set the expected value is transformed too,
    otherwise it is compared as is.
    """

    actual_transform: Callable[[A | None], Any]
    description: str
    expected_transform: Callable[[E | None], Any] | None = None

    def __post_init__(self) -> None:
        _check_description(self.description)

    def compare(self, actual: A | None, expected: E | None) -> bool:
        transformed_expected = (
            expected
            if self.expected_transform is None
            else self.expected_transform(expected)
        )
        return bool(self.actual_transform(actual) == transformed_expected)

    def describe(self) -> str:
        return self.description


def from_predicate(
    predicate: Callable[[A | None, E | None], Any], description: str
) -> Correspondence[A, E]:
    """Build a correspondence from a binary predicate and a description.

    Args:
        predicate: Called as ``predicate(actual, expected)``; its result is
            coerced to bool. Must be deterministic and free of side effects.
        description: Fragment naming the relation, e.g. ``"contains"``.

    Returns:
        A correspondence that delegates to ``predicate``.

    Raises:
        InvalidDescriptionError: If ``description`` is empty or not a string.
    """
    correspondence: Correspondence[A, E] = PredicateCorrespondence(
        predicate, description
    )
    logger.debug("Built predicate correspondence: %r", correspondence)
    return correspondence


def transforming(
    actual_transform: Callable[[A | None], Any],
    description: str,
    expected_transform: Callable[[E | None], Any] | None = None,
) -> Correspondence[A, E]:
    """Build a correspondence comparing transformed values for equality.

    Examples:
        ```py
        has_length = transforming(len, "has a length of")
        has_length.compare("abc", 3)  # True

        same_id = transforming(
            lambda r: r.id, "has the same id as", lambda r: r.id
        )
        ```

    Args:
        actual_transform: Applied to each actual value.
        description: Fragment naming the relation.
        expected_transform: Applied to each expected value, if given.

    Returns:
        A correspondence for which ``compare(a, e)`` is
        ``actual_transform(a) == expected_transform(e)`` (or ``== e``).

    Raises:
        InvalidDescriptionError: If ``description`` is empty or not a string.
    """
    correspondence: Correspondence[A, E] = TransformingCorrespondence(
        actual_transform, description, expected_transform
    )
    logger.debug("Built transforming correspondence: %r", correspondence)
    return correspondence

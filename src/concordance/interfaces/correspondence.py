"""Interface for correspondences between actual and expected values.

A `Correspondence` determines whether a value of type ``A`` corresponds in
some way to a value of type ``E``. For example, a variant might implement
approximate equality between numbers, with values said to correspond when the
difference between them does not exceed a fixed tolerance. The ``A`` values
are typically actual values from a collection returned by the code under
test; the ``E`` values are the expected values the test compares them with.

A correspondence is required to be consistent: for any given ``actual`` and
``expected``, repeated calls to ``compare(actual, expected)`` must either
always return ``True`` or always return ``False`` (provided neither value is
modified). ``A`` and ``E`` are often the same type, but they need not be, and
even when they are the correspondence need not be reflexive, symmetric or
transitive.

Identity equality and hashing are disabled on every correspondence. Using
``==``, ``!=`` or ``hash()`` on one raises `UnsupportedOperationError`, and
subclasses may not override those methods.
"""

import abc
from typing import Generic, TypeVar

from .errors import SealedMethodError, UnsupportedOperationError

A = TypeVar("A")
E = TypeVar("E")

SEALED_METHODS = ("__eq__", "__ne__", "__hash__")

EQ_NOT_SUPPORTED = (
    "Correspondence.__eq__(other) is not supported. If you meant to compare objects,"
    " use .compare(actual, expected) instead."
)
NE_NOT_SUPPORTED = (
    "Correspondence.__ne__(other) is not supported. If you meant to compare objects,"
    " use .compare(actual, expected) instead."
)
HASH_NOT_SUPPORTED = "Correspondence.__hash__() is not supported."


class Correspondence(abc.ABC, Generic[A, E]):
    """Contract for a pairwise comparison between actual and expected values.

    Implementations supply `compare` and `describe`. Any configuration they
    hold (a tolerance, a predicate) must stay unchanged for the lifetime of
    the instance so that `compare` remains deterministic and safe to call
    from several threads at once.

    Note:
        ``__eq__``, ``__ne__`` and ``__hash__`` always raise and are sealed.
        Dataclass variants must be declared with ``eq=False``.
    """

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        for name in SEALED_METHODS:
            if name in cls.__dict__:
                raise SealedMethodError(cls.__qualname__, name)

    def __new__(cls, *args, **kwargs):  # pylint: disable=unused-argument
        # Catches overrides injected after class creation, e.g. @dataclass(eq=True).
        for name in SEALED_METHODS:
            if getattr(cls, name) is not getattr(Correspondence, name):
                raise SealedMethodError(cls.__qualname__, name)
        return super().__new__(cls)

    @abc.abstractmethod
    def compare(self, actual: A | None, expected: E | None) -> bool:
        """Return whether ``actual`` corresponds to ``expected`` for this test.

        Args:
            actual: The value produced by the code under test. May be None.
            expected: The value the test expects. May be None.

        Returns:
            True if the pair corresponds under this correspondence.
        """

    @abc.abstractmethod
    def describe(self) -> str:
        """Return a description of the correspondence.

        The description fills the gap in a failure message of the form
        ``"Not true that <[a1, a2, a3]> contains exactly elements which ... <expected>"``.
        A correspondence that tests whether an actual string parses to an
        expected integer would return ``"parses to"``, giving
        ``"Not true that <[foo, 123, bar]> contains exactly elements which parses to <[123, 456]>"``.
        """

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self.describe()}>"

    def __eq__(self, other: object) -> bool:
        """Not supported.

        Raises:
            UnsupportedOperationError: Always. Use `compare` to compare values.
        """
        raise UnsupportedOperationError("__eq__", EQ_NOT_SUPPORTED)

    def __ne__(self, other: object) -> bool:
        """Not supported.

        Raises:
            UnsupportedOperationError: Always. Use `compare` to compare values.
        """
        raise UnsupportedOperationError("__ne__", NE_NOT_SUPPORTED)

    def __hash__(self) -> int:
        """Not supported.

        Raises:
            UnsupportedOperationError: Always.
        """
        raise UnsupportedOperationError("__hash__", HASH_NOT_SUPPORTED)

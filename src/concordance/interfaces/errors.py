"""Errors related to the correspondence contract and its variants."""


class CorrespondenceError(Exception):
    """Base class for all correspondence-related errors."""


# ============================================================================
#                           Contract misuse errors
# ============================================================================


class UnsupportedOperationError(CorrespondenceError, TypeError):
    """Raised when identity equality or hashing is used on a correspondence."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(message)
        self.operation = operation


class SealedMethodError(CorrespondenceError, TypeError):
    """Raised when a subclass overrides a method sealed by Correspondence."""

    def __init__(self, class_name: str, method: str) -> None:
        super().__init__(
            f"{class_name} must not override Correspondence.{method}; "
            "implement compare() and describe() instead."
        )
        self.class_name = class_name
        self.method = method


# ============================================================================
#                           Variant configuration errors
# ============================================================================


class InvalidDescriptionError(CorrespondenceError, ValueError):
    """Raised when a correspondence is given an empty or non-string description."""

    def __init__(self, description: object) -> None:
        super().__init__(
            f"Correspondence description must be a non-empty string, got {description!r}"
        )
        self.description = description


class InvalidToleranceError(CorrespondenceError, ValueError):
    """Raised when a tolerance is not a number, or is negative, NaN or infinite."""

    def __init__(self, tolerance: float, reason: str) -> None:
        super().__init__(f"Invalid tolerance ({tolerance}): {reason}")
        self.tolerance = tolerance


class MissingValueError(CorrespondenceError, ValueError):
    """Raised when a correspondence that rejects absent values receives None."""

    def __init__(self, role: str, relation: str) -> None:
        super().__init__(
            f"Cannot check whether a value {relation} another: {role} value is None"
        )
        self.role = role
        self.relation = relation


class NotANumberError(CorrespondenceError, TypeError):
    """Raised when a numeric correspondence receives a value that is not a number."""

    def __init__(self, role: str, value: object, relation: str) -> None:
        super().__init__(
            f"Cannot check whether a value {relation} another: "
            f"{role} value {value!r} is not a real number"
        )
        self.role = role
        self.value = value
        self.relation = relation

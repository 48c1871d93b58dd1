"""Request validation for the shot solver.

Structural problems with a request (unknown pocket, cushion count out of
range) are caller mistakes and are raised. Geometric infeasibility is never
an error; the solver simply drops the candidate.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from .constants import MAX_CUSHIONS


class BankShotError(Exception):
    """Base exception for bankshot errors."""

    pass


class ShotRequestError(BankShotError, ValueError):
    """Raised when a shot request is structurally invalid."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        """Initialize request error.

        Args:
            message: Human-readable description
            field: Name of the offending request field
            value: The rejected value
        """
        super().__init__(message)
        self.field = field
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "value": self.value}


@dataclass
class ValidationResult:
    """Result of request validation."""

    is_valid: bool = True
    errors: list[str] = field(default_factory=list)
    fields: list[str] = field(default_factory=list)
    values: list[Any] = field(default_factory=list)

    def add_error(self, error: str, field_name: str, value: Any = None) -> None:
        """Add an error message.

        Args:
            error: Error message to add
            field_name: Field the error refers to
            value: Offending value
        """
        self.errors.append(error)
        self.fields.append(field_name)
        self.values.append(value)
        self.is_valid = False

    def raise_for_errors(self) -> None:
        """Raise ShotRequestError for the first recorded error, if any."""
        if self.is_valid:
            return
        message = "; ".join(self.errors)
        raise ShotRequestError(message, field=self.fields[0], value=self.values[0])


def validate_max_cushions(max_cushions: Any, result: ValidationResult) -> None:
    # bool is an int subclass but never a meaningful cushion count
    if (
        isinstance(max_cushions, bool)
        or not isinstance(max_cushions, int)
        or not 0 <= max_cushions <= MAX_CUSHIONS
    ):
        result.add_error(
            f"max_cushions must be 0, 1 or 2, got {max_cushions!r}",
            "max_cushions",
            max_cushions,
        )


def validate_pocket(
    pocket: Optional[str], pocket_names: Iterable[str], result: ValidationResult
) -> None:
    if pocket is None:
        return
    known = list(pocket_names)
    if pocket not in known:
        result.add_error(
            f"Unknown pocket {pocket!r}, expected one of {', '.join(known)}",
            "pocket",
            pocket,
        )


def validate_shot_request(
    pocket: Optional[str], max_cushions: Any, pocket_names: Iterable[str]
) -> ValidationResult:
    """Validate the structural parts of a shot request.

    Args:
        pocket: Pocket name or None for all pockets
        max_cushions: Requested cushion cap
        pocket_names: Pocket names known to the table

    Returns:
        Validation result listing every problem found
    """
    result = ValidationResult()
    validate_pocket(pocket, pocket_names, result)
    validate_max_cushions(max_cushions, result)
    return result


__all__ = [
    "BankShotError",
    "ShotRequestError",
    "ValidationResult",
    "validate_shot_request",
    "validate_pocket",
    "validate_max_cushions",
]

"""Validation helpers shared by request builders.

Each helper raises :class:`SonarQubeValidationError` naming the violated
constraint. Parameters are looked up by wire name.
"""

from collections.abc import Mapping
from typing import Any

from sonarqube_client.exceptions import SonarQubeValidationError

MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 500


def is_set(value: Any) -> bool:
    """Check whether a parameter value counts as provided.

    None, empty strings and empty collections are treated as missing.
    """
    if value is None:
        return False
    if isinstance(value, str | list | tuple | dict):
        return len(value) > 0
    return True


def validate_required(params: Mapping[str, Any], field: str, message: str | None = None) -> None:
    """Require a parameter to be set."""
    if not is_set(params.get(field)):
        raise SonarQubeValidationError(message or f"{field} is required", field=field)


def validate_page_size(params: Mapping[str, Any], field: str = "ps", maximum: int = MAX_PAGE_SIZE) -> None:
    """Require the page size, when set, to be within 1..maximum."""
    validate_range(params, field, MIN_PAGE_SIZE, maximum, message=f"Page size must be between 1 and {maximum}")


def validate_range(
    params: Mapping[str, Any],
    field: str,
    minimum: int,
    maximum: int,
    message: str | None = None,
) -> None:
    """Require a numeric parameter, when set, to be within bounds (inclusive)."""
    value = params.get(field)
    if value is None:
        return
    if not minimum <= value <= maximum:
        raise SonarQubeValidationError(
            message or f"{field} must be between {minimum} and {maximum}",
            field=field,
        )


def validate_mutually_exclusive(params: Mapping[str, Any], field: str, *others: str) -> None:
    """Forbid ``field`` together with any of ``others``.

    Raises:
        SonarQubeValidationError: e.g. "Cannot use both branch and pullRequest"
    """
    if not is_set(params.get(field)):
        return
    for other in others:
        if is_set(params.get(other)):
            raise SonarQubeValidationError(f"Cannot use both {field} and {other}", field=field)


def validate_requires(params: Mapping[str, Any], field: str, required: str) -> None:
    """Require ``required`` whenever ``field`` is set.

    Raises:
        SonarQubeValidationError: e.g. "fixedInPullRequest requires components"
    """
    if is_set(params.get(field)) and not is_set(params.get(required)):
        raise SonarQubeValidationError(f"{field} requires {required}", field=field)


def validate_one_of_required(params: Mapping[str, Any], *fields: str) -> None:
    """Require at least one of ``fields`` to be set."""
    if not any(is_set(params.get(field)) for field in fields):
        names = ", ".join(fields)
        raise SonarQubeValidationError(f"At least one of {names} is required", field=fields[0])


def validate_exactly_one(params: Mapping[str, Any], *fields: str) -> None:
    """Require exactly one of ``fields`` to be set."""
    provided = [field for field in fields if is_set(params.get(field))]
    if len(provided) != 1:
        names = ", ".join(fields)
        raise SonarQubeValidationError(f"Exactly one of {names} must be provided", field=fields[0])

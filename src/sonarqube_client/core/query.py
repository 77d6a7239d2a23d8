"""Query-string encoding for the SonarQube Web API."""

from collections.abc import Mapping
from enum import Enum
from typing import Any


def encode_value(value: Any) -> str | None:
    """Encode a single parameter value the way the Web API expects it.

    Lists become comma-separated strings and booleans are lowercase.

    Args:
        value: Raw parameter value

    Returns:
        Encoded value, or None if the parameter should be omitted
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, list | tuple):
        items = [encoded for item in value if (encoded := encode_value(item)) is not None]
        return ",".join(items) if items else None
    return str(value)


def to_query_params(params: Mapping[str, Any]) -> dict[str, str]:
    """Convert builder parameters to query parameters.

    None values and empty lists are dropped.

    Args:
        params: Parameters keyed by wire name

    Returns:
        Encoded parameters
    """
    encoded: dict[str, str] = {}
    for key, value in params.items():
        encoded_value = encode_value(value)
        if encoded_value is not None:
            encoded[key] = encoded_value
    return encoded

"""Shared argument handling for the Booli tools."""

from typing import Any

from booli_mcp.error_handling import BooliError, ErrorKind


def resolve_limit(value: Any, default: int) -> int:
    """Resolve the ``limit`` argument.

    Missing or zero falls back to ``default``; there is no upper bound.

    Raises:
        BooliError: VALIDATION for non-numeric or negative values
    """
    if not value:
        return default
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 1:
        raise BooliError(
            ErrorKind.VALIDATION,
            'Error: limit must be a positive number (e.g., 10).',
        )
    return int(value)

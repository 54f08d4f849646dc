"""Shared parsing helpers for CLI, config, and environment value normalization."""

from __future__ import annotations

import math


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_lenient_integer(value: object) -> int | None:
    """Parse a numeric token and round it half-up, returning `None` for non-numbers.

    Booleans, blank values, `nan`, and infinities are treated as non-numeric.
    """

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None
    try:
        parsed = float(normalized)
    except ValueError:
        return None
    if not math.isfinite(parsed):
        return None
    return math.floor(parsed + 0.5)


def parse_required_positive_int(value: object, field_name: str) -> int:
    """Parse a strictly positive integer value.

    Args:
        value: Raw value to parse.
        field_name: Field name for an actionable validation error message.

    Raises:
        ValueError: If the value is not an integer greater than zero.
    """

    if isinstance(value, bool):
        raise ValueError(f"`{field_name}` must be a positive integer.")
    if isinstance(value, int):
        parsed = value
    else:
        normalized = normalize_optional_string(value)
        if normalized is None:
            raise ValueError(f"`{field_name}` must be a positive integer.")
        try:
            parsed = int(normalized)
        except ValueError as exc:
            raise ValueError(f"`{field_name}` must be a positive integer.") from exc

    if parsed <= 0:
        raise ValueError(f"`{field_name}` must be a positive integer.")
    return parsed

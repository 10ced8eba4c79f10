"""
Input sanitization - Pure normalization of values before dispatch.

Sanitizers never raise: anything that is not a scalar degrades to an
empty string. Format validation is left to the remote API.
"""

from collections.abc import Mapping
from typing import Any

COUNTRY_CODE_LENGTH = 2
FLOAT_PRECISION = 14


def is_scalar(value: Any) -> bool:
    """Return True for str, int, float and bool values."""
    return isinstance(value, (str, int, float, bool))


def _to_text(value: str | int | float | bool) -> str:
    # Booleans render as "1" and "".
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, float):
        return _float_to_text(value)
    return str(value)


def _float_to_text(value: float) -> str:
    """
    Render a float with 14 significant digits, the remote API's own format.

    1.0 renders as "1", 0.1 + 0.2 as "0.3" and 1e20 as "1.0E+20".
    """
    text = format(value, f".{FLOAT_PRECISION}G")
    if "E" not in text:
        return text
    mantissa, exponent = text.split("E")
    if "." not in mantissa:
        mantissa += ".0"
    sign = "-" if exponent.startswith("-") else "+"
    return f"{mantissa}E{sign}{int(exponent[1:])}"


def sanitize_country(value: Any) -> str:
    """
    Normalize a country code.

    Takes the first two characters of a scalar and upper-cases them.
    No check against an ISO 3166-1 list is performed.
    """
    if not is_scalar(value):
        return ""
    return _to_text(value)[:COUNTRY_CODE_LENGTH].upper()


def sanitize_string(value: Any) -> str:
    """Coerce a scalar to str, anything else to an empty string."""
    if not is_scalar(value):
        return ""
    return _to_text(value)


def is_empty(value: Any) -> bool:
    """Loose emptiness: falsy values and the string "0"."""
    return not value or value == "0"


def filter_empty(data: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of data without keys whose value is empty."""
    return {key: value for key, value in data.items() if not is_empty(value)}

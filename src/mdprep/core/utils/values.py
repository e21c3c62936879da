"""String-form rendering of loosely-typed front matter and parameter values"""

from typing import Any


def stringify(value: Any) -> str:
    """Render value the way the publishing platform compares it.

    Booleans are lowercase, None is 'null', integral floats drop the fraction,
    and sequences are comma-joined without spaces.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join("" if v is None else stringify(v) for v in value)
    return str(value)


def is_scalar(value: Any) -> bool:
    """True for values that are not mappings or sequences."""
    return not isinstance(value, (list, tuple, dict, set))

"""String transformations used to derive identifiers."""

import re

__all__ = ["transform_string_function_style"]

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")


def transform_string_function_style(name: str) -> str:
    """Turn ``name`` into a lower-case identifier of letters, digits and underscores."""
    name = name.replace(" ", "_")
    name = _NON_ALPHANUMERIC.sub("_", name)
    return name.lower()
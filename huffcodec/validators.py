"""
validators.py

Shared codes for input validation in huffcodec.
"""


from typing import Any

def validate_type(variable: Any, name: str, expected_type: type) -> None:
    """Validate that variable is of the expected type."""
    if not isinstance(variable, expected_type):
        raise ValueError(f"{name} must be of type {expected_type.__name__}")


def validate_hashable(variable: Any, name: str) -> None:
    """Validate that variable can be used as a mapping key."""
    try:
        hash(variable)
    except TypeError:
        raise ValueError(f"{name} must be hashable, got {type(variable).__name__}")

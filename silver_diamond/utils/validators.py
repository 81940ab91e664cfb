"""
Validation utilities for request arguments.
"""

from enum import Enum
from typing import Any, Iterable, List, Optional, Union

from ..exceptions import InvalidArgument

Labels = Union[str, Iterable[str]]


def label_value(value: Any) -> Any:
    """Return the wire value of an enum member, or the value unchanged."""
    if isinstance(value, Enum):
        return value.value
    return value


def normalize_text(text: Any, name: str = "Text") -> str:
    """
    Validate and trim a text argument.

    Args:
        text: Value supplied by the caller
        name: Argument name used in error messages

    Returns:
        The text without leading/trailing whitespace

    Raises:
        InvalidArgument: If text is not a string or is blank
    """
    if not isinstance(text, str):
        raise InvalidArgument(f"{name} must be a string")

    text = text.strip()
    if not text:
        raise InvalidArgument(f"{name} must not be empty")

    return text


def normalize_labels(labels: Labels, name: str = "Labels") -> List[str]:
    """
    Turn a label or a collection of labels into lower-cased strings.

    Args:
        labels: A single label, or a list/tuple/set of labels
        name: Argument name used in error messages

    Returns:
        List of trimmed, lower-cased labels

    Raises:
        InvalidArgument: If labels is neither a string nor a collection of strings
    """
    if isinstance(labels, str):
        labels = [labels]

    if not isinstance(labels, (list, tuple, set, frozenset)):
        raise InvalidArgument(f"{name} must be a string or a list")

    normalized = []
    for label in labels:
        if not isinstance(label, str):
            raise InvalidArgument(f"{name} must be a string or a list")
        normalized.append(str(label_value(label)).strip().lower())

    return normalized


def optional_label(value: Any) -> Optional[str]:
    """Wire value for an optional language argument; falsy values mean 'omit'."""
    if not value:
        return None
    return label_value(value)

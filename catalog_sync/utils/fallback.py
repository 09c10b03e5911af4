"""
Ordered fallback chains for reading loosely shaped platform payloads.

Platform payloads disagree on field names and nesting, so every attribute is
resolved by trying a list of extractors in order and keeping the first value
that is accepted.
"""
import math
from typing import Any, Callable, Iterable, Optional

Extractor = Callable[[Any], Any]

# Errors an extractor may raise when the payload lacks the expected shape
_MISSING = (KeyError, IndexError, TypeError, AttributeError)


def is_present(value: Any) -> bool:
    """Accept anything except None, empty strings and empty containers."""
    if value is None:
        return False
    if isinstance(value, (str, list, tuple, dict)) and not value:
        return False
    if value is False:
        return False
    if isinstance(value, (int, float)) and value == 0:
        return False
    return True


def is_not_none(value: Any) -> bool:
    """Accept any value but None, so 0 and empty strings are kept."""
    return value is not None


def first_of(
    source: Any,
    extractors: Iterable[Extractor],
    default: Any = None,
    accept: Callable[[Any], bool] = is_present,
) -> Any:
    """Return the first extracted value accepted by ``accept``.

    An extractor that fails because the payload is missing a key, index or
    attribute counts as having produced no value.
    """
    for extractor in extractors:
        try:
            value = extractor(source)
        except _MISSING:
            continue
        if accept(value):
            return value
    return default


def dig(source: Any, *path: Any) -> Any:
    """Walk nested dicts/lists, returning None as soon as a step is missing."""
    current = source
    for step in path:
        if current is None:
            return None
        try:
            current = current[step]
        except (KeyError, IndexError, TypeError):
            return None
    return current


def to_number(value: Any, default: Optional[float] = None) -> Optional[float]:
    """Coerce ``value`` to a number, returning ``default`` when it is not numeric."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    try:
        number = float(value) if isinstance(value, float) else float(str(value).strip())
    except (TypeError, ValueError):
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number

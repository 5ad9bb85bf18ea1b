"""Delimiter predicates deciding which characters separate tokens."""

from typing import Callable, Optional

Delimiter = Callable[[str], bool]

QUOTES = ("'", '"')


def whitespace(c: str) -> bool:
    """Default delimiter: any Unicode whitespace character."""
    return c.isspace()


def any_of(chars: str) -> Delimiter:
    """
    Build a delimiter that accepts any of the given characters.

    Args:
        chars: The characters to split on, e.g. "." or ",;"

    Returns:
        A predicate over a single character
    """
    accepted = frozenset(chars)

    def delimiter(c: str) -> bool:
        return c in accepted

    return delimiter


def accepts_quote(delimiter: Delimiter) -> Optional[str]:
    """Return the first quote character the delimiter accepts, if any."""
    for quote in QUOTES:
        if delimiter(quote):
            return quote
    return None

"""
Text normalizer for free-text comparison

Canonical form:
  - lowercase
  - curly apostrophes/quotes folded to straight ones
  - only a-z, 0-9 and whitespace kept
  - whitespace runs collapsed to one space, ends trimmed
"""
import re


_APOSTROPHES = re.compile(r"['‘’]")
_QUOTES = re.compile(r"[\"“”]")
_DISALLOWED = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """
    Normalize a string for comparison

    Example:
        >>> normalize("  Bart’s   “Friend” Falls in Love ")
        'barts friend falls in love'

    Args:
        text: Any string (may be empty)

    Returns:
        Normalized string, "" for empty input
    """
    result = text.lower()
    result = _APOSTROPHES.sub("'", result)
    result = _QUOTES.sub('"', result)
    result = _DISALLOWED.sub("", result)
    result = _WHITESPACE.sub(" ", result)
    return result.strip()

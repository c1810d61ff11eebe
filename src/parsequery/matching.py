"""Separators and key predicates.

The parser only ever calls ``splitter.split(query)`` and ``predicate(key)``.
The helpers here turn whatever the caller configured (a literal string, a
compiled pattern, a function, ...) into one of those two shapes.
"""
import re

from parsequery.exceptions import OptionsError


class LiteralSeparator:
    """Split on every occurrence of a literal string."""

    def __init__(self, literal):
        if not literal:
            raise OptionsError("separator must not be empty")
        self.literal = literal

    def split(self, query):
        return query.split(self.literal)

    def __repr__(self):
        return f"<LiteralSeparator {self.literal!r}>"


class PatternSeparator:
    """Split wherever a regular expression matches."""

    def __init__(self, pattern):
        self.pattern = re.compile(pattern)

    def split(self, query):
        return self.pattern.split(query)

    def __repr__(self):
        return f"<PatternSeparator {self.pattern.pattern!r}>"


def separator(value):
    """Return a splitter for a configured ``separator`` option."""
    if isinstance(value, str):
        return LiteralSeparator(value)
    if isinstance(value, re.Pattern):
        return PatternSeparator(value)
    if callable(getattr(value, "split", None)):
        return value
    raise OptionsError(
        f"separator must be a string, a compiled pattern or an object with"
        f" a split() method, not {type(value).__name__!r}"
    )


def never(key):
    """Default ``array_keys`` predicate: no key is multi-valued."""
    return False


class PatternPredicate:
    """Matches keys in which the pattern is found anywhere."""

    def __init__(self, pattern):
        self.pattern = re.compile(pattern)

    def __call__(self, key):
        return self.pattern.search(key) is not None

    def __repr__(self):
        return f"<PatternPredicate {self.pattern.pattern!r}>"


def key_predicate(value):
    """Return a ``predicate(key) -> bool`` for a configured ``array_keys``.

    Accepts ``None``/``False`` (never matches), a regex source string or
    compiled pattern (searched in the key), an object with a ``test()``
    method, or any callable taking the decoded key.
    """
    if value is None or value is False:
        return never
    if isinstance(value, (str, re.Pattern)):
        return PatternPredicate(value)
    test = getattr(value, "test", None)
    if callable(test):
        return test
    if callable(value):
        return value
    raise OptionsError(
        f"array_keys must be a pattern or a callable,"
        f" not {type(value).__name__!r}"
    )

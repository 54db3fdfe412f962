# menuclasses/unescape.py
"""
Un-escaping of CSS class tokens.

Utility-first CSS frameworks use classes such as ``hover:text-primary``, but
the colon is stripped or mangled by many of the places menu classes are
authored. Authors write ``hover___text-primary`` instead and the un-escape pass
turns the reserved sequence back into a colon.

Patterns are regular expressions. Lists of patterns and replacements follow the
usual substitution-routine conventions:

- one pattern, one replacement: a single substitution
- several patterns, one replacement: every pattern becomes that replacement
- several patterns, several replacements: paired in order, missing
  replacements are the empty string
"""

import re
from typing import Iterable, List, Sequence, Tuple, Union

from django.core.exceptions import ImproperlyConfigured

DEFAULT_PATTERNS = "___"
DEFAULT_REPLACEMENTS = ":"

PatternSpec = Union[str, "re.Pattern[str]", Sequence[Union[str, "re.Pattern[str]"]]]
ReplacementSpec = Union[str, Sequence[str]]


def _is_many(value) -> bool:
    return isinstance(value, (list, tuple))


def _compile(pattern) -> "re.Pattern[str]":
    if isinstance(pattern, re.Pattern):
        return pattern
    if not isinstance(pattern, str):
        raise ImproperlyConfigured(
            f"Class un-escape patterns must be strings or compiled regexes, got {pattern!r}"
        )
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ImproperlyConfigured(
            f"Invalid class un-escape pattern {pattern!r}: {e}"
        ) from e


class UnescapeRules:
    """Immutable set of (pattern, replacement) pairs applied to class tokens."""

    def __init__(
        self,
        patterns: PatternSpec = DEFAULT_PATTERNS,
        replacements: ReplacementSpec = DEFAULT_REPLACEMENTS,
    ):
        self._pairs: Tuple[Tuple["re.Pattern[str]", str], ...] = tuple(
            self._build_pairs(patterns, replacements)
        )

    @staticmethod
    def _build_pairs(patterns, replacements) -> List[Tuple["re.Pattern[str]", str]]:
        if not _is_many(patterns):
            if _is_many(replacements):
                raise ImproperlyConfigured(
                    "A single class un-escape pattern needs a single replacement string"
                )
            return [(_compile(patterns), str(replacements))]

        if _is_many(replacements):
            padded = list(replacements) + [""] * (len(patterns) - len(replacements))
        else:
            padded = [replacements] * len(patterns)
        return [(_compile(p), str(r)) for p, r in zip(patterns, padded)]

    @property
    def pairs(self) -> Tuple[Tuple["re.Pattern[str]", str], ...]:
        return self._pairs

    def apply(self, token: str) -> str:
        """Un-escape a single class token."""
        for pattern, replacement in self._pairs:
            token = pattern.sub(replacement, token)
        return token

    def apply_all(self, tokens: Iterable[str]) -> List[str]:
        """Un-escape every token of a class list, keeping order."""
        return [self.apply(token) for token in tokens]

    def __repr__(self):
        rendered = ", ".join(f"{p.pattern!r} -> {r!r}" for p, r in self._pairs)
        return f"UnescapeRules({rendered})"

"""Ref selection: decide whether a job runs for a branch or tag.

``only`` and ``except`` entries are either literal ref names or regular
expressions wrapped in slashes (``/^release-.*/``). The keywords ``branches``
and ``tags`` are recognised at list level only.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Sequence
from dataclasses import dataclass

from ..exceptions import PatternError

BRANCHES = "branches"
TAGS = "tags"


@dataclass(frozen=True)
class LiteralPattern:
    value: str

    def matches(self, ref: str) -> bool:
        return self.value == ref


@dataclass(frozen=True)
class RegexPattern:
    source: str

    def compile(self) -> re.Pattern[str]:
        return _compile(self.source)

    def matches(self, ref: str) -> bool:
        return self.compile().search(ref) is not None


Pattern = LiteralPattern | RegexPattern


@functools.cache
def _compile(source: str) -> re.Pattern[str]:
    """Compile a regex source once; patterns never change at runtime."""
    try:
        return re.compile(source)
    except re.error as e:
        raise PatternError(f"/{source}/", str(e)) from e


def is_regex(pattern: str) -> bool:
    return len(pattern) >= 2 and pattern.startswith("/") and pattern.endswith("/")


def parse_pattern(pattern: str) -> Pattern:
    """Classify a raw only/except entry without compiling it."""
    if is_regex(pattern):
        return RegexPattern(pattern[1:-1])
    return LiteralPattern(pattern)


def match_ref(pattern: str, ref: str) -> bool:
    return parse_pattern(pattern).matches(ref)


def should_run(
    only: Sequence[str] | None,
    except_: Sequence[str] | None,
    ref: str,
    tag: bool = False,
) -> bool:
    """Return True when a job with the given filters runs for *ref*.

    ``only`` takes precedence when both lists are given. With ``only`` a ref
    that matches nothing is skipped; with ``except`` it runs.
    """
    if only is None and except_ is None:
        return True

    if only is not None:
        if tag and TAGS in only:
            return True
        if not tag and BRANCHES in only:
            return True
        return any(match_ref(pattern, ref) for pattern in only)

    if tag and TAGS in except_:
        return False
    if not tag and BRANCHES in except_:
        return False
    return not any(match_ref(pattern, ref) for pattern in except_)

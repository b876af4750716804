"""Compile regular expressions that use the ``\\p{CJK}`` and ``\\p{CJ}`` shorthands."""

from functools import lru_cache

import regex

CJK = (
    r"\p{Script=Han}|\p{Script=Hangul}|\p{Script=Hanunoo}"
    r"|\p{Script=Katakana}|\p{Script=Hiragana}|\p{Script=Bopomofo}"
)
CJ = r"\p{Script=Han}|\p{Script=Katakana}|\p{Script=Hiragana}|\p{Script=Bopomofo}"


@lru_cache(maxsize=None)
def compile_pattern(pattern: str) -> "regex.Pattern[str]":
    """Expand the CJK shorthands in *pattern* and compile it.

    The shorthands are replaced textually by an alternation of scripts, so
    ``\\p{CJK}`` outside a group becomes an alternation and inside a
    character class also admits a literal ``|``.
    """
    expanded = pattern.replace(r"\p{CJK}", CJK).replace(r"\p{CJ}", CJ)
    return regex.compile(expanded)
"""Add spaces between CJK and half-width text and correct nearby punctuation."""

from .fullwidth import fullwidth
from .halfwidth import halfwidth
from .patterns import compile_pattern
from .strategery import Strategery

_CJK_RE = compile_pattern(r"\p{CJK}")
_DASH_HANS_RE = compile_pattern(
    r"([\p{CJK}）】」》”’])([\-]+)([\p{CJK}}}（【「《“‘])"
)
_LEFT_QUOTE_RE = compile_pattern(r" ([（【「《])")
_RIGHT_QUOTE_RE = compile_pattern(r"([）】」》]) ")

_STRATEGIES = (
    # English letters and digits; not after %, $ or \ so that %s, $1, \d stay intact.
    Strategery(r"\p{CJK}[^%\$\\]", r"[a-zA-Z0-9]", True, False),
    Strategery(r"[^%\$\\][a-zA-Z0-9]", r"\p{CJK}", True, False),
    # 10%中文
    Strategery(r"[0-9][%]", r"\p{CJK}", True, False),
    # Special symbols
    Strategery(r"\p{CJK}", r"[\|+]", True, True),
    # @ after CJK, but not before: 你好 @某某
    Strategery(r"\p{CJK}", r"[@]", True, False),
    Strategery(r"\p{CJK}", r"[\[\(]", True, False),
    Strategery(r"[\]\)!]", r"\p{CJK}", True, False),
    # Full-width punctuation: spaces next to it are safe to drop.
    Strategery(r"[\w\p{CJK}]", r"[，。！？：；）」》】”’]", False, True),
    Strategery(r"[‘“【「《（]", r"[\w\p{CJK}]", False, True),
)


def _space_dash_with_hans(text: str) -> str:
    out = _DASH_HANS_RE.sub(r"\1 \2 \3", text)
    out = _LEFT_QUOTE_RE.sub(r"\1", out)
    return _RIGHT_QUOTE_RE.sub(r"\1", out)


def format_text(text: str) -> str:
    """Format plain text: spacing and punctuation around CJK characters.

    Text without any CJK character is returned unchanged.
    """
    if not _CJK_RE.search(text):
        return text

    out = fullwidth(text)
    out = halfwidth(out)
    for rule in _STRATEGIES:
        out = rule.format(out)
    return _space_dash_with_hans(out)
"""Turn half-width punctuation next to CJK text into full-width punctuation."""

from .patterns import compile_pattern

_SPECIAL_PUNCTUATIONS = "[.:]([ ]*)"
_NORMAL_PUNCTUATIONS = "[,!?]([ ]*)"

_FULLWIDTH_MAP = {
    ",": "，",
    ".": "。",
    ";": "；",
    ":": "：",
    "!": "！",
    "?": "？",
}

_PUNCTUATION_RULES = (
    compile_pattern(r"[\p{CJ}\w\d]+" + _NORMAL_PUNCTUATIONS + r"[\p{CJ}]+"),
    compile_pattern(r"[\p{CJ}]+" + _NORMAL_PUNCTUATIONS),
    compile_pattern(r"[\p{CJ}]+" + _SPECIAL_PUNCTUATIONS + r"[\p{CJ}]+"),
    compile_pattern(r"[\p{CJ}]+" + _SPECIAL_PUNCTUATIONS + r"\Z"),
)
_PUNCTUATIONS_RE = compile_pattern(f"({_SPECIAL_PUNCTUATIONS}|{_NORMAL_PUNCTUATIONS})")


def _replace_part(match) -> str:
    return _PUNCTUATIONS_RE.sub(lambda m: _FULLWIDTH_MAP[m.group(0).strip()], match.group(0))


def fullwidth(text: str) -> str:
    """Replace punctuation surrounded by CJK characters with its full-width form."""
    out = text
    for rule in _PUNCTUATION_RULES:
        out = rule.sub(_replace_part, out)
    return out
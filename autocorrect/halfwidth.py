"""Turn full-width letters, digits and spaces into their half-width forms."""

from .patterns import compile_pattern

_CHAR_WIDTH_MAP = str.maketrans(
    {
        **{chr(0xFF41 + i): chr(ord("a") + i) for i in range(26)},
        **{chr(0xFF21 + i): chr(ord("A") + i) for i in range(26)},
        **{chr(0xFF10 + i): chr(ord("0") + i) for i in range(10)},
        "\u3000": " ",
    }
)

_HALF_TIME_RE = compile_pattern(r"(\d)(：)(\d)")


def halfwidth(text: str) -> str:
    """Replace full-width alphanumerics and spaces, and fix times like 12：00."""
    out = text.translate(_CHAR_WIDTH_MAP)
    return _HALF_TIME_RE.sub(lambda m: m.group(0).replace("：", ":"), out)
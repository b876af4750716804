"""A single spacing rule between two kinds of characters."""

from .patterns import compile_pattern


class Strategery:
    """Adds (or keeps) a space between text matching *one* and *other*.

    With ``space`` true a space is inserted; with ``reverse`` true the rule
    also applies to ``other`` followed by ``one``.
    """

    def __init__(self, one: str, other: str, space: bool, reverse: bool) -> None:
        self.space = space
        self.reverse = reverse
        self._add_space_re = compile_pattern(f"({one})({other})")
        self._add_space_reverse_re = compile_pattern(f"({other})({one})")
        self._remove_space_re = compile_pattern(f"({one})[ ]({other})")
        self._remove_space_reverse_re = compile_pattern(f"({other})[ ]({one})")

    def format(self, text: str) -> str:
        """Apply the rule to *text*."""
        if self.space:
            return self._apply(text, self._add_space_re, self._add_space_reverse_re)
        return self._apply(text, self._remove_space_re, self._remove_space_reverse_re)

    def _apply(self, text, forward, backward) -> str:
        out = forward.sub(r"\g<1> \g<2>", text)
        if self.reverse:
            out = backward.sub(r"\g<1> \g<2>", out)
        return out
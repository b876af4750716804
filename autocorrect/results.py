"""Collect the output of formatting or linting the text parts of a file."""

from __future__ import annotations

import difflib
import json
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union

from .formatter import format_text

_DISABLE_RE = re.compile(r"autocorrect(:[ ]*|\-)(false|disable)")
_ENABLE_RE = re.compile(r"autocorrect(:[ ]*|\-)(true|enable)")

_RED = "\x1b[91m"
_GREEN = "\x1b[92m"
_RESET = "\x1b[0m"


class Toggle(Enum):
    """A switch found in a comment that turns correcting on or off."""

    NONE = "none"
    DISABLE = "disable"
    ENABLE = "enable"


def match_autocorrect_toggle(part: str) -> Toggle:
    """Return the toggle that *part* asks for, if any."""
    if _DISABLE_RE.search(part):
        return Toggle.DISABLE
    if _ENABLE_RE.search(part):
        return Toggle.ENABLE
    return Toggle.NONE


def line_col(part: str) -> tuple[int, int, bool]:
    """Count the lines and the column that *part* advances a cursor by.

    Returns ``(lines, col, has_new_line)``; after a newline the column
    restarts at 1. A ``\\r\\n`` pair counts as one newline.
    """
    lines = 0
    col = 0
    has_new_line = False
    chars = iter(part)
    pending = None
    while True:
        char = pending if pending is not None else next(chars, None)
        pending = None
        if char is None:
            break
        if char == "\r":
            following = next(chars, None)
            if following == "\n":
                lines, col = lines + 1, 1
                has_new_line = True
            else:
                col += 1
                pending = following
        elif char == "\n":
            lines, col = lines + 1, 1
            has_new_line = True
        else:
            col += 1
    return lines, col, has_new_line


@dataclass
class LineResult:
    """One corrected piece of text and where it starts."""

    line: int
    col: int
    new: str
    old: str

    def to_dict(self) -> dict:
        return {"l": self.line, "c": self.col, "new": self.new, "old": self.old}


@dataclass
class FormatResult:
    """Accumulates the formatted output of a file."""

    raw: str = ""
    out: str = ""
    error: str = ""
    enable: bool = True

    is_lint: ClassVar[bool] = False

    def push(self, line_result: LineResult) -> None:
        self.out += line_result.new

    def ignore(self, part: str) -> None:
        self.out += part
        self.move_cursor(part)

    def set_error(self, err: str) -> None:
        self.error = err

    def toggle(self, enable: bool) -> None:
        self.enable = enable

    def move_cursor(self, part: str) -> tuple[int, int]:
        return 0, 0

    def has_error(self) -> bool:
        return bool(self.error)

    def __str__(self) -> str:
        return self.out


@dataclass
class LintResult:
    """Accumulates the lines that formatting would change."""

    raw: str = ""
    filepath: str = ""
    lines: list[LineResult] = field(default_factory=list)
    error: str = ""
    enable: bool = True
    line: int = 1
    col: int = 1

    is_lint: ClassVar[bool] = True

    def push(self, line_result: LineResult) -> None:
        self.lines.append(line_result)

    def ignore(self, part: str) -> None:
        self.move_cursor(part)

    def set_error(self, err: str) -> None:
        self.error = err

    def toggle(self, enable: bool) -> None:
        self.enable = enable

    def move_cursor(self, part: str) -> tuple[int, int]:
        """Advance the cursor past *part* and return where it was."""
        lines, col, has_new_line = line_col(part)
        previous = (self.line, self.col)
        self.line += lines
        self.col = col if has_new_line else self.col + col
        return previous

    def has_error(self) -> bool:
        return bool(self.error)

    def to_dict(self) -> dict:
        return {
            "filepath": self.filepath,
            "lines": [line.to_dict() for line in self.lines],
            "error": self.error,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))

    def to_json_pretty(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)

    def to_diff(self) -> str:
        """Render every changed line as a coloured line diff."""
        path = self.filepath.replace("./", "")
        chunks = []
        for item in self.lines:
            chunks.append(f"{path}:{item.line}:{item.col}\n")
            chunks.append(_changeset(item.old, item.new))
            chunks.append("\n")
        return "".join(chunks)

    def __str__(self) -> str:
        return ""


Results = Union[FormatResult, LintResult]


def _changeset(old: str, new: str) -> str:
    old_lines = old.split("\n")
    new_lines = new.split("\n")
    out = []
    matcher = difflib.SequenceMatcher(a=old_lines, b=new_lines, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            out.extend(f"{text}\n" for text in old_lines[i1:i2])
            continue
        if tag in ("delete", "replace"):
            out.extend(f"{_RED}{text}{_RESET}\n" for text in old_lines[i1:i2])
        if tag in ("insert", "replace"):
            out.extend(f"{_GREEN}{text}{_RESET}\n" for text in new_lines[j1:j2])
    return "".join(out)


def format_or_lint(results: Results, rule_name: str, part: str) -> None:
    """Format (or lint) a text part and record the outcome in *results*.

    Comments may carry an ``autocorrect: false`` / ``autocorrect: true``
    toggle that switches correcting off or on for the parts that follow.
    """
    line, col = results.move_cursor(part)

    if rule_name == "comment":
        toggle = match_autocorrect_toggle(part)
        if toggle is Toggle.DISABLE:
            results.toggle(False)
        elif toggle is Toggle.ENABLE:
            results.toggle(True)

    if results.is_lint:
        if not results.enable:
            return
        for sub_line, line_str in enumerate(part.split("\n")):
            new_line = format_text(line_str)
            if new_line == line_str:
                continue
            trimmed = line_str.lstrip()
            leading_spaces = len(line_str) - len(trimmed)
            current_col = leading_spaces + 1 if sub_line > 0 else col
            results.push(
                LineResult(
                    line=line + sub_line,
                    col=current_col,
                    old=trimmed.rstrip(),
                    new=new_line.strip(),
                )
            )
    else:
        new_part = part
        if results.enable:
            new_part = "\n".join(format_text(line_str) for line_str in part.split("\n"))
        results.push(LineResult(line=line, col=col, old=part, new=new_part))
"""Decide whether a path is excluded by .autocorrectignore or .gitignore rules."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

AUTOCORRECTIGNORE = ".autocorrectignore"
GITIGNORE = ".gitignore"


@dataclass(frozen=True)
class _Rule:
    pattern: "re.Pattern[str]"
    whitelist: bool
    dir_only: bool


def _glob_to_regex(glob: str) -> str:
    out = []
    i = 0
    n = len(glob)
    while i < n:
        char = glob[i]
        if glob.startswith("**", i) and (i == 0 or glob[i - 1] == "/"):
            after = i + 2
            if after == n:
                out.append(".*")
                i = after
                continue
            if glob[after] == "/":
                out.append("(?:.*/)?")
                i = after + 1
                continue
        if char == "*":
            while i < n and glob[i] == "*":
                i += 1
            out.append("[^/]*")
            continue
        if char == "?":
            out.append("[^/]")
        elif char == "[":
            end = glob.find("]", i + 2 if glob[i + 1 : i + 2] in ("!", "^", "]") else i + 1)
            if end == -1:
                out.append(re.escape(char))
            else:
                body = glob[i + 1 : end]
                if body.startswith("!"):
                    body = "^" + body[1:]
                out.append("[" + body.replace("\\", "\\\\") + "]")
                i = end
        elif char == "\\" and i + 1 < n:
            i += 1
            out.append(re.escape(glob[i]))
        else:
            out.append(re.escape(char))
        i += 1
    return "".join(out)


def _parse_line(line: str) -> _Rule | None:
    if not line or line.startswith("#"):
        return None
    if not line.endswith("\\ "):
        line = line.rstrip()

    whitelist = False
    if line.startswith("!"):
        whitelist = True
        line = line[1:]
    elif line.startswith("\\!") or line.startswith("\\#"):
        line = line[1:]

    anchored = False
    if line.startswith("/"):
        anchored = True
        line = line[1:]

    dir_only = False
    if line.endswith("/"):
        dir_only = True
        line = line[:-1]

    if not line:
        return None
    if not anchored and "/" not in line and not line.startswith("**/"):
        line = "**/" + line

    return _Rule(re.compile(_glob_to_regex(line), re.DOTALL), whitelist, dir_only)


def _load_rules(path: Path) -> list[_Rule]:
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return []
    return [rule for rule in map(_parse_line, text.splitlines()) if rule is not None]


class Ignorer:
    """Matches paths against the ignore files found in a working directory."""

    def __init__(self, work_dir: str) -> None:
        self.work_dir = work_dir
        root = str(work_dir).replace(os.sep, "/").rstrip("/")
        while root.startswith("./"):
            root = root[2:]
        self._root = "" if root in ("", ".") else root
        base = Path(work_dir)
        self._rules = _load_rules(base / AUTOCORRECTIGNORE) + _load_rules(base / GITIGNORE)

    def is_ignored(self, path: str) -> bool:
        """Return whether *path*, or any of its parent directories, is ignored."""
        return self._matched(path, False) is True or self._matched(path, True) is True

    def _strip(self, path: str) -> str:
        path = path.replace(os.sep, "/")
        while path.startswith("./"):
            path = path[2:]
        if self._root and path.startswith(self._root + "/"):
            path = path[len(self._root) + 1 :]
        return path.strip("/")

    def _match_one(self, candidate: str, is_dir: bool) -> bool | None:
        for rule in reversed(self._rules):
            if rule.dir_only and not is_dir:
                continue
            if rule.pattern.fullmatch(candidate):
                return not rule.whitelist
        return None

    def _matched(self, path: str, is_dir: bool) -> bool | None:
        stripped = self._strip(path)
        if not stripped:
            return None
        parts = stripped.split("/")
        for end in range(len(parts), 0, -1):
            candidate = "/".join(parts[:end])
            matched = self._match_one(candidate, is_dir if end == len(parts) else True)
            if matched is not None:
                return matched
        return None
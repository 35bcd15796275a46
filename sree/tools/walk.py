"""Directory walking that honours .gitignore files, and glob matching of paths."""

from __future__ import annotations

import functools
import os
import re
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path


def _char_class(pattern: str, i: int, negators: str) -> tuple[str | None, int]:
    """Translate a bracket expression starting at ``pattern[i] == '['``.

    Returns the regex and the index after the closing bracket, or ``None``
    when the bracket is never closed.
    """
    n = len(pattern)
    j = i + 1
    negated = j < n and pattern[j] in negators
    if negated:
        j += 1
    start = j
    if j < n and pattern[j] == "]":
        j += 1
    while j < n and pattern[j] != "]":
        j += 1
    if j >= n:
        return None, i

    body = pattern[start:j]
    items: list[str] = []
    k = 0
    while k < len(body):
        if k + 2 < len(body) and body[k + 1] == "-":
            low, high = body[k], body[k + 2]
            if low <= high:
                items.append(f"{re.escape(low)}-{re.escape(high)}")
            k += 3
        else:
            items.append(re.escape(body[k]))
            k += 1

    if not items:
        regex = "." if negated else "(?!)"
    else:
        regex = "[" + ("^" if negated else "") + "".join(items) + "]"
    return regex, j + 1


@functools.lru_cache(maxsize=256)
def _compile_glob(pattern: str) -> re.Pattern[str]:
    parts: list[str] = []
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        if c == "*":
            j = i
            while j < n and pattern[j] == "*":
                j += 1
            run = j - i
            if run > 2:
                raise ValueError("wildcards are either regular `*` or recursive `**`")
            if run == 2:
                if i > 0 and pattern[i - 1] != "/":
                    raise ValueError("recursive wildcards must form a single path component")
                if j == n:
                    parts.append(".*")
                elif pattern[j] == "/":
                    parts.append("(?:.*/)?")
                    j += 1
                else:
                    raise ValueError("recursive wildcards must form a single path component")
            else:
                parts.append(".*")
            i = j
        elif c == "?":
            parts.append(".")
            i += 1
        elif c == "[":
            regex, i = _char_class(pattern, i, "!")
            if regex is None:
                raise ValueError("invalid range pattern")
            parts.append(regex)
        else:
            parts.append(re.escape(c))
            i += 1
    return re.compile("".join(parts), re.DOTALL)


def glob_match(pattern: str, path: str | os.PathLike[str]) -> bool:
    """Whether the whole path matches the glob pattern.

    ``*`` and ``?`` also match path separators; ``**`` must stand as a whole
    path component. Malformed patterns raise ValueError.
    """
    return _compile_glob(pattern).fullmatch(os.fspath(path)) is not None


def _gitignore_regex(pattern: str) -> str:
    parts: list[str] = []
    i, n = 0, len(pattern)
    while i < n:
        if pattern.startswith("**/", i):
            parts.append("(?:.*/)?")
            i += 3
        elif pattern.startswith("/**", i) and i + 3 == n:
            parts.append("/.*")
            i += 3
        elif pattern.startswith("**", i):
            parts.append(".*")
            i += 2
        elif pattern[i] == "*":
            parts.append("[^/]*")
            i += 1
        elif pattern[i] == "?":
            parts.append("[^/]")
            i += 1
        elif pattern[i] == "[":
            regex, end = _char_class(pattern, i, "!^")
            if regex is None:
                parts.append(re.escape("["))
                i += 1
            else:
                parts.append(regex)
                i = end
        elif pattern[i] == "\\" and i + 1 < n:
            parts.append(re.escape(pattern[i + 1]))
            i += 2
        else:
            parts.append(re.escape(pattern[i]))
            i += 1
    return "".join(parts)


@dataclass(frozen=True)
class _Rule:
    base: str
    regex: re.Pattern[str]
    negated: bool
    dir_only: bool


def _parse_rule(directory: str, line: str) -> _Rule | None:
    line = line.rstrip(" ")
    if not line or line.startswith("#"):
        return None
    negated = line.startswith("!")
    if negated:
        line = line[1:]
    dir_only = line.endswith("/")
    line = line.rstrip("/")
    if not line:
        return None
    anchored = "/" in line
    line = line.lstrip("/")
    if not anchored:
        line = "**/" + line
    return _Rule(directory, re.compile(_gitignore_regex(line), re.DOTALL), negated, dir_only)


def _load_rules(directory: str) -> list[_Rule]:
    try:
        text = Path(directory, ".gitignore").read_text(encoding="utf-8", errors="replace")
    except OSError:
        return []
    return [rule for line in text.splitlines() if (rule := _parse_rule(directory, line)) is not None]


def _ignored(rules: list[_Rule], path: str, is_dir: bool) -> bool:
    ignored = False
    for rule in rules:
        if rule.dir_only and not is_dir:
            continue
        relative = os.path.relpath(path, rule.base).replace(os.sep, "/")
        if rule.regex.fullmatch(relative):
            ignored = not rule.negated
    return ignored


def _repo_root(absolute: str) -> str | None:
    start = Path(absolute)
    for directory in (start, *start.parents):
        if (directory / ".git").exists():
            return str(directory)
    return None


def _dirs_between(repo: str, absolute: str) -> list[str]:
    """Directories from the repository root down to, but excluding, ``absolute``."""
    relative = os.path.relpath(absolute, repo)
    if relative == os.curdir:
        return []
    dirs = [repo]
    current = repo
    for part in relative.split(os.sep)[:-1]:
        current = os.path.join(current, part)
        dirs.append(current)
    return dirs


def _walk_dir(display: str, absolute: str, rules: list[_Rule], use_git: bool) -> Iterator[str]:
    if use_git:
        rules = rules + _load_rules(absolute)
    with os.scandir(absolute) as scan:
        entries = sorted(scan, key=lambda entry: entry.name)
    for entry in entries:
        is_dir = entry.is_dir(follow_symlinks=False)
        child_absolute = os.path.join(absolute, entry.name)
        if rules and _ignored(rules, child_absolute, is_dir):
            continue
        child_display = os.path.join(display, entry.name)
        yield child_display
        if is_dir:
            yield from _walk_dir(child_display, child_absolute, rules, use_git)


def walk(root: str | os.PathLike[str]) -> Iterator[str]:
    """Yield the root and every path below it, depth first, in name order.

    Hidden files are included. Inside a git work tree, paths excluded by
    .gitignore files (from the repository root down) are skipped, and
    ignored directories are not entered. Symbolic links are not followed.
    """
    root = os.fspath(root)
    is_dir = os.path.isdir(root)
    if not is_dir:
        os.stat(root)
    yield root
    if not is_dir:
        return

    absolute = os.path.abspath(root)
    repo = _repo_root(absolute)
    rules: list[_Rule] = []
    if repo is not None:
        for directory in _dirs_between(repo, absolute):
            rules.extend(_load_rules(directory))
    yield from _walk_dir(root, absolute, rules, repo is not None)
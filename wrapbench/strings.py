"""String routines: character search, dirname, shell-style matching and word counts."""

from __future__ import annotations

import re
from dataclasses import dataclass

EOS = ""
_WORD = re.compile(r"[^ \t\n\r]+")


def _terminated(s: str) -> str:
    """Cut a string at its first NUL character."""
    return s.split("\0", 1)[0]


def _at(s: str, i: int) -> str:
    return s[i] if i < len(s) else EOS


def strchr(s: str, c: str, start: int = 0) -> int | None:
    """Index of the first c in s at or after start, stopping at a NUL.

    Searching for the NUL character itself gives the index of the end.
    """
    end = s.find("\0", start)
    if end == -1:
        end = len(s)
    if c == "\0":
        return end
    index = s.find(c, start, end)
    return None if index == -1 else index


def strrchr(s: str, c: str) -> int | None:
    """Index of the last c in s before its terminating NUL, or None."""
    end = len(_terminated(s))
    if c == "\0":
        return end
    index = s.rfind(c, 0, end)
    return None if index == -1 else index


def _skip_slashes_back(path: str, i: int) -> int:
    while i > 0 and path[i - 1] == "/":
        i -= 1
    return i


def dirname(path: str | None) -> str:
    """Directory part of a path; "." when there is none."""
    if path is None:
        return "."
    path = _terminated(path)
    last = path.rfind("/")
    if last == -1:
        return "."
    if last != 0 and last == len(path) - 1:
        # Trailing slash: step back over it and look for the one before.
        runp = _skip_slashes_back(path, last)
        last = path.rfind("/", 0, runp)
        if last == -1:
            return "."
    runp = _skip_slashes_back(path, last)
    if runp == 0:
        # Keep exactly two leading slashes, otherwise the root alone.
        last = 2 if last == 1 else 1
    else:
        last = runp
    return path[:last]


def rangematch(pattern: str, test: str) -> int | None:
    """Match test against a bracket expression.

    pattern starts just after the opening '['.  Returns how many pattern
    characters the expression takes up to and including its closing ']',
    or None when test does not match or the expression is unterminated.
    """
    pattern = _terminated(pattern)
    negate = _at(pattern, 0) in ("!", "^")
    i = 1 if negate else 0
    ok = False
    c = _at(pattern, i)
    i += 1
    while c != "]":
        if c == "\\":
            c = _at(pattern, i)
            i += 1
        if c == EOS:
            return None
        if _at(pattern, i) == "-":
            c2 = _at(pattern, i + 1)
            if c2 not in (EOS, "]"):
                i += 2
                if c2 == "\\":
                    c2 = _at(pattern, i)
                    i += 1
                if c2 == EOS:
                    return None
                if c <= test <= c2:
                    ok = True
        elif c == test:
            ok = True
        c = _at(pattern, i)
        i += 1
    return None if ok == negate else i


def fnmatch(pattern: str, string: str) -> bool:
    """Shell-style match of string against pattern ('?', '*', '[...]', '\\')."""
    pattern = _terminated(pattern)
    string = _terminated(string)
    p = 0
    s = 0
    while True:
        c = _at(pattern, p)
        p += 1
        current = _at(string, s)
        if c == EOS:
            return current == EOS
        if c == "?":
            if current == EOS:
                return False
            s += 1
        elif c == "*":
            while _at(pattern, p) == "*":
                p += 1
            if _at(pattern, p) == EOS:
                return True
            rest = pattern[p:]
            return any(fnmatch(rest, string[k:]) for k in range(s, len(string)))
        elif c == "[":
            if current == EOS:
                return False
            consumed = rangematch(pattern[p:], current)
            if consumed is None:
                return False
            p += consumed
            s += 1
        else:
            if c == "\\":
                c = _at(pattern, p)
                p += 1
                if c == EOS:
                    c = "\\"
                    p -= 1
            if c != current:
                return False
            s += 1


@dataclass(frozen=True)
class WordCount:
    """Line, word and character totals of a text."""

    lines: int
    words: int
    characters: int


def word_count(text: str) -> WordCount:
    """Count line feeds, whitespace-separated words and characters."""
    return WordCount(
        lines=text.count("\n"),
        words=len(_WORD.findall(text)),
        characters=len(text),
    )
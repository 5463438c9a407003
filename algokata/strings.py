"""String puzzles: phone letters, prefixes, palindromes, patterns, brackets, zigzags."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import product

_PHONE_LETTERS = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}

_CLOSING = {")": "(", "}": "{", "]": "["}


def letter_combinations(digits: str) -> list[str]:
    """Return every word a phone keypad can spell from ``digits``, in keypad order."""
    if not digits:
        return []
    try:
        letter_sets = [_PHONE_LETTERS[digit] for digit in digits]
    except KeyError as exc:
        raise ValueError(f"digit {exc.args[0]!r} carries no letters") from None
    return ["".join(letters) for letters in product(*letter_sets)]


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string in ``strs``."""
    if not strs:
        raise ValueError("need at least one string")
    prefix = []
    for chars in zip(*strs):
        if len(set(chars)) != 1:
            break
        prefix.append(chars[0])
    return "".join(prefix)


def is_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same forwards and backwards."""
    return s == s[::-1]


def _expand(s: str, left: int, right: int) -> str:
    """Grow the window around a centre while its ends match."""
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return s[left + 1 : right]


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring; the earliest wins on ties."""
    best = ""
    for centre in range(len(s)):
        for candidate in (_expand(s, centre, centre), _expand(s, centre, centre + 1)):
            if len(candidate) > len(best):
                best = candidate
    return best


def is_match(s: str, p: str) -> bool:
    """Tell whether pattern ``p`` matches the whole of ``s``.

    ``.`` matches any single character and ``*`` repeats the character
    before it zero or more times.
    """
    if p.startswith("*"):
        raise ValueError("'*' must follow a character to repeat")
    rows, cols = len(s), len(p)
    dp = [[False] * (cols + 1) for _ in range(rows + 1)]
    dp[0][0] = True

    for j in range(2, cols + 1):
        if p[j - 1] == "*":
            dp[0][j] = dp[0][j - 2]

    for i in range(1, rows + 1):
        for j in range(1, cols + 1):
            token = p[j - 1]
            if token == s[i - 1] or token == ".":
                dp[i][j] = dp[i - 1][j - 1]
            elif token == "*":
                repeated = p[j - 2]
                dp[i][j] = dp[i][j - 2] or (
                    dp[i - 1][j] and repeated in (s[i - 1], ".")
                )
    return dp[rows][cols]


def is_valid_parentheses(s: str) -> bool:
    """Tell whether ``s`` holds only brackets, each closed in the right order."""
    stack = []
    for char in s:
        if char in "({[":
            stack.append(char)
        elif char in _CLOSING:
            if not stack or stack.pop() != _CLOSING[char]:
                return False
        else:
            return False
    return not stack


def convert_zigzag(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it row by row."""
    if num_rows < 2 or len(s) < 2:
        return s
    rows = [[] for _ in range(num_rows)]
    row = 0
    going_down = False
    for char in s:
        rows[row].append(char)
        if row in (0, num_rows - 1):
            going_down = not going_down
        row += 1 if going_down else -1
    return "".join("".join(chars) for chars in rows)


def _sample(text: str, counter: int, period: int) -> str:
    """Pick the characters at which a wrapping counter stands at zero."""
    picked = []
    for char in text:
        if counter == 0:
            picked.append(char)
        counter += 1
        if counter >= period:
            counter = 0
    return "".join(picked)


def convert_zigzag_by_stride(s: str, num_rows: int) -> str:
    """Read a zigzag by sampling each row at a fixed stride.

    The first and last rows follow the zigzag exactly. Middle rows use a
    single stride per row and never look at the final character, so for
    three or more rows the result can differ from :func:`convert_zigzag`.
    """
    if num_rows == 1:
        return s
    cycle = num_rows * 2 - 2
    parts = [_sample(s, 0, cycle)]
    for row in range(1, num_rows - 1):
        stride = num_rows * 2 - 4 * row + (2 if row % 2 == 1 else 3)
        parts.append(_sample(s[:-1], -row, stride))
    parts.append(_sample(s, 1 - num_rows, cycle))
    return "".join(parts)
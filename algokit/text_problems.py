"""String problems: backspace comparison, substrings, palindromes, brackets, numerals."""

from __future__ import annotations

from itertools import pairwise

BACKSPACE = "#"

_CLOSERS = {")": "(", "]": "[", "}": "{"}
_OPENERS = {"(": ")", "[": "]", "{": "}"}
_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def get_last(s: str) -> tuple[str, str]:
    """Return the last character kept after backspaces, and the text before it."""
    if not s:
        return "", ""
    backspaces = 0
    for index, char in reversed(list(enumerate(s))):
        if char == BACKSPACE:
            backspaces += 1
            continue
        if index < backspaces:
            return "", ""
        if backspaces:
            backspaces -= 1
        else:
            return char, s[:index]
    return "", ""


def backspace_compare(s: str, t: str) -> bool:
    """Tell whether two texts are equal once ``#`` backspaces are applied."""
    s_rest, t_rest = s, t
    while True:
        s_last, s_rest = get_last(s_rest)
        t_last, t_rest = get_last(t_rest)
        if s_last != t_last:
            return False
        if not s_rest or not t_rest:
            break
    return s_rest == t_rest


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without a repeated character."""
    length = 0
    left = 0
    seen: dict[str, int] = {}
    for index, char in enumerate(s):
        if char in seen and seen[char] >= left:
            left = seen[char] + 1
        seen[char] = index
        if index - left >= length:
            length += 1
    return length


def is_simple_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways."""
    return s == s[::-1]


def valid_palindrome(s: str) -> bool:
    """Tell whether ``s`` is a palindrome after deleting at most one character."""
    if len(s) <= 2:
        return True
    left, right = 0, len(s) - 1
    while left < right:
        if s[left] != s[right]:
            return is_simple_palindrome(s[left:right]) or is_simple_palindrome(
                s[left + 1 : right + 1]
            )
        left += 1
        right -= 1
    return True


def is_valid_brackets(s: str) -> bool:
    """Tell whether every closing bracket closes the latest open one.

    Characters that are not closing brackets are all kept on the stack.
    """
    stack: list[str] = []
    for char in s:
        if char in _CLOSERS:
            if stack and stack[-1] == _CLOSERS[char]:
                stack.pop()
            else:
                return False
        else:
            stack.append(char)
    return not stack


def is_valid_parentheses(s: str) -> bool:
    """Tell whether ``s`` is a balanced string of ``()[]{}``; anything else fails."""
    if len(s) == 1:
        return False
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
        elif not stack or _OPENERS[stack[-1]] != char:
            return False
        else:
            stack.pop()
    return not stack


def min_remove_to_make_valid(s: str) -> str:
    """Drop the fewest parentheses so the rest are balanced."""
    chars = list(s)
    open_positions: list[int] = []
    for index, char in enumerate(chars):
        if char == "(":
            open_positions.append(index)
        elif char == ")":
            if open_positions:
                open_positions.pop()
            else:
                chars[index] = ""
    for index in open_positions:
        chars[index] = ""
    return "".join(chars)


def roman_to_int(s: str) -> int:
    """Return the value of a Roman numeral."""
    if not s:
        raise ValueError("empty Roman numeral")
    try:
        values = [_ROMAN[char] for char in s]
    except KeyError as error:
        raise ValueError(f"invalid Roman digit {error.args[0]!r}") from None
    total = values[-1]
    for current, following in pairwise(values):
        total += -current if current < following else current
    return total
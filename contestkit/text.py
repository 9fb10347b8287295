"""Short string problems: echoes, reversals, searches and counts."""

from __future__ import annotations

import re

_VOWELS = frozenset("aeiouAEIOU")
_ATOI = re.compile(r"\s*([+-]?\d+)")


def _atoi(token: str) -> int:
    """Parse a leading integer as the C library would, or 0 if none."""
    match = _ATOI.match(token)
    return int(match.group(1)) if match else 0


def autori(name: str) -> str:
    """Return the short form of a hyphenated list of author surnames."""
    return "".join(part[0] for part in name.split("-") if part)


def count_the_vowels(line: str) -> int:
    """Return how many vowels the line holds."""
    return sum(1 for ch in line if ch in _VOWELS)


def digit_swap(digits: str) -> str:
    """Return the first two characters in swapped order."""
    if len(digits) < 2:
        raise ValueError("need at least two characters")
    return digits[1] + digits[0]


def echo_echo_echo(word: str) -> str:
    """Return the word three times, separated by spaces."""
    return " ".join([word] * 3)


def finding_an_a(word: str) -> str:
    """Return the word from its first 'a' on, or an empty string."""
    index = word.find("a")
    return word[index:] if index >= 0 else ""


def hello() -> str:
    """Return the greeting."""
    return "Hello World!"


def hradgreining(text: str) -> str:
    """Return the diagnosis for a genetic sample."""
    if "COV" in text:
        return "Veikur!"
    return "Ekki veikur!"


def kvedja(name: str) -> str:
    """Return a sign-off letter from ``name``."""
    return f"Kvedja,\n{name}"


def lubbi_laerir(word: str) -> str:
    """Return the first letter of the word."""
    if not word:
        raise ValueError("empty word")
    return word[0]


def ovissa(text: str) -> int:
    """Return the length of the text."""
    return len(text)


def reduplikation(word: str, times: int) -> str:
    """Return the word repeated ``times`` times."""
    return word * times


def the_last_problem(name: str) -> str:
    """Return the farewell message for ``name``."""
    return f"Thank you, {name}, and farewell!"


def vidsnuningur(text: str) -> str:
    """Return the text reversed."""
    return text[::-1]


def hissing_microphone(word: str) -> str:
    """Return 'hiss' if the word holds two consecutive s, else 'no hiss'."""
    if "ss" in word:
        return "hiss"
    return "no hiss"


def help_a_phd(problem: str) -> int | None:
    """Return the sum of a ``a+b`` problem, or None for the unsolvable 'P=NP'."""
    if problem == "P=NP":
        return None
    return sum(_atoi(token) for token in problem.split("+") if token)


def digits(x0: str) -> int:
    """Return the smallest i with x_i == x_{i-1}, where x_{i+1} is the digit count of x_i."""
    if len(x0) > 9:
        return 4
    if len(x0) > 1:
        return 3
    if x0 == "1":
        return 1
    return 2


def filip(a: str, b: str) -> str:
    """Return the larger of two three-digit numbers as read backwards."""
    for number in (a, b):
        if len(number) != 3:
            raise ValueError(f"expected a three-digit number, got {number!r}")
    return max(a[::-1], b[::-1])
"""Problems that scan a sequence or grid of values."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Sequence
from itertools import cycle, pairwise

MAKES_SENSE = "makes sense"
FISHY = "something is fishy"
LOST = "Lost"
OUT = "Out"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_MOVES = {"E": (0, 1), "W": (0, -1), "N": (-1, 0), "S": (1, 0)}


def _leading_int(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def artichoke(p: int, a: int, b: int, c: int, d: int, n: int) -> float:
    """Return the largest drop in stock price over the first ``n`` days."""
    if n < 1:
        raise ValueError("need at least one day")
    prices = [p * (math.sin(a * k + b) + math.cos(c * k + d) + 2) for k in range(1, n + 1)]
    largest = 0.0
    lowest_after = prices[-1]
    for price in reversed(prices[:-1]):
        largest = max(largest, price - lowest_after)
        lowest_after = min(lowest_after, price)
    return largest


def baby_bites(words: Iterable[str]) -> str:
    """Return whether the baby's counting makes sense."""
    for expected, word in enumerate(words, start=1):
        if word.startswith("0"):
            return FISHY
        value = _leading_int(word)
        if value != 0 and value != expected:
            return FISHY
    return MAKES_SENSE


def early_winter(threshold: int, depths: Iterable[int]) -> str:
    """Return how many years back snow came this early, given past depths newest first."""
    for years, depth in enumerate(depths):
        if depth <= threshold:
            return f"It hadn't snowed this early in {years} years!"
    return "It had never snowed this early!"


def license_to_launch(junk: Sequence[int]) -> int:
    """Return the first day with the least space junk."""
    if not junk:
        raise ValueError("no days given")
    return min(range(len(junk)), key=junk.__getitem__)


def lost_lineup(distances: Sequence[int]) -> list[int]:
    """Return the queue order given how many stand between person 1 and each of 2..n."""
    lineup: list[int | None] = [None] * len(distances)
    for person, between in enumerate(distances, start=2):
        if not 0 <= between < len(distances) or lineup[between] is not None:
            raise ValueError(f"inconsistent distance {between} for person {person}")
        lineup[between] = person
    return [1, *lineup]


def odd_gnome(gnomes: Sequence[int]) -> int:
    """Return the 1-based position of the king, the gnome that breaks the run."""
    for position, (previous, current) in enumerate(pairwise(gnomes), start=2):
        if current != previous + 1:
            return position
    return 1


def speed_limit(entries: Iterable[tuple[int, int]]) -> int:
    """Return the miles driven from (speed, elapsed hours) readings."""
    miles = 0
    last = 0
    for speed, elapsed in entries:
        miles += speed * (elapsed - last)
        last = elapsed
    return miles


def statistics(values: Sequence[int]) -> tuple[int, int, int]:
    """Return the minimum, maximum and range of the values."""
    if not values:
        raise ValueError("no values given")
    low, high = min(values), max(values)
    return low, high, high - low


def thanos(p: int, r: int, f: int) -> int:
    """Return the years until population ``p`` growing by factor ``r`` exceeds ``f``."""
    if p > f:
        return 0
    if p <= 0 or r <= 1:
        raise ValueError("population never exceeds the food supply")
    years = 0
    while p <= f:
        p *= r
        years += 1
    return years


def zanzibar(counts: Iterable[int]) -> int:
    """Return the fewest turtles that must have been imported over the years."""
    return sum(
        current - 2 * previous
        for previous, current in pairwise(counts)
        if current > 2 * previous
    )


def star_arrangements(stars: int) -> list[tuple[int, int]]:
    """Return the visually appealing (first row, second row) flag patterns."""
    patterns = []
    for first in range(2, stars // 2 + 2):
        second = first - 1
        total = first
        for row in cycle((second, first)):
            total += row
            if total == stars:
                patterns.append((first, second))
                break
            if total > stars:
                break
        if stars % first == 0:
            patterns.append((first, first))
    return patterns


def treasure_hunt(grid: Sequence[str]) -> int | str:
    """Return the moves to reach the treasure, or 'Lost' or 'Out'."""
    row = col = moves = 0
    visited: set[tuple[int, int]] = set()
    while 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        cell = grid[row][col]
        if cell == "T":
            return moves
        if cell not in _MOVES or (row, col) in visited:
            return LOST
        visited.add((row, col))
        d_row, d_col = _MOVES[cell]
        row += d_row
        col += d_col
        moves += 1
    return OUT


def umferd(rows: Sequence[str]) -> float:
    """Return the fraction of road cells that are empty ('.')."""
    cells = sum(len(row) for row in rows)
    if cells == 0:
        raise ValueError("empty road")
    return sum(row.count(".") for row in rows) / cells
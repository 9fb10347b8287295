"""Problems that pick an answer from a handful of cases."""

from __future__ import annotations

from collections.abc import Iterable

PLAYER_ONE_WINS = "Player 1 wins."
PLAYER_TWO_WINS = "Player 2 wins."
TIE = "Tie."
_MIA = 1000
_DIAL = 40
_HOLIDAYS = frozenset({("OCT", 31), ("DEC", 25)})


def blandad_best(count: int, first: str) -> str:
    """Return the dish for ``count`` meats, the first of which is ``first``."""
    if count > 1:
        return "blandad best"
    return "kjuklingur" if first.startswith("k") else "nautakjot"


def fyi(number: int) -> int:
    """Return 1 if the seven-digit number is a directory-information number, else 0."""
    prefix = int(number / 10000)
    if prefix == 555:
        return 1
    return 0


def is_it_halloween(month: str, day: int) -> str:
    """Return 'yup' on Oct 31 and Dec 25, else 'nope'."""
    if (month, day) in _HOLIDAYS:
        return "yup"
    return "nope"


def judging_moose(left: int, right: int) -> str:
    """Return the description of a moose with the given tine counts."""
    if left == 0 and right == 0:
        return "Not a moose"
    if left == right:
        return f"Even {left + right}"
    return f"Odd {2 * max(left, right)}"


def knight_packing(n: int) -> str:
    """Return which player wins the knight-packing game on an n-by-n board."""
    if n % 2:
        return "first"
    return "second"


def millifaersla(a: int, b: int, c: int) -> str:
    """Return the name of the bank with the lowest fee."""
    if a < b and a < c:
        return "Monnei"
    if b < c:
        return "Fjee"
    return "Dolladollabilljoll"


def moscow_dream(a: int, b: int, c: int, n: int) -> str:
    """Return 'YES' if ``n`` problems can include at least one of each difficulty."""
    ok = a > 0 and b > 0 and c > 0 and a + b + c >= n and n > 2
    return "YES" if ok else "NO"


def one_chicken(people: int, pieces: int) -> str:
    """Return the message about how the chicken works out."""
    shortfall = people - pieces
    if shortfall > 0:
        plural = "" if shortfall == 1 else "s"
        return f"Dr. Chaz needs {shortfall} more piece{plural} of chicken!"
    spare = -shortfall
    plural = "" if spare == 1 else "s"
    return f"Dr. Chaz will have {spare} piece{plural} of chicken left over!"


def provinces_and_gold(gold: int, silver: int, copper: int) -> str:
    """Return the best victory and treasure cards affordable with the hand."""
    buying_power = gold * 3 + silver * 2 + copper
    if buying_power > 7:
        victory = "Province"
    elif buying_power > 4:
        victory = "Duchy"
    elif buying_power > 1:
        victory = "Estate"
    else:
        victory = None
    if buying_power > 5:
        treasure = "Gold"
    elif buying_power > 2:
        treasure = "Silver"
    else:
        treasure = "Copper"
    return f"{victory} or {treasure}" if victory else treasure


def quadrant(x: int, y: int) -> int:
    """Return the quadrant of the point."""
    if x > 0 and y > 0:
        return 1
    if x < 0 < y:
        return 2
    if x < 0 and y < 0:
        return 3
    return 4


def sort_two_numbers(a: int, b: int) -> tuple[int, int]:
    """Return the two numbers in ascending order."""
    return (a, b) if b > a else (b, a)


def two_stones(n: int) -> str:
    """Return the winner of the two-stones game with ``n`` stones."""
    if n % 2:
        return "Alice"
    return "Bob"


def which_is_greater(a: int, b: int) -> int:
    """Return 1 if ``a`` is greater than ``b``, else 0."""
    if a > b:
        return 1
    return 0


def eligibility(name: str, studies_year: int, birth_year: int, courses: int) -> str:
    """Return the eligibility line for a contestant."""
    if studies_year >= 2010 or birth_year >= 1991:
        return f"{name} eligible"
    if courses > 40:
        return f"{name} ineligible"
    return f"{name} coach petitions"


def carrots(descriptions: Iterable[str], solved: int) -> int:
    """Return the carrots earned: one per solved problem, whatever the contestants say."""
    if solved < 0:
        raise ValueError("the number of solved problems cannot be negative")
    for description in descriptions:
        if not isinstance(description, str):
            raise TypeError(f"expected a description string, got {description!r}")
    return solved


def nasty_hacks(revenue: int, with_ad: int, cost: int) -> str:
    """Return whether the advertising pays off."""
    gain = with_ad - cost
    if gain > revenue:
        return "advertise"
    if gain < revenue:
        return "do not advertise"
    return "does not matter"


def number_fun(a: int, b: int, c: int) -> str:
    """Return 'Possible' if one arithmetic operation on ``a`` and ``b`` gives ``c``."""
    possible = (
        a + b == c
        or a - b == c
        or b - a == c
        or (b != 0 and a == b * c)
        or (a != 0 and b == a * c)
        or a * b == c
    )
    return "Possible" if possible else "Impossible"


def oddities(n: int) -> str:
    """Return whether ``n`` is even or odd."""
    return f"{n} is even" if n % 2 == 0 else f"{n} is odd"


def left_beehind(sweet: int, sour: int) -> str:
    """Return the verdict for a jar count of sweet and sour honey."""
    if sweet + sour == 13:
        return "Never speak again."
    if sweet > sour:
        return "To the convention."
    if sour > sweet:
        return "Left beehind."
    return "Undecided."


def mia_score(a: int, b: int) -> int:
    """Return the rank of a throw of two dice; higher beats lower."""
    if a == b:
        return a * 100 + b
    if {a, b} == {1, 2}:
        return _MIA
    high, low = max(a, b), min(a, b)
    return high * 10 + low


def mia(a: int, b: int, c: int, d: int) -> str:
    """Return the outcome of player 1 throwing (a, b) and player 2 throwing (c, d)."""
    first, second = mia_score(a, b), mia_score(c, d)
    if first > second:
        return PLAYER_ONE_WINS
    if second > first:
        return PLAYER_TWO_WINS
    return TIE


def fizzbuzz(x: int, y: int, n: int) -> list[str]:
    """Return the fizzbuzz lines from 1 to ``n`` for divisors ``x`` and ``y``."""

    def line(i: int) -> str:
        fizz, buzz = i % x == 0, i % y == 0
        if fizz and buzz:
            return "FizzBuzz"
        if fizz:
            return "Fizz"
        if buzz:
            return "Buzz"
        return str(i)

    return [line(i) for i in range(1, n + 1)]


def time_loop(n: int) -> list[str]:
    """Return the ``n`` numbered incantations."""
    return [f"{i} Abracadabra" for i in range(1, n + 1)]


def combination_lock(a: int, b: int, c: int, d: int) -> int:
    """Return the degrees turned to open the lock at ``a`` with combination b, c, d."""
    ticks = 3 * _DIAL
    ticks += (_DIAL + a - b) % _DIAL
    ticks += (_DIAL - b + c) % _DIAL
    ticks += (_DIAL + c - d) % _DIAL
    return ticks * 9
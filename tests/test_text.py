import pytest

from contestkit.text import (
    autori,
    count_the_vowels,
    digit_swap,
    digits,
    echo_echo_echo,
    filip,
    finding_an_a,
    hello,
    help_a_phd,
    hissing_microphone,
    hradgreining,
    kvedja,
    lubbi_laerir,
    ovissa,
    reduplikation,
    the_last_problem,
    vidsnuningur,
)


def test_autori_worked_example():
    assert autori("Knuth-Morris-Pratt") == "KMP"


def test_autori_single_name():
    assert autori("Mirko") == "M"
    assert len(autori("A-B-C-D")) == 4


def test_count_the_vowels():
    assert count_the_vowels("") == 0
    assert count_the_vowels("bcdfg xyz") == 0
    assert count_the_vowels("aeiouAEIOU") == len("aeiouAEIOU")


@pytest.mark.parametrize("line", ["Hello there", "Programming is FUN", "rhythm"])
def test_count_the_vowels_doubles(line):
    assert count_the_vowels(line + line) == 2 * count_the_vowels(line)
    assert count_the_vowels(line.upper()) == count_the_vowels(line)


@pytest.mark.parametrize("pair", ["12", "90", "55"])
def test_digit_swap_round_trip(pair):
    assert digit_swap(digit_swap(pair)) == pair
    assert digit_swap(pair) == pair[::-1]


def test_digit_swap_too_short():
    with pytest.raises(ValueError):
        digit_swap("7")


@pytest.mark.parametrize("word", ["Hello", "a", "echo"])
def test_echo_echo_echo(word):
    assert echo_echo_echo(word).split(" ") == [word, word, word]


def test_finding_an_a():
    assert finding_an_a("xyzabca") == "abca"
    assert finding_an_a("qwerty") == ""
    assert finding_an_a("a") == "a"


def test_hello():
    assert hello() == "Hello World!"


def test_hradgreining():
    assert hradgreining("AACOVTT") == "Veikur!"
    assert hradgreining("AACOTTV") == "Ekki veikur!"


@pytest.mark.parametrize("name", ["Jon", "Gudrun"])
def test_kvedja(name):
    assert kvedja(name) == "Kvedja,\n" + name


def test_lubbi_laerir():
    assert lubbi_laerir("bein") == "b"
    with pytest.raises(ValueError):
        lubbi_laerir("")


@pytest.mark.parametrize("text", ["", "x", "abcdefghij"])
def test_ovissa(text):
    assert ovissa(text) == len(text)
    assert ovissa(text * 2) == 2 * ovissa(text)


@pytest.mark.parametrize("word,times", [("bla", 3), ("x", 1), ("abc", 0)])
def test_reduplikation(word, times):
    result = reduplikation(word, times)
    assert len(result) == len(word) * times
    assert result.count(word) == times


def test_the_last_problem():
    message = the_last_problem("Alice Bob")
    assert message == "Thank you, Alice Bob, and farewell!"


@pytest.mark.parametrize("text", ["", "abc", "racecar", "hello"])
def test_vidsnuningur_round_trip(text):
    assert vidsnuningur(vidsnuningur(text)) == text
    assert vidsnuningur(text + "z")[0] == "z"


@pytest.mark.parametrize(
    "word,expected",
    [("amiss", "hiss"), ("ssss", "hiss"), ("octopuses", "no hiss"), ("s", "no hiss"), ("", "no hiss")],
)
def test_hissing_microphone(word, expected):
    assert hissing_microphone(word) == expected


def test_help_a_phd_skipped():
    assert help_a_phd("P=NP") is None


@pytest.mark.parametrize("a,b", [(2, 2), (1, 999), (0, 0)])
def test_help_a_phd_sums(a, b):
    assert help_a_phd(f"{a}+{b}") == a + b
    assert help_a_phd(f"{a}") == a


@pytest.mark.parametrize(
    "x0,expected",
    [("1", 1), ("0", 2), ("7", 2), ("42", 3), ("123456789", 3), ("1234567890", 4)],
)
def test_digits(x0, expected):
    assert digits(x0) == expected


def test_filip_example():
    assert filip("734", "893") == "437"


@pytest.mark.parametrize("a,b", [("221", "231"), ("839", "237"), ("555", "555")])
def test_filip_symmetric_and_one_of_inputs(a, b):
    result = filip(a, b)
    assert result == filip(b, a)
    assert result in (a[::-1], b[::-1])


def test_filip_rejects_bad_length():
    with pytest.raises(ValueError):
        filip("12", "345")
# contestkit

A collection of solutions to short programming-contest problems. Each problem is
a plain Python function that takes ordinary values and returns its answer.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

The solutions are grouped by the kind of work they do:

- `contestkit.text`: string problems, for example `autori`,
  `count_the_vowels`, `echo_echo_echo`, `vidsnuningur`, `hissing_microphone`,
  `help_a_phd`, `digits`, `filip`.
- `contestkit.decisions`: problems that pick one of a few answers, for example
  `judging_moose`, `one_chicken`, `provinces_and_gold`, `number_fun`, `mia`,
  `fizzbuzz`, `time_loop`, `combination_lock`.
- `contestkit.sequences`: problems that walk through a list or grid, for example
  `artichoke`, `baby_bites`, `odd_gnome`, `speed_limit`, `statistics`,
  `star_arrangements`, `treasure_hunt`, `umferd`.

## Examples

```python
from contestkit.text import autori, help_a_phd
from contestkit.decisions import judging_moose, fizzbuzz, mia
from contestkit.sequences import statistics, treasure_hunt

autori("Knuth-Morris-Pratt")     # "KMP"
help_a_phd("2+2")                # 4
help_a_phd("P=NP")               # None
judging_moose(3, 3)              # "Even 6"
fizzbuzz(2, 3, 7)                # ["1", "Fizz", "Buzz", "Fizz", "5", "FizzBuzz", "7"]
mia(1, 2, 6, 6)                  # "Player 1 wins."
statistics([2, 9, 4])            # (2, 9, 7)
treasure_hunt(["ES", "TW"])      # 3
```

Functions that take several cases at once in a contest take one case per call
here; loop over your inputs and call the function for each. Invalid input that
has no answer, such as an empty list where at least one value is needed, raises
`ValueError`.

## What the package does not do

There is no command-line tool: nothing reads a problem's input from standard
input or prints its output. Parse the input yourself and call the functions.
The package also has no module of one-line arithmetic formulas; only the text,
decision and sequence problems listed above are included.
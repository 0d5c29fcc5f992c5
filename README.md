# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
small instruction set, and prints the instructions it used, one per line.

The instructions are:

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both up by one (top goes to the bottom) |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both down by one (bottom goes to the top) |

The first number given is the top of stack `a`; the goal is to leave `a`
holding every number in increasing order from the top, with `b` empty.

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 1
```

prints

```
sa
rra
```

The same command is available as `python -m pushswap.cli`.

Numbers may be given as separate arguments or as space-separated words in
one argument (`push-swap "4 67 3 87 23"`). Each number must be a decimal
integer that fits in 32 bits, with an optional `+` or `-` sign and no
other characters.

- With no arguments nothing is printed and the exit status is 0.
- Input that is already sorted prints nothing.
- Two values are sorted with `sa`, three with at most two instructions;
  larger inputs push all but three values to `b`, sort those three, and
  bring the rest back one at a time, always choosing the value that needs
  the fewest rotations, then rotate `a` so its smallest value is on top.
- Invalid input, arguments holding no number at all, or duplicate numbers
  print `Error` to standard error and exit with status 1.

## Library use

```python
from pushswap.sorting import push_swap
from pushswap.stack import Stacks, is_sorted

moves = push_swap([5, 1, 4, 2, 3])   # a list of Operation members

stacks = Stacks([5, 1, 4, 2, 3])
for move in moves:
    stacks.apply(move)
assert is_sorted(stacks.a)
assert not stacks.b
```

`Operation` is a string enum whose values are the instruction names, so
`str(move)` gives `"sa"`, `"rra"` and so on, and `Stacks.apply` accepts
either a member or a name (an unknown name raises `ValueError`). Every
`Stacks` keeps the instructions it performed in `stacks.operations`;
single-stack instructions that change nothing are not recorded.

The steps of the algorithm are in `pushswap.sorting` as well:
`sort_three`, `sort_large`, `calculate_costs` (returning one `Move` per
value of `b`), `execute_cheapest_move`, `final_rotation`, `find_target_pos`
and `assign_index`.

Parsing is available on its own:

```python
from pushswap.parsing import parse_arguments, has_duplicates, ParseError

values = parse_arguments(["3 1", "2"])   # [3, 1, 2]
has_duplicates(values)                   # False
```

`parse_arguments` raises `ParseError` for a word that is not a valid
32-bit integer, and when no number is given at all.

## Helper modules

The package also holds small general-purpose helpers:

- `pushswap.printf`: `sprintf(fmt, *args)` and `printf(fmt, *args)` for
  the conversions `c s d i u p x X %` with the flags `- + space # 0`,
  width and precision; a format ending in a lone `%` or a missing
  argument raises `PrintfError`. `pushswap.formatspec.parse_spec` and
  the `format_*` functions of `pushswap.conversions` render a single
  directive.
- `pushswap.lines`: `LineReader` and `read_lines(stream, buffer_size)`
  yield the lines of a text or binary stream, each with its newline,
  reading a fixed number of units at a time (42 by default).
- `pushswap.lists`: `LinkedList`, a singly linked list of `Node`s with
  `add_front`, `add_back`, `last`, `for_each`, `map` and `clear`.
- `pushswap.strings`, `pushswap.strsearch`, `pushswap.numbers`,
  `pushswap.chars`, `pushswap.memory` and `pushswap.output`: string
  building and searching with C string semantics, 32-bit integer text,
  ASCII character tests, byte-buffer operations and writing to a stream.

## What it does not do

There is no checker command: the package does not read instructions from
standard input to verify them. Replaying a list of instructions is done
in code, with `Stacks.apply` as shown above.

## Tests

```
pip install ".[test]"
pytest
```
# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and prints
the moves it performs, one per line. The moves are:

| Move  | Effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `ss`  | `sa` then `sb`, then `ss` itself is announced |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` up (top goes to the bottom)        |
| `rb`  | rotate `b` up                                 |
| `rr`  | `ra` then `rb`, then `rr` itself is announced |
| `rra` | rotate `a` down (bottom goes to the top)      |
| `rrb` | rotate `b` down                               |
| `rrr` | `rra` then `rrb`, then `rrr` is announced     |

A single-stack move that has nothing to act on (swapping or rotating a stack
with fewer than two elements, pushing from an empty stack) does nothing and
prints nothing. The combined moves `ss`, `rr` and `rrr` run their two parts,
each of which prints its own name if it changed something, and then always
print their own name. The sorting routines never use the combined moves.

## Installation

```
pip install .
```

## Command line

```
push_swap 3 2 1
```

prints

```
sa
rra
```

The same command is available as `python -m pushswap.cli`.

Numbers can be given as separate arguments, as one quoted argument separated
by spaces, or as a mix of both:

```
push_swap "4 -7 12" 0 9
```

Stacks of two to five numbers are handled by fixed small-case routines;
larger inputs use a chunked "k-sort" whose window is about 1.4 times the
square root of the count. An input that is already sorted, or an empty
command line, prints nothing and exits with status 0.

A word that is not an optionally signed run of digits, a value outside the
32-bit signed integer range, a duplicate, or an argument holding no numbers
(such as `""`) makes the command print `Error` to standard error and exit
with status 1.

## Library use

```python
from pushswap.sorting import solve

moves = solve([3, 2, 1])
print(moves)  # ['sa', 'rra']
```

`solve` prints nothing; it raises `ValueError` if a value is repeated.

Other pieces:

- `pushswap.parsing.parse_args(args)` turns command-line style strings into a
  list of integers, raising `pushswap.parsing.ParseError` (a `ValueError`) on
  bad input. `atol`, `is_valid_number` and `is_int_range` are the checks it
  uses.
- `pushswap.stacks.PushSwap(values, output)` holds the stacks `a` and `b`
  (`pushswap.stacks.Stack` objects of `Node(value, index)`) and exposes every
  move as a method (`sa`, `pb`, `rra`, ...). Each move that is carried out is
  written to `output` (standard output when it is `None`) and appended to the
  `moves` list.
- `pushswap.indexing.rank(values)` gives each value its position in sorted
  order; `assign_index(stack)` stores those ranks on a stack's nodes.
- `pushswap.sorting` holds the individual strategies: `sort_two`,
  `sort_three`, `sort_four`, `sort_five`, `k_sort` and `sort_controller`,
  which picks one by the size of `a`. They work on node ranks, so call
  `assign_index(ps.a)` first.
- `pushswap.linereader.LineReader(stream, buffer_size=32)` reads a text or
  binary stream line by line, newline kept, through a fixed-size read buffer;
  `readline()` returns `None` at the end and the reader is also iterable.
- `pushswap.output` has `format_string` and `printf` (conversions `%c %s %p
  %d %i %u %x %X`) plus `putchar`, `putstr`, `putendl` and `putnbr`.
- `pushswap.charclass`, `pushswap.memory` and `pushswap.textutil` hold small
  ASCII, byte-buffer and string helpers (`atoi`, `memmove`, `split`,
  `strlcat` and the like).

## What it does not do

There is no checker: nothing reads a list of moves from standard input and
verifies that they sort the numbers. The command only produces moves.

## Tests

```
pip install .[test]
pytest
```
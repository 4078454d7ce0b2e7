# pushswap

`pushswap` models two integer stacks, `a` and `b`, driven by a small
instruction set: `sa`, `sb`, `ss`, `pa`, `pb`, `ra`, `rb`, `rr`, `rra`,
`rrb` and `rrr`. Each instruction that changes a stack writes its name on
its own line, so a run of the machine leaves behind the list of moves it
made. Stacks of three to five elements can be sorted with these moves.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Command line

```
pushswap 3 -1 42 7
```

Every argument must be an optional `+` or `-` followed only by digits, and
no two arguments may denote the same value (`1`, `+1` and `01` count as the
same). Values are read as 32-bit signed integers; digits beyond that range
wrap around rather than being rejected. The program loads the values into
stack `a` in the order given, ranks each by how many others are smaller, and
prints one line per node:

```
value: 3, rank: 1
value: -1, rank: 0
value: 42, rank: 3
value: 7, rank: 2
```

When there are no arguments, a malformed one, or a duplicate, the program
prints `need number`, `wrong input` or `Error: duplicate values` on standard
output and exits with a non-zero status (the length of that message).

## Library use

```python
from pushswap.stacks import StackMachine
from pushswap.sorting import sort_five

machine = StackMachine([5, 1, 4, 2, 3])
sort_five(machine)
```

This prints the moves `ra`, `pb`, `ra`, `pb`, `sa`, `ra`, `pa`, `pa`, one per
line, and leaves `machine.a` holding the nodes in ascending order. Pass
`stream=` to `StackMachine` to send the moves to another text stream.

Each instruction method returns `True` if it changed a stack and `False`
(writing nothing) if there were too few elements. The combined moves `ss`,
`rr` and `rrr` always write their name.

### Modules

- `pushswap.stacks`: `Node` (a `value` and a `rank`), `assign_ranks` and
  `StackMachine`, whose stacks `a` and `b` are deques with the top at index 0.
- `pushswap.sorting`: `find_min`, `move_min_to_top`, `sort_three` and
  `sort_five`.
- `pushswap.parsing`: `check_input` and `has_duplicates` for validating
  arguments.
- `pushswap.cli`: `format_node` and the `main` entry point; `main(argv)`
  takes an argument list and returns the exit status.
- `pushswap.formatting`: `render`, `printf`, `format_hex` and
  `format_pointer`, a small formatter for `%c %s %d %i %u %x %X %p %%`.
- `pushswap.numbers`: `atoi`, `is_number`, `in_int_range` and `itoa`.
- `pushswap.ctype`: ASCII classification and case conversion (`is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower`, `to_upper`).
- `pushswap.strings`: string helpers with NUL-terminated semantics
  (`strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strncmp`,
  `strnstr`, `strdup`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`,
  `striteri`).
- `pushswap.memory`: byte-buffer helpers (`bzero`, `calloc`, `memset`,
  `memcpy`, `memmove`, `memchr`, `memcmp`).
- `pushswap.chain`: `Link` and `Chain`, a singly linked list.

## What it does not do

The `pushswap` command validates and ranks its arguments; it does not sort
them or print a list of moves. Sorting is available only from the library,
and only for stacks of three to five elements (`sort_three`, `sort_five`);
there is no algorithm for larger stacks. There is no checker that reads
moves back and verifies a result.
"""Command line entry point: validate the numbers and show their ranks."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .formatting import printf, render
from .numbers import atoi
from .parsing import check_input, has_duplicates
from .stacks import Node, StackMachine


def format_node(node: Node) -> str:
    """One line describing a node's value and rank."""
    return render("value: %d, rank: %d\n", node.value, node.rank)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read numbers from the arguments and print each with its rank.

    On bad input a message is printed and the number of characters it
    took is returned as the exit status; success returns 0.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return printf("need number\n")
    if not all(check_input(text) for text in args):
        return printf("wrong input\n")
    if has_duplicates(args):
        return printf("Error: duplicate values\n")
    machine = StackMachine(atoi(text) for text in args)
    for node in machine.a:
        printf("%s", format_node(node))
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Sorting small stacks with the stack machine's instructions."""

from __future__ import annotations

from typing import Iterable

from .stacks import Node, StackMachine


def find_min(stack: Iterable[Node]) -> Node:
    """The node of lowest rank, the first one met if several tie."""
    lowest = None
    for node in stack:
        if lowest is None or node.rank < lowest.rank:
            lowest = node
    if lowest is None:
        raise ValueError("cannot find the minimum of an empty stack")
    return lowest


def move_min_to_top(machine: StackMachine, node: Node) -> None:
    """Rotate stack a until node is on top, taking the shorter direction.

    A node in the upper half, middle included, is brought up with ``ra``;
    one lower down is brought up with ``rra``.
    """
    position = next(
        (index for index, member in enumerate(machine.a) if member is node), None
    )
    if position is None:
        raise ValueError("node is not on stack a")
    rotate = machine.ra if position <= len(machine.a) // 2 else machine.rra
    while machine.a[0] is not node:
        rotate()


def sort_three(machine: StackMachine) -> None:
    """Put the top three elements of stack a in ascending order of rank."""
    if len(machine.a) < 3:
        raise ValueError("stack a needs at least three elements")
    first, second, third = (machine.a[index].rank for index in range(3))
    if first < second < third:
        return
    if first > second and second < third and first < third:
        machine.sa()
    elif first > second > third:
        machine.sa()
        machine.rra()
    elif first > second and second < third and first > third:
        machine.ra()
    elif first < second and second > third and first < third:
        machine.sa()
        machine.ra()
    elif first < second and second > third and first > third:
        machine.rra()


def sort_five(machine: StackMachine) -> None:
    """Sort a stack of three to five elements held in stack a.

    The lowest elements are pushed to b until three remain, those three are
    sorted, and b is pushed back on top.
    """
    if len(machine.a) < 3:
        raise ValueError("stack a needs at least three elements")
    while len(machine.a) > 3:
        move_min_to_top(machine, find_min(machine.a))
        machine.pb()
    sort_three(machine)
    if len(machine.b) >= 2 and machine.b[0].rank < machine.b[1].rank:
        machine.sb()
    while machine.b:
        machine.pa()
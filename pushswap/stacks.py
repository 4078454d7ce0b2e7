"""The two stacks and the instructions that rearrange them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, Optional, TextIO

from .formatting import printf


@dataclass(eq=False)
class Node:
    """One stack element: its value and its rank among all values."""

    value: int
    rank: int = 0


def assign_ranks(nodes: Iterable[Node]) -> None:
    """Set each node's rank to the number of nodes with a smaller value."""
    members = list(nodes)
    for node in members:
        node.rank = sum(1 for other in members if other.value < node.value)


class StackMachine:
    """Stacks ``a`` and ``b``, with the top of each at index 0.

    Each instruction that changes a stack writes its name and a newline to
    the stream (standard output by default) and returns True; one that has
    too few elements to act on writes nothing and returns False. The
    combined instructions apply both halves and always write their own name.
    """

    def __init__(self, values: Iterable[int] = (), stream: Optional[TextIO] = None) -> None:
        self.a: Deque[Node] = deque(Node(value) for value in values)
        self.b: Deque[Node] = deque()
        self.stream = stream
        assign_ranks(self.a)

    def __repr__(self) -> str:
        a_values = [node.value for node in self.a]
        b_values = [node.value for node in self.b]
        return f"StackMachine(a={a_values!r}, b={b_values!r})"

    def _emit(self, name: str) -> None:
        printf("%s\n", name, stream=self.stream)

    @staticmethod
    def _swap(stack: Deque[Node]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _push(source: Deque[Node], target: Deque[Node]) -> bool:
        if not source:
            return False
        target.appendleft(source.popleft())
        return True

    @staticmethod
    def _rotate(stack: Deque[Node], steps: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(steps)
        return True

    def _report(self, name: str, changed: bool) -> bool:
        if changed:
            self._emit(name)
        return changed

    def sa(self) -> bool:
        """Swap the top two elements of a."""
        return self._report("sa", self._swap(self.a))

    def sb(self) -> bool:
        """Swap the top two elements of b."""
        return self._report("sb", self._swap(self.b))

    def ss(self) -> bool:
        """Swap the top two elements of both stacks."""
        changed_a = self._swap(self.a)
        changed_b = self._swap(self.b)
        self._emit("ss")
        return changed_a or changed_b

    def pa(self) -> bool:
        """Move the top of b onto a."""
        return self._report("pa", self._push(self.b, self.a))

    def pb(self) -> bool:
        """Move the top of a onto b."""
        return self._report("pb", self._push(self.a, self.b))

    def ra(self) -> bool:
        """Move the top of a to its bottom."""
        return self._report("ra", self._rotate(self.a, -1))

    def rb(self) -> bool:
        """Move the top of b to its bottom."""
        return self._report("rb", self._rotate(self.b, -1))

    def rr(self) -> bool:
        """Rotate both stacks upwards."""
        changed_a = self._rotate(self.a, -1)
        changed_b = self._rotate(self.b, -1)
        self._emit("rr")
        return changed_a or changed_b

    def rra(self) -> bool:
        """Move the bottom of a to its top."""
        return self._report("rra", self._rotate(self.a, 1))

    def rrb(self) -> bool:
        """Move the bottom of b to its top."""
        return self._report("rrb", self._rotate(self.b, 1))

    def rrr(self) -> bool:
        """Rotate both stacks downwards."""
        changed_a = self._rotate(self.a, 1)
        changed_b = self._rotate(self.b, 1)
        self._emit("rrr")
        return changed_a or changed_b
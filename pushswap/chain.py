"""A singly linked chain of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Link:
    """One element of a chain: its content and the link after it."""

    content: Any
    next: Optional["Link"] = None


class Chain:
    """A singly linked list whose elements are ``Link`` objects."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Link] = None
        for item in items:
            self.add_back(item)

    def _links(self) -> Iterator[Link]:
        link = self.head
        while link is not None:
            yield link
            link = link.next

    def __iter__(self) -> Iterator[Any]:
        return (link.content for link in self._links())

    def __len__(self) -> int:
        return sum(1 for _ in self._links())

    def __repr__(self) -> str:
        return f"Chain({list(self)!r})"

    def add_front(self, content: Any) -> Link:
        """Put content at the front and return its new link."""
        link = Link(content, self.head)
        self.head = link
        return link

    def add_back(self, content: Any) -> Link:
        """Put content at the back and return its new link."""
        link = Link(content)
        tail = self.last()
        if tail is None:
            self.head = link
        else:
            tail.next = link
        return link

    def last(self) -> Optional[Link]:
        """The final link, or None when the chain is empty."""
        tail = None
        for tail in self._links():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every link, passing each content to delete first if given."""
        link = self.head
        while link is not None:
            following = link.next
            if delete is not None:
                delete(link.content)
            link.next = None
            link = following
        self.head = None

    def iterate(self, func: Optional[Callable[[Any], Any]]) -> None:
        """Call func on each content, front to back."""
        if func is None:
            return
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], Any],
    ) -> "Chain":
        """A new chain of func(content) for each content.

        If func yields None, every content made so far is passed to delete
        and ValueError is raised.
        """
        if func is None or delete is None:
            raise TypeError("func and delete are both required")
        result = Chain()
        for content in self:
            mapped = func(content)
            if mapped is None:
                result.clear(delete)
                raise ValueError("mapping function produced no value")
            result.add_back(mapped)
        return result
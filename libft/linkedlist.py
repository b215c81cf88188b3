"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Optional


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list whose nodes can be reached through ``head``."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        for item in items:
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Add a node holding ``content`` at the start of the list."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        return node

    def push_back(self, content: Any) -> Node:
        """Add a node holding ``content`` at the end of the list."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        return self._tail

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def iter(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on the content of every node, from first to last."""
        for content in self:
            f(content)

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every node, passing each content to ``delete`` when given."""
        for node in self._nodes():
            if delete is not None:
                delete(node.content)
            node.next = None
        self.head = None
        self._tail = None

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """Return a new list of ``f`` applied to every content.

        If ``f`` raises, the contents made so far are passed to ``delete``
        (when given) and the exception propagates.
        """
        made: List[Any] = []
        try:
            for content in self:
                made.append(f(content))
        except BaseException:
            if delete is not None:
                for content in made:
                    delete(content)
            raise
        return LinkedList(made)
"""A singly linked list with the stack-style moves used by sorting exercises."""

from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Node(Generic[T]):
    """One link of a :class:`LinkedList`."""

    __slots__ = ("content", "next")

    def __init__(self, content: T, next: "Optional[Node[T]]" = None) -> None:
        self.content = content
        self.next = next

    def __repr__(self) -> str:
        return f"Node({self.content!r})"


class LinkedList(Generic[T]):
    """A singly linked list of arbitrary contents."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[Node[T]] = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    @property
    def head(self) -> Optional[Node[T]]:
        """The first node, or None when the list is empty."""
        return self._head

    def _nodes(self) -> Iterator[Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _push_front_node(self, node: Node[T]) -> None:
        node.next = self._head
        self._head = node
        self._size += 1

    def _pop_front_node(self) -> Node[T]:
        node = self._head
        if node is None:
            raise IndexError("pop from an empty list")
        self._head = node.next
        node.next = None
        self._size -= 1
        return node

    def push_front(self, content: T) -> Node[T]:
        """Put ``content`` at the front and return its node."""
        node = Node(content)
        self._push_front_node(node)
        return node

    def push_back(self, content: T) -> Node[T]:
        """Put ``content`` at the back and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self._head = node
        else:
            tail.next = node
        self._size += 1
        return node

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Optional[Node[T]]:
        """The last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every node, passing each content to ``delete`` first if given."""
        if delete is not None:
            for content in self:
                delete(content)
        self._head = None
        self._size = 0

    def for_each(self, f: Callable[[T], Any]) -> None:
        """Call ``f`` on each content, front to back."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[T], U],
        delete: Optional[Callable[[U], Any]] = None,
    ) -> "LinkedList[U]":
        """A new list of ``f(content)`` for each content.

        If ``f`` raises, the contents produced so far are passed to
        ``delete`` before the error propagates.
        """
        result: LinkedList[U] = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def push_to(self, other: "LinkedList[T]") -> None:
        """Move the first node of this list to the front of ``other``."""
        if other is self or self._head is None:
            return
        other._push_front_node(self._pop_front_node())

    def rotate(self) -> None:
        """Move the first node to the back."""
        if self._size <= 1:
            return
        first = self._pop_front_node()
        tail = self.last()
        tail.next = first
        self._size += 1

    def reverse_rotate(self) -> None:
        """Move the last node to the front."""
        if self._size <= 1:
            return
        before_last = self._head
        while before_last.next.next is not None:
            before_last = before_last.next
        tail = before_last.next
        before_last.next = None
        self._size -= 1
        self._push_front_node(tail)

    def swap(self) -> None:
        """Exchange the contents of the first two nodes."""
        if self._size <= 1:
            return
        first = self._head
        second = first.next
        first.content, second.content = second.content, first.content
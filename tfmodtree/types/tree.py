"""Generic ordered tree container"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

__all__ = ["Tree"]

T = TypeVar("T")


@dataclass
class Tree(Generic[T]):
    """Ordered multi-way tree holding a value of type T at every node.

    A parent owns its children outright; there are no back-references.
    Children keep the order in which they were attached.
    """

    value: T
    children: list["Tree[T]"] = field(default_factory=list)

    def with_leaves(self, leaves: Iterable["Tree[T]"]) -> "Tree[T]":
        """Append child trees in order and return self for chaining."""
        self.children.extend(leaves)
        return self

    def walk(self) -> Iterator[T]:
        """Yield node values depth-first, parents before children."""
        yield self.value
        for child in self.children:
            yield from child.walk()

    def depth(self) -> int:
        """Number of levels in the tree, counting this node as 1."""
        if not self.children:
            return 1
        return 1 + max(child.depth() for child in self.children)

    def __len__(self) -> int:
        return sum(1 for _ in self.walk())

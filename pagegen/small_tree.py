"""Small ordered collections shaped as a binary tree.

Attribute and class lists on a page are almost always tiny, so the tree has a
dedicated variant for zero to four items, one for arbitrary sequences, and a
``Join`` node for concatenation. Iterating a tree yields its items left to
right, depth first; that order is the order things appear in the output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Tuple, TypeVar

T = TypeVar("T")


class SmallTree(Generic[T]):
    """Base class for every tree variant."""

    __slots__ = ()

    def __iter__(self) -> Iterator[T]:
        raise NotImplementedError

    def __len__(self) -> int:
        return sum(1 for _ in self)


@dataclass(frozen=True)
class Empty(SmallTree[T]):
    def __iter__(self) -> Iterator[T]:
        return iter(())


@dataclass(frozen=True)
class One(SmallTree[T]):
    first: T

    def __iter__(self) -> Iterator[T]:
        yield self.first


@dataclass(frozen=True)
class Two(SmallTree[T]):
    first: T
    second: T

    def __iter__(self) -> Iterator[T]:
        yield self.first
        yield self.second


@dataclass(frozen=True)
class Three(SmallTree[T]):
    first: T
    second: T
    third: T

    def __iter__(self) -> Iterator[T]:
        yield self.first
        yield self.second
        yield self.third


@dataclass(frozen=True)
class Four(SmallTree[T]):
    first: T
    second: T
    third: T
    fourth: T

    def __iter__(self) -> Iterator[T]:
        yield self.first
        yield self.second
        yield self.third
        yield self.fourth


@dataclass(frozen=True)
class Many(SmallTree[T]):
    items: Tuple[T, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)


@dataclass(frozen=True)
class Join(SmallTree[T]):
    """Concatenation of two non-empty trees. Build it through ``join``."""

    left: SmallTree[T]
    right: SmallTree[T]

    def __iter__(self) -> Iterator[T]:
        yield from self.left
        yield from self.right


EMPTY: Empty = Empty()


def is_empty(tree: SmallTree[T]) -> bool:
    return isinstance(tree, Empty)


def join(left: SmallTree[T], right: SmallTree[T]) -> SmallTree[T]:
    """Return ``left`` followed by ``right``.

    An empty operand is dropped and the other operand is returned as is, so
    repeated merges never pile up ``Join`` nodes around nothing.
    """
    if is_empty(left):
        return right
    if is_empty(right):
        return left
    return Join(left, right)


def tree_of(items: Iterable[T]) -> SmallTree[T]:
    """Pack a sequence into the smallest variant that holds it."""
    values = tuple(items)
    count = len(values)
    if count == 0:
        return EMPTY
    if count == 1:
        return One(*values)
    if count == 2:
        return Two(*values)
    if count == 3:
        return Three(*values)
    if count == 4:
        return Four(*values)
    return Many(values)


__all__ = [
    "EMPTY",
    "Empty",
    "Four",
    "Join",
    "Many",
    "One",
    "SmallTree",
    "Three",
    "Two",
    "is_empty",
    "join",
    "tree_of",
]

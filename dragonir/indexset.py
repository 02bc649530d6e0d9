"""Ordered set of non-negative indices with a universe size for complements."""

from __future__ import annotations

from typing import Iterator


class IndexSet:
    """A set of non-negative integers.

    ``count`` is the size of the universe ``0 .. count-1`` used by the
    complement operation; the binary operations keep the larger of the two.
    Equality compares members only.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._members: set[int] = set()
        self.count = 0

    @classmethod
    def _with(cls, members: set[int], count: int) -> "IndexSet":
        result = cls()
        result._members = members
        result.count = count
        return result

    def init(self, count: int, value: bool) -> None:
        """Set the first ``count`` indices to ``value`` and make ``count`` the universe."""
        if self.count >= count and not value:
            self.count = count
            self._members.clear()
            return
        self.count = count
        self.init_range(0, count, value)

    def init_range(self, start: int, stop: int, value: bool) -> None:
        """Set every index in ``start .. stop-1`` to ``value``."""
        indices = range(start, stop)
        if value:
            self._members.update(indices)
        else:
            self._members.difference_update(indices)

    def clear(self) -> None:
        """Remove every member; the universe size is kept."""
        self._members.clear()

    def _combine(self, other: "IndexSet", members: set[int]) -> "IndexSet":
        return self._with(members, max(self.count, other.count))

    def __and__(self, other: "IndexSet") -> "IndexSet":
        return self._combine(other, self._members & other._members)

    def __or__(self, other: "IndexSet") -> "IndexSet":
        return self._combine(other, self._members | other._members)

    def __sub__(self, other: "IndexSet") -> "IndexSet":
        return self._combine(other, self._members - other._members)

    def __xor__(self, other: "IndexSet") -> "IndexSet":
        return self._combine(other, self._members ^ other._members)

    def __invert__(self) -> "IndexSet":
        return self._with(set(range(self.count)) - self._members, self.count)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexSet):
            return NotImplemented
        return self._members == other._members

    def __contains__(self, index: object) -> bool:
        return index in self._members

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._members))

    def __str__(self) -> str:
        return "".join(f"{member} " for member in self)

    def get(self, index: int) -> bool:
        """Return whether ``index`` is a member."""
        return index in self._members

    def set(self, index: int) -> None:
        """Add ``index``."""
        self._members.add(index)

    def reset(self, index: int) -> None:
        """Remove ``index`` if present."""
        self._members.discard(index)

    def max(self) -> int:
        """Return the largest member; raise ValueError when empty."""
        if not self._members:
            raise ValueError("max() of an empty IndexSet")
        return max(self._members)

    def min(self) -> int:
        """Return the smallest member; raise ValueError when empty."""
        if not self._members:
            raise ValueError("min() of an empty IndexSet")
        return min(self._members)

    def is_empty(self) -> bool:
        """Return whether the set has no members."""
        return not self._members
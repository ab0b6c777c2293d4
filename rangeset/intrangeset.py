from typing import List, Tuple, Union as TypingUnion, ClassVar, Iterator

from rangeset.domain import INTEGERS
from rangeset.range import Range
from rangeset.rangeset import RangeSet


class IntRangeSet:
    """
    A set of integers stored as coalesced ``(start, end)`` ranges.

    Thin wrapper around a discrete ``RangeSet`` over the integers, for callers
    who just want to write ``IntRangeSet([1, (3, 5)])``. Instances are treated
    as values: ``union`` and ``+`` build new sets.
    """
    _set: RangeSet[Range[int], int]

    empty: ClassVar["IntRangeSet"]  # type: ignore

    def __init__(self, values: List[TypingUnion[int, Tuple[int, int]]]):
        """
        Initializes an IntRangeSet from a list of integers or (start, end) tuples.
        Ranges are validated and then merged in one by one.
        """
        self._set = RangeSet(Range, INTEGERS)
        for value in values:
            if isinstance(value, bool):
                raise TypeError(f"Invalid value type: {value}. Must be int or tuple[int, int].")
            if isinstance(value, int):
                self._set.insert_point(value)
            elif isinstance(value, tuple) and len(value) == 2:
                start, end = value
                if not isinstance(start, int) or not isinstance(end, int):
                    raise TypeError(f"Range endpoints must be integers: {value}")
                self._set.insert(Range(start, end))
            else:
                raise TypeError(
                    f"Invalid value type: {value}. Must be int or tuple[int, int]."
                )

    @property
    def ranges(self) -> List[Tuple[int, int]]:
        return [(rng.min, rng.max) for rng in self._set]

    def union(self, other: "IntRangeSet") -> "IntRangeSet":
        """Returns a new IntRangeSet covering both this set and ``other``."""
        new_set = IntRangeSet([])
        new_set._set = self._set.copy()
        new_set._set.union_with(other._set)
        return new_set

    def __add__(self, other: "IntRangeSet") -> "IntRangeSet":
        if not isinstance(other, IntRangeSet):
            return NotImplemented
        return self.union(other)

    def __contains__(self, value: int) -> bool:
        if not isinstance(value, int):
            return False
        return self._set.contains_point(value)

    def __iter__(self) -> Iterator[int]:
        """Iterates over all individual integers contained in the ranges."""
        for start, end in self.ranges:
            yield from range(start, end + 1)

    def __len__(self) -> int:
        return sum(end - start + 1 for start, end in self.ranges)

    def __repr__(self) -> str:
        # Usable with __init__
        range_strs = []
        for s, e in self.ranges:
            if s == e:
                range_strs.append(str(s))
            else:
                range_strs.append(f"({s}, {e})")
        return f"IntRangeSet([{', '.join(range_strs)}])"

    def __str__(self) -> str:
        range_strs = []
        for s, e in self.ranges:
            if s == e:
                range_strs.append(str(s))
            else:
                range_strs.append(f"{s}-{e}")
        return f"{{{', '.join(range_strs)}}}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntRangeSet):
            return NotImplemented
        return self.ranges == other.ranges

    def __hash__(self) -> int:
        return hash(tuple(self.ranges))


IntRangeSet.empty = IntRangeSet([])

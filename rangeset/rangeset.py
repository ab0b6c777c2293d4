import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from rangeset.domain import Domain
from rangeset.factory import RangeFactory, as_factory
from rangeset.range import Range

T = TypeVar('T', bound=Range)
Y = TypeVar('Y')

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Location:
    """
    Where a point falls relative to the stored intervals.

    ``region`` indexes the alternating partition of the element line:
    even regions are the gaps (0 is before the first interval, ``2 * n``
    after the last), odd region ``k`` is the stored interval ``(k - 1) // 2``.
    The edge flags are only ever set in discrete mode, when the point sits
    one step outside the interval: ``prev(range.min)`` or ``next(range.max)``.
    """
    region: int
    touches_left_edge: bool = False
    touches_right_edge: bool = False

    @property
    def occupied(self) -> bool:
        return self.region % 2 == 1


class RangeSet(Generic[T, Y]):
    """
    A minimal, sorted collection of disjoint closed ranges.

    Invariant: ``intervals`` is sorted by ``min`` and for any two neighbours
    ``a``, ``b`` we have ``a.max < b.min``. In discrete mode (a ``Domain``
    was given) additionally ``domain.next(a.max) < b.min``: ranges that merely
    touch are fused into one.

    Insertion is the only mutator. Every operation is a linear scan over the
    stored intervals.

    Not thread-safe. Hold one exclusive lock around ``insert``/``union_with``
    and either the same lock or a ``copy()`` for concurrent readers.
    """

    def __init__(
        self,
        factory: RangeFactory[T, Y] | type[T] | Callable[[Y, Y], T] | None = None,
        domain: Optional[Domain[Y]] = None,
        ranges: Iterable[T] = (),
    ) -> None:
        self.factory = as_factory(factory)
        self.domain = domain
        self._intervals: List[T] = []
        for rng in ranges:
            self.insert(rng)

    @property
    def discrete(self) -> bool:
        return self.domain is not None

    @property
    def intervals(self) -> List[T]:
        """A copy of the stored intervals, ascending."""
        return list(self._intervals)

    ###########################################################################
    # Merge algorithm
    ###########################################################################

    def _window(self, rng: T) -> tuple[Y, Y]:
        # The span of points that merge with rng: widened by one step per side
        # in discrete mode.
        if self.domain is None:
            return rng.min, rng.max
        return self.domain.prev(rng.min), self.domain.next(rng.max)

    def _location(self, i: int, point: Y, lo: Y, hi: Y) -> Location:
        if self.domain is None:
            return Location(2 * i + 1)
        return Location(2 * i + 1, point == lo, point == hi)

    def locate(self, point: Y, from_right: bool = False) -> Location:
        """
        Finds the region ``point`` falls in.

        Scanning left to right yields the first interval whose window reaches
        ``point``; that is the region used for a new range's ``min``. With
        ``from_right`` the scan mirrors and yields the last such interval,
        used for a new range's ``max``. The two only differ in discrete mode
        when ``point`` is the single element separating two stored intervals,
        where it belongs to both windows.
        """
        if not from_right:
            for i, rng in enumerate(self._intervals):
                lo, hi = self._window(rng)
                if point < lo:
                    return Location(2 * i)
                if point <= hi:
                    return self._location(i, point, lo, hi)
            return Location(2 * len(self._intervals))

        for i in range(len(self._intervals) - 1, -1, -1):
            lo, hi = self._window(self._intervals[i])
            if point > hi:
                return Location(2 * i + 2)
            if point >= lo:
                return self._location(i, point, lo, hi)
        return Location(0)

    def insert(self, rng: T) -> None:
        """
        Merges ``rng`` into the set.

        All stored intervals reached by ``rng`` are replaced by one interval
        spanning them and ``rng``. The merged interval is built before the
        stored list is touched, so a failing factory leaves the set unchanged.
        """
        start = self.locate(rng.min)
        finish = self.locate(rng.max, from_right=True)

        s = start.region // 2
        f = (finish.region - 1) // 2

        if start.region == finish.region and not start.occupied:
            new_range = self.factory.create(rng.min, rng.max)
            logger.debug("Inserting %s at %d", new_range, s)
            self._intervals.insert(s, new_range)
            return

        if start.occupied and not start.touches_left_edge:
            min_point = self._intervals[s].min
        else:
            min_point = rng.min

        if finish.occupied and not finish.touches_right_edge:
            max_point = self._intervals[f].max
        else:
            max_point = rng.max

        if s == f and self._intervals[s].min == min_point and self._intervals[s].max == max_point:
            logger.debug("%s is already covered by %s", rng, self._intervals[s])
            return

        new_range = self.factory.create(min_point, max_point)
        logger.debug(
            "Merging %s into regions %d..%d, replacing intervals %d..%d with %s",
            rng, start.region, finish.region, s, f, new_range,
        )
        self._intervals[s:f + 1] = [new_range]

    def insert_point(self, value: Y) -> None:
        self.insert(self.factory.create(value, value))

    def union_with(self, other: 'RangeSet[T, Y]') -> None:
        """Inserts every interval of ``other`` into this set, ascending."""
        for rng in list(other):
            self.insert(rng)

    def __ior__(self, other: 'RangeSet[T, Y]') -> 'RangeSet[T, Y]':
        if not isinstance(other, RangeSet):
            return NotImplemented
        self.union_with(other)
        return self

    ###########################################################################
    # Queries
    ###########################################################################

    def contains_point(self, value: Y) -> bool:
        for rng in self._intervals:
            if rng.contains(value):
                return True
        return False

    def __contains__(self, value: Any) -> bool:
        return self.contains_point(value)

    def contains_range(self, rng: Range) -> bool:
        """True iff a single stored interval covers all of ``rng``."""
        for stored in self._intervals:
            if stored.min <= rng.min and rng.max <= stored.max:
                return True
        return False

    def bounds(self) -> T | None:
        if not self._intervals:
            return None
        return self.factory.create(self._intervals[0].min, self._intervals[-1].max)

    def copy(self) -> 'RangeSet[T, Y]':
        result = RangeSet(self.factory, self.domain)
        result._intervals = list(self._intervals)
        return result

    ###########################################################################
    # Iteration & rendering
    ###########################################################################

    def iterate(self, reverse: bool = False) -> Iterator[T]:
        if reverse:
            for i in range(len(self._intervals) - 1, -1, -1):
                yield self._intervals[i]
        else:
            for i in range(len(self._intervals)):
                yield self._intervals[i]

    def __iter__(self) -> Iterator[T]:
        return self.iterate()

    def __reversed__(self) -> Iterator[T]:
        return self.iterate(reverse=True)

    def __len__(self) -> int:
        return len(self._intervals)

    def __bool__(self) -> bool:
        return bool(self._intervals)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangeSet):
            return NotImplemented
        return self._intervals == other._intervals

    __hash__ = None  # type: ignore

    def __str__(self) -> str:
        return ''.join(f"{rng}\n" for rng in self._intervals)

    def __repr__(self) -> str:
        mode = 'discrete' if self.discrete else 'continuous'
        ranges = ', '.join(f"[{rng.min}, {rng.max}]" for rng in self._intervals)
        return f"RangeSet({mode}, [{ranges}])"

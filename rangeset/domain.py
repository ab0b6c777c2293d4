import abc
import datetime
from typing import Dict, Generic, TypeVar

Y = TypeVar('Y')


class Domain(abc.ABC, Generic[Y]):
    """
    Successor/predecessor navigation for a discrete element type.

    A ``RangeSet`` given a domain runs in discrete mode: ranges separated by
    exactly one ``next`` step are fused. Implementations must satisfy
    ``prev(next(y)) == y`` and ``next(prev(y)) == y`` for every value they
    are asked about away from the edges of the type.

    ``RangeSet`` calls ``prev(stored.min)`` and ``next(stored.max)`` on every
    stored interval, so a domain with bounded values must not raise at its
    edges. The bounded domains below saturate: ``prev`` of the smallest value
    and ``next`` of the largest return the value itself.
    """
    name: str

    @abc.abstractmethod
    def next(self, value: Y) -> Y:
        ...

    @abc.abstractmethod
    def prev(self, value: Y) -> Y:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class IntegerDomain(Domain[int]):
    name = 'int'

    def next(self, value: int) -> int:
        return value + 1

    def prev(self, value: int) -> int:
        return value - 1


class DateDomain(Domain[datetime.date]):
    name = 'date'

    _ONE_DAY = datetime.timedelta(days=1)

    def next(self, value: datetime.date) -> datetime.date:
        if value >= datetime.date.max:
            return value
        return value + self._ONE_DAY

    def prev(self, value: datetime.date) -> datetime.date:
        if value <= datetime.date.min:
            return value
        return value - self._ONE_DAY


class CharacterDomain(Domain[str]):
    """Single characters, ordered by code point."""
    name = 'char'

    MAX_CODE_POINT = 0x10FFFF

    def next(self, value: str) -> str:
        code = ord(value)
        if code >= self.MAX_CODE_POINT:
            return value
        return chr(code + 1)

    def prev(self, value: str) -> str:
        code = ord(value)
        if code <= 0:
            return value
        return chr(code - 1)


INTEGERS = IntegerDomain()
DATES = DateDomain()
CHARACTERS = CharacterDomain()

# Continuous element types map to None: no navigation, overlap-only merging.
_DOMAINS: Dict[str, Domain | None] = {
    'int': INTEGERS,
    'date': DATES,
    'char': CHARACTERS,
    'float': None,
    'continuous': None,
}


def domain_for(name: str) -> Domain | None:
    if name not in _DOMAINS:
        raise KeyError(f"Unknown domain: {name}. Must be one of {', '.join(_DOMAINS)}.")
    return _DOMAINS[name]

import datetime

import pytest

from rangeset.range import Range, InvalidRangeError
from rangeset.domain import INTEGERS, DATES, CHARACTERS, domain_for
from rangeset.factory import TypeFactory, CallableFactory, as_factory


class Span(Range[int]):
    def __str__(self) -> str:
        return f"{self.min}..{self.max}"


def test_construction_and_contains():
    r = Range(1, 5)
    assert r.min == 1
    assert r.max == 5
    assert r.contains(1)
    assert r.contains(3)
    assert r.contains(5)
    assert not r.contains(0)
    assert not r.contains(6)
    assert 3 in r
    assert Range(2, 2).contains(2)


def test_invalid_range():
    with pytest.raises(InvalidRangeError) as e:
        Range(10, 5)
    assert e.value.min == 10
    assert e.value.max == 5
    assert isinstance(e.value, ValueError)


def test_immutable():
    r = Range(1, 2)
    with pytest.raises(AttributeError):
        r.min = 0  # type: ignore


def test_equality_and_ordering():
    assert Range(1, 3) == Range(1, 3)
    assert Range(1, 3) != Range(1, 4)
    assert hash(Range(1, 3)) == hash(Range(1, 3))
    assert sorted([Range(4, 5), Range(1, 9), Range(1, 2)]) == [Range(1, 2), Range(1, 9), Range(4, 5)]


def test_str():
    assert str(Range(1, 3)) == "Min : 1 -  Max: 3"
    assert str(Range(datetime.date(2024, 1, 1), datetime.date(2024, 1, 2))) == "Min : 2024-01-01 -  Max: 2024-01-02"


def test_other_ordered_types():
    r = Range('b', 'y')
    assert r.contains('c')
    assert not r.contains('z')
    with pytest.raises(InvalidRangeError):
        Range(2.5, 1.0)


def test_domains():
    assert INTEGERS.next(4) == 5
    assert INTEGERS.prev(4) == 3
    d = datetime.date(2024, 2, 28)
    assert DATES.next(d) == datetime.date(2024, 2, 29)
    assert DATES.prev(datetime.date(2024, 3, 1)) == datetime.date(2024, 2, 29)
    assert CHARACTERS.next('a') == 'b'
    assert CHARACTERS.prev('b') == 'a'
    for y in (-3, 0, 7):
        assert INTEGERS.prev(INTEGERS.next(y)) == y


def test_bounded_domains_saturate():
    assert DATES.prev(datetime.date.min) == datetime.date.min
    assert DATES.next(datetime.date.max) == datetime.date.max
    assert DATES.next(datetime.date.min) == datetime.date.min + datetime.timedelta(days=1)
    assert CHARACTERS.prev('\x00') == '\x00'
    assert CHARACTERS.next(chr(0x10FFFF)) == chr(0x10FFFF)
    assert CHARACTERS.next('\x00') == '\x01'


def test_domain_for():
    assert domain_for('int') is INTEGERS
    assert domain_for('date') is DATES
    assert domain_for('char') is CHARACTERS
    assert domain_for('float') is None
    with pytest.raises(KeyError):
        domain_for('complex')


def test_factories():
    assert TypeFactory(Span).create(1, 2) == Span(1, 2)
    assert isinstance(TypeFactory(Span).create(1, 2), Span)
    with pytest.raises(InvalidRangeError):
        TypeFactory(Range).create(10, 5)

    assert isinstance(as_factory(None).create(1, 1), Range)
    assert isinstance(as_factory(Span).create(1, 1), Span)
    wrapped = as_factory(lambda lo, hi: Span(lo, hi))
    assert isinstance(wrapped, CallableFactory)
    assert wrapped.create(0, 3) == Span(0, 3)
    with pytest.raises(TypeError):
        as_factory(42)  # type: ignore

from rangeset.range import Range, InvalidRangeError
from rangeset.domain import Domain, IntegerDomain, DateDomain, CharacterDomain, INTEGERS, DATES, CHARACTERS
from rangeset.factory import RangeFactory, TypeFactory
from rangeset.rangeset import RangeSet, Location
from rangeset.intrangeset import IntRangeSet

import abc
from typing import Callable, Generic, TypeVar

from rangeset.range import Range

T = TypeVar('T', bound=Range)
Y = TypeVar('Y')


class RangeFactory(abc.ABC, Generic[T, Y]):
    """
    Builds concrete ``Range`` objects from a ``(min, max)`` pair.

    ``RangeSet`` never calls a range constructor directly; every merged range
    comes from its factory, so subclasses of ``Range`` survive merging.
    ``create`` must be deterministic, free of side effects, and must fail
    (with ``InvalidRangeError``) iff ``max < min``.
    """

    @abc.abstractmethod
    def create(self, min: Y, max: Y) -> T:
        ...


class TypeFactory(RangeFactory[T, Y]):
    """Factory that calls the constructor of a ``Range`` subclass."""

    def __init__(self, range_type: type[T]) -> None:
        assert issubclass(range_type, Range), f"Expected a Range subclass, got {range_type}"
        self.range_type = range_type

    def create(self, min: Y, max: Y) -> T:
        return self.range_type(min, max)

    def __repr__(self) -> str:
        return f"TypeFactory({self.range_type.__name__})"


class CallableFactory(RangeFactory[T, Y]):
    """Adapts a plain ``(min, max) -> Range`` function to the factory interface."""

    def __init__(self, fn: Callable[[Y, Y], T]) -> None:
        self.fn = fn

    def create(self, min: Y, max: Y) -> T:
        return self.fn(min, max)


def as_factory(factory: RangeFactory | type | Callable | None) -> RangeFactory:
    if factory is None:
        return TypeFactory(Range)
    if isinstance(factory, RangeFactory):
        return factory
    if isinstance(factory, type) and issubclass(factory, Range):
        return TypeFactory(factory)
    if callable(factory):
        return CallableFactory(factory)
    raise TypeError(f"Invalid factory: {factory!r}. Must be a RangeFactory, Range subclass or callable.")

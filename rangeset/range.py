from dataclasses import dataclass
from typing import Any, Generic, TypeVar

Y = TypeVar('Y')


class InvalidRangeError(ValueError):
    """Raised when a range is constructed with ``max < min``."""

    def __init__(self, min: Any, max: Any):
        super().__init__(
            f"Invalid range: max ({max}) cannot be less than min ({min})"
        )
        self.min = min
        self.max = max


@dataclass(frozen=True, order=True)
class Range(Generic[Y]):
    """
    An immutable closed interval ``[min, max]`` over a totally ordered type.

    A "changed" range is always a new object; nothing mutates ``min`` or
    ``max`` after construction. Two ranges are equal iff both bounds are
    equal, and they order by ``(min, max)``.
    """
    min: Y
    max: Y

    def __post_init__(self):
        if self.max < self.min:
            raise InvalidRangeError(self.min, self.max)

    def contains(self, value: Y) -> bool:
        return self.min <= value <= self.max

    def __contains__(self, value: Y) -> bool:
        return self.contains(value)

    def __str__(self) -> str:
        return f"Min : {self.min} -  Max: {self.max}"

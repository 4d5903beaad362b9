"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self

MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True)
class Capacity:
    """Positive integer bounding an event's registrations."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Capacity must be an integer")
        if self.value <= 0:
            raise ValueError("Capacity must be positive")


@dataclass(frozen=True)
class Rating:
    """Feedback score between MIN_RATING and MAX_RATING inclusive."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Rating must be an integer")
        if not MIN_RATING <= self.value <= MAX_RATING:
            raise ValueError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")


@dataclass(frozen=True)
class SequentialId:
    """Prefixed sequential identifier such as ``event3`` or ``feedback1``."""

    prefix: str
    number: int

    def __post_init__(self) -> None:
        if self.number < 1:
            raise ValueError("Sequence numbers start at 1")

    @classmethod
    def next_after(cls, prefix: str, count: int) -> Self:
        return cls(prefix=prefix, number=count + 1)

    def __str__(self) -> str:
        return f"{self.prefix}{self.number}"

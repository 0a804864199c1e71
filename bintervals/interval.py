from dataclasses import dataclass, replace
from types import NotImplementedType
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from typing_extensions import Self, override

from bintervals.errors import InvalidOrderError


class Comparable(Protocol):
    """Bound types must be totally ordered. NaN-like values are unsupported."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __le__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...

    def __ge__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=Comparable)


@runtime_checkable
class IntervalLike(Protocol[T]):
    """Anything exposing bounds, inclusion flags and a containment test."""

    @property
    def start(self) -> T: ...

    @property
    def end(self) -> T: ...

    @property
    def includes_start(self) -> bool: ...

    @property
    def includes_end(self) -> bool: ...

    def contains(self, point: T) -> bool: ...


@dataclass(frozen=True)
class Interval(Generic[T]):
    """A contiguous range over a totally ordered type.

    Each end is closed (the bound belongs to the interval) or open,
    independently. Instances are immutable; use ``with_bounds`` to derive a
    modified copy.
    """

    start: T
    end: T
    includes_start: bool = True
    includes_end: bool = True

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidOrderError(self.start, self.end)

    @classmethod
    def safe_create(
        cls,
        start: T,
        end: T,
        includes_start: bool = True,
        includes_end: bool = True,
    ) -> Self:
        """Create an interval, swapping ``start`` and ``end`` if misordered.

        The flags stay with the slots they name: ``includes_start`` always
        describes the resulting start, whichever value ends up there.
        """
        if start > end:
            start, end = end, start
        return cls(start, end, includes_start=includes_start, includes_end=includes_end)

    @property
    def is_degenerate(self) -> bool:
        return self.start == self.end

    @property
    def is_empty(self) -> bool:
        """True for a zero-width interval missing either of its bounds."""
        return self.is_degenerate and not (self.includes_start and self.includes_end)

    def contains(self, point: T) -> bool:
        """Return True if ``point`` lies within the interval's bounds."""
        after_start = point >= self.start if self.includes_start else point > self.start
        before_end = point <= self.end if self.includes_end else point < self.end
        return after_start and before_end

    def __contains__(self, point: T) -> bool:
        return self.contains(point)

    def intersects(self, other: "IntervalLike[T] | None") -> bool:
        """Return True if the two intervals share at least one point.

        ``None`` never intersects anything.
        """
        if other is None:
            return False

        if (
            self.contains(other.start)
            or self.contains(other.end)
            or other.contains(self.start)
            or other.contains(self.end)
        ):
            return True

        # Beyond the endpoint rule: interiors can overlap with no endpoint
        # contained in the other, e.g. open (1, 3) and (1, 3)
        return max(self.start, other.start) < min(self.end, other.end)

    def intersection_with(self, other: "IntervalLike[T] | None") -> "Self | None":
        """Return the interval common to ``self`` and ``other``.

        The later start and the earlier end win, each carrying its own
        inclusion flag. When both intervals share a bound, the result includes
        it only if both do.

        Returns:
            The overlapping interval, or None if ``other`` is None or the
            combined start lies after the combined end. Touching bounds give a
            zero-width interval, which may be empty (see ``is_empty``).
            Attributes of ``self`` beyond the four interval fields are
            preserved.
        """
        if other is None:
            return None

        if self.start < other.start:
            start, includes_start = other.start, other.includes_start
        elif self.start == other.start:
            start = self.start
            includes_start = self.includes_start and other.includes_start
        else:
            start, includes_start = self.start, self.includes_start

        if self.end < other.end:
            end, includes_end = self.end, self.includes_end
        elif self.end == other.end:
            end = self.end
            includes_end = self.includes_end and other.includes_end
        else:
            end, includes_end = other.end, other.includes_end

        if start > end:
            return None

        return replace(
            self,
            start=start,
            end=end,
            includes_start=includes_start,
            includes_end=includes_end,
        )

    def __and__(self, other: object) -> "Self | None | NotImplementedType":
        if not isinstance(other, IntervalLike):
            return NotImplemented
        return self.intersection_with(other)

    def with_bounds(
        self,
        start: T | None = None,
        end: T | None = None,
        includes_start: bool | None = None,
        includes_end: bool | None = None,
    ) -> Self:
        """Return a copy with the given fields replaced.

        Omitted fields keep their current values. The result is validated like
        any new interval, so a misordered combination raises InvalidOrderError.
        """
        return replace(
            self,
            start=self.start if start is None else start,
            end=self.end if end is None else end,
            includes_start=(
                self.includes_start if includes_start is None else includes_start
            ),
            includes_end=self.includes_end if includes_end is None else includes_end,
        )

    @override
    def __str__(self) -> str:
        """Bracket notation, e.g. ``[1, 3)``."""
        left = "[" if self.includes_start else "("
        right = "]" if self.includes_end else ")"
        return f"{left}{self.start}, {self.end}{right}"

"""Case-insensitive axis identifiers and score maps.

Axis names come from authored content, player sessions and the badge
catalog, and the same axis is routinely spelled "Honesty" in one place and
"honesty" in another. Every map in the engine is keyed through
:func:`normalize_axis` so those spellings collapse to one entry; the first
spelling seen is kept for display.
"""
from collections.abc import Iterable, Iterator, Mapping, MutableMapping


def normalize_axis(axis: str | None) -> str:
    """Return the comparison key for an axis name ('' for blank names)."""
    return (axis or "").strip().casefold()


def is_blank_axis(axis: str | None) -> bool:
    return not normalize_axis(axis)


def same_axis(left: str | None, right: str | None) -> bool:
    return normalize_axis(left) == normalize_axis(right)


class AxisScores(MutableMapping):
    """Mapping of axis name -> score with case-insensitive keys.

    >>> scores = AxisScores({"Honesty": 1.0})
    >>> scores.add("honesty", 0.5)
    >>> dict(scores)
    {'Honesty': 1.5}
    """

    __slots__ = ("_data",)

    def __init__(self, initial: Mapping[str, float] | Iterable[tuple[str, float]] | None = None):
        self._data: dict[str, tuple[str, float]] = {}
        if initial is not None:
            self.merge(initial)

    def _key(self, axis) -> str:
        if not isinstance(axis, str):
            raise KeyError(axis)
        return normalize_axis(axis)

    def __getitem__(self, axis: str) -> float:
        return self._data[self._key(axis)][1]

    def __setitem__(self, axis: str, value: float) -> None:
        key = self._key(axis)
        if not key:
            raise KeyError(axis)
        existing = self._data.get(key)
        name = existing[0] if existing is not None else axis.strip()
        self._data[key] = (name, float(value))

    def __delitem__(self, axis: str) -> None:
        del self._data[self._key(axis)]

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._data.values())

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"AxisScores({self.to_dict()!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        if not isinstance(other, AxisScores):
            converted = AxisScores(other)
            if len(converted) != len(other):
                return False
            other = converted
        return {key: value for key, (_, value) in self._data.items()} == {
            key: value for key, (_, value) in other._data.items()
        }

    __hash__ = None

    def add(self, axis: str, delta: float) -> None:
        """Add delta to the axis, creating it at 0 first."""
        key = self._key(axis)
        current = self._data[key][1] if key in self._data else 0.0
        self[axis] = current + delta

    def merge(self, other: Mapping[str, float] | Iterable[tuple[str, float]]) -> None:
        """Add every score of another map into this one, skipping blank axes.

        Spellings of the same axis are summed, not overwritten.
        """
        items = other.items() if isinstance(other, Mapping) else other
        for axis, value in items:
            if not isinstance(axis, str) or is_blank_axis(axis):
                continue
            self.add(axis, value)

    def copy(self) -> "AxisScores":
        clone = AxisScores()
        clone._data = dict(self._data)
        return clone

    def to_dict(self) -> dict[str, float]:
        return {name: value for name, value in self._data.values()}

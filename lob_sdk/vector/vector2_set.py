"""Deduplicating container of Vector2 values."""

from typing import Callable, Iterable, Iterator

from .vector2 import Vector2
from .vector_array import VectorArray

VectorKey = tuple[float, float]


class Vector2Set:
    """Set of vectors where two vectors are the same if their x and y match.

    Membership is keyed by the exact ``(x, y)`` float tuple, so there is no
    text formatting step that could make equal coordinates disagree. Adding
    a vector whose coordinates are already present replaces the stored
    instance but keeps its original position in iteration order.
    """

    def __init__(self, vectors: Iterable[Vector2] = ()):
        self._vectors: dict[VectorKey, Vector2] = {}
        for vector in vectors:
            self.add(vector)

    @staticmethod
    def key_of(vector: Vector2) -> VectorKey:
        return (vector.x, vector.y)

    def __len__(self) -> int:
        return len(self._vectors)

    def __iter__(self) -> Iterator[Vector2]:
        return iter(self._vectors.values())

    def __contains__(self, vector: object) -> bool:
        return isinstance(vector, Vector2) and self.has(vector)

    def add(self, vector: Vector2) -> None:
        self._vectors[self.key_of(vector)] = vector

    def has(self, vector: Vector2) -> bool:
        return self.key_of(vector) in self._vectors

    def discard(self, vector: Vector2) -> None:
        """Remove the vector with the same coordinates, if present."""
        self._vectors.pop(self.key_of(vector), None)

    def filter(self, predicate: Callable[[Vector2], bool]) -> "Vector2Set":
        """Return a new set with the members satisfying ``predicate``."""
        return Vector2Set(vector for vector in self._vectors.values() if predicate(vector))

    def clear(self) -> None:
        self._vectors.clear()

    def values(self) -> Iterator[Vector2]:
        return iter(self._vectors.values())

    def to_array(self) -> list[Vector2]:
        return list(self._vectors.values())

    def to_vector_array(self) -> VectorArray:
        """Numpy view of the members for batch distance queries."""
        return VectorArray(self.to_array())

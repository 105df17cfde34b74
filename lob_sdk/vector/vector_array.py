"""Numpy-backed batch view over many 2D vectors."""

from typing import Iterator, Optional, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from ..errors import EmptyInputError
from .vector2 import PointLike, Vector2


class VectorArray:
    """Collection of 2D positions stored as a float64 array of shape (N, 2).

    Columns are (x, y). Use it when the same query runs against many
    vectors at once, such as finding the closest candidate position.
    """

    def __init__(self, vectors: Optional[Union[Sequence[PointLike], NDArray[np.float64]]] = None):
        """Initialize from point-like objects or an (N, 2) array.

        Args:
            vectors: Sequence of objects with ``x``/``y`` or an (N, 2) array.
                    If None, creates an empty VectorArray.
        """
        if vectors is None:
            self._data = np.empty((0, 2), dtype=np.float64)
        elif isinstance(vectors, np.ndarray):
            if vectors.ndim != 2 or vectors.shape[-1] != 2:
                raise ValueError("Numpy array must have shape (N, 2)")
            self._data = vectors.astype(np.float64)
        elif len(vectors) == 0:
            self._data = np.empty((0, 2), dtype=np.float64)
        else:
            self._data = np.array([[v.x, v.y] for v in vectors], dtype=np.float64)

    @property
    def data(self) -> NDArray[np.float64]:
        return self._data

    @property
    def x_coords(self) -> NDArray[np.float64]:
        return self._data[:, 0]

    @property
    def y_coords(self) -> NDArray[np.float64]:
        return self._data[:, 1]

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> Vector2:
        if index >= len(self._data) or index < -len(self._data):
            raise IndexError("VectorArray index out of range")
        row = self._data[index]
        return Vector2(float(row[0]), float(row[1]))

    def __iter__(self) -> Iterator[Vector2]:
        for row in self._data:
            yield Vector2(float(row[0]), float(row[1]))

    def to_vector_list(self) -> list[Vector2]:
        return list(self)

    def squared_distance_to_point(self, target: PointLike) -> NDArray[np.float64]:
        diff = self._data - np.array([target.x, target.y], dtype=np.float64)
        return np.sum(diff ** 2, axis=1)

    def distance_to_point(self, target: PointLike) -> NDArray[np.float64]:
        """Euclidean distances from every vector to ``target``."""
        return np.sqrt(self.squared_distance_to_point(target))

    def closest_to(self, target: PointLike) -> Optional[Vector2]:
        """Return the vector nearest to ``target``, None when empty.

        Ties resolve to the lowest index, matching ``Vector2.get_closest_vector``.
        """
        if len(self._data) == 0:
            return None
        return self[int(np.argmin(self.squared_distance_to_point(target)))]

    def center(self) -> Vector2:
        """Centroid of all vectors.

        Raises:
            EmptyInputError: if the array holds no vectors
        """
        if len(self._data) == 0:
            raise EmptyInputError("No vectors provided.")
        mean = self._data.mean(axis=0)
        return Vector2(float(mean[0]), float(mean[1]))

    def filter_by_distance(self, center: PointLike, min_dist: float, max_dist: float) -> "VectorArray":
        """Keep vectors whose Euclidean distance to ``center`` is in [min_dist, max_dist]."""
        distances = self.distance_to_point(center)
        mask = (distances >= min_dist) & (distances <= max_dist)
        return VectorArray(self._data[mask])

    def filter_by_bounds(self, min_x: float, max_x: float, min_y: float, max_y: float) -> "VectorArray":
        """Keep vectors inside the rectangle, bounds inclusive."""
        mask = ((self._data[:, 0] >= min_x) & (self._data[:, 0] <= max_x) &
                (self._data[:, 1] >= min_y) & (self._data[:, 1] <= max_y))
        return VectorArray(self._data[mask])

    def contains(self, vector: PointLike) -> bool:
        target = np.array([vector.x, vector.y], dtype=np.float64)
        return bool(np.any(np.all(self._data == target, axis=1)))

    def unique(self) -> "VectorArray":
        """Remove duplicate vectors. Result rows are sorted."""
        return VectorArray(np.unique(self._data, axis=0))

"""Vector value types and vector containers.

This package contains the 2D/3D vector algebra and the containers built on it:
- vector2.py: Vector2, Point2 and the "x,y" textual encoding
- vector3.py: Vector3 and Point3
- vector2_set.py: Vector2Set, deduplicating by coordinates
- vector_array.py: VectorArray, numpy batch queries over many vectors
"""

from .vector2 import ArrayVector2, Point2, PointLike, Vector2, format_coordinate
from .vector3 import ArrayVector3, Point3, Point3Like, Vector3
from .vector2_set import Vector2Set
from .vector_array import VectorArray

__all__ = [
    "ArrayVector2",
    "Point2",
    "PointLike",
    "Vector2",
    "format_coordinate",
    "ArrayVector3",
    "Point3",
    "Point3Like",
    "Vector3",
    "Vector2Set",
    "VectorArray",
]

"""
Shared fixtures for the lob_sdk test suite.
"""

import sys
import os
from dataclasses import dataclass

import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from lob_sdk.containers.priority_queue import PriorityQueue
from lob_sdk.vector.vector2 import Point2, Vector2
from lob_sdk.vector.vector2_set import Vector2Set


@dataclass(frozen=True)
class TaggedPoint:
    """Point carrying an extra field, as order paths do."""
    x: float
    y: float
    id: str


@pytest.fixture
def sample_vector():
    """Create a sample Vector2 for testing."""
    return Vector2(3, 4)


@pytest.fixture
def sample_positions():
    """Create a list of sample positions for testing."""
    return [
        Vector2(0, 0),
        Vector2(1, 1),
        Vector2(2, 2),
        Vector2(3, 4)
    ]


@pytest.fixture
def empty_queue():
    """Create an empty priority queue with the default ordering."""
    return PriorityQueue()


@pytest.fixture
def empty_vector_set():
    return Vector2Set()


@pytest.fixture
def peak_path():
    """Path with one large deviation and two small ones."""
    return [
        Point2(0, 0),
        Point2(1, 0.1),
        Point2(2, 2),
        Point2(3, 0.1),
        Point2(4, 0),
    ]


@pytest.fixture
def tagged_path():
    return [
        TaggedPoint(0, 0, "start"),
        TaggedPoint(1, 0.1, "point1"),
        TaggedPoint(2, 2, "peak"),
        TaggedPoint(3, 0.1, "point2"),
        TaggedPoint(4, 0, "end"),
    ]

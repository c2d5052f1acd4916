"""Pure 2D helpers used to fit a rotated crop inside the image.

Every function here is side-effect free and only reads its arguments, so the
results are bit-identical for identical inputs and safe to call on every
frame.
"""

from __future__ import annotations

import math

from ..domain.models import Rect, Size, Vector

RIGHT_ANGLE = math.pi / 2.0


def create_vector(x: float, y: float) -> Vector:
    return Vector(x, y)


def vector_subtract(a: Vector, b: Vector) -> Vector:
    return Vector(a.x - b.x, a.y - b.y)


def vector_dot(a: Vector, b: Vector) -> float:
    return a.x * b.x + a.y * b.y


def vector_distance_squared(a: Vector, b: Vector) -> float:
    delta = vector_subtract(a, b)
    return vector_dot(delta, delta)


def vector_distance(a: Vector, b: Vector) -> float:
    return math.sqrt(vector_distance_squared(a, b))


def offset_point_on_edge(length: float, rotation: float) -> Vector:
    """Return how far the end of an edge of *length* moves when rotated.

    The edge is the hypotenuse of a right triangle whose other angles are
    *rotation* and ``π/2 - rotation``.  The law of sines gives both legs, which
    are then projected by ``cos(π/2 - rotation)``.
    """

    angle_b = rotation
    angle_c = RIGHT_ANGLE - rotation

    ratio = length / math.sin(RIGHT_ANGLE)
    side_b = ratio * math.sin(angle_b)
    side_c = ratio * math.sin(angle_c)
    # cos(π/2 - rotation), written as sin(rotation) so it is exactly 0 at rest
    cos_c = math.sin(angle_b)
    return Vector(cos_c * side_b, cos_c * side_c)


def rotated_rect_size(rect: Rect, rotation: float) -> Size:
    """Return the axis-aligned bounding size of *rect* rotated by *rotation*.

    Parameters
    ----------
    rect:
        Rectangle to rotate.
    rotation:
        Angle in radians.  Any value is accepted; only ``|sin|`` and ``|cos|``
        of the angle affect the result.

    Returns
    -------
    Size
        ``width = w|cos| + h|sin|`` and ``height = h|cos| + w|sin|``.  At a
        rotation of zero the input width and height come back unchanged.
    """

    horizontal = offset_point_on_edge(rect.width, rotation)
    vertical = offset_point_on_edge(rect.height, rotation)

    top_left = Vector(
        rect.x + abs(horizontal.x),
        rect.y - abs(horizontal.y),
    )
    top_right = Vector(
        rect.x + rect.width + abs(vertical.y),
        rect.y + abs(vertical.x),
    )
    bottom_left = Vector(
        rect.x - abs(vertical.y),
        rect.y + rect.height - abs(vertical.x),
    )
    return Size(
        vector_distance(top_left, top_right),
        vector_distance(top_left, bottom_left),
    )


def centered_rect(container: Size | Rect, aspect_ratio: float) -> Rect:
    """Return the largest *aspect_ratio* rectangle centred inside *container*."""

    width = container.width
    height = width * aspect_ratio
    if height > container.height:
        height = container.height
        width = height / aspect_ratio
    x = (container.width - width) * 0.5
    y = (container.height - height) * 0.5
    return Rect(x, y, width, height)


__all__ = [
    "centered_rect",
    "create_vector",
    "offset_point_on_edge",
    "rotated_rect_size",
    "vector_distance",
    "vector_distance_squared",
    "vector_dot",
    "vector_subtract",
]

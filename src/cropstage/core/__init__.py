"""Pure geometry core: vector helpers, transform resolver and viewport sizing."""

from .geometry import (
    centered_rect,
    create_vector,
    offset_point_on_edge,
    rotated_rect_size,
    vector_distance,
    vector_distance_squared,
    vector_dot,
    vector_subtract,
)
from .transform_resolver import (
    flip_scale,
    image_rect_zoom_factor,
    normalise_rotation,
    resolve_transform,
    transform_matrix,
)
from .viewport_sizing import resolve_viewport_size

__all__ = [
    "centered_rect",
    "create_vector",
    "flip_scale",
    "image_rect_zoom_factor",
    "normalise_rotation",
    "offset_point_on_edge",
    "resolve_transform",
    "resolve_viewport_size",
    "rotated_rect_size",
    "transform_matrix",
    "vector_distance",
    "vector_distance_squared",
    "vector_dot",
    "vector_subtract",
]

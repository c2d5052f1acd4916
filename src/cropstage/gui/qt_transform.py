"""Conversions from resolved transforms to Qt painter transforms."""

from __future__ import annotations

from typing import Optional

from PySide6.QtGui import QTransform

from ..core.transform_resolver import flip_scale, transform_matrix
from ..domain.models import Flip, ResolvedTransform, Size


def to_qtransform(transform: ResolvedTransform) -> Optional[QTransform]:
    """Return *transform* as a :class:`QTransform`, or ``None`` when skipped.

    ``QTransform`` multiplies row vectors, so the column-vector matrix is
    transposed into its ``(m11, m12, m21, m22, dx, dy)`` slots.
    """

    if transform.is_skipped:
        return None
    matrix = transform_matrix(transform)
    return QTransform(
        float(matrix[0, 0]),
        float(matrix[1, 0]),
        float(matrix[0, 1]),
        float(matrix[1, 1]),
        float(matrix[0, 2]),
        float(matrix[1, 2]),
    )


def flip_qtransform(flip: Flip, size: Size) -> QTransform:
    """Return the mirror of a *size* bitmap about its own centre."""

    scale_x, scale_y = flip_scale(flip)
    half_w = size.width * 0.5
    half_h = size.height * 0.5
    return QTransform(
        scale_x,
        0.0,
        0.0,
        scale_y,
        half_w - scale_x * half_w,
        half_h - scale_y * half_h,
    )


__all__ = ["flip_qtransform", "to_qtransform"]

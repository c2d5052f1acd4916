"""Tests for caller-side precondition checks."""

import math

import pytest

from cropstage.core.validation import require_crop, require_size, require_viewport_config
from cropstage.domain.models import CropDescriptor, Size, Vector, ViewportConfig
from cropstage.errors import CropStageError, InvalidInputError


def test_valid_crop_is_returned_unchanged():
    crop = CropDescriptor(center=Vector(0.1, 0.9), zoom=0.0, rotation=-4.0, aspect_ratio=1.5)
    assert require_crop(crop) is crop


@pytest.mark.parametrize(
    "center",
    [Vector(0.0, 0.5), Vector(1.0, 0.5), Vector(0.5, 0.0), Vector(0.5, 1.0), Vector(-0.2, 0.5)],
)
def test_crop_center_on_or_outside_the_edge_is_rejected(center):
    with pytest.raises(InvalidInputError, match="center"):
        require_crop(CropDescriptor(center=center))


@pytest.mark.parametrize("zoom", [-0.01, math.inf, math.nan])
def test_invalid_zoom_is_rejected(zoom):
    with pytest.raises(InvalidInputError, match="zoom"):
        require_crop(CropDescriptor(zoom=zoom))


def test_non_positive_crop_aspect_ratio_is_rejected():
    with pytest.raises(InvalidInputError):
        require_crop(CropDescriptor(aspect_ratio=-1.0))


def test_non_finite_rotation_is_rejected():
    with pytest.raises(InvalidInputError):
        require_crop(CropDescriptor(rotation=math.inf))


@pytest.mark.parametrize("size", [Size(0, 10), Size(10, -1), Size(math.nan, 5)])
def test_invalid_sizes_are_rejected(size):
    with pytest.raises(InvalidInputError, match="container"):
        require_size(size, "container")


def test_viewport_config_checks_ratios_and_bounds():
    ok = ViewportConfig(image_aspect_ratio=0.75, min_height=44.0, max_height=256.0)
    assert require_viewport_config(ok) is ok
    with pytest.raises(InvalidInputError):
        require_viewport_config(
            ViewportConfig(image_aspect_ratio=0.0, min_height=44.0, max_height=256.0)
        )
    with pytest.raises(InvalidInputError):
        require_viewport_config(
            ViewportConfig(image_aspect_ratio=1.0, min_height=300.0, max_height=256.0)
        )
    with pytest.raises(InvalidInputError):
        require_viewport_config(
            ViewportConfig(
                image_aspect_ratio=1.0, min_height=0.0, max_height=10.0, panel_aspect_ratio=-2.0
            )
        )


def test_invalid_input_is_a_cropstage_error():
    assert issubclass(InvalidInputError, CropStageError)

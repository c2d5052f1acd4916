"""Tests for the crop viewport sizing policy."""

import itertools

import pytest

from cropstage.core.viewport_sizing import resolve_viewport_size
from cropstage.domain.models import Size, ViewportConfig


def _config(**overrides) -> ViewportConfig:
    values = {"image_aspect_ratio": 1.0, "min_height": 100.0, "max_height": 500.0}
    values.update(overrides)
    return ViewportConfig(**values)


def test_square_image_clamped_to_max_height():
    size = resolve_viewport_size(Size(800, 600), _config())
    assert size == Size(500.0, 500.0)


def test_panel_aspect_ratio_overrides_single_item_preview():
    config = _config(panel_aspect_ratio=0.5, allow_multiple=False)
    size = resolve_viewport_size(Size(400, 300), config)
    assert size == Size(400.0, 200.0)


def test_panel_aspect_ratio_ignored_when_multiple_items_allowed():
    config = _config(panel_aspect_ratio=0.5, allow_multiple=True)
    size = resolve_viewport_size(Size(400, 300), config)
    # square image: min(400, 500) -> 400, then clamped by container height
    assert size == Size(300.0, 300.0)


def test_crop_aspect_ratio_takes_precedence_over_image_ratio():
    config = _config(image_aspect_ratio=2.0, crop_aspect_ratio=0.5)
    size = resolve_viewport_size(Size(800, 600), config)
    assert size == Size(800.0, 400.0)


def test_fixed_height_is_used_as_is():
    config = _config(image_aspect_ratio=0.5, fixed_height=300.0)
    size = resolve_viewport_size(Size(800, 600), config)
    assert size == Size(600.0, 300.0)


def test_width_containment_rederives_height():
    config = _config(image_aspect_ratio=0.5, fixed_height=400.0, max_height=1000.0)
    size = resolve_viewport_size(Size(400, 1000), config)
    assert size == Size(400.0, 200.0)


def test_height_containment_rederives_width():
    config = _config(min_height=0.0)
    size = resolve_viewport_size(Size(800, 300), config)
    assert size == Size(300.0, 300.0)


def test_width_then_height_containment():
    config = _config(fixed_height=200.0)
    size = resolve_viewport_size(Size(100, 40), config)
    assert size == Size(40.0, 40.0)


def test_min_height_binding_is_undone_by_width_containment():
    config = _config(image_aspect_ratio=0.1, min_height=44.0, max_height=256.0)
    size = resolve_viewport_size(Size(300, 600), config)
    # 300 * 0.1 = 30 is raised to 44, so the width of 440 no longer fits
    assert size.width == pytest.approx(300.0)
    assert size.height == pytest.approx(30.0)


def test_resolve_viewport_size_always_fits_container():
    containers = [Size(800, 600), Size(120, 900), Size(1920, 40), Size(44, 44)]
    ratios = [0.05, 0.5, 1.0, 1.5, 6.0]
    fixed = [None, 10.0, 700.0]
    panels = [None, 0.75]
    for container, ratio, fixed_height, panel in itertools.product(
        containers, ratios, fixed, panels
    ):
        config = ViewportConfig(
            image_aspect_ratio=ratio,
            min_height=44.0,
            max_height=256.0,
            fixed_height=fixed_height,
            panel_aspect_ratio=panel,
        )
        size = resolve_viewport_size(container, config)
        assert size.width <= container.width + 1e-9
        assert size.height <= container.height + 1e-9

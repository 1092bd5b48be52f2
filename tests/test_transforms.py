"""Tests verify actual pixel values produced by each transform."""

import pytest

from picfilter.errors import InvalidArgument
from picfilter.picture import (
    Color,
    FlipAxis,
    Picture,
    Rotation,
    blend,
    blur,
    flip,
    flip_horizontal,
    flip_vertical,
    grayscale,
    invert,
    rotate,
    rotate90,
)

from .conftest import filled, gradient


def test_invert_values():
    picture = filled(2, 1, (0, 100, 255))
    assert invert(picture) is None
    assert picture.get_pixel(1, 0) == (255, 155, 0)


def test_invert_is_an_involution(sample):
    original = sample.copy()
    invert(sample)
    assert sample != original
    invert(sample)
    assert sample == original


def test_grayscale_truncates_average():
    picture = filled(1, 1, (10, 10, 12))
    grayscale(picture)
    assert picture.get_pixel(0, 0) == (10, 10, 10)


def test_grayscale_channels_equal_and_idempotent(sample):
    grayscale(sample)
    for _, _, (red, green, blue) in sample.iter_pixels():
        assert red == green == blue
    once = sample.copy()
    grayscale(sample)
    assert sample == once


def test_rotate90_swaps_dimensions_and_moves_pixels():
    picture = gradient(3, 2)
    rotated = rotate90(picture)
    assert rotated.size == (2, 3)
    # top-left goes to top-right, bottom-left goes to top-left
    assert rotated.get_pixel(1, 0) == picture.get_pixel(0, 0)
    assert rotated.get_pixel(0, 0) == picture.get_pixel(0, 1)
    assert rotated.get_pixel(0, 2) == picture.get_pixel(2, 1)


def test_rotate90_does_not_touch_input(sample):
    before = sample.copy()
    rotate90(sample)
    assert sample == before


def test_four_quarter_turns_are_identity(sample):
    assert rotate90(rotate90(rotate90(rotate90(sample)))) == sample


@pytest.mark.parametrize(
    "rotation, turns",
    [(Rotation.R90, 1), (Rotation.R180, 2), (Rotation.R270, 3)],
)
def test_rotate_composes_quarter_turns(sample, rotation, turns):
    expected = sample
    for _ in range(turns):
        expected = rotate90(expected)
    assert rotate(sample, rotation) == expected


def test_rotate_180_returns_new_picture(sample):
    rotated = rotate(sample, Rotation.R180)
    assert rotated is not sample
    assert rotated.size == sample.size
    assert rotated.get_pixel(0, 0) == sample.get_pixel(4, 2)


def test_flip_horizontal_mirrors_columns(sample):
    flipped = flip_horizontal(sample)
    assert flipped.size == sample.size
    assert flipped.get_pixel(0, 1) == sample.get_pixel(4, 1)
    assert flip_horizontal(flipped) == sample


def test_flip_vertical_mirrors_rows(sample):
    flipped = flip_vertical(sample)
    assert flipped.size == sample.size
    assert flipped.get_pixel(3, 0) == sample.get_pixel(3, 2)
    assert flip_vertical(flipped) == sample


def test_flip_dispatches_on_axis(sample):
    assert flip(sample, FlipAxis.HORIZONTAL) == flip_horizontal(sample)
    assert flip(sample, FlipAxis.VERTICAL) == flip_vertical(sample)


def test_blend_black_and_white():
    out = blend([filled(2, 2, (0, 0, 0)), filled(2, 2, (255, 255, 255))])
    assert out.size == (2, 2)
    for _, _, color in out.iter_pixels():
        assert color == (127, 127, 127)


def test_blend_of_identical_pictures_is_unchanged(sample):
    assert blend([sample, sample, sample]) == sample


def test_blend_single_picture_is_a_copy(sample):
    out = blend([sample])
    assert out == sample
    assert out is not sample


def test_blend_uses_smallest_common_region():
    wide = filled(4, 2, (30, 0, 0))
    tall = filled(2, 5, (0, 30, 0))
    out = blend([wide, tall, filled(3, 3, (0, 0, 30))])
    assert out.size == (2, 2)
    assert out.get_pixel(1, 1) == (10, 10, 10)


def test_blend_rejects_empty_input():
    with pytest.raises(InvalidArgument):
        blend([])


def test_blur_center_pixel():
    picture = filled(3, 3, (10, 20, 30))
    picture.set_pixel(1, 1, (100, 100, 100))
    out = blur(picture)
    assert out.get_pixel(1, 1) == Color(20, 28, 37)
    for x in range(3):
        for y in range(3):
            if (x, y) != (1, 1):
                assert out.get_pixel(x, y) == (10, 20, 30)


@pytest.mark.parametrize("size", [(1, 1), (2, 2), (2, 7), (9, 2)])
def test_blur_small_pictures_unchanged(size):
    picture = gradient(*size)
    assert blur(picture) == picture


def test_blur_leaves_border_and_averages_interior():
    picture = gradient(5, 4)
    out = blur(picture)
    for x in range(5):
        for y in range(4):
            if 0 < x < 4 and 0 < y < 3:
                neighbors = [picture.get_pixel(x + dx, y + dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1)]
                expected = tuple(sum(c[k] for c in neighbors) // 9 for k in range(3))
                assert out.get_pixel(x, y) == expected
            else:
                assert out.get_pixel(x, y) == picture.get_pixel(x, y)


def test_producing_transforms_leave_input_untouched(sample):
    before = sample.copy()
    for transform in (rotate90, flip_horizontal, flip_vertical, blur):
        transform(sample)
    blend([sample, gradient(2, 2)])
    assert sample == before


def test_zero_sized_picture_transforms():
    empty = Picture(0, 0)
    invert(empty)
    assert rotate90(empty).size == (0, 0)
    assert blur(empty) == empty

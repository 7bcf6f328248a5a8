import math
import numpy as np
import pytest
from pycolor import lanes, LaneShapeError


def test_new_is_float32_vector():
    vector = lanes.new(0.25, 0.5, 0.75, 1.0)
    assert vector.dtype == np.float32
    assert vector.tolist() == [0.25, 0.5, 0.75, 1.0]


def test_splat_fills_every_lane():
    assert lanes.splat(3.0).tolist() == [3.0, 3.0, 3.0, 3.0]


def test_zero():
    assert lanes.zero().tolist() == [0.0, 0.0, 0.0, 0.0]


@pytest.mark.parametrize('factory', (
    lambda: lanes.new(1, 2, 3, 4),
    lambda: lanes.splat(1.0),
    lanes.zero,
    lambda: lanes.from_array([1, 2, 3, 4]),
))
def test_vectors_are_read_only(factory):
    vector = factory()
    with pytest.raises(ValueError):
        vector[0] = 5.0


def test_from_array_copies():
    source = np.array([1.0, 2.0, 3.0, 4.0])
    vector = lanes.from_array(source)
    source[0] = 9.0
    assert vector[0] == 1.0


@pytest.mark.parametrize('values', ([], [1, 2, 3], [1, 2, 3, 4, 5]))
def test_from_array_fails_wrong_width(values):
    with pytest.raises(LaneShapeError):
        lanes.from_array(values)


@pytest.mark.parametrize('values, expected', (
    ((0.0, 0.9, 1.5, 254.99), [0, 0, 1, 254]),
    ((-0.5, -1.5, 127.5, 255.0), [0, -1, 127, 255]),
    ((math.nan, 2.0, math.nan, 3.0), [0, 2, 0, 3]),
    ((1e12, -1e12, 0.0, 0.0), [2 ** 30, -2 ** 30, 0, 0]),
))
def test_to_i32x4_truncates_toward_zero(values, expected):
    result = lanes.to_i32x4(lanes.new(*values))
    assert result.dtype == np.int32
    assert result.tolist() == expected

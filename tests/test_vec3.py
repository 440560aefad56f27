"""Tests for the orientation helpers on VEC3."""

import math

import numpy as np
import pytest

from orientation import vec3


def test_swap_yz():
    a = vec3.from_list([0.0, 1.0, 2.0])
    np.testing.assert_array_equal(vec3.swap_yz(a), [0.0, 2.0, 1.0])
    np.testing.assert_array_equal(vec3.swap_yz(vec3.swap_yz(a)), a)
    # input is left alone
    np.testing.assert_array_equal(a, [0.0, 1.0, 2.0])


def test_magnitude_xz():
    assert vec3.magnitude_xz(vec3.from_list([1.0, 0.0, 0.0])) == pytest.approx(1.0)
    b = vec3.from_list([1.0, 2.0, 3.0])
    assert vec3.magnitude_xz_squared(b) == pytest.approx(10.0)
    assert vec3.magnitude_xz(b) == pytest.approx(math.sqrt(10.0))


def test_is_finite():
    assert vec3.is_finite(vec3.from_list([1.0, 2.0, 3.0]))
    assert not vec3.is_finite(vec3.from_list([1.0, math.nan, 3.0]))
    assert not vec3.is_finite(vec3.from_list([math.inf, 0.0, 0.0]))


def test_normalize_zero_vector_is_unchanged():
    np.testing.assert_array_equal(vec3.normalize(vec3.zero()), [0.0, 0.0, 0.0])


def test_from_list_rejects_wrong_size():
    with pytest.raises(ValueError):
        vec3.from_list([1.0, 2.0])


def test_from_list_dtype():
    assert vec3.from_list([1, 2, 3], dtype=np.float32).dtype == np.float32
    assert vec3.zero().dtype == np.float64

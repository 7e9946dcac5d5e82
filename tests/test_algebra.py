"""Unit tests for the elementwise algebra helpers."""

import numpy as np
import pytest

from numint.algebra import (
    accumulate_abs,
    accumulate_operation,
    additive,
    assign,
    clone,
    has_resize,
    same_layout,
    size_of,
    zeros_like,
)

from conftest import FixedVector


class TestAccumulateOperation:

    def test_single_term_numpy(self):
        dst = np.array([1.0, 1.0, 1.0])
        accumulate_operation(dst, additive, 0.5, np.array([2.0, 2.0, 2.0]))
        np.testing.assert_allclose(dst, [2.0, 2.0, 2.0])

    def test_single_term_list(self):
        dst = [1.0, 1.0, 1.0]
        accumulate_operation(dst, additive, 0.5, [2.0, 2.0, 2.0])
        assert dst == [2.0, 2.0, 2.0]

    def test_writes_in_place(self):
        dst = np.ones(4)
        alias = dst
        accumulate_operation(dst, additive, 2.0, np.arange(4.0))
        assert alias is dst
        np.testing.assert_allclose(alias, [1.0, 3.0, 5.0, 7.0])

    def test_several_terms(self):
        dst = [0.0, 1.0]
        accumulate_operation(dst, additive, 1.0, [1.0, 2.0], -2.0, [0.5, 0.5], 3.0, [0.0, 1.0])
        assert dst == pytest.approx([0.0, 5.0])

    def test_custom_combine_op(self):
        def combine(current, a, b):
            return current + a - b

        dst = np.array([10.0, 20.0])
        accumulate_operation(dst, combine, 2.0, np.array([1.0, 2.0]), 1.0, np.array([3.0, 4.0]))
        np.testing.assert_allclose(dst, [9.0, 20.0])

    def test_generic_container(self):
        dst = FixedVector([1.0, 2.0])
        accumulate_operation(dst, additive, 0.5, [4.0, 4.0])
        assert dst[0] == pytest.approx(3.0)
        assert dst[1] == pytest.approx(4.0)

    def test_odd_term_count_rejected(self):
        with pytest.raises(ValueError):
            accumulate_operation([1.0], additive, 0.5)


class TestAccumulateAbs:

    def test_list(self):
        assert accumulate_abs([-1.0, 2.0, -3.5]) == pytest.approx(6.5)

    def test_numpy_uses_double_precision(self):
        values = np.full(1000, -0.1, dtype=np.float32)
        assert isinstance(accumulate_abs(values), float)
        assert accumulate_abs(values) == pytest.approx(100.0, rel=1e-6)

    def test_empty(self):
        assert accumulate_abs([]) == 0.0


class TestBuffers:

    def test_assign_numpy(self):
        dst = np.zeros(3)
        assign(dst, [1.0, 2.0, 3.0])
        np.testing.assert_allclose(dst, [1.0, 2.0, 3.0])

    def test_assign_list(self):
        dst = [0.0, 0.0]
        assign(dst, np.array([4.0, 5.0]))
        assert dst == [4.0, 5.0]

    def test_zeros_like_numpy(self):
        buf = zeros_like(np.ones((2, 3), dtype=np.float32), "float64")
        assert buf.shape == (2, 3)
        assert buf.dtype == np.float64
        assert not buf.any()

    def test_zeros_like_generic(self):
        ref = FixedVector([1.5, -2.0])
        buf = zeros_like(ref)
        assert isinstance(buf, FixedVector)
        assert len(buf) == 2
        assert buf[0] == 0.0 and buf[1] == 0.0
        assert ref[0] == 1.5

    def test_clone_is_independent(self):
        for state in (np.array([1.0, 2.0]), [1.0, 2.0], FixedVector([1.0, 2.0])):
            copy = clone(state)
            copy[0] = 99.0
            assert state[0] == 1.0

    def test_size_of(self):
        assert size_of(np.zeros((2, 3))) == 6
        assert size_of([1.0, 2.0]) == 2


class TestSameLayout:

    def test_arrays_compare_shape(self):
        assert same_layout(np.zeros((2, 3)), np.ones((2, 3)))
        assert not same_layout(np.zeros(6), np.zeros((2, 3)))

    def test_other_containers_compare_length(self):
        assert same_layout([0.0, 0.0], FixedVector([1.0, 2.0]))
        assert same_layout(np.zeros(2), [1.0, 2.0])
        assert not same_layout([0.0], [0.0, 0.0])


class TestHasResize:

    def test_resizable_containers(self):
        assert has_resize(np.zeros(3))
        assert has_resize([1.0])

    def test_fixed_container(self):
        assert not has_resize(FixedVector([1.0]))
        assert not has_resize((1.0, 2.0))

    def test_resize_method(self):
        class Resizable(FixedVector):
            def resize(self, n):
                self._values = (self._values + [0.0] * n)[:n]

        assert has_resize(Resizable([1.0]))

import numpy as np
import pytest

from knowhere import distances_ref as ref
from knowhere import distances_sse as sse


def _int_vectors(d, seed):
    rng = np.random.default_rng(seed)
    x = rng.integers(-8, 9, size=d).astype(np.float32)
    y = rng.integers(-8, 9, size=d).astype(np.float32)
    return x, y


@pytest.mark.parametrize("d", list(range(0, 14)))
def test_exact_inputs_agree_with_reference(d):
    x, y = _int_vectors(d, d)
    assert sse.fvec_l2sqr(x, y) == ref.fvec_l2sqr(x, y)
    assert sse.fvec_inner_product(x, y) == ref.fvec_inner_product(x, y)
    assert sse.fvec_norm_l2sqr(x) == ref.fvec_norm_l2sqr(x)


def test_l1_and_linf_match_reference():
    x, y = _int_vectors(9, 3)
    x = x / 3
    assert sse.fvec_l1(x, y) == ref.fvec_l1(x, y)
    assert sse.fvec_linf(x, y) == ref.fvec_linf(x, y)


def test_accumulation_follows_lanes():
    x = [1e8, 1.0, -1e8, 1.0]
    ones = [1.0, 1.0, 1.0, 1.0]
    assert sse.fvec_inner_product(x, ones) == 0.0
    assert ref.fvec_inner_product(x, ones) == 1.0


def test_identical_vectors_and_symmetry():
    x, y = _int_vectors(7, 11)
    x = x * 0.37
    assert sse.fvec_l2sqr(x, x) == 0.0
    assert sse.fvec_l2sqr(x, y) == sse.fvec_l2sqr(y, x)


def test_norm_equals_self_inner_product():
    x, _ = _int_vectors(10, 5)
    x = x * 0.1
    assert sse.fvec_norm_l2sqr(x) == sse.fvec_inner_product(x, x)


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        sse.fvec_l2sqr([1.0, 2.0, 3.0], [1.0])


@pytest.mark.parametrize("d", [1, 2, 4, 5, 8, 12, 13])
def test_ny_matches_pairwise_functions(d):
    rng = np.random.default_rng(d)
    x = rng.standard_normal(d).astype(np.float32)
    ys = rng.standard_normal((5, d)).astype(np.float32)
    l2 = sse.fvec_l2sqr_ny(x, ys)
    ip = sse.fvec_inner_products_ny(x, ys)
    assert l2.shape == (5,)
    for row, dist, prod in zip(ys, l2, ip):
        assert dist == pytest.approx(sse.fvec_l2sqr(x, row), rel=1e-6)
        assert prod == pytest.approx(sse.fvec_inner_product(x, row), rel=1e-6, abs=1e-6)


def test_ny_rejects_bad_shapes():
    with pytest.raises(ValueError):
        sse.fvec_l2sqr_ny([1.0, 2.0], [[1.0, 2.0, 3.0]])


def test_madd_matches_reference():
    x, y = _int_vectors(8, 2)
    np.testing.assert_array_equal(sse.fvec_madd(x, 0.25, y), ref.fvec_madd(x, 0.25, y))


def test_argmin_ties_follow_lane_order():
    a = [5.0, 3.0, 3.0, 9.0]
    zeros = [0.0, 0.0, 0.0, 0.0]
    c, idx = sse.fvec_madd_and_argmin(a, 1.0, zeros)
    assert idx == 2
    assert c[idx] == c.min()
    assert ref.fvec_madd_and_argmin(a, 1.0, zeros)[1] == 1


@pytest.mark.parametrize("n", [4, 8, 16, 7])
def test_argmin_points_at_minimum(n):
    rng = np.random.default_rng(n)
    a = rng.standard_normal(n).astype(np.float32)
    b = rng.standard_normal(n).astype(np.float32)
    c, idx = sse.fvec_madd_and_argmin(a, -0.5, b)
    np.testing.assert_array_equal(c, ref.fvec_madd(a, -0.5, b))
    assert c[idx] == c.min()


def test_argmin_uneven_length_matches_reference():
    a = [2.0, 1.0, 1.0, 4.0, 1.0]
    b = [0.0] * 5
    assert sse.fvec_madd_and_argmin(a, 1.0, b)[1] == ref.fvec_madd_and_argmin(a, 1.0, b)[1]


def test_argmin_without_candidate_returns_minus_one():
    _, idx = sse.fvec_madd_and_argmin([1e21, 2e21, 3e21, 4e21], 1.0, [0.0] * 4)
    assert idx == -1
import numpy as np
import pytest

from bandit_search.utils import (
    argmax,
    argmin,
    argsort,
    choose_one,
    divide,
    log,
    normalize,
    normalize_log,
    sqrt,
    subtract,
)


def test_elementwise_helpers():
    np.testing.assert_allclose(log([1.0, np.e]), [0.0, 1.0])
    np.testing.assert_allclose(sqrt([4.0, 9.0]), [2.0, 3.0])
    np.testing.assert_allclose(divide([1.0, 4.0], [2.0, 2.0]), [0.5, 2.0])
    np.testing.assert_allclose(subtract([1.0, 4.0], [2.0, 2.0]), [-1.0, 2.0])


def test_helpers_do_not_modify_inputs():
    values = np.array([4.0, 9.0])
    sqrt(values)
    np.testing.assert_array_equal(values, [4.0, 9.0])


@pytest.mark.parametrize(
    "call",
    [
        lambda: log([1.0, 0.0]),
        lambda: sqrt([-1.0]),
        lambda: divide([1.0], [0.0]),
        lambda: divide([1.0, 2.0], [1.0]),
        lambda: subtract([1.0], [1.0, 2.0]),
        lambda: argmin([]),
        lambda: normalize([0.0, 0.0]),
        lambda: normalize([1.0, -1.0]),
        lambda: choose_one([]),
    ],
)
def test_domain_errors(call):
    with pytest.raises(ValueError):
        call()


def test_argmin_argmax_take_first_on_ties():
    assert argmin([3.0, 1.0, 1.0]) == 1
    assert argmax([1.0, 5.0, 5.0]) == 1


def test_argsort_is_stable():
    values = [0.5, 0.9, 0.5, 0.1]
    assert argsort(values).tolist() == [3, 0, 2, 1]
    assert argsort(values, descending=True).tolist() == [1, 0, 2, 3]


def test_normalize():
    np.testing.assert_allclose(normalize([1.0, 3.0]), [0.25, 0.75])


def test_choose_one_never_picks_zero_weight():
    rng = np.random.default_rng(0)
    draws = {choose_one([0.0, 1.0, 0.0], rng) for _ in range(200)}
    assert draws == {1}


def test_choose_one_never_picks_trailing_zero_weights():
    rng = np.random.default_rng(1)
    draws = {choose_one([0.3, 0.7, 0.0, 0.0], rng) for _ in range(2000)}
    assert draws == {0, 1}


def test_normalize_log_handles_extreme_scales():
    np.testing.assert_allclose(normalize_log([0.0, np.log(3.0)]), [0.25, 0.75])
    # exp() of these alone would overflow or underflow to zero
    np.testing.assert_allclose(normalize_log([5000.0, 5000.0]), [0.5, 0.5])
    np.testing.assert_allclose(normalize_log([-5000.0, -5000.0 + np.log(3.0)]), [0.25, 0.75])
    probabilities = normalize_log([0.0, -1e6])
    assert probabilities.tolist() == [1.0, 0.0]


@pytest.mark.parametrize("values", [[], [0.0, np.inf], [np.nan]])
def test_normalize_log_rejects_degenerate_input(values):
    with pytest.raises(ValueError):
        normalize_log(values)


def test_choose_one_follows_weights():
    rng = np.random.default_rng(7)
    draws = [choose_one([1.0, 3.0], rng) for _ in range(4000)]
    share = sum(draws) / len(draws)
    assert 0.7 < share < 0.8

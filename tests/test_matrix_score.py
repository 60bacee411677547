import itertools

import pytest

from bitcraft.matrix_score import matrix_score, matrix_score_greedy

EXAMPLE = [[0, 0, 1, 1], [1, 0, 1, 0], [1, 1, 0, 0]]


def _row_sum(grid):
    return sum(int("".join(map(str, row)), 2) for row in grid)


@pytest.mark.parametrize("score", [matrix_score, matrix_score_greedy])
def test_example(score):
    assert score(EXAMPLE) == 39


@pytest.mark.parametrize("score", [matrix_score, matrix_score_greedy])
def test_single_zero_becomes_one(score):
    assert score([[0]]) == 1


@pytest.mark.parametrize("score", [matrix_score, matrix_score_greedy])
def test_input_not_mutated(score):
    grid = [row[:] for row in EXAMPLE]
    score(grid)
    assert grid == EXAMPLE


@pytest.mark.parametrize("score", [matrix_score, matrix_score_greedy])
def test_never_below_original(score):
    assert score(EXAMPLE) >= _row_sum(EXAMPLE)


@pytest.mark.parametrize("score", [matrix_score, matrix_score_greedy])
def test_bounded_by_all_ones(score):
    n, m = len(EXAMPLE), len(EXAMPLE[0])
    assert score(EXAMPLE) <= n * ((1 << m) - 1)


def test_all_ones_unchanged():
    grid = [[1, 1, 1], [1, 1, 1]]
    assert matrix_score(grid) == _row_sum(grid)


def test_both_methods_agree_on_all_small_grids():
    for bits in itertools.product([0, 1], repeat=6):
        grid = [list(bits[:3]), list(bits[3:])]
        assert matrix_score(grid) == matrix_score_greedy(grid)


@pytest.mark.parametrize("score", [matrix_score, matrix_score_greedy])
def test_empty_grid_rejected(score):
    with pytest.raises(ValueError):
        score([])


@pytest.mark.parametrize("score", [matrix_score, matrix_score_greedy])
def test_ragged_grid_rejected(score):
    with pytest.raises(ValueError):
        score([[1, 0], [1]])
"""Tests for the Fibonacci sequence generator."""

import pytest

from goldenspiral.engine.sequence import generate


def test_first_values():
    assert generate(1) == [1]
    assert generate(2) == [1, 1]
    assert generate(8) == [1, 1, 2, 3, 5, 8, 13, 21]


@pytest.mark.parametrize("n", [1, 2, 3, 7, 15, 30])
def test_length_and_recurrence(n):
    seq = generate(n)
    assert len(seq) == n
    for i in range(2, n):
        assert seq[i] == seq[i - 1] + seq[i - 2]


def test_thirteenth_value_is_233():
    # 144 is F(12), a classic off-by-one
    assert generate(13)[12] == 233


@pytest.mark.parametrize("n", [0, -1, -15])
def test_non_positive_rejected(n):
    with pytest.raises(ValueError, match="greater than 0"):
        generate(n)

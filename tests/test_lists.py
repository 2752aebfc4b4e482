from __future__ import annotations

import logging

import pytest

from utilkit.utils import RandomNumberGenerator, unique_sample


def test_sample_has_unique_positions() -> None:
    pool = list(range(20))

    sample = unique_sample(pool, 10, RandomNumberGenerator(seed=3))

    assert len(sample) == 10
    assert len(set(sample)) == 10
    assert set(sample) <= set(pool)


def test_sample_whole_pool_is_a_permutation() -> None:
    pool = ["a", "b", "c", "d"]

    sample = unique_sample(pool, 4, RandomNumberGenerator(seed=4))

    assert sorted(sample) == pool


def test_duplicate_values_are_kept_by_position() -> None:
    sample = unique_sample(["x", "x", "y"], 3, RandomNumberGenerator(seed=5))

    assert sorted(sample) == ["x", "x", "y"]


def test_seeded_samples_repeat() -> None:
    pool = list("abcdefgh")

    assert unique_sample(pool, 5, RandomNumberGenerator(seed=9)) == unique_sample(
        pool, 5, RandomNumberGenerator(seed=9)
    )


def test_small_pool_is_returned(caplog: pytest.LogCaptureFixture) -> None:
    pool = ("a", "b")

    with caplog.at_level(logging.WARNING, logger="utilkit.utils.lists"):
        sample = unique_sample(pool, 3)

    assert sample == ["a", "b"]
    assert "too small" in caplog.text


def test_empty_sample() -> None:
    assert unique_sample([1, 2, 3], 0) == []

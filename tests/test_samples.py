import random

import pytest

from src.mytrie.samples import generate_samples, generate_string

CHARSET = "abcdefghijklmnopqrstuvwxyz"


def test_generate_string_length_and_charset():
    """Test that a string has the requested length and alphabet."""
    sample = generate_string(40, CHARSET, random.Random(1))

    assert len(sample) == 40
    assert set(sample) <= set(CHARSET)


def test_generate_samples_are_distinct_and_in_range():
    """Test count, uniqueness and length bounds of the samples."""
    samples = generate_samples(500, 30, 60, CHARSET, seed=3)

    assert len(samples) == 500
    assert len(set(samples)) == 500
    assert all(30 <= len(sample) < 60 for sample in samples)


def test_generate_samples_is_reproducible():
    """Test that the same seed gives the same samples."""
    assert generate_samples(20, 5, 10, CHARSET, seed=9) == generate_samples(
        20,
        5,
        10,
        CHARSET,
        seed=9,
    )


def test_generate_samples_exhausts_small_space():
    """Test that every possible string can be requested."""
    samples = generate_samples(6, 1, 3, "ab", seed=0)
    assert sorted(samples) == ["a", "aa", "ab", "b", "ba", "bb"]


@pytest.mark.parametrize(
    "count, min_length, max_length, charset",
    [
        (1, 5, 5, CHARSET),
        (1, 5, 4, CHARSET),
        (1, 1, 2, ""),
        (7, 1, 3, "ab"),
    ],
)
def test_generate_samples_invalid_arguments(
    count,
    min_length,
    max_length,
    charset,
):
    """Test that impossible requests are refused instead of looping."""
    with pytest.raises(ValueError):
        generate_samples(count, min_length, max_length, charset)

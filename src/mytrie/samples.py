"""Random sample generation for benchmarking the trie."""

import random
from collections.abc import Sequence
from typing import Optional


def generate_string(length: int, charset: Sequence[str], rng: random.Random) -> str:
    """Build one random string.

    Args:
        length (int): The number of characters of the string.
        charset (Sequence[str]): The characters to draw from.
        rng (random.Random): The random generator to use.

    Returns:
        str: The generated string.

    """
    return "".join(rng.choices(charset, k=length))


def generate_samples(
    count: int,
    min_length: int,
    max_length: int,
    charset: Sequence[str],
    seed: Optional[int] = None,
) -> list[str]:
    """Generate distinct random strings.

    Args:
        count (int): The number of strings to generate.
        min_length (int): The minimum length of a string.
        max_length (int): The exclusive upper bound of a string's length.
        charset (Sequence[str]): The characters to draw from.
        seed (Optional[int]): Seed for reproducible samples.

    Raises:
        ValueError: If the length range or the charset is empty, or if
        they allow fewer than `count` distinct strings.

    Returns:
        list[str]: `count` distinct strings in generation order.

    """
    if max_length <= min_length:
        raise ValueError(
            f"Empty length range: {min_length} to {max_length}.",
        )
    if not charset:
        raise ValueError("The charset must not be empty.")

    alphabet_size = len(set(charset))
    available = 0
    for length in range(min_length, max_length):
        available += alphabet_size**length
        if available >= count:
            break
    if available < count:
        raise ValueError(
            f"Only {available} distinct strings can be built, "
            f"but {count} were requested.",
        )

    rng = random.Random(seed)
    seen: set[str] = set()
    samples: list[str] = []
    # Duplicates would be stored once only, so they are drawn again
    while len(samples) < count:
        sample = generate_string(
            rng.randrange(min_length, max_length),
            charset,
            rng,
        )
        if sample not in seen:
            seen.add(sample)
            samples.append(sample)
    return samples

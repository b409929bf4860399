"""Random embedding generators for tests and benchmarks."""

import random


def uniform_random_embedding(
    dimension: int,
    rng: random.Random | None = None,
) -> list[float]:
    """Generate an embedding with values drawn uniformly from [-1, 1).

    Uniform vectors are nearly orthogonal to each other in high dimensions
    and carry no semantic structure, so they only stand in for real
    embeddings where the values themselves do not matter (timing, shape).

    Args:
        dimension: Number of values to generate.
        rng: Random source to draw from. A fresh ``random.Random`` is
            created for the call when omitted; pass a seeded instance for
            reproducible output.

    Returns:
        List of ``dimension`` floats.

    Raises:
        ValueError: If dimension is negative.
    """
    if dimension < 0:
        raise ValueError(f"Dimension cannot be negative: {dimension}")

    if rng is None:
        rng = random.Random()

    return [rng.random() * 2 - 1 for _ in range(dimension)]

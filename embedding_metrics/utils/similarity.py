"""Similarity and distance metrics for embeddings."""

import math

from embedding_metrics.models.embedding import Embedding


class LengthMismatchError(ValueError):
    """Raised when two embeddings passed to a metric differ in length.

    Attributes:
        left_length: Length of the first embedding.
        right_length: Length of the second embedding.
    """

    def __init__(self, left_length: int, right_length: int):
        self.left_length = left_length
        self.right_length = right_length
        super().__init__(
            f"Embeddings must have the same length: {left_length} != {right_length}"
        )


def _check_lengths(a: Embedding, b: Embedding) -> None:
    if len(a) != len(b):
        raise LengthMismatchError(len(a), len(b))


def cosine_similarity(a: Embedding, b: Embedding) -> float:
    """Compute cosine similarity between two embeddings.

    Empty and zero vectors have no direction; for those the similarity
    is defined as 0.0 instead of NaN. Infinity and NaN elements are not
    special-cased and propagate through the arithmetic.

    Args:
        a: First embedding.
        b: Second embedding.

    Returns:
        Cosine similarity score between -1.0 and 1.0.

    Raises:
        LengthMismatchError: If the embeddings have different lengths.
    """
    _check_lengths(a, b)

    dot_product = 0.0
    norm_a = 0.0
    norm_b = 0.0
    for x, y in zip(a, b):
        dot_product += x * y
        norm_a += x * x
        norm_b += y * y

    norm_a = math.sqrt(norm_a)
    norm_b = math.sqrt(norm_b)

    if norm_a == 0 or norm_b == 0:
        return 0.0

    return dot_product / (norm_a * norm_b)


def euclidean_distance(a: Embedding, b: Embedding) -> float:
    """Compute Euclidean (L2) distance between two embeddings.

    Args:
        a: First embedding.
        b: Second embedding.

    Returns:
        Euclidean distance (>= 0). Two empty embeddings are 0.0 apart.

    Raises:
        LengthMismatchError: If the embeddings have different lengths.
    """
    _check_lengths(a, b)

    sum_squared = 0.0
    for x, y in zip(a, b):
        diff = x - y
        sum_squared += diff * diff

    return math.sqrt(sum_squared)

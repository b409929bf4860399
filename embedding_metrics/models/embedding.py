"""Embedding value type."""

from typing import Sequence

Embedding = Sequence[float]
"""An ordered, fixed-length vector of floats.

Lists and tuples are both accepted. Functions in this package never
mutate the embeddings passed to them.
"""

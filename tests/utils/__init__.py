"""Test utilities for embed_lite."""

from tests.utils.comparison import assert_embeddings_close, assert_tensors_close

__all__ = [
    "assert_embeddings_close",
    "assert_tensors_close",
]

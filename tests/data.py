"""
Sample test data for embed-lite tests.

This module provides:
- A small word-level vocabulary and sample texts
- Embedding tables for the synthetic lookup graphs
"""

from typing import Dict, List

import numpy as np


# ============================================================================
# Vocabulary
# ============================================================================

PAD_ID = 0
UNK_ID = 1
CLS_ID = 2
SEP_ID = 3

VOCAB: Dict[str, int] = {
    "[PAD]": PAD_ID,
    "[UNK]": UNK_ID,
    "[CLS]": CLS_ID,
    "[SEP]": SEP_ID,
    "the": 4,
    "quick": 5,
    "brown": 6,
    "fox": 7,
    "jumps": 8,
    "over": 9,
    "lazy": 10,
    "dog": 11,
    "hello": 12,
    "world": 13,
}

HIDDEN_SIZE = 8


# ============================================================================
# Sample texts
# ============================================================================

SAMPLE_TEXTS: List[str] = [
    "hello world",
    "The quick brown fox",
    "the quick brown fox jumps over the lazy dog",
    "Hello, unknown words!",
    "",
]

LONG_TEXT = " ".join(["the quick brown fox jumps over the lazy dog"] * 20)


# ============================================================================
# Embedding tables
# ============================================================================

def make_embedding_table(vocab_size: int = len(VOCAB), hidden_size: int = HIDDEN_SIZE) -> np.ndarray:
    """Deterministic [vocab_size, hidden_size] float32 table with distinct rows."""
    rng = np.random.default_rng(1234)
    return rng.standard_normal((vocab_size, hidden_size)).astype(np.float32)


# Exactly representable in float32, so sums and means of copies are exact
CONSTANT_VECTOR = np.array([0.5, -1.25, 2.0, 3.75, 0.0, -0.125, 8.0, 1.5], dtype=np.float32)

# Not binary fractions: float32 sums of copies of these drift from n * v
INEXACT_VECTOR = np.array([0.1, 1 / 3, -0.7, 1e-3, 123.456, -5.55, 0.2, 7.77], dtype=np.float32)

POOLING_LENGTHS: List[int] = [7, 100, 513]


def repeated_text(num_tokens: int) -> str:
    """Text that encodes to exactly ``num_tokens`` tokens, boundary tokens included."""
    return " ".join(["hello"] * (num_tokens - 2))

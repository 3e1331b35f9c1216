"""
Pytest configuration and shared fixtures for embed-lite tests.

This module provides reusable fixtures for testing, including:
- Serialized tokenizer definitions
- Serialized synthetic ONNX graphs
- Ready engines built from them
"""

import numpy as np
import pytest

from embed_lite.core.config import EngineConfig
from embed_lite.core.inference_engine import InferenceEngine
from embed_lite.utils.logging import configure_logging
from tests import graphs
from tests.data import CONSTANT_VECTOR, INEXACT_VECTOR, make_embedding_table


configure_logging(log_level="WARNING")


@pytest.fixture(scope="session")
def tokenizer_bytes() -> bytes:
    """
    Word-level tokenizer definition with [CLS] / [SEP] boundary tokens.

    Returns:
        bytes: Contents of a tokenizer.json file
    """
    return graphs.tokenizer_bytes()


@pytest.fixture(scope="session")
def embedding_table() -> np.ndarray:
    """Deterministic [vocab_size, hidden_size] float32 table."""
    return make_embedding_table()


@pytest.fixture(scope="session")
def lookup_model_bytes(embedding_table: np.ndarray) -> bytes:
    """ONNX graph whose per-token output is the embedding table row of the token."""
    return graphs.lookup_model(embedding_table)


@pytest.fixture(scope="session")
def constant_model_bytes() -> bytes:
    """ONNX graph emitting CONSTANT_VECTOR at every token position."""
    return graphs.constant_vector_model(CONSTANT_VECTOR)


@pytest.fixture(scope="session")
def lookup_engine(lookup_model_bytes: bytes, tokenizer_bytes: bytes) -> InferenceEngine:
    """
    Engine over the lookup graph (session-scoped, shared across tests).

    Sharing is safe: the engine is never mutated after construction.
    """
    return InferenceEngine(lookup_model_bytes, tokenizer_bytes, config=EngineConfig(num_threads=1))


@pytest.fixture(scope="session")
def constant_engine(constant_model_bytes: bytes, tokenizer_bytes: bytes) -> InferenceEngine:
    """Engine over the constant-vector graph."""
    return InferenceEngine(constant_model_bytes, tokenizer_bytes)


@pytest.fixture(scope="session")
def inexact_constant_engine(tokenizer_bytes: bytes) -> InferenceEngine:
    """Engine over a constant-vector graph whose values are not binary fractions."""
    return InferenceEngine(graphs.constant_vector_model(INEXACT_VECTOR), tokenizer_bytes)

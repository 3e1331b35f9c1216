"""
Tests for reading model files and building an engine from settings.
"""

import numpy as np
import pytest

from embed_lite.core.errors import ModelLoadError
from embed_lite.core.inference_engine import InferenceEngine
from embed_lite.loaders import load_engine, read_model_files
from embed_lite.settings import EmbedSettings
from tests.data import HIDDEN_SIZE


@pytest.fixture
def model_dir(tmp_path, lookup_model_bytes, tokenizer_bytes):
    (tmp_path / "model.onnx").write_bytes(lookup_model_bytes)
    (tmp_path / "tokenizer.json").write_bytes(tokenizer_bytes)
    return tmp_path


def _settings(directory, **overrides) -> EmbedSettings:
    values = {
        "model_path": str(directory / "model.onnx"),
        "tokenizer_path": str(directory / "tokenizer.json"),
    }
    values.update(overrides)
    return EmbedSettings(_env_file=None, **values)


@pytest.mark.unit
def test_read_model_files(model_dir, lookup_model_bytes, tokenizer_bytes):
    """Test that both files are read verbatim."""
    model_bytes, tok_bytes = read_model_files(_settings(model_dir))

    assert model_bytes == lookup_model_bytes
    assert tok_bytes == tokenizer_bytes


@pytest.mark.unit
def test_read_model_files_missing(tmp_path):
    """Test that a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="model.onnx"):
        read_model_files(_settings(tmp_path))


@pytest.mark.unit
def test_load_engine(model_dir, lookup_engine):
    """Test that load_engine builds a working engine from files."""
    engine = load_engine(_settings(model_dir, num_threads=2))

    assert isinstance(engine, InferenceEngine)
    assert engine.config.num_threads == 2
    assert engine.hidden_size == HIDDEN_SIZE
    assert np.array_equal(engine.embed("hello world"), lookup_engine.embed("hello world"))


@pytest.mark.unit
def test_load_engine_corrupt_model(model_dir):
    """Test that a corrupt model file surfaces ModelLoadError."""
    (model_dir / "model.onnx").write_bytes(b"corrupt")

    with pytest.raises(ModelLoadError):
        load_engine(_settings(model_dir))

"""
embed_lite: A lightweight sentence embedding engine on top of ONNX Runtime.

This package provides:
- Tokenizer adapter over Hugging Face ``tokenizer.json`` definitions
- Inference engine compiling an ONNX transformer graph from raw bytes
- Mean pooling of per-token hidden states into a sentence vector
- Settings and loaders for wiring the engine from files and environment
"""

from embed_lite.core.config import EngineConfig
from embed_lite.core.errors import (
    EmbedError,
    EmbedLiteError,
    InferenceError,
    InitError,
    ModelLoadError,
    OutputShapeError,
    TokenizeError,
    TokenizerLoadError,
)
from embed_lite.core.inference_engine import InferenceEngine
from embed_lite.tokenizer.tokenizer_adapter import TokenizerAdapter, TokenSequence

__version__ = "0.1.0"
__author__ = "embed-lite contributors"

__all__ = [
    "EngineConfig",
    "InferenceEngine",
    "TokenizerAdapter",
    "TokenSequence",
    "EmbedLiteError",
    "InitError",
    "TokenizerLoadError",
    "ModelLoadError",
    "EmbedError",
    "TokenizeError",
    "InferenceError",
    "OutputShapeError",
]

"""
Core embedding engine module.

Provides the main API and the pieces it is assembled from:
- InferenceEngine: Compiled ONNX session plus tokenizer, main entry point
- EngineConfig: Execution context configuration
- Error hierarchy for initialization and per-call failures
"""

from embed_lite.core.config import EngineConfig
from embed_lite.core.inference_engine import InferenceEngine

__all__ = ["EngineConfig", "InferenceEngine"]

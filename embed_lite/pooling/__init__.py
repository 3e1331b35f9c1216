"""
Reduction of per-token hidden states into a single sentence vector.
"""

from embed_lite.pooling.mean_pooling import mean_pool

__all__ = ["mean_pool"]

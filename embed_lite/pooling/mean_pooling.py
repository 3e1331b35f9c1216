"""
Mean pooling over the token axis.

Every position contributes equally, boundary tokens included. The attention
mask is not applied: a single unpadded sequence has an all-ones mask, so the
two are equivalent for batch size 1. Padded batches would need a
mask-weighted mean instead.
"""

import numpy as np
import torch


def mean_pool(hidden_states: np.ndarray) -> np.ndarray:
    """Average hidden states across the sequence axis.

    Args:
        hidden_states: Per-token outputs [1, seq_len, hidden_size]

    Returns:
        Sentence vector [hidden_size], float32, not sharing memory with the input

    Raises:
        ValueError: If the input is not a rank-3 array with batch size 1
    """
    if hidden_states.ndim != 3:
        raise ValueError(
            f"hidden_states must be rank 3 [1, seq_len, hidden], got shape {hidden_states.shape}"
        )
    if hidden_states.shape[0] != 1:
        raise ValueError(f"batch size must be 1, got {hidden_states.shape[0]}")
    if hidden_states.shape[1] == 0:
        raise ValueError("cannot pool an empty sequence")

    tensor = torch.from_numpy(np.ascontiguousarray(hidden_states, dtype=np.float32))

    # [1, seq_len, hidden] -> [1, hidden] -> [hidden]; float64 accumulation keeps
    # the mean of identical float32 rows equal to that row
    pooled = tensor.mean(dim=1, dtype=torch.float64).squeeze(0).to(torch.float32)

    return pooled.numpy().copy()

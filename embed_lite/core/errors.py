"""
Exception hierarchy for the embedding engine.

Initialization errors (``InitError``) mean no engine was constructed.
Per-call errors (``EmbedError``) are local to a single ``embed`` call and
leave the engine usable for subsequent calls.
"""


class EmbedLiteError(Exception):
    """Base class for all embed_lite errors."""


class InitError(EmbedLiteError):
    """Engine could not be constructed."""


class TokenizerLoadError(InitError):
    """Tokenizer definition bytes are malformed or use an unsupported scheme."""


class ModelLoadError(InitError):
    """Model bytes are not a valid graph, or compiling them failed.

    Also raised when the graph's declared inputs do not match the three
    rank-2 int64 inputs the engine feeds.
    """


class EmbedError(EmbedLiteError):
    """A single embedding call failed."""


class TokenizeError(EmbedError):
    """Text could not be tokenized."""


class InferenceError(EmbedError):
    """Graph execution failed (shape mismatch, unsupported op, runtime fault)."""


class OutputShapeError(EmbedError):
    """The graph ran but its first output is not a (1, seq_len, hidden) float32 tensor."""

"""
Engine configuration.

This module defines the EngineConfig class which carries the execution context
settings for the compiled ONNX session and the tokenizer truncation policy.
Environment lookups are not performed here; see ``embed_lite.settings``.
"""

from typing import Any, Dict, Optional


class EngineConfig:
    """Configuration class for InferenceEngine.

    Attributes:
        num_threads: Intra-op thread count bound to the session.
        max_length: Token limit applied by the tokenizer adapter. ``None`` keeps
            whatever truncation the tokenizer definition itself declares.
        log_severity_level: onnxruntime log severity (0=verbose .. 4=fatal).
        session_name: Log id attached to the onnxruntime session.
    """

    def __init__(
        self,
        num_threads: int = 1,
        max_length: Optional[int] = None,
        log_severity_level: int = 2,
        session_name: str = "Encode",
        **kwargs: Any,
    ) -> None:
        """Initialize EngineConfig.

        Args:
            num_threads: Intra-op thread count bound to the session.
            max_length: Optional truncation limit in tokens.
            log_severity_level: onnxruntime log severity, 2 is warning.
            session_name: Log id attached to the onnxruntime session.
            **kwargs: Additional configuration parameters (ignored).
        """
        self.num_threads = num_threads
        self.max_length = max_length
        self.log_severity_level = log_severity_level
        self.session_name = session_name

        self._validate()

    def _validate(self) -> None:
        """Validate configuration parameters.

        Raises:
            ValueError: If configuration parameters are invalid.
        """
        if not isinstance(self.num_threads, int) or self.num_threads < 1:
            raise ValueError(f"num_threads must be a positive integer, got {self.num_threads}")
        if self.max_length is not None and self.max_length < 1:
            raise ValueError(f"max_length must be positive, got {self.max_length}")
        if not 0 <= self.log_severity_level <= 4:
            raise ValueError(
                f"log_severity_level must be between 0 and 4, got {self.log_severity_level}"
            )
        if not self.session_name:
            raise ValueError("session_name cannot be empty")

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "EngineConfig":
        """Create EngineConfig from a dictionary, ignoring unknown keys."""
        return cls(**config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "num_threads": self.num_threads,
            "max_length": self.max_length,
            "log_severity_level": self.log_severity_level,
            "session_name": self.session_name,
        }

    def __repr__(self) -> str:
        return (
            f"EngineConfig(num_threads={self.num_threads}, "
            f"max_length={self.max_length}, "
            f"log_severity_level={self.log_severity_level}, "
            f"session_name={self.session_name!r})"
        )

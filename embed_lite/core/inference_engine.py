"""
Core inference engine for sentence embeddings.
"""

from typing import List, Optional, Union

import numpy as np
import onnxruntime as ort

from embed_lite.core.config import EngineConfig
from embed_lite.core.errors import EmbedError, InferenceError, ModelLoadError, OutputShapeError
from embed_lite.pooling.mean_pooling import mean_pool
from embed_lite.tokenizer.tokenizer_adapter import TokenizerAdapter, TokenSequence
from embed_lite.utils.logging import get_logger

logger = get_logger(__name__)

# Order in which token arrays are fed when the graph uses other input names
INPUT_ORDER = ("input_ids", "attention_mask", "token_type_ids")

_INT64 = "tensor(int64)"


class InferenceEngine:
    """Compiled ONNX transformer plus tokenizer producing mean-pooled embeddings.

    The engine keeps the model bytes, the tokenizer and the compiled session
    together for its whole lifetime. Once constructed it is never mutated, and
    ``embed`` may be called from several threads at once: onnxruntime documents
    ``InferenceSession.run`` as thread-safe and the tokenizer is read-only.
    """

    def __init__(
        self,
        model_bytes: Union[bytes, bytearray, memoryview],
        tokenizer_bytes: Union[bytes, bytearray, memoryview],
        config: Optional[EngineConfig] = None,
    ):
        """Initialize inference engine.

        Args:
            model_bytes: Serialized ONNX graph (weights + architecture)
            tokenizer_bytes: Contents of a ``tokenizer.json`` definition
            config: Execution context configuration, defaults to EngineConfig()

        Raises:
            TokenizerLoadError: If the tokenizer definition is malformed
            ModelLoadError: If the graph is invalid, fails to compile, or does
                not declare three rank-2 int64 inputs
        """
        self.config = config if config is not None else EngineConfig()

        # Execution context: CPU only, fixed thread count, maximum optimization
        session_options = ort.SessionOptions()
        session_options.graph_optimization_level = ort.GraphOptimizationLevel.ORT_ENABLE_ALL
        session_options.intra_op_num_threads = self.config.num_threads
        session_options.log_severity_level = self.config.log_severity_level
        session_options.logid = self.config.session_name

        self.tokenizer = TokenizerAdapter(tokenizer_bytes, max_length=self.config.max_length)

        # bytes is immutable, so the session can never observe a mutation
        self._model_bytes = bytes(model_bytes)

        try:
            self.session = ort.InferenceSession(
                self._model_bytes,
                sess_options=session_options,
                providers=["CPUExecutionProvider"],
            )
        except Exception as e:
            raise ModelLoadError(f"Failed to load model: {e}") from e

        self.input_names = self._validate_inputs()
        self.output_names = [output.name for output in self.session.get_outputs()]
        if not self.output_names:
            raise ModelLoadError("Model declares no outputs")

        self.hidden_size = self._declared_hidden_size()

        logger.info(
            "Inference engine initialized",
            session_name=self.config.session_name,
            num_threads=self.config.num_threads,
            inputs=self.input_names,
            output=self.output_names[0],
            hidden_size=self.hidden_size,
            max_length=self.tokenizer.max_length,
        )

    @classmethod
    def initialize(
        cls,
        model_bytes: Union[bytes, bytearray, memoryview],
        tokenizer_bytes: Union[bytes, bytearray, memoryview],
        config: Optional[EngineConfig] = None,
    ) -> "InferenceEngine":
        """Build a ready engine. Equivalent to calling the constructor."""
        return cls(model_bytes, tokenizer_bytes, config=config)

    def _validate_inputs(self) -> List[str]:
        """Check the graph declares three rank-2 int64 inputs.

        Returns:
            Graph input names in the order token arrays are fed to them

        Raises:
            ModelLoadError: If the declared inputs differ
        """
        inputs = self.session.get_inputs()
        if len(inputs) != len(INPUT_ORDER):
            raise ModelLoadError(
                f"Model must declare {len(INPUT_ORDER)} inputs, got {len(inputs)}: "
                f"{[node.name for node in inputs]}"
            )

        for node in inputs:
            if node.type != _INT64:
                raise ModelLoadError(f"Input {node.name!r} must be {_INT64}, got {node.type}")
            if len(node.shape) != 2:
                raise ModelLoadError(
                    f"Input {node.name!r} must be rank 2 [batch, seq_len], got shape {node.shape}"
                )

        names = [node.name for node in inputs]
        if set(names) == set(INPUT_ORDER):
            return list(INPUT_ORDER)
        return names

    def _declared_hidden_size(self) -> Optional[int]:
        """Hidden dimension from the first output's static shape, if declared."""
        shape = self.session.get_outputs()[0].shape
        if len(shape) == 3 and isinstance(shape[2], int):
            return shape[2]
        return None

    def encode(self, text: str) -> TokenSequence:
        """Tokenize text with the engine's tokenizer.

        Raises:
            TokenizeError: If tokenization fails
        """
        return self.tokenizer.encode(text)

    def forward(self, sequence: TokenSequence) -> np.ndarray:
        """Run the graph on one tokenized sequence.

        Args:
            sequence: Output of ``encode``

        Returns:
            Per-token hidden states [1, seq_len, hidden_size], float32

        Raises:
            InferenceError: If graph execution fails
            OutputShapeError: If the first output is not [1, seq_len, hidden] float32
        """
        feed = dict(zip(self.input_names, sequence.as_model_inputs()))

        try:
            outputs = self.session.run(self.output_names[:1], feed)
        except Exception as e:
            raise InferenceError(f"Model execution failed: {e}") from e

        hidden_states = outputs[0]
        if not isinstance(hidden_states, np.ndarray):
            raise OutputShapeError(
                f"Expected a dense tensor output, got {type(hidden_states).__name__}"
            )
        if hidden_states.dtype != np.float32:
            raise OutputShapeError(f"Expected float32 output, got {hidden_states.dtype}")
        if hidden_states.ndim != 3:
            raise OutputShapeError(
                f"Expected rank-3 output [1, seq_len, hidden], got shape {hidden_states.shape}"
            )
        if hidden_states.shape[0] != 1 or hidden_states.shape[1] != len(sequence):
            raise OutputShapeError(
                f"Expected output shape [1, {len(sequence)}, hidden], got {hidden_states.shape}"
            )
        if hidden_states.shape[2] == 0:
            raise OutputShapeError("Output hidden dimension is 0")

        return hidden_states

    def embed(self, text: str) -> np.ndarray:
        """Compute the sentence embedding of ``text``.

        Args:
            text: Input text

        Returns:
            Mean-pooled embedding [hidden_size], float32, owned by the caller

        Raises:
            TokenizeError: If tokenization fails
            InferenceError: If graph execution fails
            OutputShapeError: If the graph output has an unexpected rank, shape or dtype
        """
        try:
            sequence = self.encode(text)
            hidden_states = self.forward(sequence)
        except EmbedError as e:
            logger.warning("Embedding failed", error_type=type(e).__name__, error=str(e))
            raise

        embedding = mean_pool(hidden_states)
        logger.debug("Embedding computed", seq_len=len(sequence), dim=embedding.shape[0])
        return embedding

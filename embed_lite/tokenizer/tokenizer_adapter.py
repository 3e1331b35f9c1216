"""
Tokenizer adapter over Hugging Face ``tokenizer.json`` definitions.

The adapter owns a ``tokenizers.Tokenizer`` built once from raw bytes. Padding
is disabled and the truncation policy is fixed at construction, after which the
tokenizer is only read from, so a single adapter can be shared by any number
of threads.

Truncation policy:
    - ``max_length`` given: sequences are silently truncated to ``max_length``
      tokens, special tokens included.
    - ``max_length`` is None: the truncation declared by the tokenizer
      definition is used unchanged (no truncation when it declares none).
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

import numpy as np
from tokenizers import Tokenizer

from embed_lite.core.errors import TokenizeError, TokenizerLoadError


@dataclass(frozen=True)
class TokenSequence:
    """Tokenized form of a single text.

    Attributes:
        input_ids: Vocabulary indices, special tokens included [seq_len]
        attention_mask: 1 for real tokens, 0 for padding [seq_len]
        token_type_ids: Segment ids, 0 for single-sequence input [seq_len]
    """

    input_ids: np.ndarray
    attention_mask: np.ndarray
    token_type_ids: np.ndarray

    def __post_init__(self) -> None:
        lengths = {
            len(self.input_ids),
            len(self.attention_mask),
            len(self.token_type_ids),
        }
        if len(lengths) != 1:
            raise ValueError(
                f"input_ids, attention_mask and token_type_ids must have equal length, "
                f"got {len(self.input_ids)}, {len(self.attention_mask)}, "
                f"{len(self.token_type_ids)}"
            )
        if len(self.input_ids) == 0:
            raise ValueError("TokenSequence cannot be empty")

    def __len__(self) -> int:
        return len(self.input_ids)

    def as_model_inputs(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return (ids, mask, type ids) as int64 arrays of shape [1, seq_len]."""
        shape = (1, len(self))
        return (
            np.asarray(self.input_ids, dtype=np.int64).reshape(shape),
            np.asarray(self.attention_mask, dtype=np.int64).reshape(shape),
            np.asarray(self.token_type_ids, dtype=np.int64).reshape(shape),
        )


class TokenizerAdapter:
    """Encodes text into model inputs using a serialized tokenizer definition."""

    def __init__(
        self,
        tokenizer_bytes: Union[bytes, bytearray, memoryview],
        max_length: Optional[int] = None,
    ) -> None:
        """Build the tokenizer from bytes.

        Args:
            tokenizer_bytes: Contents of a ``tokenizer.json`` file
            max_length: Optional truncation limit in tokens

        Raises:
            TokenizerLoadError: If the bytes cannot be parsed into a tokenizer
        """
        if max_length is not None and max_length < 1:
            raise ValueError(f"max_length must be positive, got {max_length}")

        try:
            tokenizer = Tokenizer.from_buffer(bytes(tokenizer_bytes))
        except Exception as e:
            raise TokenizerLoadError(f"Failed to load tokenizer: {e}") from e

        tokenizer.no_padding()
        if max_length is not None:
            tokenizer.enable_truncation(max_length)

        self._tokenizer = tokenizer

    @property
    def max_length(self) -> Optional[int]:
        """Effective truncation limit, or None when no truncation applies."""
        truncation = self._tokenizer.truncation
        if truncation is None:
            return None
        return truncation["max_length"]

    @property
    def vocab_size(self) -> int:
        return self._tokenizer.get_vocab_size(with_added_tokens=True)

    def encode(self, text: str) -> TokenSequence:
        """Tokenize a single text, adding the tokenizer's special tokens.

        Args:
            text: Input text; may be empty

        Returns:
            TokenSequence with three equal-length int64 arrays

        Raises:
            TokenizeError: If the tokenizer rejects the input or produces no tokens
        """
        try:
            encoding = self._tokenizer.encode(text, add_special_tokens=True)
        except Exception as e:
            raise TokenizeError(f"Failed to tokenize input: {e}") from e

        if len(encoding.ids) == 0:
            raise TokenizeError(
                "Tokenizer produced no tokens; it must add boundary tokens for empty input"
            )

        return TokenSequence(
            input_ids=np.asarray(encoding.ids, dtype=np.int64),
            attention_mask=np.asarray(encoding.attention_mask, dtype=np.int64),
            token_type_ids=np.asarray(encoding.type_ids, dtype=np.int64),
        )

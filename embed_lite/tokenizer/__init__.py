"""
Tokenization of raw text into model inputs.

Provides:
- TokenizerAdapter: Loads a tokenizer definition from bytes and encodes text
- TokenSequence: Equal-length ids / attention mask / token type ids
"""

from embed_lite.tokenizer.tokenizer_adapter import TokenizerAdapter, TokenSequence

__all__ = ["TokenizerAdapter", "TokenSequence"]

"""
Loading model and tokenizer bytes from disk and building a ready engine.
"""

from pathlib import Path
from typing import Optional, Tuple

from embed_lite.core.inference_engine import InferenceEngine
from embed_lite.settings import EmbedSettings
from embed_lite.utils.logging import get_logger

logger = get_logger(__name__)


def read_model_files(settings: EmbedSettings) -> Tuple[bytes, bytes]:
    """Read the ONNX graph and tokenizer definition named by ``settings``.

    Returns:
        Tuple of ``(model_bytes, tokenizer_bytes)``

    Raises:
        FileNotFoundError: If either file does not exist
    """
    model_path = Path(settings.model_path)
    tokenizer_path = Path(settings.tokenizer_path)

    for path in (model_path, tokenizer_path):
        if not path.is_file():
            raise FileNotFoundError(f"No such file: {path}")

    model_bytes = model_path.read_bytes()
    tokenizer_bytes = tokenizer_path.read_bytes()

    logger.info(
        "Read model files",
        model_path=str(model_path),
        model_size=len(model_bytes),
        tokenizer_path=str(tokenizer_path),
    )
    return model_bytes, tokenizer_bytes


def load_engine(settings: Optional[EmbedSettings] = None) -> InferenceEngine:
    """Build an InferenceEngine from settings (environment when omitted)."""
    settings = settings or EmbedSettings()
    model_bytes, tokenizer_bytes = read_model_files(settings)
    return InferenceEngine(model_bytes, tokenizer_bytes, config=settings.to_engine_config())

"""Example computing a sentence embedding from model files on disk.

Reads ``model.onnx`` and ``tokenizer.json`` (paths from arguments or the
``EMBED_MODEL_PATH`` / ``EMBED_TOKENIZER_PATH`` environment variables), builds
an InferenceEngine and prints the embedding of each given text. The thread
count comes from ``NUM_OMP_THREADS``.
"""

import argparse

import numpy as np

from embed_lite.core.errors import EmbedError, InitError
from embed_lite.loaders import load_engine
from embed_lite.settings import EmbedSettings
from embed_lite.utils.logging import configure_logging


def main():
    """Embed texts given on the command line."""
    parser = argparse.ArgumentParser(description="Compute sentence embeddings")
    parser.add_argument("texts", nargs="+", help="Texts to embed")
    parser.add_argument("--model", help="Path to model.onnx")
    parser.add_argument("--tokenizer", help="Path to tokenizer.json")
    parser.add_argument("--max-length", type=int, help="Truncate inputs to this many tokens")
    args = parser.parse_args()

    overrides = {
        "model_path": args.model,
        "tokenizer_path": args.tokenizer,
        "max_length": args.max_length,
    }
    settings = EmbedSettings(**{key: value for key, value in overrides.items() if value is not None})
    configure_logging(settings.log_level, settings.log_format)

    try:
        engine = load_engine(settings)
    except (InitError, FileNotFoundError) as e:
        parser.exit(1, f"Failed to load engine: {e}\n")

    print(f"=== Embeddings (hidden_size={engine.hidden_size}) ===\n")
    embeddings = []
    for text in args.texts:
        try:
            embedding = engine.embed(text)
        except EmbedError as e:
            print(f"{text!r}: error: {e}")
            continue
        embeddings.append(embedding)
        print(f"{text!r}: dim={embedding.shape[0]} norm={np.linalg.norm(embedding):.4f}")
        print(f"  {np.array2string(embedding[:8], precision=4)} ...")

    if len(embeddings) > 1:
        first = embeddings[0] / np.linalg.norm(embeddings[0])
        print("\n--- Cosine similarity to the first text ---")
        for embedding in embeddings[1:]:
            print(f"  {float(first @ (embedding / np.linalg.norm(embedding))):.4f}")


if __name__ == "__main__":
    main()

"""
Settings for wiring an engine from files and the process environment.

This is the collaborator layer around the core: it reads environment
variables (and an optional ``.env`` file) and turns them into an explicit
``EngineConfig``. The core never looks at the environment itself.
"""

from typing import Any, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from embed_lite.core.config import EngineConfig

DEFAULT_NUM_THREADS = 1


class EmbedSettings(BaseSettings):
    # MODEL FILES
    model_path: str = "models/model.onnx"
    tokenizer_path: str = "models/tokenizer.json"
    # EXECUTION CONTEXT
    num_threads: int = Field(
        DEFAULT_NUM_THREADS,
        validation_alias=AliasChoices("NUM_OMP_THREADS", "EMBED_NUM_THREADS"),
    )
    max_length: Optional[int] = None
    # LOGGING
    log_level: str = "INFO"
    log_format: str = Field("console", pattern="^(console|json)$")

    model_config = SettingsConfigDict(
        env_prefix="EMBED_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        protected_namespaces=(),
    )

    @field_validator("num_threads", mode="before")
    @classmethod
    def _default_on_unparsable(cls, value: Any) -> int:
        # absent, unparsable or non-positive -> 1
        try:
            threads = int(str(value).strip())
        except (TypeError, ValueError):
            return DEFAULT_NUM_THREADS
        return threads if threads >= 1 else DEFAULT_NUM_THREADS

    def to_engine_config(self) -> EngineConfig:
        return EngineConfig(num_threads=self.num_threads, max_length=self.max_length)

"""Settings controlling the shared configuration store."""

import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field

ENV_PREFIX = "EASYCONFIG_"


class StoreSettings(BaseModel):
    """Cache settings for the shared ConfigStore."""

    use_cache: bool = Field(
        default=True,
        description="Cache parsed config files in the process-wide cache",
    )
    cache_backend: Literal["memory", "none"] = Field(
        default="memory",
        description="Cache backend used when caching is enabled",
    )

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "StoreSettings":
        """Build settings from environment variables.

        Loads ``env_file`` (or a ``.env`` in the working directory) first if it
        exists. Variables already set in the environment win over the file.
        Blank variables count as unset.

        Args:
            env_file: Optional path to a dotenv file

        Returns:
            Validated settings

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
        """
        env_path = Path(env_file) if env_file else Path.cwd() / ".env"
        if env_path.exists():
            load_dotenv(env_path)

        raw = {}
        for field in cls.model_fields:
            value = os.getenv(f"{ENV_PREFIX}{field.upper()}")
            if value and value.strip():
                raw[field] = value.strip().lower()

        return cls(**raw)


__all__ = ["StoreSettings", "ENV_PREFIX"]

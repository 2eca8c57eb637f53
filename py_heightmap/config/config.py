from pathlib import Path
from typing import Literal, Optional

from dotenv import dotenv_values
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

import os

# Explicitly load .env for local/dev environments only if values are missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Application settings pulled from HEIGHTMAP_* environment variables."""

    # Map Generation Configuration
    default_factor: int = Field(default=8, ge=0, description="Default detail factor")
    default_offset: float = Field(default=1.0, description="Default roughness offset (must be non-zero)")
    default_seed: Optional[int] = Field(default=None, ge=0, description="Default seed, current time when unset")
    dtype: Literal["float32", "float64", "longdouble"] = Field(
        default="float64", description="Floating-point precision of generated maps"
    )
    roughness_decay: bool = Field(default=False, description="Shrink randomness as the step size shrinks")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["json", "plain"] = Field(default="json", description="Logging format (plain or json)")

    # Benchmark Configuration
    benchmark_log_path: str = Field(default="benchmark/log.txt", description="Append-only benchmark log file")
    benchmark_unit: str = Field(default="microseconds", description="Duration unit used in benchmark records")

    @field_validator("default_offset")
    @classmethod
    def offset_not_zero(cls, value: float) -> float:
        if value == 0:
            raise ValueError("default_offset must be non-zero")
        return value

    @field_validator("log_level")
    @classmethod
    def upper_level(cls, value: str) -> str:
        return value.upper()

    class Config:
        env_prefix = "HEIGHTMAP_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate singleton settings object
settings = Settings()

"""Configuration schema for dotpath."""

from pydantic import BaseModel, Field, ConfigDict, field_validator

from .logging_config import LoggingConfig


class PathsConfig(BaseModel):
    """Defaults applied by the command line to path operations."""

    model_config = ConfigDict(extra='forbid')

    base_path: str = Field(
        default="/",
        description="Base path used by 'absolute' when BASE is given as '-'"
    )
    compatible_output: bool = Field(
        default=False,
        description="Print evaluated paths with '...' style segments expanded to '../..'"
    )

    @field_validator('base_path')
    @classmethod
    def require_absolute(cls, v: str) -> str:
        """Only an absolute base can produce an absolute path."""
        if not v.startswith("/"):
            raise ValueError(f"base_path must be absolute, got {v!r}")
        return v


class DotPathConfig(BaseModel):
    """Root configuration for dotpath."""

    model_config = ConfigDict(extra='forbid')

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)

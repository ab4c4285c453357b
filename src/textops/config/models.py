"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, textops.toml only contains
overrides. An empty (or absent) file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- textops.toml sections ---


class SlugifyConfig(BaseModel):
    """[slugify] section."""

    model_config = {"frozen": True}

    max_length: int | None = None


class RepeatConfig(BaseModel):
    """[repeat] section.

    ``max_count`` bounds the CLI ``repeat`` command; the library
    functions themselves are unbounded.
    """

    model_config = {"frozen": True}

    max_count: int = Field(default=10_000, ge=0)


class TextopsConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    slugify: SlugifyConfig = Field(default_factory=SlugifyConfig)
    repeat: RepeatConfig = Field(default_factory=RepeatConfig)

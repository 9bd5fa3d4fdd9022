"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, commonkit.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, ge=40)
    no_color: bool = False


class InspectConfig(BaseModel):
    """[inspect] section."""

    model_config = {"frozen": True}

    force_access: bool = False


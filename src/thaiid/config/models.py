"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, thaiid.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class GeneratorConfig(BaseModel):
    """[generator] section."""

    model_config = {"frozen": True}

    count: int = Field(default=1, ge=1)
    stride: int = Field(default=1, ge=1)


class FixtureConfig(BaseModel):
    """[fixture] section — defaults for generated customer payloads."""

    model_config = {"frozen": True}

    firstname: str = "Test"
    lastname: str = "Customer"
    phone: str = "0812345678"
    address: str = "กรุงเทพมหานคร"


class ThaiIdConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    fixture: FixtureConfig = Field(default_factory=FixtureConfig)

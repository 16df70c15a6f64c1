"""Configuration models for the emitter."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator


class EmitterConfig(BaseModel):
    """Options accepted by :class:`emitter.domain.registry.Emitter`."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    prune_empty: bool = False
    max_listeners: int | None = None

    @model_validator(mode="after")
    def _max_listeners_positive(self) -> EmitterConfig:
        if self.max_listeners is not None and self.max_listeners < 1:
            raise ValueError("max_listeners must be at least 1")
        return self

"""Shared pydantic base for job configuration models."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable once validated; a step's configuration never changes mid-run."""

    model_config = ConfigDict(frozen=True)

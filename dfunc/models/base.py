"""Frozen pydantic base shared by dfunc models."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable model; instances are hashable and safe to share."""

    model_config = ConfigDict(frozen=True)

"""Shared base for immutable domain entities."""

from pydantic import BaseModel, ConfigDict


class Entity(BaseModel):
    """Immutable, denormalised value object produced by a mapper.

    Entities own copies of the related entities they embed and never point
    back to their parents.
    """

    model_config = ConfigDict(frozen=True)

    id: str

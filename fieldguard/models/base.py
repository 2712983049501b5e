"""Base model classes for fieldguard."""

from pydantic import BaseModel, ConfigDict


class FieldguardBaseModel(BaseModel):
    """Base model with common configuration for all fieldguard models."""

    model_config = ConfigDict(
        # Keep enum objects in memory, serialize values only when needed
        use_enum_values=False,
        # Allow population by field name or alias
        populate_by_name=True,
        # Unknown keys are a definition mistake
        extra="forbid",
        # Options and descriptors are snapshots taken at registration
        frozen=True,
    )

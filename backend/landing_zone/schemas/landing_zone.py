"""Landing Zone Schemas — response payload for a zone evaluation."""

from pydantic import BaseModel, ConfigDict, Field


class ZoneValidation(BaseModel):
    """Verdict for one zone. elapsed_time covers the containment check only."""
    model_config = ConfigDict(populate_by_name=True)

    zone: str
    is_valid: bool = Field(alias="isValid")
    elapsed_time: float = Field(alias="elapsedTime", ge=0)  # milliseconds

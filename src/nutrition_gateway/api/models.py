"""Request models for the public API."""

from pydantic import BaseModel, ConfigDict, Field


class FoodLookupRequest(BaseModel):
    """Body of a nutrition search request."""

    barcode: str | None = None
    search: str | None = None


class GuidanceRequest(BaseModel):
    """Body of an AI guidance request."""

    model_config = ConfigDict(populate_by_name=True)

    nutrition: dict[str, object] | None = None
    user_goals: dict[str, object] | None = Field(default=None, alias="userGoals")
    type: str | None = "guidance"

# coping strategy models
# mirrors frontend shared/schema.ts CopingStrategy

from typing import Optional, Literal
from pydantic import BaseModel, Field


class CopingStrategy(BaseModel):
    """a catalog self-help technique. personalized_reason is attached per request"""
    id: str
    title: str
    category: Literal["breathing", "meditation", "movement", "grounding", "social", "creative"]
    description: str
    steps: tuple[str, ...]
    duration: str
    difficulty: Literal["beginner", "intermediate", "advanced"]
    personalized_reason: Optional[str] = Field(None, alias="personalizedReason")

    model_config = {"populate_by_name": True, "frozen": True}

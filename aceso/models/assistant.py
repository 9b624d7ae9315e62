# assistant models - chat request and response schemas
# mirrors frontend shared/schema.ts AssistantMessage

from datetime import datetime
from typing import Optional, Literal
from pydantic import BaseModel, Field


class AssistantMessage(BaseModel):
    """single message in the conversation history"""
    id: Optional[str] = None
    role: Literal["user", "assistant"]
    content: str
    timestamp: Optional[datetime] = None


class AssistantRequest(BaseModel):
    message: str = Field(..., min_length=1, description="the user's new message")
    conversation_history: list[AssistantMessage] = Field(
        default_factory=list,
        alias="conversationHistory",
        description="previous turns, only the most recent few are sent to the model",
    )

    model_config = {"populate_by_name": True}


class AssistantResponse(BaseModel):
    response: str

# assistant router - chat with the aceso wellness companion

import logging

from fastapi import APIRouter, HTTPException, status

from aceso.models.assistant import AssistantRequest, AssistantResponse
from aceso.services.assistant_service import chat_with_assistant, AssistantError

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/assistant", tags=["assistant"])


@router.post("", response_model=AssistantResponse)
async def chat(body: AssistantRequest):
    """send a message with recent history, get the companion's reply"""
    try:
        reply = await chat_with_assistant(body.message, body.conversation_history)
    except AssistantError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        )
    return AssistantResponse(response=reply)

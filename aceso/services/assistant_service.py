# assistant service - aceso wellness companion chat
# langchain prompt with the recent conversation history, answered by gemini

import logging
from typing import Optional

from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder
from langchain_core.output_parsers import StrOutputParser

from aceso.config import settings
from aceso.models.assistant import AssistantMessage

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "I'm here to listen. How are you feeling?"


class AssistantError(Exception):
    """raised when the companion model cannot produce a reply"""


ASSISTANT_PROMPT = ChatPromptTemplate.from_messages([
    ("system", """You are a compassionate AI wellness companion named Aceso. Your role is to:
- Provide emotional support and empathetic listening
- Help users process their feelings without judgment
- Suggest healthy coping strategies when appropriate
- Encourage professional help for serious mental health concerns
- Be warm, supportive, and understanding
- Keep responses concise but meaningful (2-4 sentences typically)
- Never diagnose or replace professional therapy
- Focus on validation, reflection, and gentle guidance

Important: If the user expresses suicidal thoughts or severe crisis, immediately encourage them to contact crisis resources (988 Suicide & Crisis Lifeline, Crisis Text Line: text HOME to 741741)."""),
    MessagesPlaceholder("history"),
    ("human", "{message}"),
])

_chain = None


def get_llm() -> ChatGoogleGenerativeAI:
    """create a gemini llm instance for companion replies"""
    return ChatGoogleGenerativeAI(
        model=settings.GEMINI_MODEL,
        google_api_key=settings.GEMINI_API_KEY,
        temperature=0.7,
    )


def get_assistant_chain():
    """get or create the assistant chain"""
    global _chain
    if _chain is None:
        _chain = ASSISTANT_PROMPT | get_llm() | StrOutputParser()
    return _chain


def _format_history(history: Optional[list[AssistantMessage]]) -> list[tuple[str, str]]:
    """last few turns as (role, content) pairs. assistant maps to ai, all else to human"""
    if not history:
        return []
    recent = history[-settings.ASSISTANT_HISTORY_TURNS:]
    return [("ai" if msg.role == "assistant" else "human", msg.content) for msg in recent]


async def chat_with_assistant(message: str, history: Optional[list[AssistantMessage]] = None) -> str:
    """generate a companion reply for the new message"""
    try:
        chain = get_assistant_chain()
        reply = await chain.ainvoke({
            "history": _format_history(history),
            "message": message,
        })
    except Exception as e:
        logger.error(f"Assistant reply failed: {e}")
        raise AssistantError("I'm having trouble responding right now. Please try again.") from e

    return reply.strip() if reply and reply.strip() else FALLBACK_REPLY

import logging
from typing import List
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_ollama import ChatOllama
from agentforge.core.config import settings
from agentforge.models import AgentSubmissionPayload, ChatTurn

logger = logging.getLogger(__name__)
llm = ChatOllama(model=settings.OLLAMA_MODEL, temperature=0)

PREVIEW_FALLBACK = "Sorry, the preview assistant is unavailable right now. Please try again in a moment."

def build_preview_messages(payload: AgentSubmissionPayload, message: str, history: List[ChatTurn]) -> List[BaseMessage]:
    """The conversation a customer would have, opened by the agent's welcome message."""
    messages: List[BaseMessage] = []
    if payload.system_prompt:
        messages.append(SystemMessage(content=payload.system_prompt))
    messages.append(AIMessage(content=payload.welcome_message))
    for turn in history:
        if turn.role == "assistant":
            messages.append(AIMessage(content=turn.content))
        else:
            messages.append(HumanMessage(content=turn.content))
    messages.append(HumanMessage(content=message))
    return messages

async def preview_reply(payload: AgentSubmissionPayload, message: str, history: List[ChatTurn]) -> str:
    messages = build_preview_messages(payload, message, history)
    try:
        response = await llm.ainvoke(messages)
    except Exception as e:
        logger.error(f"Error in preview_reply: {e}")
        return PREVIEW_FALLBACK
    return response.content if hasattr(response, "content") else str(response)

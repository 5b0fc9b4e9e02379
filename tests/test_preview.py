import pytest
from unittest.mock import AsyncMock, patch
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage
from agentforge.models import AgentDraft, BusinessDetails, ChatTurn
from agentforge.registry import default_registry
from agentforge.services.agent_builder import build_whatsapp_payload
from agentforge.services.preview import PREVIEW_FALLBACK, build_preview_messages, preview_reply

@pytest.fixture
def payload():
    draft = AgentDraft(
        business_details=BusinessDetails(name="Joe's Pizza"),
        category_id="restaurant",
        active_capability_ids=("menu",),
    )
    return build_whatsapp_payload(draft, default_registry())

def test_preview_conversation_shape(payload):
    history = [ChatTurn(role="user", content="Hi"), ChatTurn(role="assistant", content="Hello!")]
    messages = build_preview_messages(payload, "Do you deliver?", history)
    assert isinstance(messages[0], SystemMessage)
    assert messages[0].content == payload.system_prompt
    assert isinstance(messages[1], AIMessage)
    assert messages[1].content == payload.welcome_message
    assert [type(m) for m in messages[2:]] == [HumanMessage, AIMessage, HumanMessage]
    assert messages[-1].content == "Do you deliver?"

@pytest.mark.asyncio
async def test_preview_reply_uses_llm(payload):
    mock_llm = AsyncMock()
    mock_llm.ainvoke.return_value = AIMessage(content="Yes, within 5km.")
    with patch("agentforge.services.preview.llm", mock_llm):
        reply = await preview_reply(payload, "Do you deliver?", [])
    assert reply == "Yes, within 5km."
    sent = mock_llm.ainvoke.call_args.args[0]
    assert sent[0].content.startswith("You are a helpful WhatsApp assistant for Joe's Pizza")

@pytest.mark.asyncio
async def test_preview_reply_falls_back_on_llm_error(payload):
    mock_llm = AsyncMock()
    mock_llm.ainvoke.side_effect = RuntimeError("ollama not running")
    with patch("agentforge.services.preview.llm", mock_llm):
        reply = await preview_reply(payload, "Do you deliver?", [])
    assert reply == PREVIEW_FALLBACK
